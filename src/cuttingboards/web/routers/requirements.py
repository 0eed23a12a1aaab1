"""Stock requirement endpoints."""

from fastapi import APIRouter

from cuttingboards.application import DesiredBoardInput
from cuttingboards.domain import get_woven_pattern
from cuttingboards.infrastructure import report_to_dict
from cuttingboards.web.dependencies import RequirementsCommandDep
from cuttingboards.web.exceptions import DesignInputError
from cuttingboards.web.schemas.requests import RequirementsRequest
from cuttingboards.web.schemas.responses import RequirementReportSchema

router = APIRouter(prefix="/requirements", tags=["requirements"])


@router.post("", response_model=RequirementReportSchema)
async def calculate_requirements(
    request: RequirementsRequest,
    command: RequirementsCommandDep,
) -> RequirementReportSchema:
    """Estimate boards needed per stock entry.

    An invalid color selection is reported through ``patternError`` rather
    than an HTTP error.

    Raises:
        PatternNotFoundError: If the pattern key is unknown (handled as 404).
    """
    pattern = get_woven_pattern(request.pattern) if request.pattern else None
    desired = DesiredBoardInput(
        width=request.desired.width,
        length=request.desired.length,
        thickness=request.desired.thickness,
    )
    result = command.execute(
        desired,
        [piece.to_input() for piece in request.stock],
        pattern=pattern,
        main_index=request.main_index,
        accent_index=request.accent_index,
    )
    if not result.is_valid or result.report is None:
        raise DesignInputError(result.errors)
    return RequirementReportSchema.model_validate(report_to_dict(result.report))

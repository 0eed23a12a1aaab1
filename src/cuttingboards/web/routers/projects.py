"""Endpoints that evaluate a whole project file."""

from fastapi import APIRouter

from cuttingboards.application.config import (
    config_to_construction_config,
    config_to_desired_board,
    config_to_pattern,
    config_to_stock,
    load_config_from_dict,
)
from cuttingboards.infrastructure import report_to_dict
from cuttingboards.web.dependencies import GenerateCommandDep, RequirementsCommandDep
from cuttingboards.web.exceptions import DesignInputError
from cuttingboards.web.schemas.common import DesignOptionSchema
from cuttingboards.web.schemas.requests import ProjectRequest
from cuttingboards.web.schemas.responses import (
    DesignOptionsSchema,
    RequirementReportSchema,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/designs", response_model=DesignOptionsSchema)
async def project_designs(
    request: ProjectRequest,
    command: GenerateCommandDep,
) -> DesignOptionsSchema:
    """Generate design options from a project file.

    Raises:
        ConfigError: If the project fails validation (handled as 422).
    """
    project = load_config_from_dict(request.config)
    result = command.execute(
        config_to_stock(project), config_to_construction_config(project)
    )
    if not result.is_valid:
        raise DesignInputError(result.errors)
    return DesignOptionsSchema(
        options=[DesignOptionSchema.from_domain(option) for option in result.options],
        feasible=result.is_feasible,
    )


@router.post("/requirements", response_model=RequirementReportSchema)
async def project_requirements(
    request: ProjectRequest,
    command: RequirementsCommandDep,
) -> RequirementReportSchema:
    """Estimate stock requirements for the board a project file describes."""
    project = load_config_from_dict(request.config)
    pattern, main_index, accent_index = config_to_pattern(project)
    result = command.execute(
        config_to_desired_board(project),
        config_to_stock(project),
        pattern=pattern,
        main_index=main_index,
        accent_index=accent_index,
    )
    if not result.is_valid or result.report is None:
        raise DesignInputError(result.errors)
    return RequirementReportSchema.model_validate(report_to_dict(result.report))

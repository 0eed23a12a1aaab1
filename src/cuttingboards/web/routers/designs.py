"""Design option endpoints."""

import random

from fastapi import APIRouter

from cuttingboards.application import RegeneratePatternCommand
from cuttingboards.domain import ConstructionConfig
from cuttingboards.web.dependencies import GenerateCommandDep
from cuttingboards.web.exceptions import DesignInputError
from cuttingboards.web.schemas.common import DesignOptionSchema
from cuttingboards.web.schemas.requests import (
    GenerateDesignsRequest,
    RegeneratePatternRequest,
)
from cuttingboards.web.schemas.responses import DesignOptionsSchema

router = APIRouter(prefix="/designs", tags=["designs"])


@router.post("", response_model=DesignOptionsSchema)
async def generate_designs(
    request: GenerateDesignsRequest,
    command: GenerateCommandDep,
) -> DesignOptionsSchema:
    """Generate face, edge and end-grain options for the given stock.

    Returns an empty option list when no stock entry has a wood type, and
    ``feasible: false`` when every option came out zero-sized.
    """
    config = ConstructionConfig(
        segment_width=request.segment_width,
        kerf_width=request.kerf_width,
    )
    result = command.execute([piece.to_input() for piece in request.stock], config)
    if not result.is_valid:
        raise DesignInputError(result.errors)

    return DesignOptionsSchema(
        options=[DesignOptionSchema.from_domain(option) for option in result.options],
        feasible=result.is_feasible,
    )


@router.post("/regenerate", response_model=DesignOptionSchema)
async def regenerate_pattern(request: RegeneratePatternRequest) -> DesignOptionSchema:
    """Reshuffle a saved option's pattern; its geometry is returned unchanged."""
    rng = random.Random(request.seed) if request.seed is not None else None
    option = request.option.to_domain()
    result = RegeneratePatternCommand(rng).execute(
        [option], [piece.to_input() for piece in request.stock]
    )
    if not result.is_valid:
        raise DesignInputError(result.errors)
    return DesignOptionSchema.from_domain(result.options[0])

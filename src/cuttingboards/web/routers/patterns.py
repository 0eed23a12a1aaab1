"""Woven pattern catalog endpoints."""

from fastapi import APIRouter

from cuttingboards.domain import get_woven_pattern
from cuttingboards.domain.services import list_woven_patterns
from cuttingboards.web.schemas.responses import WovenPatternListSchema, WovenPatternSchema

router = APIRouter(prefix="/patterns", tags=["patterns"])


def _to_schema(pattern) -> WovenPatternSchema:
    return WovenPatternSchema(
        key=pattern.key,
        name=pattern.name,
        description=pattern.description,
        cube_size=pattern.cube_size,
        required_colors=pattern.required_colors,
    )


@router.get("", response_model=WovenPatternListSchema)
async def list_patterns() -> WovenPatternListSchema:
    """List all woven patterns."""
    return WovenPatternListSchema(
        patterns=[_to_schema(pattern) for pattern in list_woven_patterns()]
    )


@router.get("/{key}", response_model=WovenPatternSchema)
async def get_pattern(key: str) -> WovenPatternSchema:
    """Get one woven pattern.

    Raises:
        PatternNotFoundError: If the key is unknown (handled by exception handler).
    """
    return _to_schema(get_woven_pattern(key))

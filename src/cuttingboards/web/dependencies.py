"""FastAPI dependency injection for cutting board services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cuttingboards.application import CalculateRequirementsCommand, GenerateDesignsCommand


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateDesignsCommand:
    """Get cached GenerateDesignsCommand instance."""
    return GenerateDesignsCommand()


@lru_cache(maxsize=1)
def get_requirements_command() -> CalculateRequirementsCommand:
    """Get cached CalculateRequirementsCommand instance."""
    return CalculateRequirementsCommand()


# Type aliases for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateDesignsCommand, Depends(get_generate_command)]
RequirementsCommandDep = Annotated[
    CalculateRequirementsCommand, Depends(get_requirements_command)
]

"""API routers for the REST API."""

from cuttingboards.web.routers.designs import router as designs_router
from cuttingboards.web.routers.patterns import router as patterns_router
from cuttingboards.web.routers.projects import router as projects_router
from cuttingboards.web.routers.requirements import router as requirements_router

__all__ = [
    "designs_router",
    "patterns_router",
    "projects_router",
    "requirements_router",
]

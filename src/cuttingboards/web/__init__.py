"""FastAPI REST API for cutting board design.

This module provides a REST API for generating design options, reshuffling
gluing patterns, and estimating stock requirements.

Usage:
    uvicorn cuttingboards.web:app --reload
"""

from cuttingboards.web.app import app, create_app

__all__ = ["app", "create_app"]

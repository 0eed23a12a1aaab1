"""Custom exceptions and error handlers for the REST API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cuttingboards.application.config import ConfigError
from cuttingboards.domain import InvalidDesignOptionError, PatternNotFoundError
from cuttingboards.web.schemas.responses import ErrorResponseSchema

logger = logging.getLogger(__name__)


class DesignInputError(Exception):
    """Raised when stock or board input fails validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid input: {errors}")


def _error_response(status_code: int, body: ErrorResponseSchema) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(DesignInputError)
    async def design_input_error_handler(
        request: Request, exc: DesignInputError
    ) -> JSONResponse:
        return _error_response(
            422,
            ErrorResponseSchema(
                error="Invalid design input",
                error_type="input",
                details=[{"message": e} for e in exc.errors],
            ),
        )

    @app.exception_handler(InvalidDesignOptionError)
    async def invalid_option_handler(
        request: Request, exc: InvalidDesignOptionError
    ) -> JSONResponse:
        return _error_response(
            422,
            ErrorResponseSchema(error=str(exc), error_type="design_option"),
        )

    @app.exception_handler(PatternNotFoundError)
    async def pattern_not_found_handler(
        request: Request, exc: PatternNotFoundError
    ) -> JSONResponse:
        return _error_response(
            404,
            ErrorResponseSchema(
                error=f"Woven pattern not found: {exc.key}",
                error_type="not_found",
            ),
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        logger.info("Rejected configuration: %s", exc.error_type)
        return _error_response(
            422,
            ErrorResponseSchema(
                error=exc.message,
                error_type=exc.error_type,
                details=exc.details or None,
            ),
        )

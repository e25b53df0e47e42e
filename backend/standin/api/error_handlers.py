"""Error Handlers: global exception handlers for the stand-in server.

Invariants:
    - StandinError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details
    - Error responses carry the same Cache-Control and X-Powered-By headers as pages

Design Decisions:
    - Two-layer handler: domain (StandinError), catch-all (Exception)
    - No request validation layer: no route takes parameters or a body
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from standin.config import get_settings
from standin.core.domain_types import ContentType
from standin.core.errors import ErrorSeverity, StandinError
from standin.core.responses import build_headers

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_standin_error_handler(app)
    _register_generic_error_handler(app)


def _register_standin_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StandinError)
    async def standin_error_handler(request: Request, exc: StandinError):
        """Handle all domain/infrastructure errors."""
        exc.context.path = request.url.path
        logger.error(
            f"StandinError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
            headers=_error_headers(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
            headers=_error_headers(),
        )


def _error_headers() -> dict[str, str]:
    return build_headers(ContentType.JSON, get_settings().service_name)

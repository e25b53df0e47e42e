"""Stand-in Server: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StandinError → structured JSON responses
    - Auto docs (/docs, /redoc, /openapi.json) disabled: the catch-all route owns every path
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from standin.api.error_handlers import register_error_handlers
from standin.api.routes import pages
from standin.config import get_settings
from standin.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    pages.get_metrics_provider()
    logger.info(
        f"Stand-in server started as '{settings.service_name}'",
    )
    yield
    logger.info("Stand-in server shutting down")
    logging.root.removeHandler(handler)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Strapi Stand-in", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    register_error_handlers(app)
    app.include_router(pages.router)
    return app


app = create_app()


def serve() -> None:
    """Run the server on the configured address (0.0.0.0:1337 by default)."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    serve()

"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, job_tracker.api, job_tracker.presentation,
    job_tracker.observability, job_tracker.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from job_tracker import __version__
from job_tracker.api import api_router
from job_tracker.api.deps import get_service_cache
from job_tracker.configs import get_settings
from job_tracker.observability.logger import configure_logging
from job_tracker.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from job_tracker.presentation.pages import STATIC_DIR, router as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and loads spreadsheet credentials once at startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment},
    )

    cache = get_service_cache()
    sheets = cache.sheets_factory
    _ = cache.session_store
    if sheets.is_configured:
        logger.info("Google Sheets credentials loaded")
    else:
        logger.warning(
            "Google Sheets is not configured; handlers will fail until it is",
            extra={"missing": sheets.config.missing_fields()},
        )

    yield

    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Job Tracker",
        description="Job entry form and job table backed by Google Sheets",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    # Added last so it runs first and the request log carries the ID
    app.add_middleware(CorrelationMiddleware)

    app.include_router(api_router, prefix="/api")
    app.include_router(pages_router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


app = create_app()


def run() -> None:
    """Run the development server."""
    settings = get_settings()
    uvicorn.run(
        "job_tracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()

"""
FastAPI application entry point.
"""

import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bluescreen import __version__
from bluescreen.api import analytics as analytics_api
from bluescreen.api import errors, pages
from bluescreen.config import Settings, settings as default_settings
from bluescreen.middleware.logging import RequestLoggingMiddleware
from bluescreen.services.analytics import AnalyticsAggregator
from bluescreen.services.scan_code import ScanCodeGenerator
from bluescreen.services.selector import ErrorSelector
from bluescreen.utils.logging import get_logger, log_error_with_context, setup_logging

logger = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Answer API errors with the ``{"success": false, "error": ...}`` envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404 and exc.detail == "Not Found":
            content = {"success": False, "error": "Route not found", "path": request.url.path}
        else:
            content = {"success": False, "error": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        log_error_with_context(
            logger,
            "Error occurred",
            exc,
            url=str(request.url),
            method=request.method,
        )
        content = {"success": False, "error": "Internal server error"}
        if not request.app.state.settings.is_production:
            content["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(status_code=500, content=content)


def create_app(
    settings: Optional[Settings] = None,
    analytics: Optional[AnalyticsAggregator] = None,
    selector: Optional[ErrorSelector] = None,
    code_generator: Optional[ScanCodeGenerator] = None,
) -> FastAPI:
    """
    Build the application.

    Collaborators not passed in are created from ``settings``.

    Args:
        settings: Application settings (default: loaded from the environment)
        analytics: Analytics aggregator
        selector: Error selector
        code_generator: Scannable code generator

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description="Parody system failure pages and their JSON API",
        version=__version__,
    )

    app.state.settings = settings
    app.state.analytics = analytics or AnalyticsAggregator(enabled=settings.enable_analytics)
    app.state.selector = selector or ErrorSelector()
    app.state.code_generator = code_generator or ScanCodeGenerator(enabled=settings.enable_qr_codes)

    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for container orchestration."""
        return {"status": "healthy", "version": __version__}

    # Include routers
    app.include_router(pages.router)
    app.include_router(errors.router)
    app.include_router(analytics_api.router)

    return app


app = create_app()


def run() -> None:
    """Configure logging and serve the application with uvicorn."""
    import uvicorn

    setup_logging(default_settings.log_level)
    logger.info(
        f"Starting {default_settings.app_name}",
        extra={"environment": default_settings.environment, "port": default_settings.port},
    )
    uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_config=None)


if __name__ == "__main__":
    run()

"""
FastAPI dependencies resolving the per-application collaborators.

``create_app`` stores each collaborator on ``app.state``; routes reach them
only through these functions, so tests can build isolated applications.
"""

from fastapi import HTTPException, Request

from bluescreen.config import Settings
from bluescreen.services.analytics import AnalyticsAggregator
from bluescreen.services.scan_code import ScanCodeGenerator
from bluescreen.services.selector import ErrorSelector


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_analytics(request: Request) -> AnalyticsAggregator:
    return request.app.state.analytics


def get_selector(request: Request) -> ErrorSelector:
    return request.app.state.selector


def get_code_generator(request: Request) -> ScanCodeGenerator:
    return request.app.state.code_generator


def track_api_call(request: Request) -> None:
    """Count the request as an API call."""
    get_analytics(request).track_api_call()


def require_non_production(request: Request) -> None:
    """
    Reject the request when running in production.

    Raises:
        HTTPException: 403 in production
    """
    if get_settings(request).is_production:
        raise HTTPException(status_code=403, detail="Not available in production")

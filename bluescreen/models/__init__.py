"""Data models for Blue Screen of App."""

from .analytics import AnalyticsSummary, Uptime
from .api_response import (
    CodeList,
    DataResponse,
    ErrorCodeNotFound,
    HealthStatus,
    MessageResponse,
    StyleList,
)
from .error import ErrorRecord, Override
from .style import DEFAULT_STYLE, Style, resolve_style

__all__ = [
    # Error models
    "ErrorRecord",
    "Override",
    # Style models
    "Style",
    "DEFAULT_STYLE",
    "resolve_style",
    # Analytics models
    "Uptime",
    "AnalyticsSummary",
    # API response models
    "DataResponse",
    "MessageResponse",
    "ErrorCodeNotFound",
    "CodeList",
    "StyleList",
    "HealthStatus",
]

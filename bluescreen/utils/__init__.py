"""
Utility modules for Blue Screen of App.
"""

from bluescreen.utils.logging import (
    get_logger,
    setup_logging,
    log_request,
    log_error_with_context,
)
from bluescreen.utils.metrics import (
    ANALYTICS_METRICS,
    MetricDefinition,
    render_metrics,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_request",
    "log_error_with_context",
    "ANALYTICS_METRICS",
    "MetricDefinition",
    "render_metrics",
]

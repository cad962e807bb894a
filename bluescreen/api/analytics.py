"""
Analytics, health and metrics endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from bluescreen import __version__
from bluescreen.api.dependencies import get_analytics, require_non_production
from bluescreen.models.analytics import AnalyticsSummary
from bluescreen.models.api_response import DataResponse, HealthStatus, MessageResponse
from bluescreen.services.analytics import AnalyticsAggregator
from bluescreen.utils.logging import get_logger
from bluescreen.utils.metrics import EXPOSITION_CONTENT_TYPE, render_metrics

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/analytics", response_model=DataResponse[AnalyticsSummary])
async def get_analytics_summary(
    analytics: AnalyticsAggregator = Depends(get_analytics),
) -> DataResponse[AnalyticsSummary]:
    """Get the analytics summary."""
    return DataResponse[AnalyticsSummary](data=analytics.summary())


@router.post(
    "/analytics/reset",
    response_model=MessageResponse,
    dependencies=[Depends(require_non_production)],
)
async def reset_analytics(analytics: AnalyticsAggregator = Depends(get_analytics)) -> MessageResponse:
    """
    Reset all analytics counters and the uptime clock.

    Refused with 403 in production.
    """
    analytics.reset()
    return MessageResponse(message="Analytics reset successfully")


@router.get("/health", response_model=HealthStatus)
async def health(analytics: AnalyticsAggregator = Depends(get_analytics)) -> HealthStatus:
    """Detailed health check including uptime."""
    return HealthStatus(
        timestamp=datetime.now(timezone.utc),
        uptime=analytics.summary().uptime,
        version=__version__,
    )


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics(analytics: AnalyticsAggregator = Depends(get_analytics)) -> PlainTextResponse:
    """Metrics in the Prometheus text exposition format."""
    return PlainTextResponse(render_metrics(analytics.summary()), media_type=EXPOSITION_CONTENT_TYPE)

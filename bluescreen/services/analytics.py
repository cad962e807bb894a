"""
In-memory usage analytics.

Counts page visits (per style, per stop-code, custom vs. stock) and API calls
for the lifetime of the process. Every mutation and every snapshot holds the
same lock, so request handlers running on worker threads never lose updates
or observe a half-applied visit.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from bluescreen.models.analytics import AnalyticsSummary, Uptime
from bluescreen.utils.logging import get_logger

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AnalyticsState:
    """Mutable counters owned by an ``AnalyticsAggregator``."""

    start_time: datetime
    total_visits: int = 0
    style_views: Dict[str, int] = field(default_factory=dict)
    stop_code_views: Dict[str, int] = field(default_factory=dict)
    custom_message_count: int = 0
    api_calls: int = 0


class AnalyticsAggregator:
    """
    Process-wide visit and API call counters.

    One instance is created per application and handed to request handlers;
    tests build their own isolated instances.
    """

    def __init__(self, enabled: bool = True, clock: Optional[Clock] = None):
        """
        Initialize aggregator.

        Args:
            enabled: When False, tracking calls leave every counter untouched
            clock: Source of the current time (timezone-aware)
        """
        self.enabled = enabled
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._state = AnalyticsState(start_time=self._clock())

    def track_visit(self, style: str, stop_code: Optional[str] = None, is_custom: bool = False) -> None:
        """
        Record a rendered page.

        Args:
            style: Style the page was rendered with
            stop_code: Stop-code shown, if any
            is_custom: Whether the caller supplied their own text
        """
        if not self.enabled:
            return

        with self._lock:
            state = self._state
            state.total_visits += 1
            state.style_views[style] = state.style_views.get(style, 0) + 1
            if stop_code is not None:
                state.stop_code_views[stop_code] = state.stop_code_views.get(stop_code, 0) + 1
            if is_custom:
                state.custom_message_count += 1

        logger.debug(
            "Visit tracked",
            extra={"style": style, "stop_code": stop_code, "is_custom": is_custom},
        )

    def track_api_call(self) -> None:
        """Record an API call."""
        if not self.enabled:
            return

        with self._lock:
            self._state.api_calls += 1

    def summary(self) -> AnalyticsSummary:
        """
        Snapshot the counters together with the derived uptime.

        Returns:
            Analytics summary; later tracking does not affect it
        """
        with self._lock:
            state = self._state
            summary_data = {
                "total_visits": state.total_visits,
                "style_views": dict(state.style_views),
                "stop_code_views": dict(state.stop_code_views),
                "custom_message_count": state.custom_message_count,
                "api_calls": state.api_calls,
                "start_time": state.start_time,
            }
            now = self._clock()

        elapsed_ms = int((now - summary_data["start_time"]).total_seconds() * 1000)
        return AnalyticsSummary(uptime=Uptime.from_milliseconds(elapsed_ms), **summary_data)

    def reset(self) -> None:
        """Zero every counter and restart the uptime clock."""
        with self._lock:
            self._state = AnalyticsState(start_time=self._clock())
        logger.info("Analytics reset")

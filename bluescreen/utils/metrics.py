"""
Metrics exposition for monitoring systems.

Renders the analytics summary in the Prometheus text format: for every
metric a ``# HELP`` line, a ``# TYPE`` line and a ``name value`` sample, with
a blank line between metrics. Metric names never change between calls.
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from bluescreen.models.analytics import AnalyticsSummary

EXPOSITION_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


@dataclass(frozen=True)
class MetricDefinition:
    """A single exposed metric and how to read it from a summary."""

    name: str
    kind: str
    help: str
    read: Callable[[AnalyticsSummary], float]

    def render(self, summary: AnalyticsSummary) -> List[str]:
        return [
            f"# HELP {self.name} {self.help}",
            f"# TYPE {self.name} {self.kind}",
            f"{self.name} {self.read(summary)}",
        ]


ANALYTICS_METRICS: Tuple[MetricDefinition, ...] = (
    MetricDefinition(
        name="bsod_total_visits",
        kind="counter",
        help="Total number of BSOD page visits",
        read=lambda summary: summary.total_visits,
    ),
    MetricDefinition(
        name="bsod_api_calls",
        kind="counter",
        help="Total number of API calls",
        read=lambda summary: summary.api_calls,
    ),
    MetricDefinition(
        name="bsod_custom_messages",
        kind="counter",
        help="Total number of custom messages",
        read=lambda summary: summary.custom_message_count,
    ),
    MetricDefinition(
        name="bsod_uptime_seconds",
        kind="gauge",
        help="Application uptime in seconds",
        read=lambda summary: summary.uptime.seconds,
    ),
)


def render_metrics(summary: AnalyticsSummary) -> str:
    """
    Render ``summary`` as metrics exposition text.

    Args:
        summary: Analytics snapshot

    Returns:
        Exposition text, one sample per metric
    """
    blocks = ["\n".join(metric.render(summary)) for metric in ANALYTICS_METRICS]
    return "\n\n".join(blocks) + "\n"

"""
Unit tests for metrics exposition.
"""

import re

from bluescreen.services.analytics import AnalyticsAggregator
from bluescreen.utils.metrics import ANALYTICS_METRICS, render_metrics

METRIC_NAMES = [
    "bsod_total_visits",
    "bsod_api_calls",
    "bsod_custom_messages",
    "bsod_uptime_seconds",
]


def parse_samples(text: str) -> dict:
    samples = {}
    for line in text.splitlines():
        if line and not line.startswith("#"):
            name, value = line.split(" ")
            samples[name] = value
    return samples


def test_metric_names_are_stable():
    """Test the exposed metric names."""
    assert [metric.name for metric in ANALYTICS_METRICS] == METRIC_NAMES


def test_render_metrics_values(fake_clock):
    """Test that samples reflect the analytics summary."""
    analytics = AnalyticsAggregator(clock=fake_clock)
    analytics.track_visit("win10", "COFFEE_NOT_FOUND", True)
    analytics.track_visit("win7", "SEMICOLON_MISSING", False)
    analytics.track_api_call()
    fake_clock.advance(seconds=90)

    samples = parse_samples(render_metrics(analytics.summary()))

    assert samples == {
        "bsod_total_visits": "2",
        "bsod_api_calls": "1",
        "bsod_custom_messages": "1",
        "bsod_uptime_seconds": "90",
    }


def test_render_metrics_annotations(analytics):
    """Test that each metric is preceded by HELP and TYPE lines."""
    text = render_metrics(analytics.summary())
    blocks = text.strip().split("\n\n")

    assert len(blocks) == 4
    for block, name in zip(blocks, METRIC_NAMES):
        help_line, type_line, sample = block.split("\n")
        assert help_line.startswith(f"# HELP {name} ")
        assert re.fullmatch(rf"# TYPE {name} (counter|gauge)", type_line)
        assert re.fullmatch(rf"{name} \d+", sample)


def test_uptime_is_a_gauge():
    """Test metric types."""
    kinds = {metric.name: metric.kind for metric in ANALYTICS_METRICS}

    assert kinds["bsod_uptime_seconds"] == "gauge"
    assert kinds["bsod_total_visits"] == "counter"

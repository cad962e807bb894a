"""
Unit tests for the analytics aggregator.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from bluescreen.models.analytics import Uptime
from bluescreen.services.analytics import AnalyticsAggregator


def test_initial_summary(analytics):
    """Test a fresh aggregator."""
    summary = analytics.summary()

    assert summary.total_visits == 0
    assert summary.api_calls == 0
    assert summary.custom_message_count == 0
    assert summary.style_views == {}
    assert summary.stop_code_views == {}


def test_track_visit(analytics):
    """Test recording a custom visit."""
    analytics.track_visit("win10", "COFFEE_NOT_FOUND", True)

    summary = analytics.summary()
    assert summary.total_visits == 1
    assert summary.style_views == {"win10": 1}
    assert summary.stop_code_views == {"COFFEE_NOT_FOUND": 1}
    assert summary.custom_message_count == 1


def test_track_visit_accumulates(analytics):
    """Test that counters accumulate per key."""
    analytics.track_visit("win10", "COFFEE_NOT_FOUND")
    analytics.track_visit("win10", "SEMICOLON_MISSING")
    analytics.track_visit("winxp", "COFFEE_NOT_FOUND")

    summary = analytics.summary()
    assert summary.total_visits == 3
    assert summary.style_views == {"win10": 2, "winxp": 1}
    assert summary.stop_code_views == {"COFFEE_NOT_FOUND": 2, "SEMICOLON_MISSING": 1}
    assert summary.custom_message_count == 0


def test_track_visit_without_stop_code(analytics):
    """Test that a missing stop-code is not counted per code."""
    analytics.track_visit("win7", None)

    summary = analytics.summary()
    assert summary.total_visits == 1
    assert summary.stop_code_views == {}


def test_track_api_call(analytics):
    """Test recording API calls."""
    analytics.track_api_call()
    analytics.track_api_call()

    assert analytics.summary().api_calls == 2


def test_disabled_aggregator_ignores_tracking():
    """Test that tracking is a no-op when analytics are disabled."""
    analytics = AnalyticsAggregator(enabled=False)

    for _ in range(10):
        analytics.track_visit("win10", "COFFEE_NOT_FOUND", True)
        analytics.track_api_call()

    summary = analytics.summary()
    assert summary.total_visits == 0
    assert summary.api_calls == 0
    assert summary.custom_message_count == 0
    assert summary.style_views == {}
    assert summary.stop_code_views == {}


def test_summary_is_a_snapshot(analytics):
    """Test that later tracking does not change an earlier summary."""
    analytics.track_visit("win10", "COFFEE_NOT_FOUND")
    summary = analytics.summary()

    analytics.track_visit("win10", "COFFEE_NOT_FOUND")

    assert summary.total_visits == 1
    assert summary.style_views == {"win10": 1}


def test_summary_does_not_mutate_state(analytics):
    """Test that reading the summary leaves the counters alone."""
    analytics.track_visit("win11", "COFFEE_NOT_FOUND")
    summary = analytics.summary()
    summary.style_views["win11"] = 99

    assert analytics.summary().style_views == {"win11": 1}


def test_uptime(fake_clock):
    """Test uptime derived from the clock."""
    analytics = AnalyticsAggregator(clock=fake_clock)
    fake_clock.advance(hours=2, minutes=5, seconds=7, milliseconds=250)

    uptime = analytics.summary().uptime

    assert uptime.ms == 7507250
    assert uptime.seconds == 7507
    assert uptime.minutes == 125
    assert uptime.hours == 2
    assert uptime.human == "2h 5m 7s"


def test_reset(fake_clock):
    """Test that reset zeroes counters and restarts uptime."""
    analytics = AnalyticsAggregator(clock=fake_clock)
    analytics.track_visit("win10", "COFFEE_NOT_FOUND", True)
    analytics.track_api_call()
    fake_clock.advance(minutes=3)

    analytics.reset()
    summary = analytics.summary()

    assert summary.total_visits == 0
    assert summary.api_calls == 0
    assert summary.custom_message_count == 0
    assert summary.style_views == {}
    assert summary.stop_code_views == {}
    assert summary.uptime.seconds == 0
    assert summary.start_time == fake_clock.now


def test_reset_with_real_clock(analytics):
    """Test that uptime is near zero right after a reset."""
    analytics.track_api_call()
    analytics.reset()

    assert analytics.summary().uptime.seconds == 0


def test_concurrent_tracking_loses_no_updates(analytics):
    """Test that concurrent increments are all counted."""
    visits_per_worker = 500
    workers = 8

    def work(worker: int) -> None:
        for i in range(visits_per_worker):
            if (worker + i) % 2:
                analytics.track_visit("win10", "COFFEE_NOT_FOUND", i % 3 == 0)
            else:
                analytics.track_api_call()

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(work, range(workers)))

    summary = analytics.summary()
    assert summary.total_visits + summary.api_calls == visits_per_worker * workers
    assert summary.style_views["win10"] == summary.total_visits
    assert summary.stop_code_views["COFFEE_NOT_FOUND"] == summary.total_visits


@pytest.mark.parametrize("ms, human", [
    (0, "0h 0m 0s"),
    (59_999, "0h 0m 59s"),
    (60_000, "0h 1m 0s"),
    (3_661_000, "1h 1m 1s"),
    (90_061_000, "25h 1m 1s"),
])
def test_uptime_human_format(ms, human):
    """Test the composite uptime string."""
    assert Uptime.from_milliseconds(ms).human == human

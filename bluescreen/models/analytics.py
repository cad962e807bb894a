"""Analytics snapshot data models."""

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Uptime(BaseModel):
    """Elapsed time since process start or the last analytics reset."""

    ms: int
    seconds: int
    minutes: int
    hours: int
    human: str

    @classmethod
    def from_milliseconds(cls, ms: int) -> "Uptime":
        ms = max(0, ms)
        seconds = ms // 1000
        minutes = seconds // 60
        hours = minutes // 60
        return cls(
            ms=ms,
            seconds=seconds,
            minutes=minutes,
            hours=hours,
            human=f"{hours}h {minutes % 60}m {seconds % 60}s",
        )


class AnalyticsSummary(BaseModel):
    """Read-only snapshot of the usage counters."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_visits: int = 0
    style_views: Dict[str, int] = {}
    stop_code_views: Dict[str, int] = {}
    custom_message_count: int = 0
    api_calls: int = 0
    start_time: datetime
    uptime: Uptime

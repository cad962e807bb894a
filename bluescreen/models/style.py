"""Page style data models."""

from enum import Enum
from typing import Optional


class Style(str, Enum):
    """Visual theme of a rendered failure page."""

    WIN10 = "win10"
    WIN11 = "win11"
    WIN7 = "win7"
    WINXP = "winxp"


DEFAULT_STYLE = Style.WIN10


def resolve_style(raw: Optional[str]) -> Style:
    """Map a requested style token to a ``Style``, falling back to the default."""
    if not raw:
        return DEFAULT_STYLE
    try:
        return Style(raw.strip().lower())
    except ValueError:
        return DEFAULT_STYLE

"""
Merging of caller-supplied overrides into selected error records.

Nothing here raises: the values come straight from query strings on a
display-only page, so malformed input degrades to a safe value.
"""

import re
from typing import Optional, Union

from bluescreen.models.error import ErrorRecord, Override

MIN_PERCENTAGE = 0
MAX_PERCENTAGE = 100

_LEADING_INTEGER = re.compile(r"\s*([+-]?)0*([0-9]+)")


def clamp_percentage(value: int) -> int:
    return max(MIN_PERCENTAGE, min(MAX_PERCENTAGE, value))


def coerce_percentage(raw: Union[str, int, None]) -> int:
    """
    Turn a raw percentage into an integer in [0, 100].

    Strings are read up to the first non-digit, so ``"42abc"`` is 42 and
    ``"12.7"`` is 12. Only ASCII digits count; anything without a leading
    integer counts as 0.

    Args:
        raw: Value supplied by the caller

    Returns:
        Clamped percentage
    """
    if isinstance(raw, bool) or raw is None:
        return MIN_PERCENTAGE
    if isinstance(raw, int):
        return clamp_percentage(raw)

    match = _LEADING_INTEGER.match(str(raw))
    if not match:
        return MIN_PERCENTAGE
    sign, digits = match.groups()
    # More than three significant digits is always out of range
    if len(digits) > 3:
        return MIN_PERCENTAGE if sign == "-" else MAX_PERCENTAGE
    return clamp_percentage(int(sign + digits))


def apply_overrides(record: ErrorRecord, override: Optional[Override]) -> ErrorRecord:
    """
    Return a copy of ``record`` with the supplied override fields applied.

    Empty description or technical detail strings are ignored. A supplied
    percentage, even an empty or non-numeric one, replaces the record's
    percentage after coercion.

    Args:
        record: Selected error record
        override: Caller-supplied replacements

    Returns:
        New error record; ``record`` itself is left untouched
    """
    if override is None:
        return record

    changes = {}
    if override.description:
        changes["description"] = override.description
    if override.technical_detail:
        changes["technical_detail"] = override.technical_detail
    if override.percentage is not None:
        changes["percentage"] = coerce_percentage(override.percentage)

    if not changes:
        return record
    return record.model_copy(update=changes)

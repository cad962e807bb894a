"""Error record data models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorRecord(BaseModel):
    """A fully populated failure shown on a page or returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    stop_code: str
    description: str
    technical_detail: str
    scan_prompt: str
    percentage: int = Field(ge=0, le=100)


class Override(BaseModel):
    """Caller-supplied replacements for parts of a selected record.

    Values arrive as raw query strings; ``percentage`` is coerced later so that
    malformed input degrades instead of failing validation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    description: Optional[str] = None
    technical_detail: Optional[str] = None
    percentage: Optional[str] = None

    @property
    def is_custom(self) -> bool:
        """True when the caller supplied their own description or detail."""
        return bool(self.description or self.technical_detail)

"""API response data models."""

from datetime import datetime
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .analytics import Uptime
from .style import Style

DataT = TypeVar("DataT")


class DataResponse(BaseModel, Generic[DataT]):
    """Successful API response envelope."""

    success: bool = True
    data: DataT


class MessageResponse(BaseModel):
    """Successful API response carrying only a message."""

    success: bool = True
    message: str


class ErrorCodeNotFound(BaseModel):
    """Lookup miss; lists every valid code so clients can correct themselves."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = False
    error: str = "Error code not found"
    available_codes: List[str]


class CodeList(BaseModel):
    """All stop-codes in the catalog."""

    codes: List[str]
    count: int


class StyleList(BaseModel):
    """All page styles and the one used when none is requested."""

    styles: List[Style]
    default: Style


class HealthStatus(BaseModel):
    """Detailed health report of the API."""

    success: bool = True
    status: str = "healthy"
    timestamp: datetime
    uptime: Uptime
    version: str

"""
Types shared by all resources.
"""

from datetime import UTC, datetime
from typing import Generic, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# Seconds since the Unix epoch, UTC
Timestamp: TypeAlias = int

Metadata: TypeAlias = dict[str, str]

T = TypeVar("T")


def now_timestamp() -> Timestamp:
    """Current wall-clock time as a Unix timestamp."""
    return int(datetime.now(UTC).timestamp())


class ApiList(BaseModel, Generic[T]):
    """A page of objects as returned by list endpoints and embedded lists."""

    model_config = ConfigDict(extra="ignore")

    object: str = Field("list", description="Always 'list'")
    data: list[T] = Field(default_factory=list, description="Objects on this page")
    has_more: bool = Field(False, description="Whether more objects exist after this page")
    total_count: int | None = Field(None, description="Total number of objects, if requested")
    url: str | None = Field(None, description="URL for fetching this list")

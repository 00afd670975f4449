"""Pydantic data contracts for the in-memory document repository."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive timestamps are read as UTC so every comparison is between aware values.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Author embedded in a document."""

    id: str = Field(..., description="Stable identifier of the author")
    name: str = Field(..., description="Display name of the author")


class Document(BaseModel):
    """A stored document.

    Instances are mutable and shared: the store and the cache hold the same
    object, so an update made through one is visible through the other.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = Field(
        None, description="Identifier assigned by the store on first save when unset"
    )
    title: str = Field(..., description="Document title")
    content: str = Field(..., description="Document body")
    author: Author
    created: datetime = Field(
        default_factory=_utcnow, description="Creation timestamp, never modified by save"
    )

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class SearchRequest(BaseModel):
    """Search filters; every field is optional and an unset field matches all."""

    model_config = ConfigDict(populate_by_name=True)

    title_prefixes: Optional[List[str]] = Field(None, alias="titlePrefixes")
    contains_contents: Optional[List[str]] = Field(None, alias="containsContents")
    author_ids: Optional[List[str]] = Field(None, alias="authorIds")
    created_from: Optional[datetime] = Field(
        None, alias="createdFrom", description="Exclusive lower bound on created"
    )
    created_to: Optional[datetime] = Field(
        None, alias="createdTo", description="Exclusive upper bound on created"
    )

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class CacheStats(BaseModel):
    """Snapshot of cache counters."""

    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int

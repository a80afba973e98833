"""Pydantic data models for the business group resolver.

All data structures are immutable (frozen) after creation so a fetched
snapshot cannot change under a resolution step.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field, field_validator

from .types import DataSource, MatchStatus


def get_resource_id(link: str) -> str:
    """Return the short ID of a resource: the last segment of its link.

    ``/resources/groups/xyz`` and ``/resources/groups/xyz/`` both give ``xyz``;
    a value without slashes is returned unchanged.
    """
    trimmed = link.rstrip("/")
    if not trimmed:
        return link
    return trimmed.rsplit("/", 1)[-1]


@runtime_checkable
class Identifiable(Protocol):
    """Anything addressable by a full ID and its derived short ID."""

    @property
    def full_id(self) -> str: ...

    @property
    def short_id(self) -> str: ...


class BusinessGroup(BaseModel):
    """A business group as returned by the remote directory."""

    id: str = Field(min_length=1)
    label: str = ""

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("label", mode="before")
    @classmethod
    def none_label_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v

    @property
    def full_id(self) -> str:
        return self.id

    @property
    def short_id(self) -> str:
        return get_resource_id(self.id)


class MatchOutcome(BaseModel):
    """Result of one matching strategy over one snapshot.

    ``entity`` is set only for UNIQUE; ``match_count`` is always the raw count.
    """

    status: MatchStatus
    match_count: int = 0
    entity: BusinessGroup | None = None

    model_config = {"frozen": True}

    @classmethod
    def unique(cls, entity: BusinessGroup) -> "MatchOutcome":
        return cls(status=MatchStatus.UNIQUE, match_count=1, entity=entity)

    @classmethod
    def not_found(cls) -> "MatchOutcome":
        return cls(status=MatchStatus.NOT_FOUND, match_count=0)

    @classmethod
    def non_unique(cls, match_count: int) -> "MatchOutcome":
        return cls(status=MatchStatus.NON_UNIQUE, match_count=match_count)

    @property
    def is_unique(self) -> bool:
        return self.status == MatchStatus.UNIQUE


class AuditEntry(BaseModel):
    """Audit trail entry for a directory fetch."""

    timestamp: datetime = Field(default_factory=datetime.utcnow)
    source: DataSource
    action: str  # "fetch"
    endpoint: str | None = None
    success: bool = True
    error_message: str | None = None
    duration_ms: int | None = None
    notes: str | None = None

    model_config = {"frozen": True}

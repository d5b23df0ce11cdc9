"""Shared fields for every stored document."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_serializer

# Fixed width so stored timestamps order correctly as strings.
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utcnow() -> datetime:
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid.uuid4())


def format_timestamp(value: datetime) -> str:
    """Render a datetime as a UTC timestamp with microseconds always present."""
    return value.astimezone(UTC).strftime(_TIMESTAMP_FORMAT)


class DocumentStatus(StrEnum):
    ACTIVE = "Active"
    DELETED = "Deleted"


class DocumentBase(BaseModel):
    """Lifecycle fields common to answers and events."""

    id: str = Field(default_factory=new_id)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: datetime | None = None
    document_status: DocumentStatus = DocumentStatus.ACTIVE

    @field_serializer("created_at", "updated_at", "deleted_at", when_used="json-unless-none")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @property
    def is_active(self) -> bool:
        return self.document_status == DocumentStatus.ACTIVE

"""Event document model — immutable audit records of answer mutations."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_serializer

from answer_ledger.models.base import DocumentBase, DocumentStatus, format_timestamp, new_id


class EventType(StrEnum):
    """Enumerate the answer transitions that produce an event."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class EventData(BaseModel):
    key: str
    value: str


class Event(DocumentBase):
    """Snapshot of the value in effect when an answer was mutated."""

    uid: str = Field(default_factory=new_id)
    event: EventType
    data: EventData


class EventResponse(BaseModel):
    """Public projection of an event; the storage id stays internal."""

    uid: str
    event: EventType
    data: EventData
    created_at: datetime
    updated_at: datetime
    document_status: DocumentStatus

    @field_serializer("created_at", "updated_at", when_used="json")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_event(cls, event: Event) -> EventResponse:
        return cls(
            uid=event.uid,
            event=event.event,
            data=event.data,
            created_at=event.created_at,
            updated_at=event.updated_at,
            document_status=event.document_status,
        )

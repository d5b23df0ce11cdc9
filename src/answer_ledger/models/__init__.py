"""Data models for stored documents and API payloads."""

from answer_ledger.models.answer import (
    Answer,
    AnswerResponse,
    AnswerValue,
    CreateAnswerRequest,
    UpdateAnswerRequest,
)
from answer_ledger.models.base import DocumentBase, DocumentStatus
from answer_ledger.models.event import Event, EventData, EventResponse, EventType
from answer_ledger.models.pagination import PagedResponse, Pageable, PaginationData, SortOrder

__all__ = [
    "Answer",
    "AnswerResponse",
    "AnswerValue",
    "CreateAnswerRequest",
    "DocumentBase",
    "DocumentStatus",
    "Event",
    "EventData",
    "EventResponse",
    "EventType",
    "PagedResponse",
    "Pageable",
    "PaginationData",
    "SortOrder",
]

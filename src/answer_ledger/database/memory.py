"""In-memory answer and event stores for tests and local runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_ledger.errors import AnswerNotFoundError, DuplicateKeyError
from answer_ledger.models.answer import Answer, AnswerValue
from answer_ledger.models.base import DocumentStatus, utcnow
from answer_ledger.models.pagination import Pageable, PaginationData, SortOrder

if TYPE_CHECKING:
    from answer_ledger.models.event import Event


class InMemoryAnswerStore:
    """Answer store holding documents in a dict keyed by document id."""

    def __init__(self) -> None:
        self._documents: dict[str, Answer] = {}

    def _active(self, key: str) -> Answer | None:
        return next(
            (a for a in self._documents.values() if a.key == key and a.is_active),
            None,
        )

    async def create(self, answer: Answer) -> None:
        if answer.is_active and self._active(answer.key) is not None:
            raise DuplicateKeyError
        self._documents[answer.id] = answer.model_copy(deep=True)

    async def find_by_key(self, key: str) -> Answer:
        answer = self._active(key)
        if answer is None:
            raise AnswerNotFoundError
        return answer.model_copy(deep=True)

    async def append_value(self, key: str, value: str) -> Answer:
        answer = self._active(key)
        if answer is None:
            raise AnswerNotFoundError
        answer.values.append(AnswerValue(value=value))
        answer.updated_at = utcnow()
        return answer.model_copy(deep=True)

    async def mark_deleted(self, key: str) -> None:
        answer = self._active(key)
        if answer is None:
            raise AnswerNotFoundError
        answer.document_status = DocumentStatus.DELETED
        answer.deleted_at = utcnow()

    def all(self, key: str) -> list[Answer]:
        """Return every answer ever stored under a key, deleted ones included."""
        return [a.model_copy(deep=True) for a in self._documents.values() if a.key == key]


class InMemoryEventStore:
    """Append-only event store ordered by (created_at, insertion order)."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    async def create(self, event: Event) -> None:
        self._events.append(event.model_copy(deep=True))

    async def find_by_key(
        self, key: str, pageable: Pageable
    ) -> tuple[list[Event], PaginationData]:
        matching = [
            (event.created_at, seq, event)
            for seq, event in enumerate(self._events)
            if event.data.key == key and event.is_active
        ]
        matching.sort(key=lambda item: item[:2], reverse=pageable.sort == SortOrder.DESC)
        page = matching[pageable.offset : pageable.offset + pageable.per_page]
        return (
            [event.model_copy(deep=True) for _, _, event in page],
            PaginationData.build(len(matching), pageable),
        )

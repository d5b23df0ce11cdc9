"""Storage capabilities the services depend on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from answer_ledger.models.answer import Answer
    from answer_ledger.models.event import Event
    from answer_ledger.models.pagination import Pageable, PaginationData


@runtime_checkable
class AnswerStore(Protocol):
    """Persists one document per answer; keys are unique among active answers."""

    async def create(self, answer: Answer) -> None:
        """Insert a new answer. Raise DuplicateKeyError if the key is taken."""
        ...

    async def find_by_key(self, key: str) -> Answer:
        """Return the active answer for a key or raise AnswerNotFoundError."""
        ...

    async def append_value(self, key: str, value: str) -> Answer:
        """Append a value to the active answer and return the document after the append."""
        ...

    async def mark_deleted(self, key: str) -> None:
        """Soft-delete the active answer for a key, keeping its values."""
        ...


@runtime_checkable
class EventStore(Protocol):
    """Persists immutable events, queryable by answer key."""

    async def create(self, event: Event) -> None:
        """Insert a new event."""
        ...

    async def find_by_key(
        self, key: str, pageable: Pageable
    ) -> tuple[list[Event], PaginationData]:
        """Return one page of events for a key, ordered by creation time."""
        ...

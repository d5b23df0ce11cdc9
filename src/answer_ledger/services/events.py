"""Event business logic — record audit events and serve paginated history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_ledger.models.event import Event, EventData

if TYPE_CHECKING:
    from datetime import datetime

    from answer_ledger.database.stores import AnswerStore, EventStore
    from answer_ledger.models.answer import Answer
    from answer_ledger.models.event import EventType
    from answer_ledger.models.pagination import Pageable, PaginationData


class EventService:
    def __init__(self, answers: AnswerStore, events: EventStore) -> None:
        self._answers = answers
        self._events = events

    async def create_event(
        self,
        answer: Answer,
        event_type: EventType,
        *,
        occurred_at: datetime | None = None,
    ) -> Event:
        """Persist an event carrying the answer's key and current value.

        ``occurred_at`` becomes the event's ``created_at`` so history follows
        the order mutations happened in, not the order their writes finished.
        """
        event = Event(
            event=event_type,
            data=EventData(key=answer.key, value=answer.current_value),
        )
        if occurred_at is not None:
            event.created_at = occurred_at
            event.updated_at = occurred_at
        await self._events.create(event)
        return event

    async def find_history_by_key(
        self, key: str, pageable: Pageable
    ) -> tuple[list[Event], PaginationData]:
        """Return a page of events for a key that still has an active answer."""
        answer = await self._answers.find_by_key(key)
        return await self._events.find_by_key(answer.key, pageable)

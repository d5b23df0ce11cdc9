"""Tests for EventService with mocked stores."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from answer_ledger.errors import AnswerNotFoundError, StoreError
from answer_ledger.models.answer import Answer, AnswerValue
from answer_ledger.models.base import DocumentStatus
from answer_ledger.models.event import Event, EventData, EventType
from answer_ledger.models.pagination import Pageable, PaginationData
from answer_ledger.services.events import EventService


@pytest.fixture
def answers() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def events() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def service(answers: AsyncMock, events: AsyncMock) -> EventService:
    return EventService(answers, events)


def _answer(*values: str) -> Answer:
    return Answer(uid="12345", key="some-key", values=[AnswerValue(value=v) for v in values])


class TestCreateEvent:
    async def test_creates_event_from_last_value(self, service, events) -> None:
        event = await service.create_event(_answer("a", "b"), EventType.UPDATE)

        events.create.assert_awaited_once_with(event)
        assert event.uid
        assert event.event == EventType.UPDATE
        assert event.data == EventData(key="some-key", value="b")
        assert event.document_status == DocumentStatus.ACTIVE
        assert event.deleted_at is None
        assert event.created_at is not None

    async def test_uses_occurred_at(self, service) -> None:
        occurred_at = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)

        event = await service.create_event(
            _answer("a"), EventType.CREATE, occurred_at=occurred_at
        )

        assert event.created_at == occurred_at
        assert event.updated_at == occurred_at

    async def test_store_failure_propagates(self, service, events) -> None:
        events.create.side_effect = StoreError("failed")

        with pytest.raises(StoreError, match="failed"):
            await service.create_event(_answer("a"), EventType.CREATE)


class TestFindHistoryByKey:
    async def test_returns_events_and_pagination(self, service, answers, events) -> None:
        answers.find_by_key.return_value = _answer("a")
        page = [
            Event(uid="e1", event=EventType.UPDATE, data=EventData(key="some-key", value="b")),
            Event(uid="e2", event=EventType.CREATE, data=EventData(key="some-key", value="a")),
        ]
        pagination = PaginationData(total=2, page=1, per_page=10, prev=0, next=0, total_page=1)
        events.find_by_key.return_value = (page, pagination)
        pageable = Pageable(page=1, per_page=10)

        result, meta = await service.find_history_by_key("some-key", pageable)

        assert result == page
        assert meta == pagination
        answers.find_by_key.assert_awaited_once_with("some-key")
        events.find_by_key.assert_awaited_once_with("some-key", pageable)

    async def test_unknown_key(self, service, answers, events) -> None:
        answers.find_by_key.side_effect = AnswerNotFoundError

        with pytest.raises(AnswerNotFoundError):
            await service.find_history_by_key("missing", Pageable())

        events.find_by_key.assert_not_awaited()

    async def test_deleted_key_hides_history(
        self, answer_service, event_service, dispatcher
    ) -> None:
        """History for a deleted key is not found even though its events exist."""
        await answer_service.create_answer("k1", "a")
        await answer_service.delete_answer("k1")
        await dispatcher.drain()

        with pytest.raises(AnswerNotFoundError):
            await event_service.find_history_by_key("k1", Pageable())

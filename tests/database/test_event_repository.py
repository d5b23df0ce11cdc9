"""Tests for EventRepository against a mocked Cosmos container."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from azure.cosmos.exceptions import CosmosHttpResponseError

from answer_ledger.database.repositories.events import EventRepository
from answer_ledger.errors import StoreError
from answer_ledger.models.event import Event, EventData, EventType
from answer_ledger.models.pagination import Pageable, SortOrder


def _items(*docs: object):
    async def _gen():
        for doc in docs:
            yield doc

    return _gen()


def _event_doc(uid: str, event_type: str, value: str) -> dict:
    return {
        "id": f"id-{uid}",
        "uid": uid,
        "event": event_type,
        "data": {"key": "k1", "value": value},
        "document_status": "Active",
        "created_at": "2026-01-01T00:00:00+00:00",
        "updated_at": "2026-01-01T00:00:00+00:00",
        "_rid": "rid",
    }


class TestEventRepository:
    """Test the Event Repository."""

    @pytest.fixture
    def repo(self) -> EventRepository:
        """Create a repo for testing."""
        mock_db = MagicMock()
        mock_container = AsyncMock()
        mock_db.get_container_client.return_value = mock_container
        return EventRepository(mock_db)

    async def test_create(self, repo: EventRepository) -> None:
        """Verify events are written with their data key for partitioning."""
        event = Event(event=EventType.CREATE, data=EventData(key="k1", value="a"))

        await repo.create(event)

        body = repo._container.create_item.call_args.kwargs["body"]  # noqa: SLF001
        assert body["uid"] == event.uid
        assert body["event"] == "create"
        assert body["data"] == {"key": "k1", "value": "a"}

    async def test_create_failure(self, repo: EventRepository) -> None:
        """Verify write failures are wrapped in StoreError."""
        repo._container.create_item.side_effect = CosmosHttpResponseError(  # noqa: SLF001
            status_code=429,
            message="Too many requests",
        )

        with pytest.raises(StoreError):
            await repo.create(Event(event=EventType.CREATE, data=EventData(key="k1", value="a")))

    async def test_find_by_key_pages_descending(self, repo: EventRepository) -> None:
        """Verify history queries count, order, offset and limit within the partition."""
        repo._container.query_items = MagicMock(  # noqa: SLF001
            side_effect=[
                _items(3),
                _items(_event_doc("e2", "update", "b"), _event_doc("e1", "create", "a")),
            ]
        )

        events, pagination = await repo.find_by_key("k1", Pageable(page=1, per_page=2))

        assert [e.uid for e in events] == ["e2", "e1"]
        assert events[0].event == EventType.UPDATE
        assert pagination.total == 3
        assert pagination.total_page == 2
        assert pagination.next == 2
        assert pagination.prev == 0

        count_call, page_call = repo._container.query_items.call_args_list  # noqa: SLF001
        assert "COUNT(1)" in count_call[0][0]
        assert count_call.kwargs["partition_key"] == "k1"
        sql = page_call[0][0]
        assert "c.data.key = @key" in sql
        assert "ORDER BY c.created_at DESC" in sql
        params = {p["name"]: p["value"] for p in page_call.kwargs["parameters"]}
        assert params["@key"] == "k1"
        assert params["@status"] == "Active"
        assert params["@offset"] == 0
        assert params["@limit"] == 2
        assert page_call.kwargs["partition_key"] == "k1"

    async def test_find_by_key_ascending_second_page(self, repo: EventRepository) -> None:
        """Verify ascending sort and offsets for later pages."""
        repo._container.query_items = MagicMock(  # noqa: SLF001
            side_effect=[_items(3), _items(_event_doc("e3", "delete", "b"))]
        )

        events, pagination = await repo.find_by_key(
            "k1", Pageable(page=2, per_page=2, sort=SortOrder.ASC)
        )

        assert len(events) == 1
        assert pagination.prev == 1
        assert pagination.next == 0
        page_call = repo._container.query_items.call_args_list[1]  # noqa: SLF001
        assert "ORDER BY c.created_at ASC" in page_call[0][0]
        params = {p["name"]: p["value"] for p in page_call.kwargs["parameters"]}
        assert params["@offset"] == 2

    async def test_find_by_key_empty(self, repo: EventRepository) -> None:
        """Verify an empty history returns an empty page."""
        repo._container.query_items = MagicMock(side_effect=[_items(0), _items()])  # noqa: SLF001

        events, pagination = await repo.find_by_key("k1", Pageable())

        assert events == []
        assert pagination.total == 0
        assert pagination.total_page == 0

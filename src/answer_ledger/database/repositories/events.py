"""Repository for the events container (partitioned by /data/key)."""

from __future__ import annotations

from azure.cosmos.exceptions import CosmosHttpResponseError

from answer_ledger.database.repositories.base import BaseRepository
from answer_ledger.errors import StoreError
from answer_ledger.models.base import DocumentStatus
from answer_ledger.models.event import Event
from answer_ledger.models.pagination import Pageable, PaginationData, SortOrder

_HISTORY_FILTER = "c.data.key = @key AND c.document_status = @status"


class EventRepository(BaseRepository[Event]):
    """Provide data access for the events container."""

    container_name = "events"
    model_class = Event

    async def create(self, event: Event) -> None:
        try:
            await self._container.create_item(body=self._dump(event))
        except CosmosHttpResponseError as exc:
            raise StoreError(f"failed to create event: {exc.message}") from exc

    async def find_by_key(
        self, key: str, pageable: Pageable
    ) -> tuple[list[Event], PaginationData]:
        """Fetch one page of active events for a key, ordered by created_at."""
        parameters = [
            {"name": "@key", "value": key},
            {"name": "@status", "value": DocumentStatus.ACTIVE.value},
        ]
        total = await self.count(
            f"SELECT VALUE COUNT(1) FROM c WHERE {_HISTORY_FILTER}",
            parameters,
            partition_key=key,
        )
        direction = "ASC" if pageable.sort == SortOrder.ASC else "DESC"
        events = await self.query(
            f"SELECT * FROM c WHERE {_HISTORY_FILTER}"
            f" ORDER BY c.created_at {direction}"
            " OFFSET @offset LIMIT @limit",
            [
                *parameters,
                {"name": "@offset", "value": pageable.offset},
                {"name": "@limit", "value": pageable.per_page},
            ],
            partition_key=key,
        )
        return events, PaginationData.build(total, pageable)

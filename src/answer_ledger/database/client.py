"""Async Cosmos DB client initialization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient as AzureCosmosClient
from azure.cosmos.aio import DatabaseProxy

if TYPE_CHECKING:
    from answer_ledger.config import CosmosConfig

logger = logging.getLogger(__name__)

ANSWERS_CONTAINER = "answers"
EVENTS_CONTAINER = "events"

# Uniqueness is scoped to active answers: active_key holds the key while the
# answer is active and the answer's uid once it is deleted.
_ANSWERS_UNIQUE_KEYS = {"uniqueKeys": [{"paths": ["/active_key"]}]}


class CosmosClient:
    """Manages the async Cosmos DB client and database reference."""

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self) -> None:
        """Create the client and obtain a database reference."""
        self._client = AzureCosmosClient(
            self._config.endpoint,
            credential=self._config.key,
            timeout=self._config.request_timeout,
        )
        self._database = self._client.get_database_client(self._config.database)

    async def ensure_containers(self) -> None:
        """Create the database and both containers if they do not exist yet."""
        if self._client is None:
            raise RuntimeError("CosmosClient not initialized — call initialize() first")
        self._database = await self._client.create_database_if_not_exists(
            id=self._config.database
        )
        await self._database.create_container_if_not_exists(
            id=ANSWERS_CONTAINER,
            partition_key=PartitionKey(path="/key"),
            unique_key_policy=_ANSWERS_UNIQUE_KEYS,
        )
        await self._database.create_container_if_not_exists(
            id=EVENTS_CONTAINER,
            partition_key=PartitionKey(path="/data/key"),
        )
        logger.info("Cosmos containers ready in database=%s", self._config.database)

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            raise RuntimeError("CosmosClient not initialized — call initialize() first")
        return self._database

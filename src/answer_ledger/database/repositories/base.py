"""Generic repository over a single Cosmos DB container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.cosmos.exceptions import CosmosHttpResponseError

from answer_ledger.errors import StoreError
from answer_ledger.models.base import DocumentBase

if TYPE_CHECKING:
    from azure.cosmos.aio import ContainerProxy, DatabaseProxy

T = TypeVar("T", bound=DocumentBase)


class BaseRepository(Generic[T]):
    """Shared query and serialization helpers for document repositories."""

    container_name: ClassVar[str]
    model_class: ClassVar[type[DocumentBase]]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container: ContainerProxy = database.get_container_client(self.container_name)

    @staticmethod
    def _dump(document: DocumentBase) -> dict[str, Any]:
        return document.model_dump(mode="json", exclude_none=True)

    async def query(
        self,
        sql: str,
        parameters: list[dict[str, Any]] | None = None,
        *,
        partition_key: str | None = None,
    ) -> list[T]:
        """Run a parametrized query and validate each item into the model class."""
        kwargs: dict[str, Any] = {"parameters": parameters or []}
        if partition_key is not None:
            kwargs["partition_key"] = partition_key
        try:
            return [
                cast("T", self.model_class.model_validate(item))
                async for item in self._container.query_items(sql, **kwargs)
            ]
        except CosmosHttpResponseError as exc:
            raise StoreError(f"query on {self.container_name} failed: {exc.message}") from exc

    async def count(
        self,
        sql: str,
        parameters: list[dict[str, Any]] | None = None,
        *,
        partition_key: str | None = None,
    ) -> int:
        """Run a ``SELECT VALUE COUNT(1)`` query and return the scalar."""
        kwargs: dict[str, Any] = {"parameters": parameters or []}
        if partition_key is not None:
            kwargs["partition_key"] = partition_key
        total = 0
        try:
            async for item in self._container.query_items(sql, **kwargs):
                total = cast("int", item)
        except CosmosHttpResponseError as exc:
            raise StoreError(f"count on {self.container_name} failed: {exc.message}") from exc
        return total

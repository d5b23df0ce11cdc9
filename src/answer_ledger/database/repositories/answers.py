"""Repository for the answers container (partitioned by /key)."""

from __future__ import annotations

from typing import Any, cast

from azure.cosmos.exceptions import CosmosHttpResponseError, CosmosResourceExistsError

from answer_ledger.database.repositories.base import BaseRepository
from answer_ledger.errors import AnswerNotFoundError, DuplicateKeyError, StoreError
from answer_ledger.models.answer import Answer, AnswerValue
from answer_ledger.models.base import DocumentStatus, format_timestamp, utcnow

_ACTIVE_KEY_FIELD = "active_key"
_HTTP_PRECONDITION_FAILED = 412

# Patches only apply while the document is still active; a concurrent delete
# turns the losing write into a 412.
_ACTIVE_PREDICATE = f"FROM c WHERE c.document_status = '{DocumentStatus.ACTIVE.value}'"


class AnswerRepository(BaseRepository[Answer]):
    """Provide data access for the answers container."""

    container_name = "answers"
    model_class = Answer

    async def create(self, answer: Answer) -> None:
        """Insert an answer; the unique key policy rejects a second active key."""
        body = {**self._dump(answer), _ACTIVE_KEY_FIELD: answer.key}
        try:
            await self._container.create_item(body=body)
        except CosmosResourceExistsError as exc:
            raise DuplicateKeyError from exc
        except CosmosHttpResponseError as exc:
            raise StoreError(f"failed to create answer: {exc.message}") from exc

    async def find_by_key(self, key: str) -> Answer:
        """Fetch the active answer for a key."""
        answers = await self.query(
            "SELECT * FROM c WHERE c.key = @key AND c.document_status = @status",
            [
                {"name": "@key", "value": key},
                {"name": "@status", "value": DocumentStatus.ACTIVE.value},
            ],
            partition_key=key,
        )
        if not answers:
            raise AnswerNotFoundError
        return answers[0]

    async def append_value(self, key: str, value: str) -> Answer:
        """Append a value to the active answer in a single patch."""
        answer = await self.find_by_key(key)
        operations = [
            {"op": "add", "path": "/values/-", "value": AnswerValue(value=value).model_dump()},
            {"op": "set", "path": "/updated_at", "value": format_timestamp(utcnow())},
        ]
        data = await self._patch(answer, operations)
        return Answer.model_validate(data)

    async def mark_deleted(self, key: str) -> None:
        """Soft-delete the active answer, freeing its key for a new answer."""
        answer = await self.find_by_key(key)
        operations = [
            {"op": "set", "path": "/document_status", "value": DocumentStatus.DELETED.value},
            {"op": "set", "path": "/deleted_at", "value": format_timestamp(utcnow())},
            {"op": "set", "path": f"/{_ACTIVE_KEY_FIELD}", "value": answer.uid},
        ]
        await self._patch(answer, operations)

    async def _patch(self, answer: Answer, operations: list[dict[str, Any]]) -> dict[str, Any]:
        try:
            return cast(
                "dict[str, Any]",
                await self._container.patch_item(
                    item=answer.id,
                    partition_key=answer.key,
                    patch_operations=operations,
                    filter_predicate=_ACTIVE_PREDICATE,
                ),
            )
        except CosmosHttpResponseError as exc:
            if exc.status_code == _HTTP_PRECONDITION_FAILED:
                raise AnswerNotFoundError from exc
            raise StoreError(f"failed to update answer: {exc.message}") from exc

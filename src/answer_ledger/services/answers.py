"""Answer business logic — create, look up, update and soft-delete keyed values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from answer_ledger.errors import InvalidAnswerError
from answer_ledger.models.answer import Answer
from answer_ledger.models.event import EventType

if TYPE_CHECKING:
    from answer_ledger.database.stores import AnswerStore
    from answer_ledger.services.dispatcher import EventDispatcher


def _require(**fields: str) -> None:
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise InvalidAnswerError(f"{', '.join(missing)} is required")


class AnswerService:
    """Enforce key uniqueness, value history and soft deletes.

    Every successful mutation hands the answer to the event dispatcher, which
    records the audit event in the background.
    """

    def __init__(self, answers: AnswerStore, dispatcher: EventDispatcher) -> None:
        self._answers = answers
        self._dispatcher = dispatcher

    async def create_answer(self, key: str, value: str) -> Answer:
        """Create an active answer. Raises DuplicateKeyError if the key is live."""
        _require(key=key, value=value)
        answer = Answer.new(key, value)
        await self._answers.create(answer)
        self._dispatcher.dispatch(answer, EventType.CREATE)
        return answer

    async def find_answer_by_key(self, key: str) -> Answer:
        return await self._answers.find_by_key(key)

    async def update_answer(self, key: str, value: str) -> Answer:
        """Append a value to the active answer for ``key``.

        The lookup and the append are separate store calls, so concurrent
        updates to one key may interleave; each append is still applied once.
        """
        _require(value=value)
        await self.find_answer_by_key(key)
        answer = await self._answers.append_value(key, value)
        self._dispatcher.dispatch(answer, EventType.UPDATE)
        return answer

    async def delete_answer(self, key: str) -> None:
        """Soft-delete the active answer; its event carries the last value."""
        answer = await self.find_answer_by_key(key)
        await self._answers.mark_deleted(key)
        self._dispatcher.dispatch(answer, EventType.DELETE)

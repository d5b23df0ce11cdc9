"""Detached audit-event writes.

Mutations hand a snapshot of the answer to :class:`EventDispatcher` and return
immediately. The write runs as a background task with its own timeout, so a
slow or failing event store never delays or fails the mutation that triggered
it. Failures are logged and the event is lost; there is no retry queue.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from answer_ledger.models.base import utcnow

if TYPE_CHECKING:
    from datetime import datetime

    from answer_ledger.models.answer import Answer
    from answer_ledger.models.event import EventType
    from answer_ledger.services.events import EventService

logger = logging.getLogger(__name__)

_DEFAULT_MAX_CONCURRENCY = 16
_DEFAULT_WRITE_TIMEOUT_SECONDS = 5.0


class EventDispatcher:
    """Schedule event writes on a bounded pool of background tasks."""

    def __init__(
        self,
        event_service: EventService,
        *,
        max_concurrency: int = _DEFAULT_MAX_CONCURRENCY,
        write_timeout: float = _DEFAULT_WRITE_TIMEOUT_SECONDS,
    ) -> None:
        self._event_service = event_service
        self._semaphore = asyncio.Semaphore(max_concurrency)
        self._write_timeout = write_timeout
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def dispatch(self, answer: Answer, event_type: EventType) -> None:
        """Start recording an event for ``answer`` without waiting for it."""
        snapshot = answer.model_copy(deep=True)
        task = asyncio.create_task(self._record(snapshot, event_type, utcnow()))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.debug("Dispatched event=%s key=%s", event_type, snapshot.key)

    async def _record(self, answer: Answer, event_type: EventType, occurred_at: datetime) -> None:
        async with self._semaphore:
            try:
                async with asyncio.timeout(self._write_timeout):
                    await self._event_service.create_event(
                        answer, event_type, occurred_at=occurred_at
                    )
            except Exception:  # noqa: BLE001
                logger.warning(
                    "Failed to create event=%s for key=%s",
                    event_type,
                    answer.key,
                    exc_info=True,
                )

    async def drain(self) -> None:
        """Wait until every dispatched event has been written or has failed."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def stop(self, timeout: float) -> None:
        """Drain with a bound, then cancel and report anything still in flight."""
        if not self._tasks:
            return
        _, dropped = await asyncio.wait(set(self._tasks), timeout=timeout)
        if dropped:
            for task in dropped:
                task.cancel()
            await asyncio.gather(*dropped, return_exceptions=True)
            logger.warning("Dropped %d pending events on shutdown", len(dropped))

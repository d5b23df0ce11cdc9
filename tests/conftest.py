"""Shared fixtures: in-memory stores wired into the core services."""

from __future__ import annotations

import pytest

from answer_ledger.database.memory import InMemoryAnswerStore, InMemoryEventStore
from answer_ledger.services import AnswerService, EventDispatcher, EventService


@pytest.fixture
def answer_store() -> InMemoryAnswerStore:
    return InMemoryAnswerStore()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def event_service(
    answer_store: InMemoryAnswerStore, event_store: InMemoryEventStore
) -> EventService:
    return EventService(answer_store, event_store)


@pytest.fixture
def dispatcher(event_service: EventService) -> EventDispatcher:
    return EventDispatcher(event_service, max_concurrency=4, write_timeout=1.0)


@pytest.fixture
def answer_service(
    answer_store: InMemoryAnswerStore, dispatcher: EventDispatcher
) -> AnswerService:
    return AnswerService(answer_store, dispatcher)

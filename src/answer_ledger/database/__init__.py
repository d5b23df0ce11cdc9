"""Persistence: store protocols, Cosmos DB repositories and in-memory stores."""

from answer_ledger.database.client import CosmosClient
from answer_ledger.database.memory import InMemoryAnswerStore, InMemoryEventStore
from answer_ledger.database.stores import AnswerStore, EventStore

__all__ = [
    "AnswerStore",
    "CosmosClient",
    "EventStore",
    "InMemoryAnswerStore",
    "InMemoryEventStore",
]

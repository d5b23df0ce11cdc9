"""Repository modules for each Cosmos DB container."""

from answer_ledger.database.repositories.answers import AnswerRepository
from answer_ledger.database.repositories.events import EventRepository

__all__ = [
    "AnswerRepository",
    "EventRepository",
]

"""Core services for answers and their audit events."""

from answer_ledger.services.answers import AnswerService
from answer_ledger.services.dispatcher import EventDispatcher
from answer_ledger.services.events import EventService

__all__ = [
    "AnswerService",
    "EventDispatcher",
    "EventService",
]

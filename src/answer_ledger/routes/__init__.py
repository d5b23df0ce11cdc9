"""HTTP routers."""

from answer_ledger.routes.answers import router as answers_router
from answer_ledger.routes.health import router as health_router

__all__ = [
    "answers_router",
    "health_router",
]

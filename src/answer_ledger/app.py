"""FastAPI application factory and server entry point."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from answer_ledger.config import Settings, load_settings
from answer_ledger.database.client import CosmosClient
from answer_ledger.database.repositories import AnswerRepository, EventRepository
from answer_ledger.errors import AnswerLedgerError
from answer_ledger.health import check_emulators
from answer_ledger.logging import configure_logging
from answer_ledger.routes import answers_router, health_router
from answer_ledger.routes.responses import error_response, status_for
from answer_ledger.services import AnswerService, EventDispatcher, EventService

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi.responses import JSONResponse

    from answer_ledger.database.stores import AnswerStore, EventStore

logger = logging.getLogger(__name__)


def wire_services(
    app: FastAPI, settings: Settings, answers: AnswerStore, events: EventStore
) -> None:
    """Build the services over a pair of stores and attach them to app state."""
    event_service = EventService(answers, events)
    dispatcher = EventDispatcher(
        event_service,
        max_concurrency=settings.events.max_concurrency,
        write_timeout=settings.events.write_timeout,
    )
    app.state.event_service = event_service
    app.state.dispatcher = dispatcher
    app.state.answer_service = AnswerService(answers, dispatcher)


async def _handle_domain_error(_: Request, exc: Exception) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed: %s", exc, exc_info=exc)
    return error_response(status_code, str(exc))


async def _handle_validation_error(_: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    message = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'][1:]) or 'body'}: {err['msg']}" for err in errors
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message or "invalid request")


async def _handle_unexpected_error(_: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")


def create_app(
    settings: Settings | None = None,
    *,
    answer_store: AnswerStore | None = None,
    event_store: EventStore | None = None,
) -> FastAPI:
    """Create the app; injected stores replace Cosmos DB entirely."""
    settings = settings or load_settings()
    configure_logging(settings.app.log_level)
    injected = answer_store is not None and event_store is not None

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        cosmos: CosmosClient | None = None
        if not injected:
            if settings.app.is_development and not await check_emulators(settings):
                raise RuntimeError("Cosmos DB is not reachable")
            cosmos = CosmosClient(settings.cosmos)
            try:
                await cosmos.initialize()
                await cosmos.ensure_containers()
            except Exception:
                await cosmos.close()
                raise
            wire_services(
                app,
                settings,
                AnswerRepository(cosmos.database),
                EventRepository(cosmos.database),
            )
        logger.info("Answer ledger started (env=%s)", settings.app.env)

        yield

        logger.info("Answer ledger shutting down")
        await app.state.dispatcher.stop(settings.events.shutdown_timeout)
        if cosmos is not None:
            await cosmos.close()
        logger.info("Answer ledger shutdown complete")

    app = FastAPI(title="Answer Ledger", lifespan=lifespan)
    app.state.settings = settings
    if injected:
        wire_services(app, settings, answer_store, event_store)

    app.add_exception_handler(AnswerLedgerError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    app.include_router(health_router)
    app.include_router(answers_router)
    return app


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the answer ledger HTTP server")
    parser.add_argument("--host", help="Interface to bind (default: SERVER_HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: SERVER_PORT)")
    parser.add_argument("--cosmos-endpoint", help="Cosmos DB endpoint (default: COSMOS_ENDPOINT)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the HTTP server process."""
    args = _parse_args(argv)
    settings = load_settings()

    app_config = settings.app
    if args.host:
        app_config = dataclasses.replace(app_config, host=args.host)
    if args.port:
        app_config = dataclasses.replace(app_config, port=args.port)
    cosmos_config = settings.cosmos
    if args.cosmos_endpoint:
        cosmos_config = dataclasses.replace(cosmos_config, endpoint=args.cosmos_endpoint)
    settings = dataclasses.replace(settings, app=app_config, cosmos=cosmos_config)

    uvicorn.run(create_app(settings), host=settings.app.host, port=settings.app.port)


if __name__ == "__main__":
    main()

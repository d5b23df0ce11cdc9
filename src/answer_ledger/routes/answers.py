"""Answers routes — create, read, update, delete and history."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from answer_ledger.models.answer import AnswerResponse, CreateAnswerRequest, UpdateAnswerRequest
from answer_ledger.models.event import EventResponse
from answer_ledger.models.pagination import PagedResponse, Pageable
from answer_ledger.routes.responses import success_response

router = APIRouter(prefix="/api/v1/answers", tags=["answers"])


@router.post("")
async def create_answer(request: Request, body: CreateAnswerRequest) -> JSONResponse:
    """Create an answer under a new key."""
    service = request.app.state.answer_service
    answer = await service.create_answer(body.key, body.value)
    return success_response(
        status.HTTP_201_CREATED,
        "answer created successfully",
        AnswerResponse.from_answer(answer),
    )


@router.get("/{key}")
async def find_answer_by_key(request: Request, key: str) -> JSONResponse:
    """Return the current value for a key."""
    service = request.app.state.answer_service
    answer = await service.find_answer_by_key(key)
    return success_response(
        status.HTTP_200_OK,
        "answer retrieved successfully",
        AnswerResponse.from_answer(answer),
    )


@router.put("/{key}")
async def update_answer(request: Request, key: str, body: UpdateAnswerRequest) -> JSONResponse:
    """Append a new value to an existing key."""
    service = request.app.state.answer_service
    answer = await service.update_answer(key, body.value)
    return success_response(
        status.HTTP_200_OK,
        "answer updated successfully",
        AnswerResponse.from_answer(answer),
    )


@router.delete("/{key}")
async def delete_answer(request: Request, key: str) -> JSONResponse:
    """Soft-delete the answer for a key."""
    service = request.app.state.answer_service
    await service.delete_answer(key)
    return success_response(status.HTTP_200_OK, "answer deleted successfully")


@router.get("/{key}/history")
async def find_history_by_key(request: Request, key: str) -> JSONResponse:
    """Return a page of audit events for a key, newest first by default."""
    service = request.app.state.event_service
    params = request.query_params
    pageable = Pageable.from_query(
        page=params.get("page"),
        per_page=params.get("perPage"),
        sort=params.get("sort"),
    )
    events, pagination = await service.find_history_by_key(key, pageable)
    return success_response(
        status.HTTP_200_OK,
        "retrieved history",
        PagedResponse(
            content=[EventResponse.from_event(event) for event in events],
            pagination=pagination,
        ),
    )

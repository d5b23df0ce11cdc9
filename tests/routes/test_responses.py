"""Tests for the response envelope and error-to-status mapping."""

import json

import pytest

from answer_ledger.errors import (
    AnswerNotFoundError,
    DuplicateKeyError,
    ErrorKind,
    InvalidAnswerError,
    StoreError,
)
from answer_ledger.models.pagination import Pageable, PagedResponse, PaginationData
from answer_ledger.routes.responses import error_response, status_for, success_response


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (AnswerNotFoundError(), 404),
        (DuplicateKeyError(), 403),
        (InvalidAnswerError(), 400),
        (StoreError(), 500),
        (ValueError("unexpected"), 500),
    ],
)
def test_status_for(exc: Exception, expected: int) -> None:
    assert status_for(exc) == expected


def test_error_kinds() -> None:
    assert AnswerNotFoundError.kind == ErrorKind.NOT_FOUND
    assert DuplicateKeyError.kind == ErrorKind.DUPLICATE_KEY
    assert InvalidAnswerError.kind == ErrorKind.VALIDATION
    assert StoreError.kind == ErrorKind.INTERNAL


def test_error_default_and_custom_messages() -> None:
    assert str(AnswerNotFoundError()) == "answer not found"
    assert StoreError("disk on fire").message == "disk on fire"


def test_success_response_omits_empty_data() -> None:
    response = success_response(200, "answer deleted successfully")

    assert response.status_code == 200
    assert json.loads(response.body) == {
        "success": True,
        "message": "answer deleted successfully",
    }


def test_success_response_uses_aliases() -> None:
    paged = PagedResponse(content=[], pagination=PaginationData.build(0, Pageable()))

    body = json.loads(success_response(200, "retrieved history", paged).body)

    assert body["data"]["pagination"]["perPage"] == 20
    assert body["data"]["pagination"]["totalPage"] == 0


def test_error_response() -> None:
    response = error_response(404, "answer not found")

    assert response.status_code == 404
    assert json.loads(response.body) == {"success": False, "message": "answer not found"}

"""JSON response envelope and error-to-status mapping."""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from answer_ledger.errors import AnswerLedgerError, ErrorKind

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_KEY: status.HTTP_403_FORBIDDEN,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: Exception) -> int:
    """Map an exception to an HTTP status; uncategorized errors are 500."""
    if isinstance(exc, AnswerLedgerError):
        return _STATUS_BY_KIND[exc.kind]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def success_response(status_code: int, message: str, data: Any = None) -> JSONResponse:
    body: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        body["data"] = jsonable_encoder(data, by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})

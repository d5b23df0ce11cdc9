"""Pagination request and metadata models for history queries."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20


class SortOrder(IntEnum):
    ASC = 1
    DESC = -1


_SORT_ALIASES = {
    "1": SortOrder.ASC,
    "asc": SortOrder.ASC,
    "-1": SortOrder.DESC,
    "desc": SortOrder.DESC,
}


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


class Pageable(BaseModel):
    """Which page of history to return, and in which order."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1)
    sort: SortOrder = SortOrder.DESC

    @classmethod
    def from_query(
        cls,
        page: str | None = None,
        per_page: str | None = None,
        sort: str | None = None,
    ) -> Pageable:
        """Parse raw query parameters, falling back to defaults on bad input."""
        order = _SORT_ALIASES.get((sort or "").strip().lower(), SortOrder.DESC)
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            per_page=_positive_int(per_page, DEFAULT_PER_PAGE),
            sort=order,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


class PaginationData(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = 0
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    prev: int = 0
    next: int = 0
    total_page: int = 0

    @classmethod
    def build(cls, total: int, pageable: Pageable) -> PaginationData:
        """Derive page links from a total count; 0 means there is no such page."""
        total_page = math.ceil(total / pageable.per_page)
        page = pageable.page
        return cls(
            total=total,
            page=page,
            per_page=pageable.per_page,
            prev=page - 1 if page > 1 else 0,
            next=page + 1 if page < total_page else 0,
            total_page=total_page,
        )


class PagedResponse(BaseModel):
    content: list[Any]
    pagination: PaginationData

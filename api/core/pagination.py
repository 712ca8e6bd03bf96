"""
Offset pagination shared by list endpoints.

`start` is the row offset, `limit` the page size. List responses always
report `total_count`: the number of rows matching the filters before the
page is cut, so clients can compute the number of pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, Query, status

from . import settings


@dataclass(frozen=True)
class PageParams:
    start: int
    limit: int


def resolve_page(start: int = 0, limit: int | None = None) -> PageParams:
    if start < 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must be >= 0.")

    max_size = settings.page_size_max()
    resolved = settings.page_size_default() if limit is None else limit
    if resolved < 1 or resolved > max_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"limit must be between 1 and {max_size}.",
        )
    return PageParams(start=start, limit=resolved)


async def page_params(
    start: int = Query(0, ge=0),
    limit: int | None = Query(default=None, ge=1),
) -> PageParams:
    """
    FastAPI dependency; default page size comes from PAGE_SIZE_DEFAULT.
    """
    return resolve_page(start, limit)


def page_response(key: str, items: list[Any], *, total_count: int, page: PageParams) -> dict[str, Any]:
    return {
        key: items,
        "total_count": total_count,
        "start": page.start,
        "limit": page.limit,
    }

"""Helpers for following paginated remote listings to exhaustion."""

from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable, Generic, TypeVar

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")
C = TypeVar("C")


@dataclass
class CursorPage(Generic[T, C]):
    """One page of results plus the cursor of the page after it.

    A ``next_cursor`` of ``None`` marks the final page.
    """

    results: list[T] = field(default_factory=list)
    next_cursor: C | None = None


async def iterate_pages(fetch_page: Callable[[C | None], Awaitable[CursorPage[T, C]]]) -> AsyncIterator[T]:
    """Yield every item from a paginated listing, following cursors until none is returned.

    The first request is made with a cursor of ``None``.
    """
    cursor: C | None = None
    page_count = 0
    while True:
        page = await fetch_page(cursor)
        page_count += 1
        logger.debug("Fetched page of results", page_count=page_count, result_count=len(page.results), next_cursor=page.next_cursor)
        for item in page.results:
            yield item
        if page.next_cursor is None:
            break
        cursor = page.next_cursor


async def collect_pages(fetch_page: Callable[[C | None], Awaitable[CursorPage[T, C]]]) -> list[T]:
    """Collect every item from a paginated listing into a list."""
    return [item async for item in iterate_pages(fetch_page)]


def next_page_number(current_page: int | None, result_count: int, per_page: int) -> int | None:
    """Return the next page number for page-numbered APIs, or None when the listing is exhausted.

    GitHub's REST API signals the last page by returning fewer items than requested.
    """
    if result_count < per_page:
        return None
    return (current_page or 1) + 1

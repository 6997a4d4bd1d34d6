"""Unit tests for the pagination helpers."""

import pytest

from github_notion_sync.utils.pagination import CursorPage, collect_pages, iterate_pages, next_page_number


@pytest.mark.asyncio
async def test_collect_pages_follows_every_cursor() -> None:
    """Test that cursors are followed A -> B -> C -> None before collection finishes."""
    pages = {
        None: CursorPage([1, 2], "A"),
        "A": CursorPage([3], "B"),
        "B": CursorPage([4, 5], "C"),
        "C": CursorPage([6], None),
    }
    requested: list[str | None] = []

    async def fetch_page(cursor: str | None) -> CursorPage[int, str]:
        requested.append(cursor)
        return pages[cursor]

    assert await collect_pages(fetch_page) == [1, 2, 3, 4, 5, 6]
    assert requested == [None, "A", "B", "C"]


@pytest.mark.asyncio
async def test_iterate_pages_single_empty_page() -> None:
    """Test that an empty first page without a cursor yields nothing."""

    async def fetch_page(cursor: str | None) -> CursorPage[int, str]:
        return CursorPage([], None)

    assert [item async for item in iterate_pages(fetch_page)] == []


@pytest.mark.parametrize(
    "current_page,result_count,per_page,expected",
    [
        pytest.param(None, 100, 100, 2, id="full first page"),
        pytest.param(2, 100, 100, 3, id="full later page"),
        pytest.param(3, 99, 100, None, id="short page ends listing"),
        pytest.param(None, 0, 100, None, id="empty page ends listing"),
    ],
)
def test_next_page_number(current_page: int | None, result_count: int, per_page: int, expected: int | None) -> None:
    """Test that page-numbered listings stop at the first short page."""
    assert next_page_number(current_page, result_count, per_page) == expected

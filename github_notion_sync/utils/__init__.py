"""Utility modules for shared functionality."""

from .constants import (
    ISSUE_ID_PROPERTY,
    NOTION_MAX_PAGE_SIZE,
    NOTION_MAX_RICH_TEXT_LENGTH,
)
from .pagination import CursorPage, collect_pages, iterate_pages
from .retry import retry_on_rate_limit
from .tasks import BatchResult, gather_independent

__all__ = [
    "ISSUE_ID_PROPERTY",
    "NOTION_MAX_PAGE_SIZE",
    "NOTION_MAX_RICH_TEXT_LENGTH",
    "CursorPage",
    "collect_pages",
    "iterate_pages",
    "retry_on_rate_limit",
    "BatchResult",
    "gather_independent",
]

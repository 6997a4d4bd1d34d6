"""Utilities for fitting issue text within Notion's rich text limits."""

import structlog

from github_notion_sync.utils.constants import (
    HTML_BLOCK_PATTERN,
    NOTION_MAX_RICH_TEXT_LENGTH,
    NOTION_MAX_RICH_TEXT_SEGMENTS,
    TRUNCATION_SUFFIX,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def strip_html_blocks(text: str | None) -> str:
    """Remove single-line HTML element spans such as ``<details>...</details>``.

    A missing body becomes an empty string.
    """
    if text is None:
        return ""
    return HTML_BLOCK_PATTERN.sub("", text)


def truncate_string_at_end(content: str, max_length: int, truncation_suffix: str = TRUNCATION_SUFFIX) -> tuple[str, bool]:
    """Truncate a string at the end if it exceeds max_length.

    Returns:
        Tuple of (truncated_content, was_truncated). A truncated result ends
        with the truncation suffix and is never longer than max_length.
    """
    if len(content) <= max_length:
        return content, False

    suffix = truncation_suffix.format(remaining=len(content) - max_length)
    truncate_at = max_length - len(suffix)
    if truncate_at <= 0:
        return content[:max_length], True
    return content[:truncate_at] + suffix, True


def split_text(
    content: str,
    segment_length: int = NOTION_MAX_RICH_TEXT_LENGTH,
    max_segments: int = NOTION_MAX_RICH_TEXT_SEGMENTS,
) -> list[str]:
    """Split text into consecutive segments no longer than segment_length.

    Empty text yields a single empty segment so that a block always carries one
    text object. Text that would need more than max_segments is truncated.
    """
    if not content:
        return [""]

    content, was_truncated = truncate_string_at_end(content, segment_length * max_segments)
    if was_truncated:
        logger.warning("Truncated text that exceeds the Notion rich text capacity", max_length=segment_length * max_segments)
    return [content[start : start + segment_length] for start in range(0, len(content), segment_length)]

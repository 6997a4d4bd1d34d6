"""Shared constants used across the application."""

import re

# Notion Database Schema
# ----------------------

ISSUE_ID_PROPERTY = "ID"
"""Numeric property holding the GitHub issue id; the join key between GitHub and Notion."""

# Notion API Limits
# -----------------

NOTION_MAX_RICH_TEXT_LENGTH = 2000
"""Maximum number of characters in a single Notion rich text object."""

NOTION_MAX_RICH_TEXT_SEGMENTS = 100
"""Maximum number of rich text objects in a single rich text array."""

NOTION_MAX_PAGE_SIZE = 100
"""Maximum page size accepted by Notion list and query endpoints."""

# GitHub API Limits
# -----------------

GITHUB_MAX_PER_PAGE = 100
"""Maximum page size accepted by GitHub REST list endpoints."""

# Issue Body Rendering
# --------------------

HTML_BLOCK_PATTERN = re.compile(r"<.*>.*</.*>")
"""Matches HTML element spans (opening tag, content and closing tag on one line) stripped from issue bodies."""

TRUNCATION_SUFFIX = "\n... [truncated - {remaining} characters removed]"
"""Suffix template appended to truncated content. Use .format(remaining=N) to fill in count."""

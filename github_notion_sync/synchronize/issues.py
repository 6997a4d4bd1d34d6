"""Contains bulk synchronization logic for GitHub issues that are missing from Notion."""

import time
from typing import Any, Iterable

import structlog

from github_notion_sync.github.abc import IssueSourceBase
from github_notion_sync.notion.abc import PageStoreBase
from github_notion_sync.schemas.issue import IssueModel
from github_notion_sync.synchronize.projects import resolve_project_placement
from github_notion_sync.synchronize.properties import map_issue_to_properties
from github_notion_sync.synchronize.results import SyncAllResult
from github_notion_sync.utils.constants import ISSUE_ID_PROPERTY
from github_notion_sync.utils.tasks import gather_independent

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def extract_issue_id(page: dict[str, Any]) -> int | None:
    """Return the GitHub issue id stored in a page's ID property, or None if it has no usable id."""
    properties = page.get("properties")
    if not isinstance(properties, dict):
        return None
    id_property = properties.get(ISSUE_ID_PROPERTY)
    if not isinstance(id_property, dict):
        return None
    value = id_property.get("number")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def collect_existing_issue_ids(pages: Iterable[dict[str, Any]]) -> set[int]:
    """Collect the issue ids of every page that has one."""
    issue_ids: set[int] = set()
    for page in pages:
        issue_id = extract_issue_id(page)
        if issue_id is None:
            logger.debug("Skipping page without a usable issue id", page_id=page.get("id"))
            continue
        issue_ids.add(issue_id)
    return issue_ids


def find_missing_issues(github_issues: Iterable[IssueModel], existing_issue_ids: set[int]) -> list[IssueModel]:
    """Return the issues whose id has no page yet, in their original order."""
    return [issue for issue in github_issues if issue.id not in existing_issue_ids]


async def create_issue_page(issue: IssueModel, issue_source: IssueSourceBase, page_store: PageStoreBase) -> dict[str, Any]:
    """Create a properties-only page for an issue, including its project placement."""
    placement = await resolve_project_placement(issue_source, issue.number)
    properties = map_issue_to_properties(issue, placement)
    page = await page_store.create_page(properties)
    logger.info("Created page for issue", issue_number=issue.number, issue_id=issue.id, page_id=page.get("id"))
    return page


async def sync_all_issues(issue_source: IssueSourceBase, page_store: PageStoreBase) -> SyncAllResult:
    """Create a page for every GitHub issue that does not have one yet.

    Existing pages are matched by the ID property (the issue's global id, never
    its number). Pages are created without body content. Creations run
    concurrently and independently: a failed creation is recorded in the
    result and does not affect the others.
    """
    start_time = time.time()
    logger.info("Fetching existing pages from Notion", start_time=start_time)
    existing_pages = await page_store.list_all_pages()
    existing_issue_ids = collect_existing_issue_ids(existing_pages)
    logger.info(
        "Fetched existing pages from Notion",
        duration=round(time.time() - start_time, 2),
        page_count=len(existing_pages),
        issue_id_count=len(existing_issue_ids),
    )

    start_time = time.time()
    logger.info("Fetching existing issues from GitHub", start_time=start_time)
    github_issues = await issue_source.list_issues(state="all")
    logger.info("Fetched existing issues from GitHub", duration=round(time.time() - start_time, 2), issue_count=len(github_issues))

    missing_issues = find_missing_issues(github_issues, existing_issue_ids)
    if not missing_issues:
        logger.info("Notion database is up to date", issue_count=len(github_issues))
        return SyncAllResult([], existing_issue_ids, len(github_issues))

    logger.info("Creating pages for issues missing from Notion", missing_issue_count=len(missing_issues))
    batch = await gather_independent(
        missing_issues,
        [create_issue_page(issue, issue_source, page_store) for issue in missing_issues],
        description="page creation",
    )
    created = [issue for issue, _ in batch.succeeded]
    errors = [
        {"issue_number": issue.number, "issue_id": issue.id, "error": str(exc), "error_type": type(exc).__name__} for issue, exc in batch.failed
    ]
    logger.info("Finished creating pages", created_count=len(created), error_count=len(errors))
    return SyncAllResult(created, existing_issue_ids, len(github_issues), errors)

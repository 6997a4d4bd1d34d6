"""Contains reconciliation logic driven by single issue and pull request events."""

from typing import Any

import structlog
from structlog.contextvars import bound_contextvars

from github_notion_sync.github.abc import IssueSourceBase
from github_notion_sync.notion.abc import PageStoreBase
from github_notion_sync.schemas.events import IssueEventPayload, PullRequestEventPayload
from github_notion_sync.schemas.issue import IssueModel
from github_notion_sync.synchronize.blocks import reconcile_blocks, render_body_blocks
from github_notion_sync.synchronize.exceptions import IssueStateUndefinedError, PullRequestReferenceError
from github_notion_sync.synchronize.models import EventOutcome, IssueStatus
from github_notion_sync.synchronize.projects import resolve_project_placement
from github_notion_sync.synchronize.properties import map_issue_to_properties, status_property
from github_notion_sync.synchronize.results import EventResult
from github_notion_sync.utils.constants import ISSUE_ID_PROPERTY
from github_notion_sync.utils.github import issue_number_from_url

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def find_issue_page(page_store: PageStoreBase, issue_id: int) -> dict[str, Any] | None:
    """Find the page for an issue by its global id.

    At most one page is expected; if the database holds duplicates, the first
    one returned is used.
    """
    logger.info("Querying database for page with github id", issue_id=issue_id)
    response = await page_store.query_by_number_property(ISSUE_ID_PROPERTY, issue_id, page_size=1)
    if not response.results:
        return None
    return response.results[0]


async def build_issue_properties(issue: IssueModel, issue_source: IssueSourceBase) -> dict[str, Any]:
    """Build the full property set for an issue that is about to be written."""
    if issue.state is None:
        raise IssueStateUndefinedError(issue.number)
    placement = await resolve_project_placement(issue_source, issue.number)
    return map_issue_to_properties(issue, placement)


async def on_issue_opened(issue: IssueModel, issue_source: IssueSourceBase, page_store: PageStoreBase) -> EventResult:
    """Create a page, with body content, for a newly opened issue."""
    logger.info("Creating page for issue", issue_number=issue.number)
    properties = await build_issue_properties(issue, issue_source)
    page = await page_store.create_page(properties, children=render_body_blocks(issue.body))
    logger.info("Created page for issue", issue_number=issue.number, page_id=page.get("id"))
    return EventResult(EventOutcome.SUCCESS, page_id=page.get("id"))


async def on_issue_edited(issue: IssueModel, issue_source: IssueSourceBase, page_store: PageStoreBase) -> EventResult:
    """Bring an existing issue page up to date: reconcile its body, then overwrite every property.

    A missing page is reported but never created here.
    """
    page = await find_issue_page(page_store, issue.id)
    if page is None:
        logger.warning("Could not find page with github id", issue_id=issue.id, issue_number=issue.number)
        return EventResult(EventOutcome.NOT_FOUND)

    page_id = page["id"]
    logger.info("Updating page for issue", issue_number=issue.number, page_id=page_id)
    properties = await build_issue_properties(issue, issue_source)
    existing_blocks = await page_store.list_block_children(page_id)
    block_result = await reconcile_blocks(page_store, page_id, existing_blocks, render_body_blocks(issue.body))
    await page_store.update_page(page_id, properties)
    return EventResult(EventOutcome.SUCCESS, page_id=page_id, blocks=block_result)


async def handle_issue_event(payload: dict[str, Any], issue_source: IssueSourceBase, page_store: PageStoreBase) -> EventResult:
    """Handle an ``issues`` event: ``opened`` creates a page, every other action updates one."""
    event = IssueEventPayload.model_validate(payload)
    with bound_contextvars(issue_number=event.issue.number, action=event.action):
        if event.action == "opened":
            return await on_issue_opened(event.issue, issue_source, page_store)
        return await on_issue_edited(event.issue, issue_source, page_store)


async def handle_pull_request_event(payload: dict[str, Any], issue_source: IssueSourceBase, page_store: PageStoreBase) -> EventResult:
    """Handle a ``pull_request`` event by moving the linked issue's page to "In Review".

    Only ``opened`` is acted on. The pull request payload carries the issue's
    repository-scoped number, so the issue is fetched first to learn the global
    id that pages are keyed by. Only the Status property is changed.
    """
    event = PullRequestEventPayload.model_validate(payload)
    if event.action != "opened":
        logger.info("Ignoring pull request action", action=event.action, pull_request_number=event.pull_request.number)
        return EventResult(EventOutcome.IGNORED)

    issue_number = issue_number_from_url(event.pull_request.issue_url)
    if issue_number is None:
        logger.error("Issue number not found in pull request url", issue_url=event.pull_request.issue_url)
        raise PullRequestReferenceError(event.pull_request.number, event.pull_request.issue_url)

    with bound_contextvars(issue_number=issue_number, pull_request_number=event.pull_request.number):
        issue = await issue_source.get_issue(issue_number)
        page = await find_issue_page(page_store, issue.id)
        if page is None:
            logger.warning("Could not find page with github id", issue_id=issue.id, issue_number=issue_number)
            return EventResult(EventOutcome.NOT_FOUND)

        page_id = page["id"]
        logger.info("Moving issue page to review", page_id=page_id)
        await page_store.update_page(page_id, {"Status": status_property(IssueStatus.REVIEW)})
        return EventResult(EventOutcome.SUCCESS, page_id=page_id)

"""Orchestrates the synchronization of GitHub issues into a Notion database."""

import json
import time
from pathlib import Path

import structlog

from github_notion_sync.configuration.exceptions import RequiredPayloadFieldError, UnsupportedEventError
from github_notion_sync.configuration.models import SyncConfig
from github_notion_sync.github.abc import IssueSourceBase
from github_notion_sync.github.adapter import GitHubKitAdapter
from github_notion_sync.notion.abc import PageStoreBase
from github_notion_sync.notion.adapter import NotionClientAdapter
from github_notion_sync.schemas.events import EventName, InboundEvent
from github_notion_sync.synchronize.events import handle_issue_event, handle_pull_request_event
from github_notion_sync.synchronize.issues import sync_all_issues
from github_notion_sync.synchronize.models import EventOutcome
from github_notion_sync.synchronize.results import EventResult, SyncAllResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def load_event(event_name: str | None, event_path: Path | None) -> InboundEvent:
    """Load an inbound event from a GitHub Actions event file.

    Raises:
        UnsupportedEventError: If the event name is missing or not handled.
        FileNotFoundError: If the event file does not exist.
    """
    try:
        name = EventName(event_name)
    except ValueError as exc:
        raise UnsupportedEventError(event_name) from exc
    if event_path is None:
        raise FileNotFoundError("An event payload file is required to handle an event.")
    with open(event_path, encoding="utf-8") as f:
        payload = json.load(f)
    return InboundEvent(event_name=name, payload=payload)


def repository_for_event(event: InboundEvent) -> str:
    """Return the full name of the repository an event came from.

    Raises:
        RequiredPayloadFieldError: If the payload does not name the repository.
    """
    repo = event.repository_full_name
    if not repo:
        raise RequiredPayloadFieldError("repository.full_name")
    return repo


async def create_adapters(config: SyncConfig) -> tuple[GitHubKitAdapter, NotionClientAdapter]:
    """Set up the GitHub and Notion adapters described by the configuration."""
    github_adapter = await GitHubKitAdapter.create(repo=config.repo, github_token=config.github_token, github_api_url=config.github_api_url)
    notion_adapter = await NotionClientAdapter.create(
        database_id=config.notion_database_id, notion_token=config.notion_token, debug=config.debug
    )
    return github_adapter, notion_adapter


async def dispatch_event(event: InboundEvent, issue_source: IssueSourceBase, page_store: PageStoreBase) -> EventResult:
    """Route an inbound event to the reconciliation it triggers."""
    start_time = time.time()
    logger.info("Handling event", event_name=event.event_name.value, start_time=start_time)
    if event.event_name == EventName.ISSUES:
        result = await handle_issue_event(event.payload, issue_source, page_store)
    elif event.event_name == EventName.PULL_REQUEST:
        result = await handle_pull_request_event(event.payload, issue_source, page_store)
    else:
        sync_result = await sync_all_issues(issue_source, page_store)
        result = EventResult(EventOutcome.SUCCESS, sync=sync_result, errors=sync_result.errors)
    logger.info("Handled event", event_name=event.event_name.value, outcome=result.outcome.value, duration=round(time.time() - start_time, 2))
    return result


async def run_event_workflow(event: InboundEvent, config: SyncConfig) -> EventResult:
    """Run the reconciliation triggered by a single inbound event."""
    github_adapter, notion_adapter = await create_adapters(config)
    return await dispatch_event(event, github_adapter, notion_adapter)


async def run_sync_workflow(config: SyncConfig) -> SyncAllResult:
    """Run a full reconciliation of the repository's issues into the database."""
    github_adapter, notion_adapter = await create_adapters(config)
    start_time = time.time()
    logger.info("Synchronizing issues", repo=config.repo, start_time=start_time)
    result = await sync_all_issues(github_adapter, notion_adapter)
    logger.info(
        "Synchronized issues",
        repo=config.repo,
        duration=round(time.time() - start_time, 2),
        created_count=len(result.created),
        error_count=len(result.errors),
    )
    return result

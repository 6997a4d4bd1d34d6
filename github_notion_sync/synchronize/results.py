"""Contains results of synchronization workflows."""

from dataclasses import dataclass, field
from typing import Any

from github_notion_sync.schemas.issue import IssueModel
from github_notion_sync.synchronize.models import EventOutcome


@dataclass
class BlockReconciliationResult:
    """Counts of block operations applied while reconciling one page body."""

    page_id: str
    updated: int = 0
    appended: int = 0
    deleted: int = 0


class SyncAllResult:
    """Contains results of the bulk synchronization workflow."""

    def __init__(
        self,
        created: list[IssueModel],
        existing_issue_ids: set[int],
        github_issue_count: int,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the result with the created issues and any creation errors."""
        self.created = created
        self.existing_issue_ids = existing_issue_ids
        self.github_issue_count = github_issue_count
        self.errors = errors or []


@dataclass
class EventResult:
    """Contains the result of handling a single inbound event."""

    outcome: EventOutcome
    page_id: str | None = None
    blocks: BlockReconciliationResult | None = None
    sync: SyncAllResult | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

"""Pydantic schemas for the inbound GitHub Actions events that drive reconciliation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from github_notion_sync.schemas.issue import IssueModel


class EventName(str, Enum):
    """GitHub event names handled by the application."""

    ISSUES = "issues"
    PULL_REQUEST = "pull_request"
    WORKFLOW_DISPATCH = "workflow_dispatch"


class RepositoryModel(BaseModel):
    """Pydantic model for the repository section of an event payload."""

    model_config = ConfigDict(extra="ignore")

    full_name: str | None = None
    name: str | None = None


class PullRequestModel(BaseModel):
    """Pydantic model for the pull request section of a pull_request event payload."""

    model_config = ConfigDict(extra="ignore")

    number: int
    issue_url: str | None = None


class IssueEventPayload(BaseModel):
    """Payload of an ``issues`` event."""

    model_config = ConfigDict(extra="ignore")

    action: str
    issue: IssueModel
    repository: RepositoryModel | None = None


class PullRequestEventPayload(BaseModel):
    """Payload of a ``pull_request`` event."""

    model_config = ConfigDict(extra="ignore")

    action: str
    pull_request: PullRequestModel
    repository: RepositoryModel | None = None


class InboundEvent(BaseModel):
    """An event name together with its raw payload."""

    event_name: EventName
    payload: dict[str, Any]

    @property
    def repository_full_name(self) -> str | None:
        """Full name (owner/repo) of the repository the event came from, if present."""
        repository = self.payload.get("repository") or {}
        return repository.get("full_name") or None

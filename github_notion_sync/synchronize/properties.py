"""Maps GitHub issues onto the typed properties of a Notion database page."""

from datetime import datetime
from typing import Any, Iterable

from github_notion_sync.schemas.issue import IssueModel, ProjectPlacement
from github_notion_sync.synchronize.models import IssueStatus
from github_notion_sync.utils.github import split_repository_url
from github_notion_sync.utils.text import split_text

STATUS_OPTIONS: dict[IssueStatus, str] = {
    IssueStatus.OPEN: "Open",
    IssueStatus.CLOSED: "Closed",
    IssueStatus.REVIEW: "In Review",
}


def _rich_text(content: str) -> list[dict[str, Any]]:
    return [{"type": "text", "text": {"content": segment}} for segment in split_text(content)]


def title_property(content: str) -> dict[str, Any]:
    """Build a title property value."""
    return {"title": _rich_text(content)}


def text_property(content: str | None) -> dict[str, Any]:
    """Build a rich text property value; None becomes empty text."""
    return {"rich_text": _rich_text(content or "")}


def select_property(name: str | None) -> dict[str, Any]:
    """Build a select property value; None clears the selection."""
    return {"select": {"name": name} if name else None}


def multi_select_property(names: Iterable[str]) -> dict[str, Any]:
    """Build a multi-select property value. An empty iterable clears every option."""
    return {"multi_select": [{"name": name} for name in sorted(set(names))]}


def number_property(value: int | float | None) -> dict[str, Any]:
    """Build a number property value."""
    return {"number": value}


def date_property(value: datetime | None) -> dict[str, Any]:
    """Build a date property value; None clears the date."""
    return {"date": {"start": value.isoformat()} if value is not None else None}


def url_property(value: str | None) -> dict[str, Any]:
    """Build a URL property value; an empty URL clears it."""
    return {"url": value or None}


def status_property(status: IssueStatus | str | None) -> dict[str, Any]:
    """Build the Status select value for an issue state or the review transition."""
    if status is None:
        return select_property(None)
    return select_property(STATUS_OPTIONS[IssueStatus(status)])


def map_issue_to_properties(issue: IssueModel, placement: ProjectPlacement | None = None) -> dict[str, Any]:
    """Map a GitHub issue (and its project placement, if any) to a full set of page properties.

    Organization and Repository always come from the issue's repository API URL
    so that an issue maps identically whether it arrives through a webhook
    payload or the bulk listing.
    """
    organization, repository = split_repository_url(issue.repository_url)
    return {
        "Name": title_property(issue.title),
        "Status": status_property(issue.state),
        "Organization": text_property(organization),
        "Repository": text_property(repository),
        "Number": number_property(issue.number),
        "Assignees": multi_select_property(issue.assignee_logins),
        "Milestone": text_property(issue.milestone.title if issue.milestone is not None else ""),
        "Labels": multi_select_property(issue.label_names),
        "Author": text_property(issue.author),
        "Created": date_property(issue.created_at),
        "Updated": date_property(issue.updated_at),
        "ID": number_property(issue.id),
        "Link": url_property(issue.html_url),
        "Project": text_property(placement.project_name if placement is not None else ""),
        "Project Column": text_property(placement.column_name if placement is not None else ""),
    }

"""Pydantic schemas for GitHub issues as delivered by the REST API and webhook payloads."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator


class UserModel(BaseModel):
    """Pydantic model for a GitHub user reference."""

    model_config = ConfigDict(extra="ignore")

    login: str


class LabelModel(BaseModel):
    """Pydantic model for a GitHub label reference."""

    model_config = ConfigDict(extra="ignore")

    name: str


class MilestoneModel(BaseModel):
    """Pydantic model for a GitHub milestone reference."""

    model_config = ConfigDict(extra="ignore")

    title: str


class IssueModel(BaseModel):
    """Pydantic model for a GitHub issue.

    The REST API's issue listing also returns pull requests; those carry a
    ``pull_request`` object, which is the only way to tell them apart.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    number: int
    title: str
    state: Literal["open", "closed"] | None = None
    body: str | None = None
    labels: list[LabelModel] = []
    assignees: list[UserModel] = []
    milestone: MilestoneModel | None = None
    user: UserModel | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    html_url: str = ""
    repository_url: str = ""
    pull_request: dict[str, Any] | None = None

    @field_validator("labels", mode="before")
    @classmethod
    def _normalize_labels(cls, value: Any) -> Any:
        """Accept labels given either as names or as label objects."""
        if value is None:
            return []
        return [{"name": label} if isinstance(label, str) else label for label in value]

    @field_validator("assignees", mode="before")
    @classmethod
    def _normalize_assignees(cls, value: Any) -> Any:
        if value is None:
            return []
        return value

    @property
    def is_pull_request(self) -> bool:
        """Whether this record is a pull request rather than an issue."""
        return self.pull_request is not None

    @property
    def label_names(self) -> set[str]:
        """Names of the labels applied to the issue."""
        return {label.name for label in self.labels}

    @property
    def assignee_logins(self) -> set[str]:
        """Logins of the users assigned to the issue."""
        return {assignee.login for assignee in self.assignees}

    @property
    def author(self) -> str:
        """Login of the issue author, or an empty string when unknown."""
        return self.user.login if self.user is not None else ""


class ProjectPlacement(BaseModel):
    """The classic project and column a card for an issue currently sits in."""

    project_name: str
    column_name: str

"""Base ABC for GitHub issue sources."""

from abc import ABC, abstractmethod
from typing import Any, Literal

from github_notion_sync.schemas.issue import IssueModel


class IssueSourceBase(ABC):
    """Read access to one repository's issues and classic project boards.

    Every listing method returns the complete result set; implementations are
    responsible for following pagination.
    """

    @abstractmethod
    async def list_issues(self, state: Literal["open", "closed", "all"] = "all", **kwargs: Any) -> list[IssueModel]:
        """List issues for the repository, excluding pull requests."""
        pass

    @abstractmethod
    async def get_issue(self, issue_number: int) -> IssueModel:
        """Get a single issue by its repository-scoped number."""
        pass

    @abstractmethod
    async def list_projects(self) -> list[dict[str, Any]]:
        """List classic projects of the repository."""
        pass

    @abstractmethod
    async def list_columns(self, project_id: int) -> list[dict[str, Any]]:
        """List the columns of a classic project."""
        pass

    @abstractmethod
    async def list_cards(self, column_id: int) -> list[dict[str, Any]]:
        """List the cards in a classic project column."""
        pass

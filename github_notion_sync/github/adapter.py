"""GitHub issue source adapter for the githubkit library."""

from typing import Any, Literal, Self

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed

from github_notion_sync.schemas.issue import IssueModel
from github_notion_sync.utils.constants import GITHUB_MAX_PER_PAGE
from github_notion_sync.utils.github import split_repository
from github_notion_sync.utils.pagination import CursorPage, collect_pages, next_page_number
from github_notion_sync.utils.retry import retry_on_rate_limit

from .abc import IssueSourceBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)


class GitHubKitAdapter(IssueSourceBase):
    """Issue source backed by the githubkit library, bound to a single repository."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str, per_page: int = GITHUB_MAX_PER_PAGE) -> None:
        """Initialize the adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self.per_page = per_page

    @classmethod
    async def create(cls, repo: str, github_token: str, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new adapter for a repository given in 'owner/repo' format.

        Raises:
            ValueError: If the repository name is malformed
        """
        owner, repo_name = split_repository(repo)
        logger.info("Creating client for GitHub instance and repository", github_api_url=github_api_url, owner=owner, repo_name=repo_name)
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    @property
    def full_name(self) -> str:
        """The repository in 'owner/repo' format."""
        return f"{self.owner}/{self.repo_name}"

    # Issues
    @retry_on_rate_limit()
    async def _fetch_issue_page(self, page: int | None, state: str, **kwargs: Any) -> CursorPage[dict[str, Any], int]:
        response: Response[Any] = await self.client.rest.issues.async_list_for_repo(
            owner=self.owner,
            repo=self.repo_name,
            state=state,
            per_page=self.per_page,
            page=page or 1,
            **kwargs,
        )
        items: list[dict[str, Any]] = response.json()
        return CursorPage(items, next_page_number(page, len(items), self.per_page))

    async def list_issues(self, state: Literal["open", "closed", "all"] = "all", **kwargs: Any) -> list[IssueModel]:
        """List all issues for the repository, following pagination and excluding pull requests."""

        async def fetch_page(page: int | None) -> CursorPage[dict[str, Any], int]:
            return await self._fetch_issue_page(page, state, **kwargs)

        items = await collect_pages(fetch_page)
        issues = [IssueModel.model_validate(item) for item in items]
        only_issues = [issue for issue in issues if not issue.is_pull_request]
        logger.info(
            "Fetched issues from GitHub",
            repo=self.full_name,
            item_count=len(issues),
            issue_count=len(only_issues),
            pull_request_count=len(issues) - len(only_issues),
        )
        return only_issues

    @retry_on_rate_limit()
    async def get_issue(self, issue_number: int) -> IssueModel:
        """Get a single issue by number."""
        response: Response[Any] = await self.client.rest.issues.async_get(owner=self.owner, repo=self.repo_name, issue_number=issue_number)
        return IssueModel.model_validate(response.json())

    # Classic projects
    @retry_on_rate_limit()
    async def _fetch_listing_page(self, url: str, page: int | None) -> CursorPage[dict[str, Any], int]:
        response: Response[Any] = await self.client.arequest("GET", url, params={"per_page": self.per_page, "page": page or 1})
        items: list[dict[str, Any]] = response.json()
        return CursorPage(items, next_page_number(page, len(items), self.per_page))

    async def _list_all(self, url: str) -> list[dict[str, Any]]:
        async def fetch_page(page: int | None) -> CursorPage[dict[str, Any], int]:
            return await self._fetch_listing_page(url, page)

        return await collect_pages(fetch_page)

    async def list_projects(self) -> list[dict[str, Any]]:
        """List classic projects of the repository.

        Repositories with classic projects disabled answer 404 or 410; they are
        reported as having no projects.
        """
        try:
            projects = await self._list_all(f"/repos/{self.owner}/{self.repo_name}/projects")
        except RequestFailed as exc:
            if exc.response.status_code in (404, 410):
                logger.debug("Classic projects are unavailable for repository", repo=self.full_name, status_code=exc.response.status_code)
                return []
            raise
        logger.debug("Found projects", repo=self.full_name, project_count=len(projects))
        return projects

    async def list_columns(self, project_id: int) -> list[dict[str, Any]]:
        """List the columns of a classic project."""
        return await self._list_all(f"/projects/{project_id}/columns")

    async def list_cards(self, column_id: int) -> list[dict[str, Any]]:
        """List the cards in a classic project column."""
        return await self._list_all(f"/projects/columns/{column_id}/cards")

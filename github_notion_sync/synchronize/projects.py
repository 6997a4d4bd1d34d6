"""Resolves which classic project column an issue's card currently sits in."""

import structlog

from github_notion_sync.github.abc import IssueSourceBase
from github_notion_sync.schemas.issue import ProjectPlacement
from github_notion_sync.utils.github import issue_number_from_content_url

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def resolve_project_placement(issue_source: IssueSourceBase, issue_number: int) -> ProjectPlacement | None:
    """Find the first project column holding a card that links to the issue.

    Projects, columns and cards are scanned in the order GitHub lists them and
    the first matching card wins; later matches are not considered. Returns
    None when no card links to the issue.
    """
    projects = await issue_source.list_projects()
    for project in projects:
        columns = await issue_source.list_columns(project["id"])
        for column in columns:
            cards = await issue_source.list_cards(column["id"])
            for card in cards:
                if issue_number_from_content_url(card.get("content_url")) == issue_number:
                    placement = ProjectPlacement(project_name=project["name"], column_name=column["name"])
                    logger.debug("Found project placement for issue", issue_number=issue_number, **placement.model_dump())
                    return placement

    logger.debug("No project placement found for issue", issue_number=issue_number, project_count=len(projects))
    return None

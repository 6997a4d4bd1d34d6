"""Reconciles configuration between CLI arguments and environment variables."""

from github_notion_sync.configuration.env import settings
from github_notion_sync.configuration.exceptions import RequiredConfigurationElementError
from github_notion_sync.configuration.models import SyncConfig


def _require(value: str | None, name: str, cli_name: str, env_name: str) -> str:
    if not value:
        raise RequiredConfigurationElementError(name=name, cli_name=cli_name, env_name=env_name)
    return value


async def reconcile_sync_configuration(
    cli_debug: bool,
    cli_github_api_url: str | None,
    cli_github_token: str | None,
    cli_notion_token: str | None,
    cli_notion_database_id: str | None,
    cli_repo: str | None,
) -> SyncConfig:
    """Reconciles CLI arguments with environment variables; CLI values take precedence.

    Raises:
        RequiredConfigurationElementError: If the repository, a token or the database ID is missing.

    Returns:
        SyncConfig: The reconciled configuration.
    """
    repo = _require(cli_repo or settings.REPO, "Repository", "repo", "REPO")
    github_token = _require(cli_github_token or settings.GITHUB_TOKEN, "GitHub token", "github_token", "GITHUB_TOKEN")
    notion_token = _require(cli_notion_token or settings.NOTION_TOKEN, "Notion token", "notion_token", "NOTION_TOKEN")
    notion_database_id = _require(
        cli_notion_database_id or settings.NOTION_DATABASE_ID,
        "Notion database ID",
        "notion_database_id",
        "NOTION_DATABASE_ID",
    )
    return SyncConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        github_token=github_token,
        notion_token=notion_token,
        notion_database_id=notion_database_id,
        repo=repo,
    )

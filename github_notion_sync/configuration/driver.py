"""Driver for configuration reconciliation for the CLI entry points."""

import asyncio

import structlog

from github_notion_sync.configuration import reconcile
from github_notion_sync.configuration.models import SyncConfig

logger = structlog.get_logger(__name__)


async def get_sync_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_token: str | None = None,
    notion_token: str | None = None,
    notion_database_id: str | None = None,
    repo: str | None = None,
) -> SyncConfig:
    """Get the configuration reconciled from command line options and the environment."""
    resolved = await reconcile.reconcile_sync_configuration(
        cli_debug=debug,
        cli_github_api_url=github_api_url,
        cli_github_token=github_token,
        cli_notion_token=notion_token,
        cli_notion_database_id=notion_database_id,
        cli_repo=repo,
    )
    logger.debug(
        "Resolved configuration",
        repo=resolved.repo,
        github_api_url=resolved.github_api_url,
        notion_database_id=resolved.notion_database_id,
    )
    return resolved


def get_sync_config_sync(
    debug: bool = False,
    github_api_url: str | None = None,
    github_token: str | None = None,
    notion_token: str | None = None,
    notion_database_id: str | None = None,
    repo: str | None = None,
) -> SyncConfig:
    """Synchronously get the reconciled configuration."""
    return asyncio.run(
        get_sync_config(
            debug=debug,
            github_api_url=github_api_url,
            github_token=github_token,
            notion_token=notion_token,
            notion_database_id=notion_database_id,
            repo=repo,
        )
    )

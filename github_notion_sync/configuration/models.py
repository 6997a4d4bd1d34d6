"""Models for configuration reconciled between CLI arguments and environment variables."""

from dataclasses import dataclass


@dataclass
class SyncConfig:
    """Configuration class for the GitHub to Notion synchronization CLI."""

    debug: bool
    github_api_url: str
    github_token: str
    notion_token: str
    notion_database_id: str
    repo: str

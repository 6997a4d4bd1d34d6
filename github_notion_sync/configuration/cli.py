"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_notion_sync.configuration.driver import get_sync_config
from github_notion_sync.configuration.exceptions import ConfigurationError
from github_notion_sync.synchronize.driver import load_event, repository_for_event, run_event_workflow, run_sync_workflow
from github_notion_sync.synchronize.models import EventOutcome

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Keep a Notion database in sync with GitHub issues.")


def configure_logging(debug: bool) -> None:
    """Route structlog output through the standard library logger at the requested level."""
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=logging.DEBUG if debug else logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@typer_app.command(name="sync")
def sync_cli(
    repo: Annotated[str | None, Argument(envvar="REPO", help="Repository name (owner/repo).")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token.")] = None,
    notion_token: Annotated[str | None, Option(envvar="NOTION_TOKEN", help="Notion integration token.")] = None,
    notion_database_id: Annotated[str | None, Option(envvar="NOTION_DATABASE_ID", help="ID of the Notion database to sync into.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Create Notion pages for every issue in the repository that does not have one yet."""
    configure_logging(debug)
    try:
        config = asyncio.run(
            get_sync_config(
                debug=debug,
                github_api_url=github_api_url,
                github_token=github_token,
                notion_token=notion_token,
                notion_database_id=notion_database_id,
                repo=repo,
            )
        )
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    typer.echo(f"Synchronizing issues from {config.repo} into Notion database {config.notion_database_id}")
    result = asyncio.run(run_sync_workflow(config))
    typer.echo(f"Created {len(result.created)} page(s) for {result.github_issue_count} issue(s)")
    if result.errors:
        typer.echo("Error(s) encountered while creating pages:", err=True)
        for err in result.errors:
            typer.echo(str(err), err=True)
        sys.exit(1)


@typer_app.command(name="handle-event")
def handle_event_cli(
    event_name: Annotated[str | None, Option(envvar="GITHUB_EVENT_NAME", help="Name of the triggering GitHub event.")] = None,
    event_path: Annotated[Path | None, Option(envvar="GITHUB_EVENT_PATH", help="Path to the JSON event payload.")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token.")] = None,
    notion_token: Annotated[str | None, Option(envvar="NOTION_TOKEN", help="Notion integration token.")] = None,
    notion_database_id: Annotated[str | None, Option(envvar="NOTION_DATABASE_ID", help="ID of the Notion database to sync into.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Reconcile the Notion database for a single GitHub Actions event."""
    configure_logging(debug)
    try:
        event = load_event(event_name, event_path)
        config = asyncio.run(
            get_sync_config(
                debug=debug,
                github_api_url=github_api_url,
                github_token=github_token,
                notion_token=notion_token,
                notion_database_id=notion_database_id,
                repo=repository_for_event(event),
            )
        )
    except (ConfigurationError, FileNotFoundError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    typer.echo(f"Handling {event.event_name.value} event for {config.repo}")
    result = asyncio.run(run_event_workflow(event, config))
    if result.outcome == EventOutcome.NOT_FOUND:
        typer.echo("No matching page found in Notion - nothing to update")
    if result.errors:
        typer.echo("Error(s) encountered while creating pages:", err=True)
        for err in result.errors:
            typer.echo(str(err), err=True)
        sys.exit(1)
    typer.echo("Complete!")


if __name__ == "__main__":
    typer_app()

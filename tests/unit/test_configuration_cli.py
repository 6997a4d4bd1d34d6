"""Unit tests for the command line interface."""

import json
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from pytest import MonkeyPatch
from typer.testing import CliRunner

from github_notion_sync.configuration.cli import typer_app
from github_notion_sync.configuration.models import SyncConfig
from github_notion_sync.synchronize.models import EventOutcome
from github_notion_sync.synchronize.results import EventResult, SyncAllResult

CLEAN_ENV = {
    "REPO": None,
    "GITHUB_TOKEN": None,
    "GITHUB_API_URL": None,
    "NOTION_TOKEN": None,
    "NOTION_DATABASE_ID": None,
    "GITHUB_EVENT_NAME": None,
    "GITHUB_EVENT_PATH": None,
    "DEBUG": None,
}

CONFIG = SyncConfig(
    debug=False,
    github_api_url="https://api.github.com",
    github_token="gh-token",
    notion_token="notion-token",
    notion_database_id="db-1",
    repo="acme/widgets",
)


@pytest.fixture
def runner(monkeypatch: MonkeyPatch) -> CliRunner:
    """Provide a CLI runner isolated from the caller's environment and .env file."""
    monkeypatch.setattr(
        "github_notion_sync.configuration.reconcile.settings",
        SimpleNamespace(
            DEBUG=False,
            GITHUB_API_URL="https://api.github.com",
            GITHUB_TOKEN=None,
            REPO=None,
            NOTION_TOKEN=None,
            NOTION_DATABASE_ID=None,
        ),
    )
    return CliRunner(env=CLEAN_ENV)


def test_sync_missing_configuration(runner: CliRunner) -> None:
    """Test that sync exits with an error naming the missing element."""
    result = runner.invoke(typer_app, ["sync", "acme/widgets"])
    assert result.exit_code == 1
    assert "GITHUB_TOKEN" in result.output


def test_sync_reports_created_pages(runner: CliRunner) -> None:
    """Test that sync reports how many pages it created."""
    sync_result = SyncAllResult([], {101}, 3)
    with (
        patch("github_notion_sync.configuration.cli.get_sync_config", new=AsyncMock(return_value=CONFIG)),
        patch("github_notion_sync.configuration.cli.run_sync_workflow", new=AsyncMock(return_value=sync_result)),
    ):
        result = runner.invoke(typer_app, ["sync", "acme/widgets"])
    assert result.exit_code == 0
    assert "Created 0 page(s) for 3 issue(s)" in result.output


def test_sync_fails_when_creations_fail(runner: CliRunner) -> None:
    """Test that sync exits non-zero when any page creation failed."""
    errors = [{"issue_number": 2, "issue_id": 102, "error": "validation failed", "error_type": "RuntimeError"}]
    sync_result = SyncAllResult([], set(), 1, errors)
    with (
        patch("github_notion_sync.configuration.cli.get_sync_config", new=AsyncMock(return_value=CONFIG)),
        patch("github_notion_sync.configuration.cli.run_sync_workflow", new=AsyncMock(return_value=sync_result)),
    ):
        result = runner.invoke(typer_app, ["sync", "acme/widgets"])
    assert result.exit_code == 1
    assert "validation failed" in result.output


def test_handle_event_unsupported(runner: CliRunner, tmp_path: Path) -> None:
    """Test that an unhandled event name exits with an error."""
    event_path = tmp_path / "event.json"
    event_path.write_text("{}", encoding="utf-8")
    result = runner.invoke(typer_app, ["handle-event", "--event-name", "push", "--event-path", str(event_path)])
    assert result.exit_code == 1
    assert "Unsupported event" in result.output


def test_handle_event_without_repository(runner: CliRunner, tmp_path: Path) -> None:
    """Test that a payload without a repository exits with an error."""
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({"inputs": {}}), encoding="utf-8")
    result = runner.invoke(typer_app, ["handle-event", "--event-name", "workflow_dispatch", "--event-path", str(event_path)])
    assert result.exit_code == 1
    assert "repository.full_name" in result.output


def test_handle_event_not_found(runner: CliRunner, tmp_path: Path) -> None:
    """Test that an event without a matching page completes with a notice."""
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({"action": "edited", "repository": {"full_name": "acme/widgets"}}), encoding="utf-8")
    with (
        patch("github_notion_sync.configuration.cli.get_sync_config", new=AsyncMock(return_value=CONFIG)),
        patch(
            "github_notion_sync.configuration.cli.run_event_workflow",
            new=AsyncMock(return_value=EventResult(EventOutcome.NOT_FOUND)),
        ),
    ):
        result = runner.invoke(typer_app, ["handle-event", "--event-name", "issues", "--event-path", str(event_path)])
    assert result.exit_code == 0
    assert "No matching page found" in result.output
    assert "Complete!" in result.output

"""CLI command tests for jirafields."""

import json
import os
import tempfile
from collections.abc import Generator

import pytest
from typer.testing import CliRunner

from jirafields.cli.main import app

runner = CliRunner()

ENV_VARS = [
    "JIRA_URL",
    "JIRA_PERSONAL_TOKEN",
    "JIRA_TIMEOUT",
    "ENABLE_DYNAMIC_FIELDS",
    "DYNAMIC_FIELD_CACHE_TTL",
    "DYNAMIC_FIELD_CACHE_MAX_ENTRIES",
    "FIELD_SUGGESTION_THRESHOLD",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment out of CLI configuration."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def samples_file() -> Generator[str, None, None]:
    """Create a temporary search response file."""
    payload = {
        "issues": [
            {"key": "P-1", "fields": {"summary": "a", "status": {"name": "Open"}}},
            {"key": "P-2", "fields": {"summary": "b", "assignee": {"name": "x"}}},
        ]
    }
    with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False) as f:
        json.dump(payload, f)
        path = f.name
    yield path
    # Cleanup
    if os.path.exists(path):
        os.remove(path)


class TestVersionCommand:
    """Test the version command."""

    def test_version_output(self) -> None:
        """Test that version command shows version info."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "jirafields v" in result.stdout

    def test_version_ignores_bad_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Configuration is only resolved by commands that need it."""
        monkeypatch.setenv("DYNAMIC_FIELD_CACHE_TTL", "never")
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0


class TestResourcesCommands:
    """Test resource commands."""

    def test_list_json(self) -> None:
        result = runner.invoke(app, ["--json", "resources", "list"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [r["uri"] for r in data] == [
            "jira://issue/fields",
            "jira://project/fields",
            "jira://user/fields",
            "jira://agile/fields",
        ]

    def test_list_table(self) -> None:
        result = runner.invoke(app, ["resources", "list"])
        assert result.exit_code == 0
        assert "Resources" in result.stdout

    def test_show_json(self) -> None:
        result = runner.invoke(app, ["--json", "resources", "show", "issue"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["uri"] == "jira://issue/fields"
        assert data["dynamic_fields"] == 0
        assert data["last_dynamic_update"] is None
        assert data["path_index"]["status.name"] == "status"

    def test_show_unknown_entity(self) -> None:
        result = runner.invoke(app, ["--json", "resources", "show", "board"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["error"] == "ResourceNotFoundError"

    def test_validate_all_valid(self) -> None:
        result = runner.invoke(
            app, ["--json", "resources", "validate", "issue", "status.name", "customfield_10001"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["is_valid"] is True

    def test_validate_invalid_exits_1(self) -> None:
        result = runner.invoke(app, ["--json", "resources", "validate", "issue", "status.nme"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["invalid_paths"] == ["status.nme"]
        assert data["suggestions"]["status.nme"][0] == "status.name"

    def test_dynamic_without_url(self) -> None:
        result = runner.invoke(app, ["--json", "--dynamic", "resources", "show", "issue"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["error"] == "ConfigurationError"


class TestSuggestCommand:
    """Test the suggest command."""

    def test_suggest_json(self) -> None:
        result = runner.invoke(app, ["--json", "suggest", "issue", "stat"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["input"] == "stat"
        assert data["suggestions"][0] == "status"
        assert len(data["suggestions"]) <= 5

    def test_suggest_limit(self) -> None:
        result = runner.invoke(app, ["--json", "suggest", "issue", "s", "-n", "2"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["suggestions"]) == 2

    def test_suggest_metadata(self) -> None:
        result = runner.invoke(app, ["--json", "suggest", "user", "emailadress", "--metadata"])
        assert result.exit_code == 0
        top = json.loads(result.stdout)["suggestions"][0]
        assert top["field"] == "emailAddress"
        assert top["metadata"]["is_typo_correction"] is True

    def test_suggest_plain(self) -> None:
        result = runner.invoke(app, ["suggest", "issue", "stat"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "status"

    def test_suggest_unsupported_entity(self) -> None:
        result = runner.invoke(app, ["--json", "suggest", "board", "name"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["error"] == "UnsupportedEntityTypeError"
        assert data["message"] == "Unsupported entity type: board"


class TestAnalyzeCommand:
    """Test the analyze command."""

    def test_analyze_json(self, samples_file: str) -> None:
        result = runner.invoke(app, ["--json", "analyze", "issue", samples_file])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["summary"]["availability"] == 1.0
        assert data["status"]["availability"] == 0.5
        assert list(data)[0] == "summary"

    def test_analyze_limit(self, samples_file: str) -> None:
        result = runner.invoke(app, ["--json", "analyze", "issue", samples_file, "--limit", "1"])
        assert result.exit_code == 0
        assert list(json.loads(result.stdout)) == ["summary"]

    def test_analyze_missing_file(self) -> None:
        result = runner.invoke(app, ["--json", "analyze", "issue", "/nonexistent/samples.json"])
        assert result.exit_code == 1
        assert "File not found" in json.loads(result.stdout)["error"]

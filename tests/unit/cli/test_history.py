"""Unit tests for history command.

Tests for the CLI history command implementation.
"""

import json

import click
import pytest
from histsweep.cli.main import app
from histsweep.core.state import StateManager
from histsweep.models.history import SweepRecord
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def sample_records() -> list[SweepRecord]:
    """Write sample sweep records to the isolated history file."""
    records = [
        SweepRecord(
            id="abc123456789",
            timestamp="2026-01-25T10:00:00+00:00",
            profile="minimal",
            roots=("/home/alice", "/root"),
            removed=("/home/alice/.bash_history", "/root/.viminfo"),
            metadata={"command": "histsweep sweep"},
        ),
        SweepRecord(
            id="def678901234",
            timestamp="2026-02-03T08:15:00+00:00",
            profile="extended",
            roots=("/home/alice", "/home/bob", "/home/carol", "/root"),
            removed=("/home/bob/.mysql_history",),
            failed=("/home/carol/.zsh_history",),
        ),
    ]
    state = StateManager()
    for record in records:
        state.record(record)
    return records


class TestHistoryCommand:
    """Tests for histsweep history command."""

    def test_history_help(self) -> None:
        """History command shows help."""
        result = runner.invoke(app, ["history", "--help"])
        output = click.unstyle(result.stdout)
        assert result.exit_code == 0
        assert "--limit" in output
        assert "--since" in output
        assert "--json" in output

    def test_history_empty(self) -> None:
        """History shows message when no entries exist."""
        result = runner.invoke(app, ["history"])

        assert result.exit_code == 0
        assert "No history entries found." in click.unstyle(result.stdout)

    @pytest.mark.usefixtures("sample_records")
    def test_history_table(self) -> None:
        """Records are shown in a table."""
        result = runner.invoke(app, ["history"])

        assert result.exit_code == 0
        assert "Sweep History" in click.unstyle(result.stdout)

    @pytest.mark.usefixtures("sample_records")
    def test_history_json_newest_first(self) -> None:
        """JSON output lists records newest first."""
        result = runner.invoke(app, ["history", "--json"])

        assert result.exit_code == 0
        data = json.loads(click.unstyle(result.stdout))
        assert [item["id"] for item in data] == ["def678901234", "abc123456789"]
        assert data[0]["failed"] == ["/home/carol/.zsh_history"]

    @pytest.mark.usefixtures("sample_records")
    def test_history_limit(self) -> None:
        """--limit keeps only the newest records."""
        result = runner.invoke(app, ["history", "--json", "-n", "1"])

        data = json.loads(click.unstyle(result.stdout))
        assert [item["id"] for item in data] == ["def678901234"]

    @pytest.mark.usefixtures("sample_records")
    def test_history_since(self) -> None:
        """--since filters out older records."""
        result = runner.invoke(app, ["history", "--json", "--since", "2026-02-01"])

        data = json.loads(click.unstyle(result.stdout))
        assert [item["id"] for item in data] == ["def678901234"]

    @pytest.mark.usefixtures("sample_records")
    def test_history_since_future(self) -> None:
        """A future --since date leaves nothing to show."""
        result = runner.invoke(app, ["history", "--since", "2999-01-01"])

        assert result.exit_code == 0
        assert "No history entries found." in click.unstyle(result.stdout)

    def test_history_invalid_since(self) -> None:
        """An invalid --since date exits 1."""
        result = runner.invoke(app, ["history", "--since", "yesterday"])

        assert result.exit_code == 1
        assert "Invalid date format" in result.output

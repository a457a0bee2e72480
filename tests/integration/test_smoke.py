"""
End-to-end smoke tests for the item-sorter CLI.

These drive the typer app the way a user would: environment variables select
the resource, and the commands must render every view or fail with exit code 1.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from item_sorter.main import app

EXPECTED_CAPTIONS = [
    "original data",
    "data sorted by color <",
    "data sorted by id",
    "data sorted by cost <",
    "data sorted by date <",
]

runner = CliRunner()


@pytest.fixture
def cli_env(monkeypatch, json_file: Path) -> Path:
    monkeypatch.setenv("PRIMARY_RESOURCE", str(json_file))
    monkeypatch.setenv("OUTPUT_FORMAT", "console")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("COLUMNS", "120")
    return json_file


class TestIndexCommand:
    """The `index` command loads the primary resource."""

    def test_renders_all_captions_in_order(self, cli_env: Path):
        result = runner.invoke(app, ["index"])

        assert result.exit_code == 0, result.output
        positions = [result.output.index(caption) for caption in EXPECTED_CAPTIONS]
        assert positions == sorted(positions)

    def test_missing_resource_exits_with_error(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("PRIMARY_RESOURCE", str(tmp_path / "absent.json"))
        monkeypatch.setenv("LOG_LEVEL", "CRITICAL")

        result = runner.invoke(app, ["index"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_html_output_mode_writes_file(self, cli_env: Path, monkeypatch, tmp_path: Path):
        html_path = tmp_path / "items.html"
        monkeypatch.setenv("OUTPUT_FORMAT", "html")
        monkeypatch.setenv("HTML_OUTPUT", str(html_path))

        result = runner.invoke(app, ["index"])

        assert result.exit_code == 0, result.output
        assert html_path.exists()
        assert "Rendered 5 views" in result.output

    def test_unwritable_html_output_exits_with_error(
        self, cli_env: Path, monkeypatch, tmp_path: Path
    ):
        monkeypatch.setenv("OUTPUT_FORMAT", "html")
        monkeypatch.setenv("HTML_OUTPUT", str(tmp_path))
        monkeypatch.setenv("LOG_LEVEL", "CRITICAL")

        result = runner.invoke(app, ["index"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestInfoCommand:
    def test_shows_configuration(self, cli_env: Path):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert str(cli_env) in result.output
        assert "output=console" in result.output

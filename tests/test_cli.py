"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from termgrid.cli.app import create_app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestShow:
    """Tests for the show command."""

    def test_full_content(self, runner: CliRunner, text_file: Path) -> None:
        result = runner.invoke(create_app(), ["show", str(text_file), "-w", "5", "-H", "2"])
        assert result.exit_code == 0
        assert result.stdout == "aaaa \nbbbb \ncccc \n"

    def test_screen_only(self, runner: CliRunner, text_file: Path) -> None:
        result = runner.invoke(
            create_app(), ["show", str(text_file), "-w", "5", "-H", "2", "--screen-only"]
        )
        assert result.exit_code == 0
        assert result.stdout == "bbbb \ncccc \n"

    def test_size_from_environment(self, runner: CliRunner, text_file: Path) -> None:
        result = runner.invoke(
            create_app(),
            ["show", str(text_file), "--screen-only"],
            env={"TERMGRID_WIDTH": "5", "TERMGRID_HEIGHT": "1"},
        )
        assert result.exit_code == 0
        assert result.stdout == "cccc \n"

    def test_invalid_size(self, runner: CliRunner, text_file: Path) -> None:
        result = runner.invoke(create_app(), ["show", str(text_file), "-w", "0"])
        assert result.exit_code == 1

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(create_app(), ["show", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1


class TestInfo:
    """Tests for the info command."""

    def test_json(self, runner: CliRunner, text_file: Path) -> None:
        result = runner.invoke(
            create_app(), ["info", str(text_file), "-w", "5", "-H", "2", "-s", "3", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "width": 5,
            "height": 2,
            "cursor_x": 4,
            "cursor_y": 1,
            "scrollback": 1,
            "max_scrollback": 3,
        }

    def test_table(self, runner: CliRunner, text_file: Path) -> None:
        result = runner.invoke(create_app(), ["-v", "info", str(text_file), "-w", "5", "-H", "2"])
        assert result.exit_code == 0
        assert "5x2" in result.stdout
        assert "1/1000" in result.stdout

"""
Tests for CLI Module.
=====================

Tests for the Typer commands, driven through typer.testing.CliRunner:
- load / list / search
- interactive menu
- info
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli_app():
    from course_offerings.cli.main import app
    return app


# ─────────────────────────────────────────────────────────────────────────────
# One-shot Command Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestCommands:
    """Tests for load, list and search."""

    def test_load_reports_summary(self, runner, cli_app, catalog_file: Path):
        """Test that load prints the inserted count."""
        result = runner.invoke(cli_app, ["load", str(catalog_file)])

        assert result.exit_code == 0
        assert "Loaded 8 course(s)" in result.output

    def test_load_reports_malformed_rows(self, runner, cli_app, temp_dir: Path):
        """Test that malformed rows are listed but do not fail the command."""
        path = temp_dir / "bad.csv"
        path.write_text("CS101,Intro\nCS150\n", encoding="utf-8")

        result = runner.invoke(cli_app, ["load", str(path)])

        assert result.exit_code == 0
        assert "1 malformed row(s)" in result.output
        assert "row 2" in result.output

    def test_load_missing_file_exits_1(self, runner, cli_app, temp_dir: Path):
        """Test that an unreadable source fails the command."""
        result = runner.invoke(cli_app, ["load", str(temp_dir / "missing.csv")])

        assert result.exit_code == 1
        assert "Failed to open" in result.output

    def test_list_prints_sorted_courses(self, runner, cli_app, catalog_file: Path):
        """Test the full listing output."""
        result = runner.invoke(cli_app, ["list", str(catalog_file)])

        assert result.exit_code == 0
        output = result.output
        assert "CSCI100: Introduction to Computer Science" in output
        assert "Prerequisites: CSCI301, CSCI350" in output
        assert "No Prerequisites." in output
        assert output.index("CSCI100:") < output.index("CSCI200:") < output.index("MATH201:")
        assert "courseNum" not in output

    def test_search_hit(self, runner, cli_app, catalog_file: Path):
        """Test searching for an existing course."""
        result = runner.invoke(cli_app, ["search", str(catalog_file), "CSCI300"])

        assert result.exit_code == 0
        assert "Course found:" in result.output
        assert "CSCI300, Introduction to Algorithms" in result.output
        assert "Prerequisites: CSCI200, MATH201" in result.output

    def test_search_miss_exits_1(self, runner, cli_app, catalog_file: Path):
        """Test that a miss prints not-found and fails."""
        result = runner.invoke(cli_app, ["search", str(catalog_file), "csci300"])

        assert result.exit_code == 1
        assert "Course not found." in result.output


# ─────────────────────────────────────────────────────────────────────────────
# Menu Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestMenu:
    """Tests for the interactive menu."""

    def test_load_list_search_exit(self, runner, cli_app, catalog_file: Path):
        """Test a full session through every option."""
        session = f"1\n{catalog_file}\n2\n3\nCSCI200\n9\n"

        result = runner.invoke(cli_app, ["menu"], input=session)

        assert result.exit_code == 0
        output = result.output
        assert "Reminder: input is case sensitive." in output
        assert "Loaded 8 course(s)" in output
        assert "CSCI400: Large Software Development" in output
        assert "CSCI200, Data Structures" in output
        assert output.rstrip().endswith("Thank you for using the course planner!")

    def test_default_catalog_option(self, runner, cli_app, catalog_file: Path):
        """Test that --catalog is offered as the file-name default."""
        result = runner.invoke(
            cli_app, ["menu", "--catalog", str(catalog_file)], input="1\n\n9\n"
        )

        assert result.exit_code == 0
        assert "Loaded 8 course(s)" in result.output

    def test_catalog_path_from_environment(
        self, runner, cli_app, catalog_file: Path, monkeypatch
    ):
        """Test that CATALOG_PATH provides the file-name default."""
        monkeypatch.setenv("CATALOG_PATH", str(catalog_file))

        result = runner.invoke(cli_app, ["menu"], input="1\n\n9\n")

        assert result.exit_code == 0
        assert "Loaded 8 course(s)" in result.output

    def test_missing_file_keeps_menu_running(self, runner, cli_app, temp_dir: Path):
        """Test that a failed load is reported and the menu continues."""
        session = f"1\n{temp_dir / 'missing.csv'}\n2\n9\n"

        result = runner.invoke(cli_app, ["menu"], input=session)

        assert result.exit_code == 0
        assert "Failed to open" in result.output
        assert "Thank you for using the course planner!" in result.output

    def test_search_before_load(self, runner, cli_app):
        """Test that searching an empty index is a normal miss."""
        result = runner.invoke(cli_app, ["menu"], input="3\nCSCI100\n9\n")

        assert result.exit_code == 0
        assert "Course not found." in result.output

    def test_invalid_option(self, runner, cli_app):
        """Test that unknown selections re-prompt."""
        result = runner.invoke(cli_app, ["menu"], input="7\nabc\n9\n")

        assert result.exit_code == 0
        assert "'7' is not a valid option." in result.output
        assert "'abc' is not a valid option." in result.output
        assert result.output.count("Select an option:") == 3


# ─────────────────────────────────────────────────────────────────────────────
# Info Command Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestInfo:
    """Tests for the info command."""

    def test_info_shows_version(self, runner, cli_app):
        """Test that info prints the package version."""
        from course_offerings import __version__

        result = runner.invoke(cli_app, ["info"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert "courseId" in result.output

"""
CLI Main - Typer command-line interface.
========================================

Commands:
- load: Load a catalog file and report what was indexed
- list: Print every course in course-number order
- search: Look up one course by number
- menu: Interactive load / list / search menu
- info: Show version and configuration
"""

from pathlib import Path
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from course_offerings.shared.logging import get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="courseplanner",
    help="""📚 Course Planner - course catalog loader and ordered course index

Loads a comma-separated course catalog (number, title, prerequisites...),
resolves prerequisite course numbers against the catalog, and lists or
searches the courses in course-number order.

COMMANDS OVERVIEW:

  load     Load a catalog file and report what was indexed
  list     Print every course in course-number order
  search   Look up a single course by number (case sensitive)
  menu     Interactive menu: load, print list, search, exit
  info     Show version and configuration

QUICK START:

  courseplanner list courses.csv
  courseplanner search courses.csv CSCI300
  courseplanner menu --catalog courses.csv
""",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(highlight=False, soft_wrap=True, emoji=False)

MENU_TEXT = (
    "Select an option:\n"
    "1. Load Courses\n"
    "2. Print Course List\n"
    "3. Search Course Number\n"
    "9. Exit\n"
)
GOODBYE = "Thank you for using the course planner!"


def _configure():
    """Apply logging settings and build a planner from configuration."""
    from course_offerings.planner.catalog import CoursePlanner
    from course_offerings.shared.config import get_settings
    from course_offerings.shared.logging import setup_logging

    settings = get_settings()
    setup_logging(
        level=settings.get_effective_log_level(),
        use_rich=settings.logging.rich_console,
        log_file=settings.logging.file or None,
        log_format=settings.logging.format,
        force=True,
    )
    return settings, CoursePlanner.from_settings(settings)


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        console.print(line, markup=False)


def _load_or_exit(planner, catalog: Path):
    from course_offerings.shared.errors import SourceUnreadableError

    try:
        return planner.load(catalog)
    except SourceUnreadableError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


def _report_load(result) -> None:
    color = "yellow" if result.has_errors or result.inserted_count == 0 else "green"
    console.print(f"[{color}]{result.summary()}[/{color}]")
    for error in result.errors:
        console.print(f"  [yellow]• {escape(str(error))}[/yellow]")


# ─────────────────────────────────────────────────────────────────────────────
# Load / List / Search Commands
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def load(
    catalog: Path = typer.Argument(..., help="Catalog file (CSV)."),
):
    """
    📥 Load a catalog file and report what was indexed.

    Prints how many courses were inserted, how many duplicate and header rows
    were skipped, and each malformed row. Exits with status 1 when the file
    cannot be read.
    """
    _, planner = _configure()
    result = _load_or_exit(planner, catalog)
    _report_load(result)


@app.command("list")
def list_courses(
    catalog: Path = typer.Argument(..., help="Catalog file (CSV)."),
):
    """
    📋 Print every course in ascending course-number order.

    Each course prints as "<number>: <title>", then its prerequisites or
    "No Prerequisites.", then a blank line.
    """
    _, planner = _configure()
    result = _load_or_exit(planner, catalog)
    if result.has_errors:
        _report_load(result)
    _print_lines(planner.list_lines())


@app.command()
def search(
    catalog: Path = typer.Argument(..., help="Catalog file (CSV)."),
    number: str = typer.Argument(..., help="Course number (case sensitive)."),
):
    """
    🔎 Look up one course by its exact course number.

    Exits with status 1 when no course has that number.
    """
    _, planner = _configure()
    _load_or_exit(planner, catalog)

    _print_lines(planner.search_lines(number))
    if planner.search(number) is None:
        raise typer.Exit(1)


# ─────────────────────────────────────────────────────────────────────────────
# Menu Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def menu(
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog", "-c",
        help="Default file offered at the 'Load Courses' prompt.",
    ),
):
    """
    🧭 Interactive menu.

    Options:
      1  Load Courses (asks for a file name)
      2  Print Course List
      3  Search Course Number
      9  Exit

    Courses loaded from several files accumulate in the same index; a course
    number that is already loaded keeps its first record.
    """
    from course_offerings.shared.errors import SourceUnreadableError

    settings, planner = _configure()
    default_catalog = str(catalog) if catalog else settings.get_effective_catalog_path()

    console.print("Reminder: input is case sensitive.\n")

    while True:
        console.print(MENU_TEXT)
        selection = typer.prompt("", prompt_suffix="", default="", show_default=False).strip()

        if selection == "1":
            name = typer.prompt("Enter file name", default=default_catalog)
            console.print(f"Loading CSV file {name}\n", markup=False)
            try:
                result = planner.load(name)
            except SourceUnreadableError as e:
                logger.debug(f"Menu load failed: {e}")
                console.print(f"[red]{escape(str(e))}[/red]\n")
                continue
            _report_load(result)
            console.print()

        elif selection == "2":
            console.print()
            _print_lines(planner.list_lines())

        elif selection == "3":
            number = typer.prompt("Enter course number").strip()
            console.print()
            _print_lines(planner.search_lines(number))
            console.print()

        elif selection == "9":
            console.print(f"\n{GOODBYE}")
            break

        else:
            console.print(f"[yellow]'{escape(selection)}' is not a valid option.[/yellow]\n")


# ─────────────────────────────────────────────────────────────────────────────
# Info Command
# ─────────────────────────────────────────────────────────────────────────────


@app.command()
def info():
    """
    ℹ️ Show version information and effective configuration.
    """
    from course_offerings import __version__
    from course_offerings.shared.config import DEFAULT_CONFIG_FILE, get_settings

    settings = get_settings()

    console.print(Panel(
        f"[bold]Course Planner[/bold]\n"
        f"Version: {__version__}\n"
        f"Config: {DEFAULT_CONFIG_FILE}",
        title="ℹ️ Info",
    ))

    table = Table()
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("catalog.delimiter", repr(settings.catalog.delimiter))
    table.add_row("catalog.encoding", settings.catalog.encoding)
    table.add_row("catalog.header_sentinels", ", ".join(settings.catalog.header_sentinels))
    table.add_row("catalog path", settings.get_effective_catalog_path() or "-")
    table.add_row("log level", settings.get_effective_log_level())

    console.print(table)


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def cli():
    """CLI entry point."""
    app()


if __name__ == "__main__":
    cli()

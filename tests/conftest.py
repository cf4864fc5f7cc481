"""
Pytest Configuration and Fixtures.
===================================

Shared fixtures for all test modules:
- Sample catalog rows and text
- Temporary catalog files
- Fresh index and planner instances
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Path Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(project_root: Path) -> Path:
    """Get the config file path."""
    return project_root / "config" / "settings.yaml"


# ─────────────────────────────────────────────────────────────────────────────
# Sample Data Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def sample_catalog_text() -> str:
    """Catalog text with a header, unsorted rows and prerequisite columns."""
    return (
        "courseNum,courseTitle,prereq1,prereq2\n"
        "MATH201,Discrete Mathematics\n"
        "CSCI300,Introduction to Algorithms,CSCI200,MATH201\n"
        "CSCI350,Operating Systems,CSCI300\n"
        "CSCI101,Introduction to Programming in C++,CSCI100\n"
        "CSCI100,Introduction to Computer Science\n"
        "CSCI301,Advanced Programming in C++,CSCI101\n"
        "CSCI400,Large Software Development,CSCI301,CSCI350\n"
        "CSCI200,Data Structures,CSCI101\n"
    )


@pytest.fixture
def sample_numbers() -> list[str]:
    """Course numbers in sample_catalog_text, sorted."""
    return [
        "CSCI100",
        "CSCI101",
        "CSCI200",
        "CSCI300",
        "CSCI301",
        "CSCI350",
        "CSCI400",
        "MATH201",
    ]


@pytest.fixture
def sample_rows() -> list[list[str]]:
    """Two-course batch from the basic load example."""
    return [
        ["CS101", "Intro", ""],
        ["CS201", "Data Structures", "CS101"],
    ]


@pytest.fixture
def catalog_file(temp_dir: Path, sample_catalog_text: str) -> Path:
    """Sample catalog written to a temporary CSV file."""
    path = temp_dir / "courses.csv"
    path.write_text(sample_catalog_text, encoding="utf-8")
    return path


# ─────────────────────────────────────────────────────────────────────────────
# Object Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def course_index():
    """Empty CourseIndex."""
    from course_offerings.indexing.course_index import CourseIndex
    return CourseIndex()


@pytest.fixture
def make_course():
    """Factory for CourseRecord instances."""
    from course_offerings.shared.schemas import CourseRecord

    def _make(number: str, title: str = "", prerequisites=()):
        return CourseRecord(number=number, title=title or f"Title of {number}",
                            prerequisites=prerequisites)

    return _make


@pytest.fixture
def planner():
    """CoursePlanner with default loader settings."""
    from course_offerings.planner.catalog import CoursePlanner
    return CoursePlanner()


# ─────────────────────────────────────────────────────────────────────────────
# Pytest Configuration
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Isolate tests from the caller's environment and cached settings."""
    from course_offerings.shared.config import get_settings

    monkeypatch.delenv("CATALOG_PATH", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()

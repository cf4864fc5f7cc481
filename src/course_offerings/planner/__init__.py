"""
Planner Module - Catalog operations exposed to the CLI.
=======================================================

- catalog: CoursePlanner facade (load, list, search) over one CourseIndex
- formatting: Text lines for listings and search results
"""

from course_offerings.planner.catalog import CoursePlanner
from course_offerings.planner.formatting import (
    NO_PREREQUISITES,
    NOT_FOUND,
    format_course,
    format_listing,
    format_search_result,
)

__all__ = [
    # Catalog
    "CoursePlanner",
    # Formatting
    "NO_PREREQUISITES",
    "NOT_FOUND",
    "format_course",
    "format_listing",
    "format_search_result",
]

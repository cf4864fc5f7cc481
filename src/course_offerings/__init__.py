"""
Course Offerings - Course catalog loader and ordered course index
=================================================================

Reads a delimited course catalog (course number, title, prerequisite course
numbers), resolves prerequisite tokens against the rest of the catalog and
stores the resulting course records in an ordered index keyed by course
number.

The index supports:

- exact course-number lookup
- full listing in ascending course-number order

A small Typer CLI wraps the index with the classic load / list / search menu.
"""

__version__ = "1.0.0"
__author__ = "Course Offerings Team"
__license__ = "MIT"

# Public API - subpackages are imported on demand
__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Main modules (imported on demand)
    "shared",
    "ingestion",
    "indexing",
    "planner",
    "cli",
]

"""
CLI Module - Command-line interface for the course planner.
===========================================================

Provides CLI commands for:
- Loading a course catalog and reporting malformed rows
- Listing all courses in course-number order
- Searching for a course by number
- Running the interactive menu

Usage:
    courseplanner --help
    courseplanner list data/courses.csv
    courseplanner search data/courses.csv CSCI300
    courseplanner menu --catalog data/courses.csv

Components:
- main: Typer CLI application
"""

from course_offerings.cli.main import app, cli

__all__ = ["app", "cli"]

"""
Tests Package - Unit tests for the course planner.
==================================================

Test modules:
- test_indexing: CourseIndex insert, lookup, traversal
- test_ingestion: Tokenizer and catalog loader
- test_planner: Formatting and the CoursePlanner facade
- test_cli: Typer commands and the interactive menu
- test_shared: Settings, schemas, errors, logging

Run tests with:
    pytest tests/
    pytest tests/ -v --cov=src/course_offerings
"""

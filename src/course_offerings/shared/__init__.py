"""
Shared Module - Common configuration, schemas, errors, and logging.
===================================================================

This module provides foundational components used across all other modules:

- config: Configuration loading and management
- logging: Structured logging setup
- schemas: Pydantic data models
- errors: Exception hierarchy for catalog loading
"""

from course_offerings.shared.config import get_settings, reload_settings, Settings
from course_offerings.shared.logging import get_logger, setup_logging
from course_offerings.shared.schemas import (
    CourseRecord,
    ErrorKind,
    LoadResult,
    RowError,
    SourceType,
)
from course_offerings.shared.errors import (
    CatalogError,
    MalformedRowError,
    SourceUnreadableError,
    ValueNotFoundError,
)

__all__ = [
    # Config
    "get_settings",
    "reload_settings",
    "Settings",
    # Logging
    "get_logger",
    "setup_logging",
    # Schemas
    "CourseRecord",
    "ErrorKind",
    "LoadResult",
    "RowError",
    "SourceType",
    # Errors
    "CatalogError",
    "MalformedRowError",
    "SourceUnreadableError",
    "ValueNotFoundError",
]

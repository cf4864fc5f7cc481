"""
Errors Module - Exception hierarchy for catalog loading.
========================================================

- SourceUnreadableError: the catalog source cannot be opened or decoded;
  aborts the whole load
- MalformedRowError: a catalog row has too few fields; the loader records it
  and moves on to the next row
- ValueNotFoundError: a row accessor was asked for a field that does not
  exist

A course-number search that finds nothing is not an error and has no
exception here.
"""

from typing import Optional


class CatalogError(Exception):
    """Base exception for all catalog-related errors."""
    pass


class SourceUnreadableError(CatalogError):
    """Raised when the catalog file or stream cannot be read."""

    def __init__(self, source: str, message: Optional[str] = None):
        self.source = source
        super().__init__(message or f"Failed to open {source}")


class MalformedRowError(CatalogError):
    """Raised when a catalog row cannot be turned into a course record."""

    def __init__(self, row_number: int, field_count: int, message: Optional[str] = None):
        self.row_number = row_number
        self.field_count = field_count
        super().__init__(
            message
            or f"Row {row_number} has {field_count} field(s); expected at least 2"
        )


class ValueNotFoundError(CatalogError, IndexError):
    """Raised when a row field is requested by a position or name it does not have."""

    def __init__(self, key: object, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"can't return this value (doesn't exist): {key!r}")

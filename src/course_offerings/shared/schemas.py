"""
Schemas Module - Pydantic data models for the application.
==========================================================

Defines the data contracts used across the application:
- Course records stored in the index
- Load results and per-row errors reported by the loader
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────


class SourceType(str, Enum):
    """How a catalog source argument is interpreted."""

    FILE = "file"
    TEXT = "text"


class ErrorKind(str, Enum):
    """Kinds of recoverable errors reported by a load."""

    MALFORMED_ROW = "malformed_row"


# ─────────────────────────────────────────────────────────────────────────────
# Course Data Models
# ─────────────────────────────────────────────────────────────────────────────


class CourseRecord(BaseModel):
    """
    A single catalog entry.

    Records are frozen: once the loader has built one and handed it to the
    index, neither its attributes nor its prerequisite sequence can change.
    """

    model_config = ConfigDict(frozen=True)

    number: str = Field(..., description="Course number (e.g., 'CSCI300'), the index key")
    title: str = Field(..., description="Course title, display only")
    prerequisites: tuple[str, ...] = Field(
        default=(), description="Resolved prerequisite course numbers, in source order"
    )

    @field_validator("number")
    @classmethod
    def validate_number(cls, v: str) -> str:
        if not v:
            raise ValueError("course number must be non-empty")
        return v

    @property
    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0


# ─────────────────────────────────────────────────────────────────────────────
# Load Result Models
# ─────────────────────────────────────────────────────────────────────────────


class RowError(BaseModel):
    """A recoverable problem with one catalog row."""

    row_number: int = Field(..., description="1-based position of the row in the batch")
    kind: ErrorKind = Field(..., description="Error classification")
    message: str = Field(..., description="Human-readable description")

    def __str__(self) -> str:
        return f"row {self.row_number}: {self.message}"


class LoadResult(BaseModel):
    """
    Outcome of loading one batch of rows into an index.

    A result with inserted_count == 0 is not a failure by itself; callers
    decide how to report an empty load.
    """

    inserted_count: int = 0
    duplicate_count: int = 0
    skipped_count: int = 0
    dropped_prerequisites: int = 0
    errors: list[RowError] = Field(default_factory=list)

    @computed_field
    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def summary(self) -> str:
        """One-line summary used by the CLI."""
        return (
            f"Loaded {self.inserted_count} course(s); "
            f"{self.duplicate_count} duplicate(s) skipped, "
            f"{self.skipped_count} header/blank row(s) ignored, "
            f"{self.error_count} malformed row(s)"
        )

"""
Tokenizer Module - Split delimited catalog text into rows of fields.
====================================================================

Catalog sources are plain delimited text:

    courseNum,courseTitle,prereq1,prereq2
    CSCI100,Introduction to Computer Science
    CSCI200,Data Structures,CSCI101
    "MATH201","Discrete Mathematics, Logic"

- every line is one row; blank lines are dropped
- fields may be wrapped in double quotes to contain the delimiter
- the first line of the source is treated as its header, for lookups by
  column name; it is not removed from the rows
"""

import csv
from pathlib import Path
from typing import Callable, Iterator, Sequence, TypeVar, Union, overload

from course_offerings.shared.errors import SourceUnreadableError, ValueNotFoundError
from course_offerings.shared.logging import get_logger
from course_offerings.shared.schemas import SourceType

logger = get_logger(__name__)

T = TypeVar("T")


# ─────────────────────────────────────────────────────────────────────────────
# Row
# ─────────────────────────────────────────────────────────────────────────────


class Row(Sequence[str]):
    """
    One tokenized catalog line.

    Supports len(), indexing and iteration like a tuple of strings, plus two
    accessors that fail loudly instead of returning a default:

    - value(pos, cast): typed access by position
    - get(name): access by header column name
    """

    __slots__ = ("_values", "_header")

    def __init__(self, values: Sequence[str], header: Sequence[str] = ()):
        self._values = tuple(values)
        self._header = tuple(header)

    @property
    def header(self) -> tuple[str, ...]:
        return self._header

    @property
    def values(self) -> tuple[str, ...]:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    @overload
    def __getitem__(self, pos: int) -> str: ...

    @overload
    def __getitem__(self, pos: slice) -> tuple[str, ...]: ...

    def __getitem__(self, pos: Union[int, slice]) -> Union[str, tuple[str, ...]]:
        if isinstance(pos, slice):
            return self._values[pos]
        if not -len(self._values) <= pos < len(self._values):
            raise ValueNotFoundError(pos)
        return self._values[pos]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Row({list(self._values)!r})"

    def value(self, pos: int, cast: Callable[[str], T] = str) -> T:  # type: ignore[assignment]
        """
        Get the field at a position converted with cast.

        Raises:
            ValueNotFoundError: If the row has no field at that position
            ValueError: If cast rejects the field text
        """
        if not 0 <= pos < len(self._values):
            raise ValueNotFoundError(pos)
        return cast(self._values[pos])

    def get(self, name: str) -> str:
        """
        Get the field under a header column name.

        Raises:
            ValueNotFoundError: If the header has no such column or this
                row is shorter than the header
        """
        try:
            pos = self._header.index(name)
        except ValueError:
            raise ValueNotFoundError(name) from None

        if pos >= len(self._values):
            raise ValueNotFoundError(name)
        return self._values[pos]


# ─────────────────────────────────────────────────────────────────────────────
# Tokenizing
# ─────────────────────────────────────────────────────────────────────────────


def _split_lines(text: str, delimiter: str) -> list[list[str]]:
    # One physical line is one row, even when a quote is left open
    rows: list[list[str]] = []
    for line in text.splitlines():
        if not line:
            continue
        fields = next(csv.reader([line], delimiter=delimiter, quotechar='"'), [])
        if fields:
            rows.append(fields)
    return rows


def tokenize_text(text: str, delimiter: str = ",") -> list[Row]:
    """
    Tokenize in-memory catalog text.

    Args:
        text: Raw catalog text
        delimiter: Single-character field separator

    Returns:
        Rows in source order; blank lines are not included

    Example:
        >>> rows = tokenize_text('CSCI101,"Intro, Part 1"\\n\\nCSCI200,Data Structures,CSCI101')
        >>> [list(r) for r in rows]
        [['CSCI101', 'Intro, Part 1'], ['CSCI200', 'Data Structures', 'CSCI101']]
    """
    fields = _split_lines(text, delimiter)
    header = fields[0] if fields else []
    return [Row(values, header) for values in fields]


def read_catalog_file(
    path: Union[str, Path],
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[Row]:
    """
    Read and tokenize a catalog file.

    Args:
        path: Path to the catalog file
        delimiter: Single-character field separator
        encoding: File encoding

    Returns:
        Rows in file order; blank lines are not included

    Raises:
        SourceUnreadableError: If the file cannot be opened or decoded
    """
    path = Path(path)
    logger.info(f"Reading catalog file {path}")

    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            fields = _split_lines(f.read(), delimiter)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise SourceUnreadableError(str(path), f"Failed to open {path}: {e}") from e

    header = fields[0] if fields else []
    rows = [Row(values, header) for values in fields]
    logger.debug(f"Tokenized {len(rows)} rows from {path}")
    return rows


def read_source(
    source: Union[str, Path],
    source_type: SourceType = SourceType.FILE,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[Row]:
    """Tokenize either a catalog file path or literal catalog text."""
    if source_type == SourceType.TEXT:
        try:
            return tokenize_text(str(source), delimiter)
        except csv.Error as e:
            raise SourceUnreadableError("<text>", f"Failed to read catalog text: {e}") from e
    return read_catalog_file(source, delimiter, encoding)

"""
Loader Module - Build course records from catalog rows and index them.
======================================================================

For each row of a batch, in order:

1. Skip rows whose first field is empty or a header sentinel
   ("courseId", "courseNum").
2. Rows with fewer than two fields are malformed: recorded, then skipped.
3. Skip rows whose course number is already in the index. The first record
   loaded for a number wins, across batches too.
4. Resolve prerequisite tokens (fields 2..N, whitespace-trimmed). A token
   resolves when another row of the same batch starts with it, whether or
   not that row ends up indexed. Unresolved tokens are dropped silently.
5. Build the record and insert it.

Source-level failures (unreadable file) abort the load before any insert.
Row-level failures never escape load().
"""

from collections import defaultdict
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from course_offerings.indexing.course_index import CourseIndex
from course_offerings.ingestion.tokenizer import read_source
from course_offerings.shared.errors import MalformedRowError
from course_offerings.shared.logging import get_logger
from course_offerings.shared.schemas import (
    CourseRecord,
    ErrorKind,
    LoadResult,
    RowError,
    SourceType,
)

logger = get_logger(__name__)

DEFAULT_HEADER_SENTINELS: tuple[str, ...] = ("courseId", "courseNum")

# Column layout of a catalog row
NUMBER_COLUMN = 0
TITLE_COLUMN = 1
FIRST_PREREQUISITE_COLUMN = 2


class CatalogLoader:
    """
    Turns tokenized catalog rows into course records in a CourseIndex.

    Example:
        >>> index = CourseIndex()
        >>> result = CatalogLoader().load(
        ...     [["CSCI101", "Intro", ""], ["CSCI200", "Data Structures", "CSCI101"]],
        ...     index,
        ... )
        >>> result.inserted_count
        2
        >>> index.find("CSCI200").prerequisites
        ('CSCI101',)
    """

    def __init__(
        self,
        header_sentinels: Optional[Iterable[str]] = None,
        delimiter: str = ",",
        encoding: str = "utf-8",
    ):
        """
        Initialize the loader.

        Args:
            header_sentinels: First-field values that mark a header row
                (exact, case-sensitive match)
            delimiter: Field separator used when reading a source
            encoding: Encoding used when reading a catalog file
        """
        if header_sentinels is None:
            header_sentinels = DEFAULT_HEADER_SENTINELS
        self.header_sentinels = frozenset(header_sentinels)
        self.delimiter = delimiter
        self.encoding = encoding

    # ─────────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────────

    def load(self, rows: Sequence[Sequence[str]], index: CourseIndex) -> LoadResult:
        """
        Load one batch of rows into an index.

        Args:
            rows: Tokenized rows, each a sequence of field strings
            index: Index to insert new records into

        Returns:
            LoadResult with counts and any malformed-row errors
        """
        result = LoadResult()
        positions_by_number = self._positions_by_number(rows)

        for position, row in enumerate(rows):
            if self._is_skippable(row):
                result.skipped_count += 1
                continue

            try:
                number, title = self._split_identity(row, position)
            except MalformedRowError as e:
                logger.warning(f"Skipping malformed row: {e}")
                result.errors.append(
                    RowError(row_number=position + 1, kind=ErrorKind.MALFORMED_ROW, message=str(e))
                )
                continue

            if index.find(number) is not None:
                logger.debug(f"Skipping duplicate course {number} (row {position + 1})")
                result.duplicate_count += 1
                continue

            prerequisites = []
            for token in self._prerequisite_tokens(row):
                if self._resolves(token, position, positions_by_number):
                    prerequisites.append(token)
                else:
                    logger.debug(f"Dropping unknown prerequisite {token!r} of {number}")
                    result.dropped_prerequisites += 1

            index.insert(CourseRecord(number=number, title=title, prerequisites=prerequisites))
            result.inserted_count += 1

        logger.info(result.summary())
        return result

    def load_source(
        self,
        source: Union[str, Path],
        index: CourseIndex,
        source_type: SourceType = SourceType.FILE,
    ) -> LoadResult:
        """
        Read a catalog source and load its rows.

        Args:
            source: File path, or catalog text when source_type is TEXT
            index: Index to insert new records into
            source_type: How to interpret source

        Raises:
            SourceUnreadableError: If the source cannot be read
        """
        rows = read_source(source, source_type, self.delimiter, self.encoding)
        return self.load(rows, index)

    # ─────────────────────────────────────────────────────────────────────────
    # Row helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _is_skippable(self, row: Sequence[str]) -> bool:
        if len(row) == 0:
            return True
        first = row[NUMBER_COLUMN]
        return first == "" or first in self.header_sentinels

    @staticmethod
    def _split_identity(row: Sequence[str], position: int) -> tuple[str, str]:
        if len(row) < FIRST_PREREQUISITE_COLUMN:
            raise MalformedRowError(position + 1, len(row))
        return row[NUMBER_COLUMN], row[TITLE_COLUMN]

    @staticmethod
    def _prerequisite_tokens(row: Sequence[str]) -> list[str]:
        tokens = (field.strip() for field in row[FIRST_PREREQUISITE_COLUMN:])
        return [token for token in tokens if token]

    @staticmethod
    def _positions_by_number(rows: Sequence[Sequence[str]]) -> dict[str, list[int]]:
        """Map each first field in the raw batch to the rows that carry it."""
        positions: dict[str, list[int]] = defaultdict(list)
        for position, row in enumerate(rows):
            if len(row) > 0:
                positions[row[NUMBER_COLUMN]].append(position)
        return positions

    @staticmethod
    def _resolves(token: str, position: int, positions_by_number: dict[str, list[int]]) -> bool:
        return any(other != position for other in positions_by_number.get(token, ()))


def load_catalog(
    source: Union[str, Path],
    index: CourseIndex,
    source_type: SourceType = SourceType.FILE,
    loader: Optional[CatalogLoader] = None,
) -> LoadResult:
    """
    Convenience function to load a catalog source into an index.

    Args:
        source: File path, or catalog text when source_type is TEXT
        index: Index to insert new records into
        source_type: How to interpret source
        loader: Loader to use (default settings if None)

    Returns:
        LoadResult for the load
    """
    loader = loader or CatalogLoader()
    return loader.load_source(source, index, source_type)

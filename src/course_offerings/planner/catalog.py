"""
Catalog Module - Course planner facade over one course index.
=============================================================

The CLI talks to a CoursePlanner instead of a process-wide tree: the entry
point builds one planner, and every load, list and search goes through it.
"""

from pathlib import Path
from typing import Iterator, Optional, Union

from course_offerings.indexing.course_index import CourseIndex
from course_offerings.ingestion.loader import CatalogLoader
from course_offerings.planner.formatting import format_listing, format_search_result
from course_offerings.shared.config import Settings
from course_offerings.shared.logging import get_logger
from course_offerings.shared.schemas import CourseRecord, LoadResult, SourceType

logger = get_logger(__name__)


class CoursePlanner:
    """
    Load, list and search operations over a single CourseIndex.

    Example:
        >>> planner = CoursePlanner()
        >>> planner.load("CSCI100,Intro\\nCSCI200,Data Structures,CSCI100",
        ...              SourceType.TEXT).inserted_count
        2
        >>> list(planner.list_lines())[:2]
        ['CSCI100: Intro', 'No Prerequisites.']
    """

    def __init__(
        self,
        index: Optional[CourseIndex] = None,
        loader: Optional[CatalogLoader] = None,
    ):
        self.index = index if index is not None else CourseIndex()
        self.loader = loader or CatalogLoader()

    @classmethod
    def from_settings(cls, settings: Settings) -> "CoursePlanner":
        """Create a planner whose loader follows the catalog settings."""
        loader = CatalogLoader(
            header_sentinels=settings.catalog.header_sentinels,
            delimiter=settings.catalog.delimiter,
            encoding=settings.catalog.encoding,
        )
        return cls(loader=loader)

    def load(
        self,
        source: Union[str, Path],
        source_type: SourceType = SourceType.FILE,
    ) -> LoadResult:
        """
        Load a catalog file (or text) into the index.

        Raises:
            SourceUnreadableError: If the source cannot be read
        """
        result = self.loader.load_source(source, self.index, source_type)
        logger.info(f"Index now holds {len(self.index)} course(s)")
        return result

    def courses(self) -> Iterator[CourseRecord]:
        return self.index.traverse_in_order()

    def list_lines(self) -> Iterator[str]:
        """Listing lines for every course, in ascending course-number order."""
        return format_listing(self.courses())

    def search(self, number: str) -> Optional[CourseRecord]:
        """Exact, case-sensitive course-number lookup; None on a miss."""
        return self.index.find(number)

    def search_lines(self, number: str) -> list[str]:
        return format_search_result(self.search(number))

    def __len__(self) -> int:
        return len(self.index)

"""
Ingestion Module - Read catalog sources and load them into an index.
====================================================================

- tokenizer: Delimited text to rows of fields, with quoted-field support
- loader: Rows to validated course records, with prerequisite resolution
  and duplicate suppression

Pipeline flow:
    Catalog file/text → Tokenizer → Rows → Loader → CourseRecords → CourseIndex
"""

from course_offerings.ingestion.tokenizer import (
    Row,
    read_catalog_file,
    read_source,
    tokenize_text,
)
from course_offerings.ingestion.loader import (
    DEFAULT_HEADER_SENTINELS,
    CatalogLoader,
    load_catalog,
)

__all__ = [
    # Tokenizer
    "Row",
    "read_catalog_file",
    "read_source",
    "tokenize_text",
    # Loader
    "DEFAULT_HEADER_SENTINELS",
    "CatalogLoader",
    "load_catalog",
]

"""
Indexing Module - Ordered in-memory course index.
=================================================

- course_index: Binary search tree keyed by course number, with exact
  lookup and sorted traversal
"""

from course_offerings.indexing.course_index import CourseIndex

__all__ = [
    "CourseIndex",
]

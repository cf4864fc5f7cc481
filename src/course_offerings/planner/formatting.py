"""
Formatting helpers for course listings and search results.
"""

from typing import Iterable, Iterator, Optional

from course_offerings.shared.schemas import CourseRecord

NO_PREREQUISITES = "No Prerequisites."
NOT_FOUND = "Course not found."


def format_prerequisites(course: CourseRecord) -> str:
    """Comma-joined prerequisite numbers, in source order."""
    return ", ".join(course.prerequisites)


def format_course(course: CourseRecord) -> list[str]:
    """
    Lines for one course in the full listing.

    Example:
        >>> format_course(CourseRecord(number="CSCI200", title="Data Structures",
        ...                            prerequisites=["CSCI101"]))
        ['CSCI200: Data Structures', 'Prerequisites: CSCI101', '']
    """
    lines = [f"{course.number}: {course.title}"]
    if course.has_prerequisites:
        lines.append(f"Prerequisites: {format_prerequisites(course)}")
    else:
        lines.append(NO_PREREQUISITES)
    lines.append("")
    return lines


def format_listing(courses: Iterable[CourseRecord]) -> Iterator[str]:
    for course in courses:
        yield from format_course(course)


def format_search_result(course: Optional[CourseRecord]) -> list[str]:
    # Found courses always print the label, even with nothing after it
    if course is None:
        return [NOT_FOUND]
    return [
        "Course found:",
        f"{course.number}, {course.title}",
        f"Prerequisites: {format_prerequisites(course)}",
    ]

"""
Course Index - Ordered index of course records keyed by course number.
======================================================================

A plain (unbalanced) binary search tree:

- keys in a node's left subtree compare less than the node's key
- keys in its right subtree compare greater than or equal to it

Equal keys are routed right on insert. Lookup returns the first node on the
search path whose key matches, so when the same key is inserted twice only
the first record is ever returned; the later one is still in the tree and
still appears in traversal.

Walks use an explicit stack instead of recursion: catalogs are often already
sorted, which turns the tree into a linked list as deep as the catalog.

The index is not thread-safe. Callers that share one across threads must
guard the whole index with a single lock.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from course_offerings.shared.schemas import CourseRecord


@dataclass
class _Node:
    """One tree node; owns its record and up to two children."""

    course: CourseRecord
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None

    @property
    def key(self) -> str:
        return self.course.number


class CourseIndex:
    """
    Binary search tree of course records.

    Example:
        >>> index = CourseIndex()
        >>> index.insert(CourseRecord(number="CSCI200", title="Data Structures"))
        >>> index.find("CSCI200").title
        'Data Structures'
        >>> index.find("MATH201") is None
        True
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation
    # ─────────────────────────────────────────────────────────────────────────

    def insert(self, course: CourseRecord) -> None:
        """
        Insert a course record.

        Always succeeds. A record whose number is already indexed is placed
        in the right subtree of the existing node; rejecting duplicates is
        the loader's job.
        """
        new_node = _Node(course)
        self._size += 1

        if self._root is None:
            self._root = new_node
            return

        node = self._root
        while True:
            if course.number < node.key:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def find(self, number: str) -> Optional[CourseRecord]:
        """
        Look up a course by exact (case-sensitive) course number.

        Args:
            number: Course number to search for

        Returns:
            The first record inserted under that number, or None on a miss
        """
        node = self._root
        while node is not None:
            if number == node.key:
                return node.course
            if number < node.key:
                node = node.left
            else:
                node = node.right
        return None

    def traverse_in_order(self) -> Iterator[CourseRecord]:
        """
        Yield every record in ascending course-number order.

        Each call starts a fresh walk. Records sharing a key are yielded in
        insertion order.
        """
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0

        deepest = 0
        stack: list[tuple[_Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[CourseRecord]:
        return self.traverse_in_order()

    def __contains__(self, number: object) -> bool:
        if not isinstance(number, str):
            return False
        return self.find(number) is not None

    def __repr__(self) -> str:
        return f"CourseIndex(size={self._size}, height={self.height()})"

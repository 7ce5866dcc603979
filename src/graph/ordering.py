"""Numeric total order over vertices.

Vertices are compared by the integer value of their string form, so ``"10"``
sorts after ``"9"`` and ``3`` and ``"3"`` sort together.
"""

from collections.abc import Iterable
from typing import TypeVar

V = TypeVar("V")


def vertex_sort_key(vertex: object) -> int:
    """Return the sort key of a vertex.

    Raises:
        ValueError: If the vertex's string form is not an integer
    """
    return int(str(vertex))


def compare_vertices(first: object, second: object) -> int:
    """Three-way comparison of two vertices: -1, 0 or 1."""
    first_key = vertex_sort_key(first)
    second_key = vertex_sort_key(second)
    return (first_key > second_key) - (first_key < second_key)


def sort_vertices(vertices: Iterable[V]) -> list[V]:
    """Return the vertices in ascending numeric order."""
    return sorted(vertices, key=vertex_sort_key)

"""Directed edge between two vertices."""

from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class Edge(Generic[V]):
    """An ordered (source, destination) pair.

    Equality and hashing are structural, so edges can be looked up in sets
    by constructing a fresh instance with the same endpoints. Self-loops
    (source == destination) are allowed.

    Attributes:
        source: Vertex the edge leaves from
        destination: Vertex the edge points to
    """

    source: V
    destination: V

    @property
    def is_self_loop(self) -> bool:
        """Whether the edge starts and ends at the same vertex."""
        return self.source == self.destination

    def reversed(self) -> "Edge[V]":
        """Return the edge with source and destination swapped."""
        return Edge(self.destination, self.source)

"""Directed graph over ordered vertices with relation analysis and traversals.

This module provides the RelationGraph class, which builds an ordered
adjacency index once at construction and answers relation-property
questions (reflexive, symmetric, transitive, anti-symmetric, equivalence),
derives roots and equivalence classes, and runs breadth-first and
depth-first traversals with deterministic numeric ordering.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

import structlog

from src.config import TraversalConfig, get_config
from src.containers import SequentialList
from src.graph.edge import Edge
from src.graph.ordering import sort_vertices, vertex_sort_key
from src.graph.traversal import breadth_first_search, depth_first_search

logger = structlog.get_logger(__name__)

V = TypeVar("V")


class RelationGraph(Generic[V]):
    """Immutable directed graph viewed as a binary relation over its vertices.

    Vertices must be hashable and have an integer string form; that integer
    gives the total order used everywhere output order matters. Every edge
    endpoint is expected to be in the vertex set. This is not checked here;
    use GraphValidator to report violations.

    Thread-safety:
        Queries never mutate the graph. The recursive traversals raise the
        process-wide recursion limit while they run, so do not call them
        concurrently from several threads.

    Example:
        >>> graph = RelationGraph({1, 2, 3}, {Edge(1, 2), Edge(2, 3)})
        >>> graph.get_roots()
        (1,)
        >>> graph.iterative_breadth_first_search()
        [1, 2, 3]
    """

    def __init__(
        self,
        vertices: Iterable[V],
        edges: Iterable[Edge[V]],
        config: TraversalConfig | None = None,
    ):
        """Build the graph and its adjacency index.

        Args:
            vertices: Unique vertex values
            edges: Unique directed edges between those vertices
            config: Traversal settings; when omitted the loaded configuration
                is read the first time a recursive traversal runs
        """
        self._vertices: frozenset[V] = frozenset(vertices)
        self._edges: frozenset[Edge[V]] = frozenset(edges)
        self._config = config
        self._adjacency = MappingProxyType(self._build_adjacency())

        logger.debug(
            "relation_graph_built",
            vertex_count=len(self._vertices),
            edge_count=len(self._edges),
        )

    def _build_adjacency(self) -> dict[V, tuple[Edge[V], ...]]:
        """Map each vertex to its outgoing edges sorted by destination."""
        ordered = sort_vertices(self._vertices)
        adjacency: dict[V, tuple[Edge[V], ...]] = {}
        for source in ordered:
            outgoing: SequentialList[Edge[V]] = SequentialList()
            for destination in ordered:
                candidate = Edge(source, destination)
                if candidate in self._edges:
                    outgoing.add(candidate)
            adjacency[source] = tuple(outgoing)
        return adjacency

    @property
    def vertices(self) -> frozenset[V]:
        return self._vertices

    @property
    def edges(self) -> frozenset[Edge[V]]:
        return self._edges

    @property
    def adjacency(self) -> Mapping[V, tuple[Edge[V], ...]]:
        """Read-only view of the adjacency index."""
        return self._adjacency

    # Relation predicates

    def is_reflexive(self) -> bool:
        """Check that there are as many self-loops as vertices.

        Edges are unique, so this means every vertex has its self-loop.
        """
        self_loops = sum(1 for edge in self._edges if edge.is_self_loop)
        return self_loops == len(self._vertices)

    def is_symmetric(self) -> bool:
        """Check that every edge (a, b) has its reverse (b, a)."""
        return all(edge.reversed() in self._edges for edge in self._edges)

    def is_transitive(self) -> bool:
        """Check that edges (a, b) and (b, c) always imply (a, c)."""
        for first in self._edges:
            for second in self._edges:
                if second.source != first.destination:
                    continue
                if Edge(first.source, second.destination) not in self._edges:
                    return False
        return True

    def is_anti_symmetric(self) -> bool:
        """Check that no edge between distinct vertices has its reverse."""
        return not any(
            not edge.is_self_loop and edge.reversed() in self._edges for edge in self._edges
        )

    def is_equivalence(self) -> bool:
        """Check whether the relation is reflexive, symmetric and transitive."""
        return self.is_reflexive() and self.is_symmetric() and self.is_transitive()

    # Roots and equivalence classes

    def _destinations(self, vertex: V) -> frozenset[V]:
        return frozenset(edge.destination for edge in self._adjacency[vertex])

    def _has_incoming_edge(self, vertex: V) -> bool:
        return any(edge.destination == vertex for edge in self._edges)

    def _has_outgoing_edge(self, vertex: V) -> bool:
        return any(edge.source == vertex for edge in self._edges)

    def get_roots(self) -> tuple[V, ...]:
        """Return the roots of the graph in ascending numeric order.

        A vertex is a root when nothing points to it and it points to at
        least one vertex. When the relation is an equivalence, the smallest
        member of every equivalence class is a root as well; both rules are
        applied and their results merged.

        Returns:
            Ascending tuple of distinct roots
        """
        roots = {
            vertex
            for vertex in self._vertices
            if not self._has_incoming_edge(vertex) and self._has_outgoing_edge(vertex)
        }

        if self.is_equivalence():
            for vertex in self._vertices:
                members = self._destinations(vertex)
                if members:
                    roots.add(min(members, key=vertex_sort_key))

        ordered = tuple(sort_vertices(roots))
        logger.debug("roots_computed", root_count=len(ordered))
        return ordered

    def get_equivalence_class(self, vertex: V) -> frozenset[V]:
        """Return the equivalence class containing ``vertex``.

        Args:
            vertex: A vertex of the graph

        Returns:
            The destinations of the vertex's outgoing edges when the relation
            is an equivalence, otherwise an empty set

        Raises:
            KeyError: If the relation is an equivalence and the vertex is not
                part of the graph
        """
        if not self.is_equivalence():
            return frozenset()
        return self._destinations(vertex)

    # Traversals

    def _traversal_config(self) -> TraversalConfig:
        if self._config is None:
            self._config = get_config().traversal
        return self._config

    def iterative_breadth_first_search(self) -> list[V]:
        """Breadth-first traversal from every root using a loop."""
        return breadth_first_search(self._adjacency, self.get_roots())

    def recursive_breadth_first_search(self) -> list[V]:
        """Breadth-first traversal from every root, one recursive call per dequeue."""
        return breadth_first_search(
            self._adjacency,
            self.get_roots(),
            recursive=True,
            recursion_headroom=self._traversal_config().recursion_headroom,
        )

    def iterative_depth_first_search(self) -> list[V]:
        """Depth-first traversal from every root using a loop."""
        return depth_first_search(self._adjacency, self.get_roots())

    def recursive_depth_first_search(self) -> list[V]:
        """Depth-first traversal from every root, one recursive call per pop."""
        return depth_first_search(
            self._adjacency,
            self.get_roots(),
            recursive=True,
            recursion_headroom=self._traversal_config().recursion_headroom,
        )

    def get_stats(self) -> dict[str, int]:
        """Get statistics about the graph.

        Returns:
            Dictionary with graph statistics including:
                - total_vertices: Number of vertices
                - total_edges: Number of edges
                - self_loops: Number of edges from a vertex to itself
                - root_count: Number of roots
        """
        stats = {
            "total_vertices": len(self._vertices),
            "total_edges": len(self._edges),
            "self_loops": sum(1 for edge in self._edges if edge.is_self_loop),
            "root_count": len(self.get_roots()),
        }

        logger.debug("graph_stats_retrieved", **stats)

        return stats

    def __repr__(self) -> str:
        return f"RelationGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"

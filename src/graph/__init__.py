"""Graph module for relation analysis and ordered traversal.

This module provides an immutable directed graph over numerically ordered
vertices, relation-property predicates, root and equivalence-class
derivation, and breadth-first and depth-first traversals.
"""

from src.graph.edge import Edge
from src.graph.ordering import compare_vertices, sort_vertices, vertex_sort_key
from src.graph.relation_graph import RelationGraph
from src.graph.traversal import breadth_first_search, depth_first_search
from src.graph.validator import GraphValidator, ValidationReport

__all__ = [
    "Edge",
    "GraphValidator",
    "RelationGraph",
    "ValidationReport",
    "breadth_first_search",
    "compare_vertices",
    "depth_first_search",
    "sort_vertices",
    "vertex_sort_key",
]

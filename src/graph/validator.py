"""Well-formedness checks for relation graphs.

RelationGraph trusts its caller: edges pointing at vertices outside the
vertex set are not rejected at construction. This module reports such
problems, along with vertices that no traversal will ever reach.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from src.graph.ordering import vertex_sort_key

if TYPE_CHECKING:
    from src.graph.relation_graph import RelationGraph

logger = structlog.get_logger(__name__)


@dataclass
class ValidationReport:
    """Report containing validation results for a relation graph.

    Attributes:
        is_valid: Whether the graph passed all validation checks
        errors: List of error messages (critical issues)
        warnings: List of warning messages (potential issues)
        missing_vertices: Edge endpoints that are not in the vertex set
        isolated_vertices: Vertices with no incoming or outgoing edges
        unreachable_vertices: Vertices not visited from any root
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    missing_vertices: set[Any] = field(default_factory=set)
    isolated_vertices: set[Any] = field(default_factory=set)
    unreachable_vertices: set[Any] = field(default_factory=set)

    def add_error(self, message: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(message)
        self.is_valid = False
        logger.error("validation_error", message=message)

    def add_warning(self, message: str) -> None:
        """Add a warning message without failing validation."""
        self.warnings.append(message)
        logger.warning("validation_warning", message=message)


def _report_order(vertex: Any) -> tuple[int, int, str]:
    # Missing endpoints may not parse as integers; those sort after the rest.
    try:
        return (0, vertex_sort_key(vertex), "")
    except ValueError:
        return (1, 0, str(vertex))


def _format_vertices(vertices: set[Any]) -> str:
    return ", ".join(str(vertex) for vertex in sorted(vertices, key=_report_order))


class GraphValidator:
    """Validator for relation graphs with detailed error reporting.

    Checks performed:
    - Edge endpoints missing from the vertex set (error)
    - Isolated vertices (warning)
    - Vertices unreachable from every root (warning, only for well-formed graphs)
    """

    def validate(self, graph: "RelationGraph") -> ValidationReport:
        """Validate a relation graph and generate a detailed report.

        Args:
            graph: The RelationGraph to validate

        Returns:
            ValidationReport containing all validation results
        """
        logger.info(
            "starting_graph_validation",
            vertex_count=len(graph.vertices),
            edge_count=len(graph.edges),
        )

        report = ValidationReport()

        missing = self._check_missing_vertices(graph)
        if missing:
            report.missing_vertices = missing
            report.add_error(
                f"Edges reference vertices outside the graph: {_format_vertices(missing)}",
            )

        isolated = self._check_isolated_vertices(graph)
        if isolated:
            report.isolated_vertices = isolated
            report.add_warning(f"Vertices with no edges: {_format_vertices(isolated)}")

        # Reachability is only meaningful once every endpoint is a vertex.
        if not missing:
            unreachable = self._check_unreachable_vertices(graph)
            if unreachable:
                report.unreachable_vertices = unreachable
                report.add_warning(
                    f"Vertices not reachable from any root: {_format_vertices(unreachable)}",
                )

        logger.info(
            "graph_validation_complete",
            is_valid=report.is_valid,
            error_count=len(report.errors),
            warning_count=len(report.warnings),
        )

        return report

    def _check_missing_vertices(self, graph: "RelationGraph") -> set[Any]:
        """Collect edge endpoints that are not vertices of the graph."""
        endpoints = set()
        for edge in graph.edges:
            endpoints.add(edge.source)
            endpoints.add(edge.destination)

        missing = endpoints - graph.vertices

        if missing:
            logger.debug("missing_vertices_found", count=len(missing), vertices=list(missing))

        return missing

    def _check_isolated_vertices(self, graph: "RelationGraph") -> set[Any]:
        """Collect vertices that no edge touches."""
        touched = set()
        for edge in graph.edges:
            touched.add(edge.source)
            touched.add(edge.destination)
        return set(graph.vertices) - touched

    def _check_unreachable_vertices(self, graph: "RelationGraph") -> set[Any]:
        """Collect vertices a breadth-first traversal from the roots never visits."""
        visited = set(graph.iterative_breadth_first_search())
        unreachable = set(graph.vertices) - visited

        if unreachable:
            logger.debug(
                "unreachable_vertices_found",
                count=len(unreachable),
                vertices=list(unreachable),
            )

        return unreachable

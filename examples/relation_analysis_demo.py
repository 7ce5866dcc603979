"""Demonstration of relation analysis and traversals with structured logging.

This example builds a few small graphs, inspects their relation properties
and logs the output of every traversal algorithm.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import get_config
from src.graph import Edge, GraphValidator, RelationGraph
from src.log_config import bind_correlation_id, clear_context, configure_from_config, get_logger


def analyse(name: str, graph: RelationGraph) -> None:
    """Log relation properties and traversal orders for one graph.

    Args:
        name: Label bound to every log entry for this graph
        graph: The graph to analyse
    """
    logger = get_logger(__name__)
    bind_correlation_id(name)

    logger.info(
        "relation_properties",
        reflexive=graph.is_reflexive(),
        symmetric=graph.is_symmetric(),
        transitive=graph.is_transitive(),
        anti_symmetric=graph.is_anti_symmetric(),
        equivalence=graph.is_equivalence(),
        roots=list(graph.get_roots()),
    )

    logger.info(
        "traversal_orders",
        bfs=graph.iterative_breadth_first_search(),
        recursive_bfs=graph.recursive_breadth_first_search(),
        dfs=graph.iterative_depth_first_search(),
        recursive_dfs=graph.recursive_depth_first_search(),
    )

    report = GraphValidator().validate(graph)
    logger.info("validation_result", is_valid=report.is_valid, warnings=report.warnings)

    clear_context()


def main() -> None:
    """Run the demonstration on a tree and an equivalence relation."""
    configure_from_config(get_config().logging)

    tree = RelationGraph(
        {1, 2, 3, 4, 5},
        {Edge(1, 2), Edge(1, 3), Edge(2, 4), Edge(3, 5)},
    )
    analyse("tree", tree)

    pairs = [(1, 1), (2, 2), (3, 3), (4, 4), (1, 2), (2, 1), (3, 4), (4, 3)]
    classes = RelationGraph({1, 2, 3, 4}, {Edge(a, b) for a, b in pairs})
    analyse("equivalence", classes)

    get_logger(__name__).info(
        "equivalence_classes",
        class_of_2=sorted(classes.get_equivalence_class(2)),
        class_of_4=sorted(classes.get_equivalence_class(4)),
    )


if __name__ == "__main__":
    main()

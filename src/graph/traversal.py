"""Breadth-first and depth-first traversals over an ordered adjacency index.

Each search family has a single step function that processes one queue or
stack pop. The iterative drivers call the step in a loop; the recursive
drivers call it once per frame until the container is empty. Both drivers
therefore produce identical output for the same graph.

Traversal contract:
    - roots are processed in the order given (ascending)
    - a vertex is emitted at most once per root component; membership in the
      ``found`` set gates every enqueue/push
    - neighbours are offered in ascending destination order
"""

import sys
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import TypeVar

import structlog

from src.containers import Queue, Stack
from src.graph.edge import Edge

logger = structlog.get_logger(__name__)

V = TypeVar("V")

AdjacencyIndex = Mapping[V, Sequence[Edge[V]]]


@contextmanager
def recursion_allowance(depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit to at least ``depth``.

    The previous limit is restored on exit. Not thread-safe: the limit is
    process-wide.
    """
    previous = sys.getrecursionlimit()
    if depth > previous:
        logger.debug("recursion_limit_raised", previous=previous, limit=depth)
        sys.setrecursionlimit(depth)
    try:
        yield
    finally:
        if sys.getrecursionlimit() != previous:
            sys.setrecursionlimit(previous)


def _breadth_first_step(
    queue: Queue[V],
    found: set[V],
    order: list[V],
    adjacency: AdjacencyIndex,
) -> None:
    current = queue.dequeue()
    found.add(current)
    order.append(current)

    for edge in adjacency[current]:
        if edge.destination not in found:
            found.add(edge.destination)
            queue.enqueue(edge.destination)


def _depth_first_step(
    stack: Stack[V],
    found: set[V],
    order: list[V],
    adjacency: AdjacencyIndex,
) -> None:
    current = stack.peek()
    found.add(current)
    edges = adjacency[current]
    order.append(stack.pop())

    if edges:
        # Push descending so the smallest destination is popped first.
        for edge in reversed(edges):
            if edge.destination not in found:
                stack.push(edge.destination)
                found.add(edge.destination)
    elif not stack.is_empty() and stack.peek() not in found:
        # Only a literally empty adjacency list takes this branch, never a
        # list whose neighbours are all found.
        order.append(stack.pop())


def _drain_iteratively(container: Queue[V] | Stack[V], step: Callable[[], None]) -> None:
    while not container.is_empty():
        step()


def _drain_recursively(container: Queue[V] | Stack[V], step: Callable[[], None]) -> None:
    if container.is_empty():
        return
    step()
    _drain_recursively(container, step)


def breadth_first_search(
    adjacency: AdjacencyIndex,
    roots: Sequence[V],
    recursive: bool = False,
    recursion_headroom: int = 1000,
) -> list[V]:
    """Breadth-first traversal from every root in order.

    Args:
        adjacency: Vertex -> outgoing edges sorted ascending by destination
        roots: Start vertices, ascending
        recursive: Drain the queue with one recursive call per dequeue
        recursion_headroom: Extra frames granted to the recursive driver

    Returns:
        Vertices in visitation order
    """
    found: set[V] = set()
    order: list[V] = []
    queue: Queue[V] = Queue()
    drain = _drain_recursively if recursive else _drain_iteratively

    with recursion_allowance(len(adjacency) + recursion_headroom if recursive else 0):
        for root in roots:
            queue.enqueue(root)
            found.add(root)
            drain(queue, lambda: _breadth_first_step(queue, found, order, adjacency))
            logger.debug("root_component_traversed", algorithm="bfs", root=root, visited=len(order))

    logger.debug(
        "traversal_completed",
        algorithm="bfs",
        recursive=recursive,
        root_count=len(roots),
        visited=len(order),
    )
    return order


def depth_first_search(
    adjacency: AdjacencyIndex,
    roots: Sequence[V],
    recursive: bool = False,
    recursion_headroom: int = 1000,
) -> list[V]:
    """Depth-first traversal from every root in order.

    A vertex is emitted when it is popped, before its unfound neighbours are
    explored, so output is pre-order with ascending sibling order.

    Args:
        adjacency: Vertex -> outgoing edges sorted ascending by destination
        roots: Start vertices, ascending
        recursive: Drain the stack with one recursive call per pop
        recursion_headroom: Extra frames granted to the recursive driver

    Returns:
        Vertices in visitation order
    """
    found: set[V] = set()
    order: list[V] = []
    stack: Stack[V] = Stack()
    drain = _drain_recursively if recursive else _drain_iteratively

    with recursion_allowance(len(adjacency) + recursion_headroom if recursive else 0):
        for root in roots:
            stack.push(root)
            found.add(root)
            drain(stack, lambda: _depth_first_step(stack, found, order, adjacency))
            logger.debug("root_component_traversed", algorithm="dfs", root=root, visited=len(order))

    logger.debug(
        "traversal_completed",
        algorithm="dfs",
        recursive=recursive,
        root_count=len(roots),
        visited=len(order),
    )
    return order

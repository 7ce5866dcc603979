"""Sequential, FIFO and LIFO containers used by the graph traversals.

These wrap Python's standard containers behind the small push/pop contract
the traversal algorithms rely on, failing loudly on empty collections.
"""

from src.containers.structures import EmptyCollectionError, Queue, SequentialList, Stack

__all__ = ["EmptyCollectionError", "Queue", "SequentialList", "Stack"]

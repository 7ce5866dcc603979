"""Queue, stack and positional list containers.

The queue is backed by collections.deque and the stack and list by the
builtin list, so push/pop/enqueue/dequeue are O(1) amortized. The graph
builds each adjacency entry in a SequentialList before freezing it into a
tuple; the traversals own one Queue or Stack per call.
"""

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class EmptyCollectionError(IndexError):
    """Exception raised when removing or peeking from an empty container."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the failed operation
        """
        super().__init__(message)
        self.message = message


class SequentialList(Generic[T]):
    """Ordered container with positional access and linear search.

    Example:
        >>> items = SequentialList([1, 3])
        >>> items.insert(1, 2)
        >>> items.get(1)
        2
        >>> items.index_of(3)
        2
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    def add(self, item: T) -> None:
        """Append an item to the end of the list."""
        self._items.append(item)

    def get(self, index: int) -> T:
        """Return the item at a position.

        Args:
            index: Zero-based position, 0 <= index < size

        Raises:
            IndexError: If the index is out of range
        """
        if index < 0 or index >= len(self._items):
            msg = f"Index {index} out of range for list of size {len(self._items)}"
            raise IndexError(msg)
        return self._items[index]

    def insert(self, index: int, item: T) -> None:
        """Insert an item so that it ends up at the given position.

        Args:
            index: Zero-based position, 0 <= index <= size
            item: Item to insert

        Raises:
            IndexError: If the index is out of range
        """
        if index < 0 or index > len(self._items):
            msg = f"Index {index} out of range for insertion into list of size {len(self._items)}"
            raise IndexError(msg)
        self._items.insert(index, item)

    def index_of(self, item: T) -> int:
        """Return the position of the first occurrence of an item, or -1."""
        for index, candidate in enumerate(self._items):
            if candidate == item:
                return index
        return -1

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"SequentialList({self._items!r})"


class Queue(Generic[T]):
    """First-in first-out queue.

    Example:
        >>> queue = Queue()
        >>> queue.enqueue("a")
        >>> queue.enqueue("b")
        >>> queue.dequeue()
        'a'
    """

    def __init__(self):
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add an item to the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front of the queue.

        Raises:
            EmptyCollectionError: If the queue is empty
        """
        if not self._items:
            msg = "Cannot dequeue from an empty queue"
            logger.debug("empty_queue_access", operation="dequeue")
            raise EmptyCollectionError(msg)
        return self._items.popleft()

    def peek(self) -> T:
        """Return the item at the front of the queue without removing it.

        Raises:
            EmptyCollectionError: If the queue is empty
        """
        if not self._items:
            msg = "Cannot peek an empty queue"
            logger.debug("empty_queue_access", operation="peek")
            raise EmptyCollectionError(msg)
        return self._items[0]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Stack(Generic[T]):
    """Last-in first-out stack.

    Example:
        >>> stack = Stack()
        >>> stack.push(1)
        >>> stack.push(2)
        >>> stack.pop()
        2
    """

    def __init__(self):
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyCollectionError: If the stack is empty
        """
        if not self._items:
            msg = "Cannot pop from an empty stack"
            logger.debug("empty_stack_access", operation="pop")
            raise EmptyCollectionError(msg)
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyCollectionError: If the stack is empty
        """
        if not self._items:
            msg = "Cannot peek an empty stack"
            logger.debug("empty_stack_access", operation="peek")
            raise EmptyCollectionError(msg)
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class EmptyQueueError(LookupError):
    """Raised when an item is requested from an empty queue."""


class Queue(Generic[T]):
    """FIFO queue of arbitrary items."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items.popleft()

    def peek(self) -> T:
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def consume(self, func: Callable[[T], Any]) -> None:
        """Remove every item in order, handing each to ``func``."""
        if not self._items:
            raise EmptyQueueError("queue is empty")
        while self._items:
            func(self._items.popleft())

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
"""A singly linked list used for ordered collections such as rankings."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class EmptyListError(LookupError):
    """Raised when an item is requested from an empty list."""


class LinkedList(Generic[T]):
    """Sequence with operations at its front and ordered insertion."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push_front(self, item: T) -> None:
        self._items.insert(0, item)

    def pop_front(self) -> T:
        if not self._items:
            raise EmptyListError("list is empty")
        return self._items.pop(0)

    def peek_front(self) -> T:
        if not self._items:
            raise EmptyListError("list is empty")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def insert_sorted_unique_desc(
        self,
        item: T,
        compare: Callable[[T, T], int],
        on_duplicate: Optional[Callable[[T, Any], Any]],
        param: Any = None,
    ) -> bool:
        """Insert ``item`` keeping descending order.

        ``compare(existing, item)`` returns a positive number while
        ``existing`` belongs before ``item``. If an equal element is found,
        ``on_duplicate(existing, param)`` is called instead and False is
        returned; otherwise the item is inserted and True is returned.
        """
        position = len(self._items)
        for index, existing in enumerate(self._items):
            result = compare(existing, item)
            if result > 0:
                continue
            if result == 0:
                if on_duplicate is not None:
                    on_duplicate(existing, param)
                return False
            position = index
            break
        self._items.insert(position, item)
        return True

    def map(self, action: Callable[[T, Any], Any], param: Any = None) -> None:
        """Call ``action(item, param)`` on every item, front to back."""
        if action is None or not callable(action):
            raise TypeError("action must be callable")
        for item in self._items:
            action(item, param)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
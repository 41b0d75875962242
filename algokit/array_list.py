"""A stack-like list backed by a growable array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_GROWTH = 10


class ArrayList(Generic[T]):
    """List whose head is the most recently inserted item.

    The backing capacity grows by ten slots whenever it runs out.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the head to the oldest item."""
        return reversed(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def head(self) -> T:
        """Return the most recently inserted item."""
        if not self._items:
            raise IndexError("head of an empty list")
        return self._items[-1]

    def insert_front(self, item: T) -> None:
        """Insert ``item`` as the new head, growing the capacity when full."""
        if len(self._items) >= self.capacity:
            self.capacity += _GROWTH
        self._items.append(item)

    def remove_front(self) -> T:
        """Remove and return the head."""
        if not self._items:
            raise IndexError("remove from an empty list")
        return self._items.pop()

    def remove(self, item: T) -> None:
        """Remove the occurrence of ``item`` nearest the head."""
        for index in range(len(self._items) - 1, -1, -1):
            if self._items[index] == item:
                del self._items[index]
                return
        raise ValueError(f"the element {item!r} is not in the list")
"""A sequence that keeps duplicates and supports sorted insertion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class OrderedBag:
    """An ordered collection allowing duplicates.

    ``insert_sorted`` places a value before the first element that is
    ``>=`` it, so the ordering used is whatever ``>=`` means for the elements.
    Equality (``==``) is used for counting, finding and removing.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"OrderedBag({self._items!r})"

    def __str__(self) -> str:
        return "".join(f"{item}\n" for item in self._items)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert value at position; position may equal the current length."""
        if not 0 <= position <= len(self._items):
            raise IndexError(f"Invalid position: {position}")
        self._items.insert(position, value)

    def remove_at(self, position: int) -> Any:
        """Remove and return the value at position."""
        if not self._items:
            raise IndexError("List is empty")
        if not 0 <= position < len(self._items):
            raise IndexError(f"Invalid position: {position}")
        return self._items.pop(position)

    def insert_sorted(self, value: Any) -> None:
        """Insert value before the first element that is >= it."""
        for index, existing in enumerate(self._items):
            if existing >= value:
                self._items.insert(index, value)
                return
        self._items.append(value)

    def count(self, value: Any) -> int:
        """Return how many elements equal value."""
        return sum(1 for item in self._items if item == value)

    def remove_all(self, value: Any) -> int:
        """Remove every element equal to value and return how many went."""
        before = len(self._items)
        self._items = [item for item in self._items if not item == value]
        return before - len(self._items)

    def find(self, value: Any) -> Any | None:
        """Return the first stored element equal to value, or None."""
        return next((item for item in self._items if item == value), None)

    def get(self, position: int) -> Any:
        """Return the element at position."""
        if not 0 <= position < len(self._items):
            raise IndexError(f"Invalid position: {position}")
        return self._items[position]
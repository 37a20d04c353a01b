"""Small container types used by the warehouse simulation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Stack:
    """A last-in, first-out stack of integer identifiers."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = list(items)

    def push(self, item: int) -> None:
        """Place ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Pilha vazia")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Pilha vazia")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def remove(self, item: int) -> bool:
        """Remove the occurrence of ``item`` closest to the top.

        Returns True if an item was removed, False if it was not present.
        """
        for index in range(len(self._items) - 1, -1, -1):
            if self._items[index] == item:
                del self._items[index]
                return True
        return False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def describe(self) -> str:
        """Return a one-line listing of the items, top first."""
        if not self._items:
            return "Pilha vazia!"
        return "Itens na pilha: " + " ".join(str(item) for item in self)
"""Min-heap of integer event keys."""

from __future__ import annotations

import heapq


class EventHeap:
    """A priority queue that always yields the smallest key first."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: list[int] = []

    def push(self, key: int) -> None:
        """Insert a non-negative key; raise ValueError for a negative one."""
        if key < 0:
            raise ValueError("Valor inválido no heap.")
        heapq.heappush(self._data, key)

    def pop(self) -> int:
        """Remove and return the smallest key; raise IndexError when empty."""
        if not self._data:
            raise IndexError("Heap está vazio")
        return heapq.heappop(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"EventHeap(size={len(self._data)})"
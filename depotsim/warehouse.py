"""Warehouses holding per-neighbour stacks of package identifiers."""

from __future__ import annotations

from depotsim.package import Package
from depotsim.structures import Stack


class Warehouse:
    """A warehouse with one storage section and one transport section per neighbour.

    Neighbours keep the order in which they were added; looking one up
    finds its first occurrence.
    """

    __slots__ = ("id", "_neighbors", "_sections", "_transport")

    def __init__(self, warehouse_id: int = 0) -> None:
        self.id = warehouse_id
        self._neighbors: list[int] = []
        self._sections: list[Stack] = []
        self._transport: list[Stack] = []

    @property
    def neighbors(self) -> tuple[int, ...]:
        """Neighbour identifiers in the order they were added."""
        return tuple(self._neighbors)

    def __repr__(self) -> str:
        return f"Warehouse(id={self.id}, neighbors={self._neighbors!r})"

    def _index(self, neighbor_id: int, where: str) -> int:
        try:
            return self._neighbors.index(neighbor_id)
        except ValueError:
            raise ValueError(f"Vizinho não encontrado em {where}.") from None

    def add_neighbor(self, neighbor_id: int) -> None:
        """Add a neighbour with empty storage and transport sections."""
        self._neighbors.append(neighbor_id)
        self._sections.append(Stack())
        self._transport.append(Stack())

    def section(self, neighbor_id: int) -> Stack:
        """Storage stack for packages bound for ``neighbor_id``."""
        return self._sections[self._index(neighbor_id, "getSecaoDestino")]

    def transport_section(self, neighbor_id: int) -> Stack:
        """Stack of packages in transit towards ``neighbor_id``."""
        return self._transport[self._index(neighbor_id, "getSecaoDestinoTransporte")]

    def store(self, package: Package) -> None:
        """Store ``package`` in the section for its next warehouse."""
        self.section(package.next_warehouse()).push(package.id)

    def store_in_transport(self, package: Package, neighbor_id: int) -> None:
        """Put ``package`` in the transport section towards ``neighbor_id``."""
        self.transport_section(neighbor_id).push(package.id)

    def remove_package(self, neighbor_id: int, package_id: int) -> bool:
        """Remove ``package_id`` from a storage section; return whether it was there."""
        return self.section(neighbor_id).remove(package_id)

    def has_packages(self, neighbor_id: int) -> bool:
        return bool(self.section(neighbor_id))

    def package_count(self, neighbor_id: int) -> int:
        return len(self.section(neighbor_id))

    def clear_section(self, neighbor_id: int) -> None:
        self.section(neighbor_id).clear()

    def is_empty(self) -> bool:
        """True when every storage and transport section is empty."""
        return not any(self._sections) and not any(self._transport)

    def describe_neighbors(self) -> str:
        """One line listing the neighbour identifiers."""
        header = f"Vizinhos do Armazem {self.id}: "
        if not self._neighbors:
            return header + "Nenhum vizinho encontrado."
        return header + " ".join(str(n) for n in self._neighbors)

    def describe_section(self, neighbor_id: int) -> str:
        """Listing of the storage section for ``neighbor_id``."""
        stack = self.section(neighbor_id)
        return f"imprimindo pilha para o vizinho:{neighbor_id}\n{stack.describe()}"
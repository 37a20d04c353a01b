"""Packages moving between warehouses along a precomputed route."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Package:
    """A package posted at ``origin`` at ``posting_time`` bound for ``destination``.

    ``route`` holds the warehouses still to be visited, the current one first.
    ``posted`` becomes True once the package has been stored at its origin.
    """

    posting_time: int = -1
    id: int = -1
    origin: int = -1
    destination: int = -1
    route: list[int] = field(default_factory=list)
    posted: bool = False

    def set_route(self, route: Iterable[int]) -> None:
        """Replace the route with a copy of ``route``."""
        self.route = list(route)

    def current_warehouse(self) -> int:
        """The warehouse the package is at; raise RuntimeError if the route is empty."""
        if not self.route:
            raise RuntimeError("Pacote sem próximo armazém: rota vazia.")
        return self.route[0]

    def next_warehouse(self) -> int:
        """The warehouse after the current one; raise RuntimeError if there is none."""
        if len(self.route) < 2:
            raise RuntimeError("Pacote sem próximo armazém: rota vazia.")
        return self.route[1]

    def advance(self) -> None:
        """Drop the current warehouse from the route, if any remains."""
        if self.route:
            del self.route[0]

    def arrived(self) -> bool:
        """True once the route has been used up."""
        return not self.route

    def describe(self) -> str:
        """A multi-line summary of the package and its route."""
        if self.route:
            route_text = " ".join(str(stop) for stop in self.route)
        else:
            route_text = "Nenhum armazém na rota."
        return "\n".join(
            [
                f"Pacote ID: {self.id}",
                f"Origem: Armazém {self.origin}",
                f"Destino: Armazém {self.destination}",
                f"Tempo de Chegada: {self.posting_time}",
                f"Rota do Pacote: {route_text}",
            ]
        )
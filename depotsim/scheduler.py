"""Discrete-event scheduler moving packages between warehouses."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from enum import Enum

from depotsim.heap import EventHeap
from depotsim.package import Package
from depotsim.structures import Stack
from depotsim.warehouse import Warehouse

_TIME_FACTOR = 10_000_000
_ORIGIN_FACTOR = 10_000
_ID_FACTOR = 10
_ARRIVAL_TAG = 1
_TRANSPORT_TAG = 2


class Action(str, Enum):
    """Kinds of event written to the simulation log."""

    STORED = "armazenado em"
    REMOVED = "removido de"
    IN_TRANSIT = "em transito de"
    RESTORED = "rearmazenado"
    DELIVERED = "entregue em"


def format_event(time: int, package_id: int, action: Action | str, origin: int, destination: int) -> str:
    """Render one log line; raise ValueError for an unknown action."""
    action = Action(action)
    line = f"{time:07d} pacote {package_id:03d} {action.value}"
    if action in (Action.STORED, Action.REMOVED, Action.DELIVERED):
        line += f" {origin:03d}"
        if action is not Action.DELIVERED:
            line += f" na secao {destination:03d}"
    elif action is Action.IN_TRANSIT:
        line += f" {origin:03d} para {destination:03d}"
    else:
        line += f" em {origin:03d} na secao {destination:03d}"
    return line


class Scheduler:
    """Runs the event loop over copies of the given packages and warehouses.

    Events are integer keys in a min-heap: the time in the high digits, then
    the package id (arrivals, tag 1) or origin and neighbour ids
    (transports, tag 2).
    """

    def __init__(
        self,
        capacity: int,
        latency: int,
        interval: int,
        removal_cost: int,
        packages: Iterable[Package],
        warehouses: Iterable[Warehouse],
        on_event: Callable[[str], None] | None = None,
    ) -> None:
        self.capacity = capacity
        self.latency = latency
        self.interval = interval
        self.removal_cost = removal_cost
        self.packages: list[Package] = copy.deepcopy(list(packages))
        self.warehouses: list[Warehouse] = copy.deepcopy(list(warehouses))
        self.events = EventHeap()
        self._on_event = on_event
        self._lines: list[str] = []

    def _emit(self, time: int, package_id: int, action: Action, origin: int, destination: int) -> None:
        line = format_event(time, package_id, action, origin, destination)
        self._lines.append(line)
        if self._on_event is not None:
            self._on_event(line)

    def sections_empty(self) -> bool:
        """True when no warehouse holds any package."""
        return all(warehouse.is_empty() for warehouse in self.warehouses)

    def schedule_arrival(self, time: int, package_id: int) -> None:
        """Queue the arrival of ``package_id`` at ``time``."""
        self.events.push(time * _TIME_FACTOR + package_id * _ID_FACTOR + _ARRIVAL_TAG)

    def schedule_transport(self, time: int, origin: int, neighbor_index: int, start_time: int) -> None:
        """Queue a transport from warehouse ``origin`` to its neighbour at ``neighbor_index``.

        The time is aligned down to a multiple of the interval and shifted
        by ``start_time``.
        """
        warehouse = self.warehouses[origin]
        neighbor = warehouse.neighbors[neighbor_index]
        aligned = (time // self.interval) * self.interval + start_time
        self.events.push(
            aligned * _TIME_FACTOR
            + warehouse.id * _ORIGIN_FACTOR
            + neighbor * _ID_FACTOR
            + _TRANSPORT_TAG
        )

    def neighbor_index(self, origin: int, destination: int) -> int:
        """Position of ``destination`` among the neighbours of ``origin``."""
        try:
            return self.warehouses[origin].neighbors.index(destination)
        except ValueError:
            raise ValueError("Vizinho não encontrado em getIdArmazemDestino.") from None

    def run(self, start_time: int) -> list[str]:
        """Process events until every section is empty; return the log lines."""
        self._lines = []
        for origin, warehouse in enumerate(self.warehouses):
            for index, _ in enumerate(warehouse.neighbors):
                self.schedule_transport(start_time + self.interval, origin, index, start_time)
        for package in self.packages:
            self.schedule_arrival(package.posting_time, package.id)

        while True:
            key = self.events.pop()
            now, rest = divmod(key, _TIME_FACTOR)
            if key % 2 == 0:
                self._transport(now, rest, start_time)
            else:
                self._arrival(now, rest // _ID_FACTOR)
            if self.sections_empty():
                break
        return self._lines

    def _transport(self, now: int, rest: int, start_time: int) -> None:
        origin = rest // _ORIGIN_FACTOR
        destination = (rest % _ORIGIN_FACTOR) // _ID_FACTOR
        warehouse = self.warehouses[origin]
        section = warehouse.section(destination)
        if section:
            held = Stack()
            for _ in range(len(section)):
                now += self.removal_cost
                package_id = section.pop()
                held.push(package_id)
                self._emit(now, package_id, Action.REMOVED, origin, destination)
            transit = warehouse.transport_section(destination)
            for _ in range(self.capacity):
                if not held:
                    break
                package_id = held.pop()
                transit.push(package_id)
                self._emit(now, package_id, Action.IN_TRANSIT, origin, destination)
                self.schedule_arrival(now + self.latency, package_id)
            while held:
                package_id = held.pop()
                section.push(package_id)
                self._emit(now, package_id, Action.RESTORED, origin, destination)
        self.schedule_transport(
            now + self.interval, origin, self.neighbor_index(origin, destination), start_time
        )

    def _unload(self, package: Package) -> None:
        transit = self.warehouses[package.current_warehouse()].transport_section(
            package.next_warehouse()
        )
        # Both bounds are re-read on every step, so only part of the stack is
        # lifted and only part of what was lifted goes back; the event log
        # depends on this exact behaviour.
        held = Stack()
        lifted = 0
        while transit and lifted < len(transit) - 1:
            held.push(transit.pop())
            lifted += 1
        transit.pop()
        restored = 0
        while restored < len(held):
            transit.push(held.pop())
            restored += 1

    def _arrival(self, now: int, package_id: int) -> None:
        package = self.packages[package_id]
        if package.next_warehouse() == package.destination and package.posted:
            self._unload(package)
            self._emit(now, package_id, Action.DELIVERED, package.destination, package.destination)
            package.advance()
        elif not package.posted:
            target = package.next_warehouse()
            self.warehouses[package.current_warehouse()].section(target).push(package.id)
            self._emit(now, package.id, Action.STORED, package.origin, target)
            package.posted = True
        else:
            self._unload(package)
            package.advance()
            current = package.current_warehouse()
            target = package.next_warehouse()
            self.warehouses[current].section(target).push(package.id)
            self._emit(now, package_id, Action.STORED, current, target)
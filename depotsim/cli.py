"""Reading workload files and running the simulation from the command line."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from depotsim.graph import Graph
from depotsim.package import Package
from depotsim.scheduler import Scheduler
from depotsim.warehouse import Warehouse

_NO_POSTING = 999999


@dataclass
class Workload:
    """Transport parameters, the warehouse adjacency matrix and the postings.

    Each posting is ``(time, origin, destination)``; a package's id is its
    position in the list.
    """

    capacity: int
    latency: int
    interval: int
    removal_cost: int
    adjacency: list[list[int]] = field(default_factory=list)
    postings: list[tuple[int, int, int]] = field(default_factory=list)


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of workload while reading {what}") from None


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = _next_token(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer for {what}, got {token!r}") from None


def parse_workload(text: str) -> Workload:
    """Parse the whitespace-separated workload format; raise ValueError if malformed."""
    tokens = iter(text.split())
    capacity = _next_int(tokens, "transport capacity")
    latency = _next_int(tokens, "transport latency")
    interval = _next_int(tokens, "transport interval")
    removal_cost = _next_int(tokens, "removal cost")
    count = _next_int(tokens, "warehouse count")
    adjacency = [
        [_next_int(tokens, f"edge {row}-{column}") for column in range(count)]
        for row in range(count)
    ]
    package_count = _next_int(tokens, "package count")
    postings = []
    for index in range(package_count):
        time = _next_int(tokens, f"posting time of package {index}")
        _next_token(tokens, "package label")
        _next_int(tokens, f"id of package {index}")
        _next_token(tokens, "origin label")
        origin = _next_int(tokens, f"origin of package {index}")
        _next_token(tokens, "destination label")
        destination = _next_int(tokens, f"destination of package {index}")
        postings.append((time, origin, destination))
    return Workload(capacity, latency, interval, removal_cost, adjacency, postings)


def load_workload(path: str | Path) -> Workload:
    """Read and parse a workload file."""
    return parse_workload(Path(path).read_text())


def _build(workload: Workload, on_event: Callable[[str], None] | None = None) -> tuple[Scheduler, int]:
    graph = Graph()
    warehouses = []
    for index, _ in enumerate(workload.adjacency):
        graph.add_vertex()
        warehouses.append(Warehouse(index))
    for origin, row in enumerate(workload.adjacency):
        for target, flag in enumerate(row):
            if flag == 1:
                graph.add_edge(origin, target)
                warehouses[origin].add_neighbor(target)

    packages = []
    for index, (time, origin, destination) in enumerate(workload.postings):
        package = Package(time, index, origin, destination)
        package.set_route(graph.shortest_path(origin, destination))
        packages.append(package)

    start_time = min([_NO_POSTING, *(package.posting_time for package in packages)])
    scheduler = Scheduler(
        workload.capacity,
        workload.latency,
        workload.interval,
        workload.removal_cost,
        packages,
        warehouses,
        on_event=on_event,
    )
    return scheduler, start_time


def simulate(workload: Workload) -> list[str]:
    """Run the simulation for ``workload`` and return the event log."""
    scheduler, start_time = _build(workload)
    return scheduler.run(start_time)


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate the workload file named by the first argument, printing events."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Uso: depotsim <nome_do_arquivo.wkl>", file=sys.stderr)
        return 1
    try:
        workload = load_workload(args[0])
    except OSError:
        print(f"Erro ao abrir o arquivo!{args[0]}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Arquivo inválido {args[0]}: {exc}", file=sys.stderr)
        return 1
    scheduler, start_time = _build(workload, on_event=print)
    scheduler.run(start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
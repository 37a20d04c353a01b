# depotsim

A discrete-event simulator for packages that travel through a network of
warehouses. Each warehouse has one storage section and one transport section
for every neighbouring warehouse. Both kinds of section are stacks. Transports
leave at fixed intervals, carry a limited number of packages, and take a fixed
time to arrive. Each event in a run becomes one line of the log.

## Installation

```
pip install .
```

## Running a simulation

```
depotsim workload.wkl
```

The command prints the event log to standard output. It exits with status 1
and prints a message to standard error in three cases: no file is given, the
file cannot be opened, or the file is malformed.

### Workload format

A workload file is a list of integers and labels separated by whitespace:

1. the transport capacity, the transport latency, the interval between
   transports, and the cost of removing one package from a section;
2. the number of warehouses `n`, followed by an `n × n` adjacency matrix.
   A `1` in row `i`, column `j` makes `j` a neighbour of `i`;
3. the number of packages, then one entry per package:

```
<time> pac <id> org <origin> dst <destination>
```

The `<id>` field is read and then ignored. A package's id is its position in
the list. Each package follows a route with the fewest hops, which is found by
breadth-first search over the adjacency matrix.

### Example

```
2 20 100 1
2
0 1
1 0
1
10 pac 0 org 0 dst 1
```

produces:

```
0000010 pacote 000 armazenado em 000 na secao 001
0000111 pacote 000 removido de 000 na secao 001
0000111 pacote 000 em transito de 000 para 001
0000131 pacote 000 entregue em 001
```

The first transports leave one interval after the earliest posting time. Later
departure times are aligned down to a multiple of the interval and then offset
by that earliest posting time. The run stops once every section of every
warehouse is empty.

## Using the library

```python
from depotsim.cli import load_workload, parse_workload, simulate

workload = load_workload("workload.wkl")   # or parse_workload(text)
for line in simulate(workload):
    print(line)
```

`Workload` is a dataclass with the following fields:

- `capacity`, `latency`, `interval` and `removal_cost`;
- `adjacency`, a list of rows;
- `postings`, a list of `(time, origin, destination)` tuples.

You can also use the building blocks on their own:

- `depotsim.graph.Graph`: an adjacency-list graph. It provides `add_vertex`,
  `add_edge`, `vertex_count`, `edge_count`, `min_degree`, `max_degree`,
  `neighbors`, `describe` and `shortest_path`.
- `depotsim.heap.EventHeap`: a min-heap of non-negative integer keys with
  `push` and `pop`.
- `depotsim.structures.Stack`: a stack of integers. It provides `push`, `pop`,
  `peek`, `clear`, `remove` and `describe`. Iterating over it goes from the
  top to the bottom.
- `depotsim.package.Package`: a dataclass holding a package's route, with
  `set_route`, `current_warehouse`, `next_warehouse`, `advance`, `arrived` and
  `describe`.
- `depotsim.warehouse.Warehouse`: per-neighbour storage and transport
  sections.
- `depotsim.scheduler.Scheduler`: the event loop. `run(start_time)` returns
  the log lines. Pass an `on_event` callback to receive each line as it is
  produced. `format_event` renders a single line for an `Action`.

## Tests

```
pip install .[test]
pytest
```
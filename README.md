# grafo

A small graph library built on adjacency lists. A graph can be directed or
undirected, and weighted or unweighted. The library reads edge-list files in
the `.edges` format: one `u v` pair of integer ids per line. Lines that start
with `#` or `%` are comments. The library also reports degree statistics and
the average shortest path.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
grafo [PATH]
```

The command loads `PATH` as an undirected, unweighted graph. When no path is
given, it loads `ia-movielens-user2tags-10m.edges` from the current
directory. It prints a message before the load and another after the load
succeeds. If the file cannot be opened, it prints an error to standard error
and exits with status 1.

## Library use

```python
from grafo.graph import Graph

g = Graph(capacity=100, directed=False, weighted=False)
a = g.add_vertex("a")       # returns the new vertex index, 0
b = g.add_vertex("b")
c = g.add_vertex("c")
g.add_edge(a, b, 1.0)       # True; False if the edge already exists
g.add_edge(b, c, 1.0)

g.degree(b)                 # 2
g.average_degree()          # mean degree over all vertices
g.max_degree()              # (degree, vertex) of the first vertex with the highest degree
g.edge_count()              # 2; undirected edges are counted once
g.label(c)                  # "c"
list(g.neighbors(b))        # Edge(target, weight) items, newest first
g.remove_edge(a, b)         # True; False if the edge was absent
distances, predecessors = g.dijkstra(a)
g.average_shortest_path()   # mean over ordered pairs of distinct, reachable vertices
len(g)                      # number of vertices
```

In an undirected graph, `add_edge` and `remove_edge` act on both directions.
Edge weights count in shortest paths only when the graph is weighted. In an
unweighted graph, every edge has length 1. In the result of `dijkstra`, an
unreachable vertex has distance `math.inf` and predecessor `None`.
`average_shortest_path` returns `0.0` when no pair of vertices is connected.

A graph's capacity grows by half each time it fills. There is no hard limit
on the number of vertices.

### Loading an edge list

```python
g = Graph(100, False, False)
added = g.load_edges("network.edges")   # number of edges added
```

Each distinct external id becomes one vertex, labelled with the id as text.
Edges are added with weight 1. Duplicate edges are skipped. Lines that do not
start with two integers are ignored.

### Errors

`grafo.graph.GraphError` is raised for a vertex index that does not exist. It
is also raised when `average_degree`, `max_degree` or
`average_shortest_path` is called on an empty graph. A negative capacity
raises `ValueError`. A file that cannot be opened raises the usual `OSError`
from `open`.

### Priority queue

`grafo.priority_queue.PriorityQueue` is the binary min-heap that the
shortest-path code uses:

- `push(vertex, distance)` adds an entry.
- `pop()` returns the `QueueItem` with the smallest distance, or raises
  `IndexError` when the queue is empty.
- An optional capacity makes `push` raise `OverflowError` once the queue is
  full.

## What it does not do

The package has no assortativity measure and no way to delete a graph's
vertices. The command only loads a file and reports whether the load worked.
It prints no statistics about the graph.
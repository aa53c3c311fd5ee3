"""Command that loads an edge-list file into an undirected, unweighted graph."""

from __future__ import annotations

import argparse
import sys

from grafo.graph import Graph

DEFAULT_EDGES = "ia-movielens-user2tags-10m.edges"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load a graph from an edge-list file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_EDGES, help="edge-list file")
    args = parser.parse_args(argv)

    graph = Graph(100, directed=False, weighted=False)
    print(f"Loading graph from file {args.path}...")
    try:
        graph.load_edges(args.path)
    except OSError as error:
        print(f"Error opening the graph file: {error}", file=sys.stderr)
        print("Error loading the graph from the file.", file=sys.stderr)
        return 1
    print("Graph loaded successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
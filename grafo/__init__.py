"""Adjacency-list graphs with edge-list loading, degree statistics and shortest paths."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "priority_queue"]
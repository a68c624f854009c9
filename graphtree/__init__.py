"""A B-tree, a union-find set, and matrix and adjacency-list graphs with
spanning-tree, shortest-path and traversal algorithms."""

__version__ = "0.1.0"
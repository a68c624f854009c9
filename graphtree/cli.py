"""Command-line demonstrations of the graph algorithms."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from .adjacency_graph import AdjacencyGraph
from .matrix_graph import MatrixGraph, NegativeCycleError, NotConnectedError


def _print_path(path: Sequence[object]) -> None:
    print("->".join(f"[{v}]" for v in path))


def _demo_graph() -> None:
    g = MatrixGraph("0123")
    g.set_edge("0", "1", 1)
    g.set_edge("0", "3", 4)
    g.set_edge("1", "3", 2)
    g.set_edge("1", "2", 9)
    g.set_edge("2", "3", 8)
    g.set_edge("2", "1", 5)
    g.set_edge("2", "0", 3)
    g.set_edge("3", "2", 6)
    print(g.render(), end="")


def _demo_min_tree() -> None:
    g = MatrixGraph("abcdefghi")
    for x, y, w in [
        ("a", "b", 4), ("a", "h", 8), ("b", "c", 8), ("b", "h", 11),
        ("c", "i", 2), ("c", "f", 4), ("c", "d", 7), ("d", "f", 14),
        ("d", "e", 9), ("e", "f", 10), ("f", "g", 2), ("g", "h", 1),
        ("g", "i", 6), ("h", "i", 7),
    ]:
        g.set_edge(x, y, w)
    for name, build in (("Kruskal", g.kruskal), ("Prim", lambda: g.prim("a"))):
        print(f"{name}:")
        try:
            print(build().render(), end="")
        except NotConnectedError as exc:
            print(exc)


def _demo_dijkstra() -> None:
    g = MatrixGraph("syztx", directed=True)
    for x, y, w in [
        ("s", "t", 10), ("s", "y", 5), ("y", "t", 3), ("y", "x", 9),
        ("y", "z", 2), ("z", "s", 7), ("z", "x", 6), ("t", "y", 2),
        ("t", "x", 1), ("x", "z", 4),
    ]:
        g.set_edge(x, y, w)
    _print_path(g.dijkstra("s", "x"))


def _demo_bellman_ford() -> None:
    g = MatrixGraph("syztx", directed=True)
    for x, y, w in [
        ("s", "t", 6), ("s", "y", 7), ("y", "z", 9), ("y", "x", -3),
        ("y", "s", 1), ("z", "s", 2), ("z", "x", 7), ("t", "x", 5),
        ("t", "y", -8), ("t", "z", -4), ("x", "t", -2),
    ]:
        g.set_edge(x, y, w)
    try:
        path = g.bellman_ford("s", "x")
    except NegativeCycleError:
        print("negative-weight cycle: no solution")
        path = []
    else:
        print("no negative-weight cycle: result is valid")
    _print_path(path)


def _demo_floyd_warshall() -> None:
    g = MatrixGraph("12345", directed=True)
    for x, y, w in [
        ("1", "2", 3), ("1", "3", 8), ("1", "5", -4), ("2", "4", 1),
        ("2", "5", 7), ("3", "2", 4), ("4", "1", 2), ("4", "3", -5),
        ("5", "4", 6),
    ]:
        g.set_edge(x, y, w)
    for path in g.floyd_warshall().values():
        _print_path(path)


def _demo_table() -> None:
    g = AdjacencyGraph(["张三", "李四", "王五", "赵六"])
    g.set_edge("张三", "李四", 100)
    g.set_edge("张三", "王五", 200)
    g.set_edge("王五", "赵六", 30)
    print(g.render(), end="")


_DEMOS: dict[str, Callable[[], None]] = {
    "graph": _demo_graph,
    "min-tree": _demo_min_tree,
    "dijkstra": _demo_dijkstra,
    "bellman-ford": _demo_bellman_ford,
    "floyd-warshall": _demo_floyd_warshall,
    "table": _demo_table,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the graph demonstrations (Floyd-Warshall by default)."""
    parser = argparse.ArgumentParser(description="Graph algorithm demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="floyd-warshall",
        choices=sorted(_DEMOS),
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    _DEMOS[args.demo]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
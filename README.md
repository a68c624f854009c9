# graphtree

Classic data structures and graph algorithms in plain Python, with no
third-party dependencies.

- `graphtree.btree`: `BTree` and `BTreeNode`. This is a B-tree of unique keys
  kept in sorted order.
- `graphtree.disjoint_set`: `UnionFindSet`. This is a union-find set over the
  integers `0..n-1`, with union by size and path compression.
- `graphtree.matrix_graph`: `MatrixGraph`. This is a weighted graph stored as
  an adjacency matrix, with the exceptions `NegativeCycleError` and
  `NotConnectedError` and the `Edge` record.
- `graphtree.adjacency_graph`: `AdjacencyGraph`. This is a weighted graph
  stored as adjacency lists.
- `graphtree.cli`: demonstrations that you can run from the command line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## B-tree

```python
from graphtree.btree import BTree

tree = BTree()          # order 3; BTree(order) takes any order >= 3
for key in (50, 20, 80, 10, 30):
    tree.insert(key)    # True for a new key

tree.insert(30)         # False: duplicate keys are refused
30 in tree              # True
len(tree)               # 5
list(tree)              # [10, 20, 30, 50, 80]
tree.inorder()          # the same list
```

A node splits as soon as it holds `order` keys. Its middle key then moves up
to the parent, and a new root is created when the split reaches the top.
`BTree(order)` raises `ValueError` if `order` is less than 3.

`tree.find(key)` returns a pair:

- `(node, index)` when the key is present.
- `(leaf, None)` when it is not. The leaf is the node the key would be
  inserted into.

`BTreeNode.search(target)` returns `(found, index)`:

- If the key is in the node, `index` is its position.
- Otherwise `index` is where the key would be inserted.

## Union-find

```python
from graphtree.disjoint_set import UnionFindSet

sets = UnionFindSet(5)
sets.union(0, 1)           # True
sets.union(1, 0)           # False: already in one set
sets.union(3, 4)
sets.is_in_same_set(0, 1)  # True
sets.find_root(1)          # the root of 1's set
sets.set_count()           # 3
sets.set_size(3)           # 2
```

An element outside `0..n-1` raises `IndexError`. A negative size raises
`ValueError`.

## Matrix graph

```python
from graphtree.matrix_graph import MatrixGraph

g = MatrixGraph("syztx", directed=True)   # undirected by default
g.set_edge("s", "t", 10)
g.set_edge("s", "y", 5)
g.set_edge("y", "t", 3)
g.set_edge("t", "x", 1)

g.weight("s", "t")       # 10; None when there is no edge
list(g.edges())          # Edge(src, dst, weight) records
g.dijkstra("s", "x")     # ['s', 'y', 't', 'x']
g.bfs("s")               # vertices reachable from s, breadth-first
g.dfs("s")               # vertices reachable from s, depth-first
print(g.render())        # vertex legend and weight matrix, '#' for no edge
```

### Editing the graph

- Vertices are fixed when the graph is built. Duplicate vertices raise
  `ValueError`.
- An unknown vertex raises `KeyError`.
- `set_edge(x, y, None)` removes an edge.
- In an undirected graph each edge is set both ways. `edges()` yields each
  undirected edge once.

### Algorithms

- `kruskal()` returns a new graph holding a minimum spanning tree.
- `prim(start)` does the same, growing the tree from `start`.
- Both raise `NotConnectedError` when no spanning tree exists.
- `dijkstra(start, end)` returns the list of vertices along a shortest path.
  Weights must be non-negative.
- `bellman_ford(start, end)` does the same and allows negative weights. It
  raises `NegativeCycleError` if a negative cycle is reachable from `start`.
- `floyd_warshall()` returns a dict that maps each pair `(u, v)` of distinct
  vertices to its shortest path, where `v` is reachable from `u`. It raises
  `NegativeCycleError` if the graph has a negative cycle.
- The path methods raise `NotConnectedError` when `end` cannot be reached.

`bellman_ford` and `floyd_warshall` report their intermediate steps at `DEBUG`
level on the `graphtree.matrix_graph` logger.

## Adjacency-list graph

```python
from graphtree.adjacency_graph import AdjacencyGraph

g = AdjacencyGraph(["A", "B", "C"])      # directed=False by default
g.set_edge("A", "B", 100)
g.set_edge("A", "C", 200)
g.neighbours("A")    # [('C', 200), ('B', 100)]: newest edge first
print(g.render())    # A -> (C, 200) (B, 100)  ...
```

`vertex_index`, `vertices`, `len()` and `in` behave as in `MatrixGraph`.
Adding the same edge twice records it twice.

## Command line

```
graphtree-btree
```

This builds order-3 B-trees from several sample key sequences and prints
each tree's keys in ascending order.

```
graphtree [graph | min-tree | dijkstra | bellman-ford | floyd-warshall | table]
```

This runs one graph demonstration on built-in sample data. The default is
`floyd-warshall`.

| Demonstration | What it prints |
| --- | --- |
| `graph` | A rendered matrix graph. |
| `min-tree` | The Kruskal and Prim spanning trees. |
| `dijkstra` | A shortest path. |
| `bellman-ford` | Whether the sample graph has a negative cycle. In the sample graph it does, so the printed path is empty. |
| `floyd-warshall` | Every all-pairs shortest path. |
| `table` | A rendered adjacency-list graph. |

## What it does not do

- The B-tree supports insertion and lookup only. There is no deletion.
- Graphs are built in code. Nothing reads graphs from files or standard input.
- Nothing here saves any structure to disk.
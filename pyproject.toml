[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphtree"
version = "0.1.0"
description = "A B-tree, a union-find set and weighted graphs with spanning-tree, shortest-path and traversal algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "b-tree",
    "graph",
    "union-find",
    "disjoint-set",
    "kruskal",
    "prim",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "bfs",
    "dfs",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphtree = "graphtree.cli:main"
graphtree-btree = "graphtree.btree:main"

[tool.hatch.build.targets.wheel]
packages = ["graphtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

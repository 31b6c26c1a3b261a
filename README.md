# gridgraph

Small search routines for undirected graphs and for rectangular grids. They
need nothing outside the standard library. The algorithms are breadth-first
and depth-first search.

## Installation

```
pip install .
```

## Graphs: `gridgraph.components`

Vertices are the integers `0 .. n-1`. Edges are pairs of vertex numbers, and
the graph is undirected. A vertex count below zero, or an edge that names a
vertex outside the range, raises `ValueError`.

```python
from gridgraph.components import (
    count_components,
    count_provinces,
    has_cycle_bfs,
    has_cycle_dfs,
)

count_components(5, [[0, 1], [1, 2], [3, 4]])        # 2
count_provinces([[1, 1, 0], [1, 1, 0], [0, 0, 1]])   # 2
has_cycle_bfs(3, [[0, 1], [1, 2], [2, 0]])           # True
has_cycle_dfs(3, [[0, 1], [1, 2]])                   # False
```

- `count_components(n, edges)` gives the number of connected components.
- `count_provinces(is_connected)` takes a square adjacency matrix. It reads
  only the upper triangle and the diagonal, where an entry equal to `1` joins
  two vertices. A matrix that is not square raises `ValueError`.
- `has_cycle_bfs(vertex_count, edges)` and `has_cycle_dfs(vertex_count, edges)`
  report whether the graph has a cycle. The first uses breadth-first search
  and the second uses depth-first search. The depth-first version keeps an
  explicit stack, so deep graphs do not hit Python's recursion limit.

## Grids: `gridgraph.grid`

A grid is a sequence of rows. Two cells are neighbours when they share a side,
so a cell has at most four neighbours. None of these functions changes the
grid it is given. The functions that return a grid return a new one.

```python
from gridgraph.grid import (
    flood_fill,
    oranges_rotting,
    nearest_zero_distances,
    capture_surrounded,
    count_enclaves,
    count_distinct_islands,
)

flood_fill([[1, 1, 1], [1, 1, 0], [1, 0, 1]], 1, 1, 2)
# [[2, 2, 2], [2, 2, 0], [2, 0, 1]]

oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]])   # 4

nearest_zero_distances([[0, 0, 0], [0, 1, 0], [1, 1, 1]])
# [[0, 0, 0], [0, 1, 0], [1, 2, 1]]

capture_surrounded([list("XXXX"), list("XOOX"), list("XXOX"), list("XOXX")])
# [['X','X','X','X'], ['X','X','X','X'], ['X','X','X','X'], ['X','O','X','X']]

count_enclaves([[0, 0, 0, 0], [1, 0, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]])  # 3

count_distinct_islands(
    [[1, 1, 0, 1, 1], [1, 0, 0, 0, 0], [0, 0, 0, 0, 1], [1, 1, 0, 1, 1]]
)  # 3
```

- `flood_fill(image, sr, sc, color)` repaints the region of equal colour that
  contains `(sr, sc)`. If the start cell lies outside the image, it raises
  `IndexError`.
- `oranges_rotting(grid)` takes a grid of `0` (empty), `1` (fresh) and
  `2` (rotten). It returns how many minutes pass until no fresh orange is
  left. It returns `-1` if some fresh orange can never rot.
- `nearest_zero_distances(mat)` gives each cell's distance in steps to the
  nearest `0`. A cell that no `0` can reach gets `-1`.
- `capture_surrounded(board)` takes a board of `"X"` and `"O"` cells. It
  returns a board in which `"O"` regions that do not reach the border are
  turned into `"X"`.
- `count_enclaves(grid)` counts the land cells (non-zero) from which the
  border cannot be reached.
- `count_distinct_islands(grid)` counts the islands of `1`s that have
  different shapes. Two islands count as the same shape when one can be
  shifted onto the other.

## What it does not do

This is a library only. It has no command-line program, and it does not read
graphs or grids from files. You build the lists in Python and pass them in.

## Running the tests

```
pip install ".[test]"
pytest
```
# dsakit

Classic data-structure and algorithm routines written as plain Python functions. It covers binary trees, graphs, binary grids, reversal, sorting and text patterns. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

### `dsakit.tree`

- `TreeNode(data, left=None, right=None)` is a binary tree node holding an integer.
- The recursive traversals are `preorder`, `inorder` and `postorder`. Each returns a list of values.
- The stack-based variants are `preorder_iterative`, `inorder_iterative`, `postorder_iterative` and `postorder_two_stacks`. They produce the same orders.
- `level_order` returns one list per level, each read left to right. `zigzag_level_order` alternates the direction from level to level, starting left to right.
- `pre_in_post(root)` computes all three depth-first orders in a single stack-driven pass. It returns a named tuple with the fields `preorder`, `inorder` and `postorder`.

An empty tree (`None`) gives empty results.

### `dsakit.tree_metrics`

- `max_depth` and `max_depth_level_order` return the number of nodes on the longest root-to-leaf path. An empty tree gives 0.
- `diameter` returns the number of edges on the longest path between any two nodes.
- `is_balanced` checks height balance by measuring every subtree, which is quadratic. `is_balanced_fast` does the same check in a single linear pass.
- `max_path_sum` returns the largest sum along any path of connected nodes. It raises `ValueError` for an empty tree.
- `are_identical(first, second)` is true when both trees have the same shape and the same values.

### `dsakit.graph_search`

Graphs are given as adjacency lists, where `adj[u]` holds the neighbours of node `u`.

- `bfs(n, adj)`, `dfs(n, adj)` and `dfs_iterative(n, adj)` return the nodes reachable from node 0 in visiting order. `dfs_iterative` marks nodes when they are pushed, so its order can differ from the true depth-first order given by `dfs`. All three raise `ValueError` when `n < 1`.
- `count_provinces(n, adj)` counts the connected components of an adjacency list.
- `count_provinces_matrix(matrix)` counts the connected components of a square adjacency matrix. Any non-zero cell counts as an edge.

### `dsakit.graph_cycles`

- `has_cycle_undirected_bfs` and `has_cycle_undirected_dfs` detect cycles in undirected graphs.
- `has_cycle_directed_dfs` tracks the current path. `has_cycle_directed_kahn` reports a cycle when Kahn's algorithm cannot order every node. Both are for directed graphs.
- `is_bipartite_bfs` and `is_bipartite_dfs` try to two-colour every component of the graph.

### `dsakit.graph_order`

- `topo_sort_dfs(n, adj)` gives a topological order from reversed depth-first finishing times. `topo_sort_kahn(n, adj)` uses Kahn's algorithm, and nodes on a cycle are left out of its result.
- `eventual_safe_nodes_dfs` returns, in ascending order, the nodes from which every path ends at a terminal node. `eventual_safe_nodes_bfs` finds the same nodes in discovery order.
- `alien_order(words, k)` derives an ordering of the first `k` lowercase letters from a sorted word list, using Kahn's algorithm.
  - It raises `ValueError` if `k` is outside 0–26.
  - It also raises `ValueError` if a deciding letter lies outside the first `k` letters.
- `shortest_path_dag(n, adj, source)` and `shortest_path_relaxation(n, adj, source)` take weighted adjacency lists of `(target, weight)` pairs.
  - Both return distances from `source`, with `math.inf` for unreachable nodes.
  - Both raise `ValueError` for a source that is not a node.
  - The relaxation variant also raises `ValueError` when a negative cycle is reachable from the source.

### `dsakit.grid`

- `nearest_one_distance(matrix)` returns, for each cell, the number of 4-neighbour steps to the nearest cell holding 1. If the matrix has no 1, every cell gets `math.inf`.
- `count_islands_dfs` and `count_islands_bfs` count the 4-connected groups of cells holding 1.
- `count_distinct_islands` counts the island shapes that differ other than by translation.
- Ragged grids raise `ValueError`.

### `dsakit.patterns`

Each function takes a size `n` and returns a single string made of newline-terminated lines. The functions are:

- `square`
- `triangle`, whose first row is empty
- `number_triangle`
- `repeated_number_triangle`
- `inverted_triangle`
- `inverted_number_triangle`
- `pyramid`
- `inverted_pyramid`
- `diamond`, whose widest row appears twice

### `dsakit.recursion`

- `reversed_list(items)` returns a new reversed list.
- `reverse_in_place(items)` reverses a mutable sequence by swapping its ends.
- `is_palindrome(text)` checks whether the text reads the same both ways.

### `dsakit.sorting`

- `selection_sort(items)` returns a new list in increasing order.
- `digit_count(number)` returns the number of decimal digits of a positive integer. Zero and negative numbers give 0.
- `smallest_with_index(items)` returns the smallest item and the index of its first occurrence. It raises `ValueError` for an empty sequence.

## Example

```python
from dsakit.tree import TreeNode, inorder, level_order
from dsakit.tree_metrics import diameter
from dsakit.graph_order import topo_sort_kahn
from dsakit.patterns import pyramid

root = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
print(inorder(root))       # [4, 2, 5, 1, 3]
print(level_order(root))   # [[1], [2, 3], [4, 5]]
print(diameter(root))      # 3

adj = [[1], [2], []]
print(topo_sort_kahn(3, adj))  # [0, 1, 2]

print(pyramid(2), end="")
#  * 
# ***
```

## What it does not do

This is a library only.

- It has no command-line program.
- It does not read graphs, grids or trees from standard input or from files.
- It has no routine that builds a tree from a list of values. You build trees with `TreeNode` yourself.

## Running the tests

```
pip install .[test]
pytest
```
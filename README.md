# dsakit

Classic algorithm problems solved as plain Python functions. The package covers
dynamic programming over sequences, strings and subsets, searches on grids,
graph traversal, and connectivity built on a union-find structure. It has no
dependencies outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.disjoint_set`

`DisjointSet(items=())` is a union-find forest over any hashable items. It
uses path compression and union by size.

- `add(item)` adds a singleton component. Items that are already known are left alone.
- `find(item)` returns the representative of the item's component. It raises
  `KeyError` for an unknown item.
- `union(a, b)` merges two components. It returns `False` if they were already joined.
- `connected(a, b)` tells whether two items share a component.
- `component_size(item)` returns the size of the item's component.
- `component_count()` returns the number of components.
- `item in ds` and `len(ds)` report membership and the number of items.

### `dsakit.strings`

- `is_match(s, pattern)`: whole-string matching where `.` matches any character
  and `*` repeats the element before it.
- `min_distance(word1, word2)`: the Levenshtein edit distance.
- `check_valid_string(s)`: whether parentheses can be balanced when each `*`
  may stand for `(`, `)` or nothing.
- `find_max_form(strs, zeros, ones)`: the most binary strings that fit within a
  budget of `0` and `1` digits.

### `dsakit.sequences`

- `max_turbulence_size`
- `count_bits`
- `number_of_arithmetic_slices` (contiguous slices)
- `number_of_arithmetic_subsequences`
- `trap`
- `jump`
- `max_sub_array`
- `find_number_of_lis`
- `find_length` (longest common subarray)
- `largest_divisible_subset` (returned in ascending order)
- `max_profit(prices, fee)`
- `climb_stairs`

### `dsakit.subsets`

- `coin_change(coins, amount)`: the fewest coins, or `-1` if the amount cannot be made.
- `combination_sum4`: the number of ordered combinations that reach a target.
- `can_partition`
- `can_partition_k_subsets`
- `ways_to_reach_target(target, types)`: `types` holds `[count, marks]` pairs.
  The result is taken modulo 10**9+7.
- `can_cross` (frog jump)
- `predict_the_winner`
- `remove_boxes`

### `dsakit.grids`

- `num_enclaves`: land is `1`.
- `closed_island`: land is `0` and water is `1`.
- `count_servers`
- `minimum_effort_path`
- `count_sub_islands(grid1, grid2)`
- `number_of_paths(grid, k)`: the result is modulo 10**9+7.
- `find_paths(m, n, max_move, start_row, start_column)`: the result is modulo 10**9+7.
- `unique_paths`
- `min_path_sum`
- `cherry_pickup`: cells are `1`, `0` or `-1` for a thorn.

### `dsakit.connectivity`

- `make_connected(n, connections)`: the cable moves needed, or `-1`.
- `find_critical_and_pseudo_critical_edges(n, edges)`: returns a tuple of two
  lists of edge indices.
- `distance_limited_paths_exist(n, edge_list, queries)`
- `find_circle_num(is_connected)`
- `find_redundant_connection(edges)`: raises `ValueError` if the graph has no cycle.
- `accounts_merge(accounts)`: each result is a name followed by sorted e-mail addresses.
- `min_swaps_couples(row)`
- `longest_consecutive(nums)`

### `dsakit.graphs`

- `validate_binary_tree_nodes(n, left_child, right_child)`
- `reachable_nodes(n, edges, restricted)`
- `calc_equation(equations, values, queries)`: unknown ratios give `-1.0`.
- `remove_stones(stones)`

Where the input makes a problem meaningless, many functions raise `ValueError`.
Examples are an empty sequence where at least one element is required,
non-positive coin values or grids of different shapes. The functions do not
modify the inputs passed to them.

## Example

```python
from dsakit.strings import is_match, min_distance
from dsakit.sequences import trap
from dsakit.disjoint_set import DisjointSet

is_match("aab", "c*a*b")          # True
min_distance("horse", "ros")      # 3
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6

ds = DisjointSet(range(4))
ds.union(0, 1)
ds.connected(0, 1)                # True
ds.component_count()              # 3
```

## What it does not do

This is a library only. It has no command-line program, and it does not read
or write files. Callers pass Python lists and get plain Python values back.
# algokit

A small collection of classic algorithms in plain Python, with no third-party
dependencies. It covers problems on sequences, number routines, matrix
manipulation, sorting techniques, list-backed binary heaps, graph traversal
and binary search trees.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.sequences`

- `two_sum(nums, target)`: indices `(i, j)`, `i < j`, of two values adding up
  to `target`, or `None` when there is no such pair
- `three_sum(nums)`: every distinct triplet of values summing to zero; the
  second value of each triplet is its smallest
- `majority_element(nums)`: the candidate left by a single voting pass (the
  majority value when one exists); raises `ValueError` on an empty sequence
- `majority_elements(nums)`: values occurring more than `len(nums) // 3` times
- `contains_nearby_duplicate(nums, k)`: whether two equal values sit at most
  `k` positions apart
- `arithmetic_triplets(nums, diff)`: count of triplets whose consecutive
  members differ by `diff`
- `find_duplicate(nums)`: the first value met a second time while scanning;
  raises `ValueError` if there is none
- `next_permutation(nums)`: rearrange in place into the next lexicographic
  permutation, wrapping the last round to the first
- `max_subarray(nums)`: largest sum of a non-empty contiguous run
- `merge_intervals(intervals)`: merge overlapping or touching closed intervals
- `sort_colors(nums)`: sort a list of 0s, 1s and 2s in place
- `merge_sorted(nums1, m, nums2, n)`: merge the first `n` of `nums2` into the
  first `m` of `nums1`, in place
- `can_partition(nums)`: whether the values split into two equal-sum parts
- `min_cost_identical(arr, brr, k)`: cost of making `arr` equal `brr`, where a
  free rearrangement costs `k` once
- `longest_common_prefix(strs)`: the prefix shared by all strings

```python
from algokit.sequences import max_subarray, merge_intervals

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])          # 6
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])   # [[1, 6], [8, 10], [15, 18]]
```

### `algokit.numeric`

- `kth_factor(n, k)`: the `k`-th smallest divisor of `n`, or `None`
- `is_ugly(n)`: whether `n` is positive with no prime factors besides 2, 3, 5
- `power(x, n)`: `x` raised to an integer power by repeated squaring
- `reverse_integer(x)`: the decimal digits of `x` reversed, or 0 when the
  result falls outside the signed 32-bit range
- `unique_paths(m, n)`: right/down paths across an `m` by `n` grid
- `pascal_triangle(num_rows)`: rows of Pascal's triangle (always at least one)
- `count_up(n)` and `count_down(n)`: the numbers from 1 to `n` and back

```python
from algokit.numeric import is_ugly, unique_paths

is_ugly(6)            # True
unique_paths(3, 7)    # 28
```

### `algokit.matrix`

- `rotate(matrix)`: rotate a square matrix a quarter turn clockwise in place
- `set_zeroes(matrix)`: zero every row and column holding a zero, in place
- `search_matrix(matrix, target)`: search a matrix whose rows are sorted
- `find_missing_and_repeated(grid)`: `[repeated, missing]` for an `n` by `n`
  grid meant to hold `1..n*n`
- `min_cost_grid_path(grid)`: fewest arrow changes needed to walk from the
  top-left to the bottom-right cell (1 right, 2 left, 3 down, 4 up)

### `algokit.sorting`

`bubble_sort`, `counting_sort(items, limit=1000)`, `heap_sort`,
`insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` and
`recursive_sort`. Each takes any iterable and returns a new sorted list,
leaving the input untouched. `counting_sort` raises `ValueError` for values
outside `range(limit)`.

```python
from algokit.sorting import merge_sort

merge_sort([-1, 21, 9, 300, 4, 2, 54, 6, 5, 2, 90])
# [-1, 2, 2, 4, 5, 6, 9, 21, 54, 90, 300]
```

### `algokit.heaps`

Binary heaps kept in plain lists (root at index 0):

- `max_heap_insert(heap, key)`, `min_heap_insert(heap, key)`
- `build_max_heap(values)`, `build_min_heap(values)`
- `delete_max(heap)`: remove and return the root of a max-heap; raises
  `IndexError` on an empty heap
- `kth_largest(values, k)`: the `k`-th largest value; raises `ValueError` if
  `k` is out of range
- `overflow_minimums(values, k)`: the values popped from a min-heap each time
  it grows past `k`

### `algokit.graphs`

An undirected `Graph(size)` on vertices `0 .. size - 1` with `add_edge(a, b)`,
`neighbours(vertex)`, the `size` property, `bfs()` (breadth first over every
component, in vertex order) and `dfs(start=0)` (depth-first preorder of the
vertices reachable from `start`). `parse_graph(text)` builds a graph from a
vertex count, an edge count and that many pairs of vertices.

```python
from algokit.graphs import Graph

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
g.bfs()    # [0, 1, 2, 3]
g.dfs(0)   # [0, 1, 2, 3]
```

The `algokit-graph` command reads the same description from standard input
and prints the traversal on one line:

```
algokit-graph < graph.txt            # breadth first
algokit-graph dfs --start 2 < graph.txt
```

where `graph.txt` holds, for example:

```
4 3
0 1
0 2
2 3
```

### `algokit.trees`

A `TreeNode` dataclass (`val`, `left`, `right`) with `bst_insert(root, key)`
(equal keys go right), `inorder(root)`, `height(root)` (nodes on the longest
root-to-leaf path) and `count_nodes(root)`.

```python
from algokit.trees import bst_insert, height, inorder

root = None
for key in (30, 10, 20, 0, 25, 13, 1, 2, 300):
    root = bst_insert(root, key)

inorder(root)   # [0, 1, 2, 10, 13, 20, 25, 30, 300]
height(root)    # 5
```

## What it does not do

algokit is a library of functions. Apart from `algokit-graph`, there are no
commands: the sorting, heap, tree and other routines are used from Python
only, and nothing is read from or saved to files.
# algokit

A collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

## Contents

| Module | What it offers |
| --- | --- |
| `algokit.ordering` | `remainder_order`, `rank_scores`, `split_even_odd` |
| `algokit.randomgen` | `distinct_values` and the `algokit-random` command |
| `algokit.arrays` | `max_subarray` (Kadane), `power_set` |
| `algokit.search` | `lower_bound`, `upper_bound`, `int_sqrt`, `nth_root` |
| `algokit.fibonacci` | `fib_memo`, `fib_table`, `fib_iterative`, `fib_naive` |
| `algokit.combinatorics` | `count_not_divisible`, `n_choose_r`, `factorial`, `n_permute_r` |
| `algokit.traversal` | `bfs_order`, `dfs_order`, `min_edge_reversals` (0-1 BFS) |
| `algokit.shortest_path` | `dijkstra` |
| `algokit.fenwick` | `FenwickTree` |
| `algokit.ancestors` | `TreeAncestor` (k-th ancestor), `LCATree` (lowest common ancestor) |
| `algokit.scc` | `strongly_connected_components` (Kosaraju) |
| `algokit.recursion` | small recursive routines: counting, sums, factorial, digit sum, palindromes, patterns |
| `algokit.subsequences` | `subsequences`, `subsequences_with_sum`, `first_subsequence_with_sum`, `count_subsequences_with_sum` |
| `algokit.ordered_set` | `OrderedSet` with `find_by_order` / `order_of_key`, and `run_queries` |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.arrays import max_subarray, power_set
from algokit.search import lower_bound, upper_bound
from algokit.shortest_path import dijkstra
from algokit.ordered_set import OrderedSet

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # (6, [4, -1, 2, 1])

power_set([1, 2])                                 # [[], [1], [2], [1, 2]]

values = [1, 4, 5, 8, 9]
lower_bound(values, 4)                            # 1
upper_bound(values, 4)                            # 2

adjacency = [[(1, 4), (2, 4)], [(0, 4), (2, 2)], [(0, 4), (1, 2)]]
dijkstra(3, adjacency, 0)                         # [0, 4, 4]

s = OrderedSet([10, 3, 5])
s.find_by_order(0)                                # 3
s.order_of_key(6)                                 # 2
```

A few behaviours worth knowing:

- `lower_bound` and `upper_bound` only search valid indexes, so a target
  beyond the last element gives the last index rather than `len(values)`.
- `nth_root` bisects over `[1, x]`, so inputs below 1 give 1.0.
- `min_edge_reversals` and `TreeAncestor.kth_ancestor` return `None` when
  there is no answer; `dijkstra` reports unreachable nodes as `math.inf`.
- `FenwickTree` positions are 1-based; `query(0)` is 0.

## Command line

`algokit-random` writes distinct random integers, one per line, to a file:

```
algokit-random 100 --low 1 --high 100000000 --output numbers.txt
```

- `count` — how many values to draw; if omitted, it is read from standard input.
- `--low`, `--high` — the closed range to draw from (defaults 1 and 100000000).
- `--output` — the file to write (default `Input-2(100).txt`).

Asking for more values than the range holds is reported as a usage error.

## What it does not do

Apart from `algokit-random`, the package offers no commands: the algorithms
are used as library functions and do not read problem input from standard
input or print formatted answers.
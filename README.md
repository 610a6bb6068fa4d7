# algolab

Textbook algorithms grouped by design technique. Each function takes plain
Python data and returns results you can inspect. Where it helps, the
intermediate steps, tables or search trees come back as well, as frozen
dataclasses or tuples.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

**Backtracking**

- `algolab.branch_knapsack.backtrack_knapsack(weights, profits, capacity)`:
  0/1 knapsack by backtracking with a fractional bound (`upper_bound`). It
  returns a `KnapsackSolution` with `profit`, `weight`, the 0/1 `selected`
  vector and the packed `items`. The bound is only exact when items are
  ordered by non-increasing profit/weight ratio.
- `algolab.hamiltonian.hamiltonian_cycles(adjacency)`: yields every
  Hamiltonian cycle that starts and ends at vertex 0, in lexicographic order.
- `algolab.nqueens`: `n_queens(n)` yields solutions as column tuples,
  `count_solutions(n)` counts them, `can_place` tests one square and
  `render_board(solution, empty)` draws a board.
- `algolab.subset_sum`: `subset_search(weights, target)` yields the
  `SearchNode`s of the state-space tree depth first, `render_tree` draws that
  tree as indented text and `matching_subsets` yields the 0/1 vectors of the
  subsets that hit the target.
- `algolab.coloring.colorings(adjacency, colors)`: yields every proper
  colouring that uses colours `1..colors`.

**Divide and conquer**

- `algolab.binary_search.binary_search(items, target)`: index of the target
  in a sorted sequence, or `None`.
- `algolab.merge_sort.merge_sort(items)`: a new, stably sorted list.
- `algolab.minmax.min_max(items)`: a `MinMaxResult` with the minimum, the
  maximum and every `MinMaxStep` in the order it finished.
- `algolab.kth_largest.select_kth_largest(items, k)`: a `SelectionResult`
  with the k-th largest value and each `SelectionStep`. `partition` is also
  available. A `k` outside `1..len(items)` raises `ValueError`.
- `algolab.strassen`: `strassen(a, b)` multiplies square matrices whose size
  is a power of two, `strassen_2x2` does a single 2×2 product and
  `format_matrix` renders entries zero-padded to two digits.
- `algolab.quicksort.quicksort_descending(items)`: the list sorted into
  descending order together with each `QuicksortPass`.
  `format_partition(items, pivot_index)` renders one pass.

**Dynamic programming**

- `algolab.knapsack01.dynamic_knapsack(profits, weights, capacity)`: 0/1
  knapsack by merging dominance-pruned sets of `Pair`s. The returned
  `KnapsackResult` also holds the sets S^0..S^n as `stages`.
- `algolab.all_pairs.floyd_warshall(cost)`: an `AllPairsResult` with
  distances, predecessors, a snapshot after each step and
  `path(source, target)`.
- `algolab.bellman_ford.bellman_ford(graph, source)`: a `ShortestPaths` with
  distances, parents, the distances after each round and `path(target)`. It
  raises `NegativeCycleError` when a negative cycle is reachable.
- `algolab.multistage`: `assign_stages`, `forward_path` and `backward_path`
  over edges `(start, end, weight)` with vertices numbered from 1. Both path
  functions return a `StagePath`.
- `algolab.obst.optimal_bst(p, q)`: the weight, cost and root tables of an
  optimal binary search tree as `OBSTTables`, with `total_cost` and
  `tree_lines(keys)`.
- `algolab.lcs.lcs(x, y)`: an `LCSResult` with the length and arrow tables,
  the subsequence and `render()` for the annotated table.

**Greedy**

- `algolab.dijkstra.dijkstra(cost, source)`: a `DijkstraResult` with
  distances, parents, the settling order, the distances after each step and
  `path(target)`.
- `algolab.fractional_knapsack.greedy_knapsack(weights, profits, capacity,
  strategy)`: fill by a `Strategy` (`LEAST_WEIGHT`, `MAX_PROFIT`,
  `MAX_RATIO`). It returns a `FractionalSolution` whose `expression` reads like
  `X1 + 0.50X2`. `evaluate_fractions` prices a given set of fractions.
- `algolab.kruskal.kruskal(num_vertices, edges)`: total cost and tree `Edge`s.
  It raises `DisconnectedGraphError` when no spanning tree exists.
- `algolab.prim.prim(edges, num_vertices)`: grows the tree from vertex 1, with
  vertices numbered 1..n. It returns a `PrimResult` with every `PrimStep` and
  raises `DisconnectedGraphError` for a disconnected graph.

In matrix inputs (`floyd_warshall`, `bellman_ford`, `dijkstra`), `math.inf`
marks a missing edge.

## Example

```python
from algolab.nqueens import count_solutions, n_queens, render_board
from algolab.lcs import lcs

print(count_solutions(8))               # 92
first = next(iter(n_queens(4)))
print(render_board(first, "."))

result = lcs("ABCBDAB", "BDCABA")
print(result.render())
```

## What it does not do

The package is a library only. It has no command-line program, reads no
input interactively and times nothing. To run an algorithm on your own data,
call its function from Python and print or inspect what it returns.
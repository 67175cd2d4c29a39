# dsakit

Classic data structures and algorithms as plain Python with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.dp_sequences` | `fibonacci_recursive`, `fibonacci_memo`, `fibonacci_table`; `catalan_recursive`, `catalan_memo`, `catalan_table`; `matrix_chain_recursive`, `matrix_chain_memo`, `matrix_chain_table` |
| `dsakit.dp_knapsack` | `knapsack_recursive`, `knapsack_memo`, `knapsack_table`, `knapsack_unbounded`, `target_subset_sum`, `rod_cutting`, `min_partition_difference` |
| `dsakit.dp_strings` | `lcs_recursive`, `lcs_memo`, `lcs_table`, `longest_common_substring`, `longest_increasing_subsequence`, `edit_distance`, `wildcard_match` |
| `dsakit.graph` | `Graph` (undirected by default, `directed=True` for directed): `bfs`, `dfs`, `has_path`, `has_undirected_cycle`, `has_directed_cycle`, `is_bipartite`, `all_paths` (a generator), `topological_sort`, `topological_sort_kahn` |
| `dsakit.spanning_tree` | `DisjointSet` (union by rank, path compression), `WeightedEdge`, `WeightedGraph` with `prim_mst_cost` and `kruskal_mst_cost` |
| `dsakit.shortest_paths` | `Edge`, `dijkstra`, `bellman_ford` (unreachable vertices get `math.inf`) |
| `dsakit.hash_table` | `HashTable`: string keys, separate chaining, doubles its buckets when the load passes one |
| `dsakit.hashing_problems` | `pair_sum_indices`, `frequent_counts`, `is_anagram`, `itinerary`, `largest_zero_sum_subarray`, `count_subarrays_with_sum` |
| `dsakit.heap` | `MaxHeap`, `heap_sort` |
| `dsakit.heap_problems` | `nearest_cars`, `min_rope_cost`, `weakest_rows`, `sliding_window_max` |
| `dsakit.linked_list` | `Node`, `LinkedList` (`merge_sort`, `zigzag` in place), `DoublyLinkedList` |
| `dsakit.queues` | `LinkedQueue`, `CircularQueue`, `TwoStackQueue`, `DequeQueue`, `TwoQueueStack`, `DequeStack`; `first_non_repeating`, `interleave`, `reverse_queue` |
| `dsakit.stacks` | `Stack`, `LinkedStack`, `push_bottom`, `reverse_stack`, `stock_span` |
| `dsakit.stack_problems` | `next_greater`, `is_balanced`, `has_duplicate_parentheses`, `largest_histogram_area` |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `counting_sort`, `merge_sort`, `quick_sort`, each returning a new list |
| `dsakit.trie` | `Trie`, `word_break`, `unique_prefixes`, `longest_word_with_all_prefixes` |

## Examples

```python
from dsakit.dp_knapsack import knapsack_table
from dsakit.dp_strings import edit_distance, wildcard_match
from dsakit.graph import Graph
from dsakit.sorting import quick_sort
from dsakit.trie import word_break

knapsack_table([15, 14, 10, 45, 30], [2, 5, 1, 3, 4], 7)   # 75
edit_distance("horse", "ros")                              # 3
wildcard_match("babaabab", "b**ba**ab*")                   # True

g = Graph(6, directed=True)
for u, v in [(2, 3), (3, 1), (4, 0), (4, 1), (5, 0), (5, 2)]:
    g.add_edge(u, v)
g.topological_sort()                                       # [5, 4, 2, 3, 1, 0]

quick_sort([6, 3, 5, 4, 2, 3, 17, 5])                      # [2, 3, 3, 4, 5, 5, 6, 17]
word_break(["i", "like", "sam", "samsung", "mobile", "phone"], "ilikesam")  # True
```

Weighted graphs and spanning trees:

```python
from dsakit.spanning_tree import WeightedGraph

g = WeightedGraph(4)
g.add_edge(0, 1, 10)
g.add_edge(0, 2, 15)
g.add_edge(0, 3, 30)
g.add_edge(1, 3, 40)
g.add_edge(2, 3, 50)
g.prim_mst_cost(0)      # 55
g.kruskal_mst_cost()    # 55
```

## Errors

- Popping or peeking an empty heap, queue, stack or list raises `IndexError`,
  as does a vertex or element number outside a graph or disjoint set.
- A full `CircularQueue` raises `OverflowError` on `push`.
- A missing key raises `KeyError` from `HashTable.__getitem__` and
  `HashTable.remove`, and from `Trie.unique_prefix` when the word runs off the trie.
- Invalid arguments (negative sizes or capacities, mismatched lengths,
  out-of-range `k`, odd-sized queues for `interleave`) raise `ValueError`.

## What it does not do

This is a library only. It has no command-line tool, and its functions
return their results instead of printing them.
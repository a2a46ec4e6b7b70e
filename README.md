# dsakit

A collection of classic data structures and algorithms written in plain Python,
with no runtime dependencies. Functions return their results instead of printing
them, take ordinary Python values (lists, tuples, dicts, matrices as lists of
lists), and raise exceptions for invalid input.

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
| `dsakit.sorting` | `sort_012`, `bubble_sort`, `insertion_sort`, `selection_sort`, `counting_sort`, `merge_sort`, `quick_sort`, `quick_sort_first_pivot`, `count_inversions`, `heap_sort` |
| `dsakit.heaps` | `sift_down`, `build_max_heap`, `MaxHeap`, `MinHeap` |
| `dsakit.recursion` | `tower_of_hanoi` |
| `dsakit.backtracking` | `hamiltonian_cycles`, `solve_n_queens`, `rat_in_maze` |
| `dsakit.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bits_range`, `count_set_bits`, `count_set_bits_fast` |
| `dsakit.mathutils` | `gcd`, `prime_sum`, `PrefixSum` |
| `dsakit.dynamic` | `knapsack_01`, `subset_sum`, `can_partition`, `tsp_min_cost` |
| `dsakit.greedy` | `max_activities`, `Item`, `fractional_knapsack`, `Job`, `Schedule`, `job_sequencing` |
| `dsakit.disjoint_set` | `UnionFind` |
| `dsakit.graph` | `Graph`, `WeightedGraph`, `articulation_points`, `greedy_coloring` |
| `dsakit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `dsakit.spanning_tree` | `Edge`, `RankedDisjointSet`, `kruskal`, `kruskal_weight`, `prim_tree`, `prim_weight` |
| `dsakit.network_flow` | `ford_fulkerson`, `FlowResult` |
| `dsakit.expressions` | `precedence`, `infix_to_postfix` |
| `dsakit.containers` | `BoundedStack`, `StackOverflowError`, `StackUnderflowError`, `reverse_queue`, `reverse_queue_recursive` |
| `dsakit.strings` | `reverse_string`, `sort_strings` |
| `dsakit.searching` | `linear_search`, `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences`, `cartesian_product` |
| `dsakit.avl` | `AVLTree` |
| `dsakit.binary_tree` | `TreeNode`, `BinarySearchTree`, `inorder`, `preorder`, `postorder`, `level_order`, `tree_height`, `morris_inorder` |
| `dsakit.linked_list` | `LinkedList` |

The sorting functions accept any iterable and return a new list; the input is
never modified. `counting_sort` accepts only integers in `0..255`.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.expressions import infix_to_postfix
from dsakit.recursion import tower_of_hanoi
from dsakit.avl import AVLTree
from dsakit.graph import WeightedGraph
from dsakit.shortest_paths import dijkstra
from dsakit.linked_list import LinkedList

merge_sort([5, 4, 3, 6, 1, 2, 7])        # [1, 2, 3, 4, 5, 6, 7]
infix_to_postfix("a^(b*c-d/(e+f))")      # 'abc*def+/-^'
tower_of_hanoi(2)                         # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]

tree = AVLTree([9, 5, 10, 0, 6, 11, -1, 1, 2])
tree.preorder()                           # [9, 1, 0, -1, 5, 2, 6, 10, 11]
tree.delete(10)
tree.search(10)                           # False

g = WeightedGraph()
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 7)
dijkstra(g, 0)                            # {0: 0, 1: 4, 2: 5}

items = LinkedList([1, 2, 3])
items.insert(9, 2)                        # positions are 1-based
list(items)                               # [1, 9, 2, 3]
items.delete(1)                           # 1
```

## Errors

Invalid input raises an exception rather than returning a status value:

- `bellman_ford` raises `NegativeCycleError` (a `ValueError`) when a
  negative-weight cycle is reachable from vertex 0.
- `BoundedStack.push` raises `StackOverflowError` on a full stack;
  `pop` and `peek` raise `StackUnderflowError` on an empty one.
- `kruskal` and `prim_tree` raise `ValueError` for a disconnected graph.
- Out-of-range positions and vertices raise `IndexError`.

## What this package does not do

dsakit is a library only. It has no command-line tool and no interactive
prompts: every algorithm is called from Python code, and nothing reads from
standard input or prints results.
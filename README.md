# dsalgo

`dsalgo` is a collection of well-known algorithms and data structures in plain Python. It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.modmath` | `mod_pow`, `mod_inverse`, `ncr`. The modulus defaults to 1 000 000 007. |
| `dsalgo.arrays` | `median_of_sorted_arrays`, `running_medians`, `next_greater_elements`, `next_smaller_elements`, `trapped_rainwater` |
| `dsalgo.bitmask` | `toggle_member`, `subset_members`: sets of the integers 1, 2, … stored as bits |
| `dsalgo.strings` | `lps_table`, `kmp_search`, `rolling_hash`, `rabin_karp_search`, `parse_complex`, `split_words` |
| `dsalgo.dp` | `lis_length`, `longest_increasing_subsequence`, `longest_palindromic_substring`, `lcs_length`, `longest_palindromic_subsequence` (plus `_linear` and `_lcs` variants), `min_palindrome_cuts` (plus `_memo` and `_linear` variants), `count_digit_sum`, `tsp_min_tour` |
| `dsalgo.graphs` | `Graph` (`add_edge`, `bfs`, `dfs_iterative`, `dfs_recursive`, `two_coloring`, `dijkstra`, `prim_mst_weight`), `has_cycle`, `topological_sort`, `CycleError` |
| `dsalgo.matching` | `max_bipartite_matching` |
| `dsalgo.unionfind` | `DisjointSet` (`find`, `union`, `connected`) |
| `dsalgo.rangequery` | `SegmentTree` (`query`, `add`), `SparseTable` (`query_log`, `query`) |
| `dsalgo.trees` | `BinaryLifting` (`kth_ancestor`, `lca`), `TreeNode`, `lca_binary_tree`, `lca_bst` |
| `dsalgo.trie` | `Trie` (`insert`, `search`, `in`), `find_words` |

## Examples

Arrays, strings and dynamic programming:

```python
from dsalgo.arrays import median_of_sorted_arrays, next_greater_elements, trapped_rainwater
from dsalgo.strings import kmp_search
from dsalgo.dp import lis_length, tsp_min_tour

median_of_sorted_arrays([1, 4, 5], [2, 6, 7, 8, 9])       # 5.5
next_greater_elements([1, 7, 2, 3, 1, 8])                 # [7, 8, 3, 8, 8, -1]
trapped_rainwater([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6

kmp_search("ABABCABAB", "ABABDABACDABABCABAB")  # [10]

lis_length([10, 22, 9, 33, 21, 50, 41, 60])  # 5

tsp_min_tour([
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
])  # 80
```

`running_medians` reports the median after each value; with an even count it is the
mean of the two middle values, rounded toward zero.

Graphs:

```python
from dsalgo.graphs import Graph, topological_sort
from dsalgo.matching import max_bipartite_matching

g = Graph()
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 7)
g.dijkstra(0)          # {0: 0, 1: 4, 2: 5}
g.prim_mst_weight(0)   # 5
g.bfs(0)               # [0, 1, 2]

topological_sort([1, 2, 3], [(1, 2), (2, 3)])  # [1, 2, 3]

matches = max_bipartite_matching([[1, 2], [0, 3], [2], [2, 3], [], [5]], 6)
len(matches)           # 5 (a mapping from job to applicant)
```

`Graph` is undirected; `dijkstra` maps unreachable vertices to `math.inf`, and
`two_coloring` returns colours 0 and 1 per vertex.

Union-find, range queries and trees:

```python
from dsalgo.unionfind import DisjointSet
from dsalgo.rangequery import SegmentTree, SparseTable
from dsalgo.trees import BinaryLifting

people = DisjointSet(5)
people.union(0, 1)
people.connected(0, 1)  # True

tree = SegmentTree(range(1, 11))
tree.query(0, 9)        # 55 (indices start at 0, ranges are inclusive)
tree.add(0, 5)
tree.query(0, 0)        # 6

table = SparseTable([568, 712, 412, 231, 241])  # min by default
table.query(2, 3)       # 231

lifting = BinaryLifting([(0, 1), (0, 2), (1, 3), (1, 4)], root=0)
lifting.lca(3, 4)           # 1
lifting.kth_ancestor(3, 2)  # 0
lifting.kth_ancestor(3, 3)  # None (above the root)
```

Tries and board word search:

```python
from dsalgo.trie import Trie, find_words

trie = Trie(["AABAC", "AAB", "ABC", "AEFDH", "BCD"])
trie.search("AAB")   # True
"AEFD" in trie       # False

board = [
    ["o", "a", "a", "n"],
    ["e", "t", "a", "e"],
    ["i", "h", "k", "r"],
    ["i", "f", "l", "v"],
]
find_words(board, ["oath", "pea", "eat", "rain"])  # ['oath', 'eat']
```

Functions that cannot produce an answer raise an exception: for example,
`topological_sort` raises `CycleError` when the graph has a cycle,
`Graph.two_coloring` raises `ValueError` for a graph that is not bipartite, and
the range-query classes raise `IndexError` for positions outside the data.

## What it does not do

`dsalgo` is a library only. It has no command-line program and reads no input
of its own; every algorithm is called from Python with the data passed in.
# leetkit

Small, dependency-free building blocks for interview-style problems:
ready-made data structures and a problem solution.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What's inside

| Module | Contents |
| --- | --- |
| `leetkit.two_sum` | `two_sum(nums, target)`: indices `[i, j]` of two numbers adding up to `target`, or `None` |
| `leetkit.fenwick` | `FenwickTree`: prefix sums and point updates (binary indexed tree) |
| `leetkit.segmenttree` | `SegmentTree`: range sum queries and point assignments |
| `leetkit.dsu` | `DisjointSet`: union-find with path compression and union by size |
| `leetkit.graph` | `Graph`: directed graph as an adjacency list |
| `leetkit.linkedlist` | `ListNode`, `build_linked_list`, `linked_list_to_list` |
| `leetkit.tree` | `TreeNode`, `slice_to_tree`, `tree_to_level_order` (level order, `-1` for a missing node) |
| `leetkit.queue` | `Queue`: FIFO queue |
| `leetkit.stack` | `Stack`: LIFO stack |
| `leetkit.heaps` | `MinHeap` and `MaxHeap` of integers |
| `leetkit.lrucache` | `LRUCache`: fixed-capacity least-recently-used cache |
| `leetkit.trie` | `Trie`: prefix tree over words made of the letters `a` to `z` |
| `leetkit.bloomfilter` | `BloomFilter`: probabilistic set membership over bytes or strings |
| `leetkit.skiplist` | `SkipList`: sorted set of distinct integers with probabilistic balancing |

## Behaviour worth knowing

- `FenwickTree.update` ignores out-of-range indices; `query` returns 0 for a
  negative index and sums everything for an index past the end;
  `query_range` returns 0 for an invalid range.
- `SegmentTree.update` raises `IndexError` for an out-of-range index;
  `query` returns 0 for an empty or disjoint range.
- `DisjointSet` raises `IndexError` for an element outside `0..n-1`.
- `Queue.dequeue`/`peek`, `Stack.pop`/`peek` and `MinHeap`/`MaxHeap`
  `pop`/`peek` raise `IndexError` when empty.
- `LRUCache.get(key, default)` returns `default` (`None` unless given) for a
  missing key.
- `Trie` raises `ValueError` for any character outside `a`-`z`.
- `BloomFilter(m, k)` raises `ValueError` if `m` is not positive or `k` is
  negative; strings are encoded as UTF-8, and `in` works as well as
  `contains`.
- `SkipList(seed=None)` takes an optional seed for reproducible levels;
  it supports `in`, `len()` and ascending iteration. `delete` returns
  `False` when the value is absent.
- In `leetkit.tree`, `-1` always stands for a missing node, so it cannot be
  stored as a node value in a level-order list.

## Examples

```python
from leetkit.two_sum import two_sum
from leetkit.fenwick import FenwickTree
from leetkit.dsu import DisjointSet
from leetkit.lrucache import LRUCache
from leetkit.trie import Trie

two_sum([2, 7, 11, 15], 9)          # [0, 1]

tree = FenwickTree.from_values([1, 2, 3, 4])
tree.query(2)                        # 6  (1 + 2 + 3)
tree.query_range(1, 3)               # 9  (2 + 3 + 4)
tree.update(0, 10)
tree.query(0)                        # 11

sets = DisjointSet(5)
sets.union(0, 1)
sets.connected(0, 1)                 # True
sets.count()                         # 4

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                         # 1
cache.put(3, 3)                      # evicts key 2
cache.get(2, -1)                     # -1

words = Trie()
words.insert("apple")
words.search("app")                  # False
words.starts_with("app")             # True
```

Linked lists and binary trees use the usual problem-site conventions:

```python
from leetkit.linkedlist import build_linked_list, linked_list_to_list
from leetkit.tree import slice_to_tree, tree_to_level_order

head = build_linked_list([1, 2, 3])
list(head)                           # [1, 2, 3]
linked_list_to_list(None)            # []

root = slice_to_tree([1, 2, 3, -1, 4])
tree_to_level_order(root)            # [1, 2, 3, -1, 4]
```

## Command line

```
leetkit
```

prints the banner `LeetCode Project` and exits with status 0. It takes no
options besides `--help`; the data structures are used from Python only.
# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

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

| Module               | Contents                                                                 |
|----------------------|--------------------------------------------------------------------------|
| `dsakit.arith`       | `Item`, `count_divisors`, `divisors`, `extended_gcd`, `fractional_knapsack` |
| `dsakit.recursion`   | `factorial`, `power`, `sum_to`, `mccarthy91`, `exp_taylor`, `indirect_sequence`, `tree_recursion` |
| `dsakit.searching`   | `linear_search`, `binary_search`                                         |
| `dsakit.sequences`   | `MaxHeap`, `middle_index`, `middle`, `delete_middle`, `insert_middle`, `next_larger` |
| `dsakit.linkedlist`  | `Node`, `LinkedList`, `has_cycle`                                        |
| `dsakit.stack`       | `Stack`, `StackFullError`, `StackEmptyError`, `is_balanced`              |
| `dsakit.graph`       | `WeightedGraph`, `count_components`                                      |
| `dsakit.trees`       | `TreeNode`, `bst_insert`, `inorder`, `preorder`, `postorder`, `level_order`, `spiral_order`, `height`, `size`, `is_bst` |

Functions that walk a structure (the tree traversals, `indirect_sequence`,
`tree_recursion`) return iterators; wrap them in `list()` to get every value.

## Examples

Number theory and the greedy fractional knapsack:

```python
from dsakit.arith import Item, count_divisors, divisors, extended_gcd, fractional_knapsack

count_divisors(100)      # 9
divisors(100)            # [1, 2, 4, 5, 10, 20, 25, 50, 100]
g, x, y = extended_gcd(56, 15)   # g == 1 and 56*x + 15*y == g

items = [Item(value=100, weight=30), Item(value=70, weight=20), Item(value=40, weight=40)]
fractional_knapsack(items, 60)   # 180.0
```

Recursion and sequences:

```python
from dsakit.recursion import factorial, mccarthy91, tree_recursion
from dsakit.sequences import MaxHeap, next_larger

factorial(5)                 # 120
mccarthy91(95)               # 91
list(tree_recursion(3))      # [3, 2, 1, 1, 2, 1, 1]

heap = MaxHeap([10, 20, 30, 40, 50])
heap.push(60)
heap.pop()                   # 60
heap.sorted_values()         # [10, 20, 30, 40, 50]

next_larger([11, 13, 21, 3]) # [13, 21, -1, -1]
```

A singly linked list (positions count from 1):

```python
from dsakit.linkedlist import LinkedList

lst = LinkedList([3, 5, 7, 10, 15])
lst.prepend(1)
lst.append(20)
lst.reverse()
list(lst)            # [20, 15, 10, 7, 5, 3, 1]
lst.total(), lst.max(), lst.min()
lst.is_palindrome()  # False
```

A bounded stack and bracket matching:

```python
from dsakit.stack import Stack, is_balanced

s = Stack(5)
s.push(10)
s.push(12)
s.peek()                # 12
is_balanced("{()}[]")   # True
```

Pushing onto a full stack raises `StackFullError`; popping or peeking an empty
one raises `StackEmptyError`.

Binary search trees:

```python
from dsakit.trees import bst_insert, inorder, is_bst

root = None
for value in (20, 10, 22, 5, 15, 21, 24):
    root = bst_insert(root, value)

list(inorder(root))  # [5, 10, 15, 20, 21, 22, 24]
is_bst(root)         # True
```

Graphs:

```python
from dsakit.graph import WeightedGraph, count_components

g = WeightedGraph(5, directed=True)
g.add_edge(0, 1, 2)
g.add_edge(0, 2, 4)
g.add_edge(1, 2, 1)
g.shortest_distances(0)   # [0, 2, 3, None, None]

count_components(6, [(0, 1), (0, 2), (3, 4)])   # 3
```

## Command-line tools

Two small commands are installed with the package.

`dsakit-stack` runs an interactive menu over an integer stack: enter `1` to
push a value, `2` to pop, `3` to print every value from the top down and `4`
to exit. The session also ends at end of input. `--capacity N` limits the
stack to `N` values.

```
dsakit-stack --capacity 5
```

`dsakit-dijkstra` takes no arguments and reads shortest-path problems from
standard input: first the number of cases, then for each case the vertex and
edge counts, the edges as `a b weight` with vertices numbered from 1, and the
source vertex. For each case it prints one line with the distance to every
other vertex in order, `-1` for vertices that cannot be reached. Repeated
edges keep the smaller weight.

```
dsakit-dijkstra < problems.txt
```

## What it does not do

Everything lives in memory: the stack session keeps nothing once it exits,
and the shortest-path command reads only standard input, not files named on
the command line.
# dsaworks

A collection of classic data structures and algorithms, written as plain,
readable Python for Python 3.10 and later. It is meant for studying how these
structures behave: each one keeps the capacity limits, orderings and edge
cases of the textbook versions it follows. It has no dependencies outside the
standard library.

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
| `dsaworks.recursion` | `nested`, `power`, `fast_power`, `sum_to`, `sum_iterative`, `countdown`, `tree_recursion`, `taylor_exp`, `taylor_exp_horner`, `taylor_exp_iterative`, `hanoi` (a generator of moves), `AccumulatingSum` |
| `dsaworks.arrays` | `Array` with insert, delete, linear and binary searches, max/min/sum/average, reversal, sorted insert, rearrange, merge, union, intersection and difference; `ArrayFullError` |
| `dsaworks.matrices` | `LowerTriangularMatrix` with row- or column-major storage (`Order`) and 1-based `m[i, j]` indexing; `SparseMatrix` of `Element` triples with addition and `to_dense` |
| `dsaworks.polynomial` | `Polynomial` of `Term`s, kept in descending order of exponent, with addition |
| `dsaworks.hashing` | `QuadraticProbingTable` with `insert`, `search` and `slots` |
| `dsaworks.sorting` | `quick_sort`, `radix_sort`, `merge_sort`, `selection_sort`, `shell_sort` (each returns a sorted copy), `merge`, `merge_halves` |
| `dsaworks.linked_list` | `LinkedList` of `Node`s: loop detection, max, merge, middle, duplicate removal, reversal, move-to-front search, recursive search, sorted insert |
| `dsaworks.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsaworks.expressions` | `is_balanced`, `is_balanced_extended`, `precedence`, `is_operand`, `infix_to_postfix`, `evaluate_postfix` |
| `dsaworks.queues` | `ArrayQueue`, `LinkedQueue`, `TwoStackQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsaworks.graphs` | `prim_mst` returning `Edge`s, `total_cost`, `bfs`, `dfs` on adjacency matrices whose vertices are numbered from 1 |
| `dsaworks.trees` | `BinaryTree` of `TreeNode`s, built level by level (`from_level_values`, with `-1` for an absent child) or from inorder and preorder traversals (`from_traversals`), with recursive and iterative traversals and `height` |

## A few examples

```python
from dsaworks.recursion import nested, fast_power, hanoi
from dsaworks.expressions import is_balanced, evaluate_postfix
from dsaworks.sorting import quick_sort

nested(95)                        # 91
fast_power(9, 3)                  # 729
list(hanoi(2, 1, 2, 3))           # [(1, 2), (1, 3), (2, 3)]
is_balanced("((a+b)*(c-d))")      # True
is_balanced("((a+b)*(c-d)))")     # False
evaluate_postfix("234*+82/-")     # 10
quick_sort([11, 13, 7, 12, 3])    # [3, 7, 11, 12, 13]
```

Fixed-capacity structures raise instead of printing a warning: pushing onto
a full `ArrayStack` raises `StackOverflowError`, dequeuing from an empty
`ArrayQueue` raises `QueueEmptyError`, and adding to a full `Array` raises
`ArrayFullError`. An `ArrayQueue` is a linear queue: slots freed by dequeuing
are not reused, so once `size` elements have been enqueued it stays full.

## Interactive array menu

The package installs a small menu-driven program for experimenting with an
`Array`. It reads the capacity from its optional `size` argument, or asks for
it, then lets you insert, delete, search, sum and display elements on
standard input until you choose 6 (Exit).

```
dsaworks-array-menu
dsaworks-array-menu 10
```

## What it does not do

Apart from the array menu, the package offers no commands: the other
structures are used from Python code. Trees are built from values passed to
`BinaryTree.from_level_values` rather than read interactively, and nothing is
stored on disk.
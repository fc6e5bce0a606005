# dsalgo

Classic data structures and algorithms in plain Python, using nothing beyond
the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.bst` | `Node`, `BinarySearchTree` (`insert`, `delete`, `in`, `preorder`, `preorder_iterative`, `inorder`, `inorder_iterative`, `postorder`, `postorder_iterative`, `height`, `levels`, `mirror`, `copy`, `parent_children`, `leaves`, `minimum`, `maximum`), `tree_from_preorder`, `tree_height` |
| `dsalgo.expression_tree` | `ExprNode`, `is_operator`, `from_postfix`, `from_prefix`, `level_order` and recursive and iterative `preorder`, `inorder`, `postorder` |
| `dsalgo.threaded_tree` | `ThreadedBinaryTree` with `insert`, `inorder`, `preorder` and in-order iteration |
| `dsalgo.containers` | `CircularQueue`, `BoundedStack`, `LinkedList`, `DisjointSet` and the errors `QueueFullError`, `QueueEmptyError`, `StackOverflowError`, `StackUnderflowError` |
| `dsalgo.segment_tree` | `SumSegmentTree` with `build`, `set` and `range_sum` |
| `dsalgo.graphs` | `dijkstra`, `shortest_route`, `floyd_warshall`, `format_distance_matrix`, `prim_mst` |
| `dsalgo.puzzles` | `is_safe`, `solve_sudoku`, `n_queens`, `render_queens` |
| `dsalgo.notation` | `precedence`, `infix_to_postfix`, `evaluate_postfix` |
| `dsalgo.sorting` | `bubble_sort`, `merge_sort`, `shell_sort`, `selection_sort`, `shifting_sort` |
| `dsalgo.dynamic` | `count_coin_change`, `longest_common_subsequence`, `subset_sum`, `min_moves_to_k_equal` |
| `dsalgo.number_theory` | `chinese_remainder`, `extended_gcd`, `fibonacci`, `is_prime`, `is_leap_year`, `binary_digits`, `is_binary_palindrome` |
| `dsalgo.searching` | `rabin_karp`, `linear_search`, `next_greater_to_right`, `next_greater_to_left` |
| `dsalgo.matrix` | `is_sparse`, `multiply`, `hourglass_sum` |
| `dsalgo.challenges` | `round_grades`, `count_fruit_on_house`, `kangaroo_meet` |
| `dsalgo.calculator` | `Calculator`, a four-function calculator driven by key presses |

The sorting functions return a new sorted list and leave their input alone.
Errors are raised as exceptions: a full `CircularQueue` raises
`QueueFullError`, deleting a value absent from a `BinarySearchTree` raises
`KeyError`, an unsolvable Sudoku grid raises `ValueError`, and so on.

## Installation

```
pip install .
```

## Examples

```python
from dsalgo.bst import BinarySearchTree

tree = BinarySearchTree([8, 3, 10, 1, 6, 14, 4, 7, 13])
tree.inorder()   # [1, 3, 4, 6, 7, 8, 10, 13, 14]
tree.height()    # 3
7 in tree        # True
tree.levels()    # [[8], [3, 10], [1, 6, 14], [4, 7, 13]]
```

```python
from dsalgo.expression_tree import from_postfix, inorder

inorder(from_postfix("AB*CD*+"))   # ['A', '*', 'B', '+', 'C', '*', 'D']
```

```python
from dsalgo.notation import infix_to_postfix, evaluate_postfix

infix_to_postfix("a+b*c")      # 'abc*+'
evaluate_postfix("231*+9-")    # -4
```

```python
from dsalgo.containers import CircularQueue

queue = CircularQueue(3)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()   # 1
list(queue)       # [2]
```

```python
from dsalgo.segment_tree import SumSegmentTree

tree = SumSegmentTree(5)
tree.build([1, 2, 3, 4, 5])
tree.range_sum(1, 4)   # 9  (positions 1, 2 and 3)
```

```python
from dsalgo.graphs import shortest_route

edges = [("a", "c", 1), ("a", "d", 2), ("b", "c", 2), ("c", "d", 1),
         ("b", "f", 3), ("c", "e", 3), ("e", "f", 2), ("d", "g", 1), ("g", "f", 1)]
shortest_route(edges, "a", "f")   # (4, ['a', 'd', 'g', 'f'])
```

```python
from dsalgo.puzzles import n_queens
from dsalgo.number_theory import extended_gcd

list(n_queens(4))       # [(2, 4, 1, 3), (3, 1, 4, 2)]
extended_gcd(30, 20)    # (10, 1, -1)
```

```python
from dsalgo.calculator import Calculator

calc = Calculator()
calc.press_digit("1")
calc.press_digit("2")
calc.press_operator("+")
calc.press_digit("3")
calc.equals()   # '15'
```

## What it does not do

This is a library only. It has no command-line program and no interactive
menus for driving the data structures, and `Calculator` is the state and key
handling of a calculator without any window or buttons to show it.

## Running the tests

```
pip install ".[test]"
pytest
```
# dslab

A small collection of classic data structures and algorithms written as plain,
readable Python. Every operation returns its result or raises an exception;
nothing is printed.

## What is inside

| Module | Contents |
| --- | --- |
| `dslab.arrays` | `summarize` returning an `ArrayStats` (maximum, minimum, total, average, sines), `insert_at`, `insert_sorted`, `delete_at`, `delete_all`, `bubble_sort`, `linear_search`, `binary_search`, `merge`, `flatten_rows`, `flatten_columns`, `compress_sparse`, `locate_in_compressed` |
| `dslab.matrix` | `add`, `subtract`, `multiply`, `identity`, `power` on integer matrices given as lists of rows |
| `dslab.graphs` | Adjacency matrix helpers `adjacent_pairs`, `path_counts`, `path_sum_matrix`, `is_strongly_connected`, `shortest_paths` (Floyd–Warshall, zero meaning no edge), `matrix_traversal`; and `Graph`, an adjacency list graph with `add_edge`, `neighbours`, `edges`, `bfs` and `dfs` |
| `dslab.linkedlist` | `LinkedList`, positions counted from 1, with `append`, `insert_at`, `insert_sorted`, `remove_at`, `remove`, `sort`, `find` and `stats` |
| `dslab.stack` | `BoundedStack` with `push`, `pop` and `peek`, raising `StackOverflow` and `StackUnderflow` |
| `dslab.queues` | `LinearQueue` (at most `capacity` items ever) and `CircularQueue` (slots reused), raising `QueueFull` and `QueueEmpty` |
| `dslab.expressions` | `evaluate_postfix`, `infix_to_postfix`, `evaluate_infix`, raising `ExpressionError` |
| `dslab.recursion` | `quicksort`, `factorial`, `fibonacci`, `fibonacci_sequence`, and `hanoi_moves` returning `Move` records |
| `dslab.bst` | `ArrayBST`, a binary search tree whose slot `i` has children in slots `2i+1` and `2i+2` |
| `dslab.heap` | `MaxHeap` with `push`, `remove`, `peek` |
| `dslab.binarytree` | `TreeNode` with `insert_left` and `insert_right`, and the `preorder`, `inorder` and `postorder` traversals |

The package has no dependencies outside the standard library and supports
Python 3.10 and later.

## Examples

```python
from dslab.arrays import bubble_sort, binary_search
from dslab.recursion import factorial, hanoi_moves
from dslab.stack import BoundedStack, StackOverflow
from dslab.linkedlist import LinkedList

numbers = bubble_sort([5, 2, 9, 1])        # [1, 2, 5, 9]
binary_search(numbers, 9)                  # 3

factorial(5)                               # 120
for move in hanoi_moves(2):
    print(move)
# Move disk 1 from A to B.
# Move disk 2 from A to C.
# Move disk 1 from B to C.

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflow:
    print("stack is full")

items = LinkedList([1, 3, 4])
items.insert_sorted(2)                     # returns position 2
print(items)                               # 1 -> 2 -> 3 -> 4 -> NULL
```

Graphs built from adjacency lists put each new neighbour at the front, which
fixes the order of the traversals:

```python
from dslab.graphs import Graph

graph = Graph(4, directed=False)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(1, 2)
graph.add_edge(2, 3)
graph.bfs(0)                   # [0, 2, 1, 3]
graph.dfs(3)                   # [3, 2, 1, 0]
```

Expressions use the operators `+ - * / ^` on integers; division truncates
toward zero. `evaluate_postfix` takes single-digit operands,
`infix_to_postfix` single-character operands, and `evaluate_infix`
non-negative integers of any length:

```python
from dslab.expressions import evaluate_postfix, infix_to_postfix, evaluate_infix

evaluate_postfix("23+")        # 5
infix_to_postfix("a+b*c")      # "a b c * +"
evaluate_infix("(12+3)*2")     # 30
```

## Errors

Operations that cannot succeed raise exceptions: a full stack raises
`StackOverflow` and an empty one `StackUnderflow`; a full queue raises
`QueueFull` and an empty one `QueueEmpty`; a malformed expression or a
division by zero raises `ExpressionError` (a subclass of `ValueError`).
Positions out of range raise `IndexError`, and missing values, mismatched
matrix shapes and negative sizes raise `ValueError`. `ArrayBST.insert` raises
`IndexError` when a value needs a slot beyond its capacity and `TypeError` for
`None`.

## What it does not do

The package is a library only. It has no command-line programs, interactive
menus or prompts for input, and it keeps nothing on disk: build the
structures in your own code and use the values the functions return.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.
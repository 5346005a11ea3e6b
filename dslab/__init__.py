"""Classic data structures and algorithms: arrays, matrices, graphs, linked
lists, stacks, queues, expressions, recursion, search trees, heaps and
binary trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "matrix",
    "graphs",
    "linkedlist",
    "stack",
    "queues",
    "expressions",
    "recursion",
    "bst",
    "heap",
    "binarytree",
]
"""Linked lists, stacks, heaps, trees, graphs, searching, recursion and number-theory helpers."""

__version__ = "0.1.0"
__all__ = [
    "arith",
    "graph",
    "linkedlist",
    "recursion",
    "searching",
    "sequences",
    "stack",
    "trees",
]
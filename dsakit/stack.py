"""A bounded LIFO stack, bracket balancing and an interactive stack shell."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterator, Sequence

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {closer: opener for opener, closer in _OPENERS.items()}


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class Stack:
    """A last-in, first-out stack, optionally limited to ``capacity`` items."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r}, capacity={self.capacity!r})"


def is_balanced(expr: str) -> bool:
    """Return True if every bracket in ``expr`` is closed by its partner in order.

    Characters other than ``()[]{}`` are ignored.
    """
    open_brackets: list[str] = []
    for char in expr:
        if char in _OPENERS:
            open_brackets.append(char)
        elif char in _CLOSERS:
            if not open_brackets or open_brackets.pop() != _CLOSERS[char]:
                return False
    return not open_brackets


_MENU = (
    "Enter 1 to insert value in stack",
    "Enter 2 to delete value from stack",
    "Enter 3 to print all values in stack",
    "Enter 4 to exit",
)


def _read() -> str | None:
    try:
        return input().strip()
    except EOFError:
        return None


def _insert(stack: Stack) -> None:
    print("Enter value to insert")
    raw = _read()
    if raw is None:
        return
    try:
        value = int(raw)
    except ValueError:
        print(f"Invalid value: {raw}")
        return
    try:
        stack.push(value)
    except StackFullError:
        print("Stack is full")


def _pop(stack: Stack) -> None:
    try:
        value = stack.pop()
    except StackEmptyError:
        print("NO Node to pop")
    else:
        print(f"Node Popped with value {value}")


def _show(stack: Stack) -> None:
    if stack.is_empty():
        print("NO Value in the stack")
        return
    print("All Values in the stack are")
    for value in stack:
        print(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a menu-driven stack session reading choices from standard input."""
    parser = argparse.ArgumentParser(description="Interactive integer stack.")
    parser.add_argument("--capacity", type=int, default=None, help="maximum number of values")
    args = parser.parse_args(argv)
    stack = Stack(args.capacity)
    actions = {1: _insert, 2: _pop, 3: _show}

    while True:
        for line in _MENU:
            print(line)
        raw = _read()
        if raw is None:
            break
        try:
            choice = int(raw)
        except ValueError:
            continue
        if choice == 4:
            break
        action = actions.get(choice)
        if action is not None:
            action(stack)
    return 0


if __name__ == "__main__":
    sys.exit(main())
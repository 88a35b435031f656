"""A singly linked list with the usual insertion, deletion and query operations."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice, pairwise
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Node | None = None


def has_cycle(head: Node | None) -> bool:
    """Return True if following ``next`` links from ``head`` loops forever."""
    slow = fast = head
    while slow and fast and fast.next:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


class LinkedList:
    """A singly linked list that keeps references to its first and last nodes.

    Positions given to the positional methods count from 1.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> Node:
        if position >= 1:
            for index, node in enumerate(self._nodes(), 1):
                if index == position:
                    return node
        raise IndexError(f"position {position} out of range")

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self))

    def __contains__(self, value: object) -> bool:
        return any(data == value for data in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = Node(value)
        if self._tail is None:
            self.head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after the node at ``position``; position 0 means the front."""
        if position == 0:
            self.prepend(value)
            return
        node = self._node_at(position)
        node.next = Node(value, node.next)
        if node is self._tail:
            self._tail = node.next

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        if position < 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.prepend(value)
        else:
            self.insert_after(position - 1, value)

    def insert_sorted(self, value: Any) -> None:
        """Insert ``value`` into an ascending list, keeping it ascending."""
        prev: Node | None = None
        node = self.head
        while node is not None and node.data < value:
            prev = node
            node = node.next
        if prev is None:
            self.prepend(value)
        else:
            prev.next = Node(value, node)
            if prev is self._tail:
                self._tail = prev.next

    def delete(self, index: int) -> Any:
        """Remove the node at ``index`` and return its value."""
        if index == 1:
            return self.pop_front()
        if index < 1:
            raise IndexError(f"position {index} out of range")
        prev = self._node_at(index - 1)
        target = prev.next
        if target is None:
            raise IndexError(f"position {index} out of range")
        prev.next = target.next
        if target is self._tail:
            self._tail = prev
        return target.data

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        return node.data

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            return self.pop_front()
        prev = self.head
        while prev.next is not None and prev.next.next is not None:
            prev = prev.next
        last = prev.next
        prev.next = None
        self._tail = prev
        return last.data

    def remove_adjacent_duplicates(self) -> None:
        """Collapse runs of equal neighbouring values to a single node."""
        node = self.head
        while node is not None and node.next is not None:
            if node.data == node.next.data:
                node.next = node.next.next
            else:
                node = node.next
        self._tail = node

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of every value."""
        seen: set[Any] = set()
        prev: Node | None = None
        node = self.head
        while node is not None:
            if node.data in seen:
                prev.next = node.next
            else:
                seen.add(node.data)
                prev = node
            node = node.next
        self._tail = prev

    def delete_middle(self) -> Any:
        """Remove the middle node (the second of two for even lengths) and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        prev: Node | None = None
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            prev = slow
            slow = slow.next
        if prev is None:
            return self.pop_front()
        prev.next = slow.next
        if slow is self._tail:
            self._tail = prev
        return slow.data

    def reverse(self) -> None:
        """Reverse the list in place by turning its links around."""
        prev: Node | None = None
        node = self.head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self.head = prev

    def total(self) -> Any:
        """Return the sum of the values."""
        return sum(self)

    def max(self) -> Any:
        """Return the largest value."""
        if self.head is None:
            raise ValueError("max of an empty list")
        return max(self)

    def min(self) -> Any:
        """Return the smallest value."""
        if self.head is None:
            raise ValueError("min of an empty list")
        return min(self)

    def middle(self) -> Any:
        """Return the middle value (the second of two for even lengths)."""
        if self.head is None:
            raise IndexError("empty list has no middle")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.data

    def nth_from_end(self, n: int) -> Any:
        """Return the ``n``-th value counted from the end, the last being 1."""
        length = len(self)
        if not 1 <= n <= length:
            raise IndexError(f"position {n} out of range")
        return next(islice(self, length - n, None))

    def is_palindrome(self) -> bool:
        """Return True if the values read the same in both directions."""
        values = list(self)
        return values == values[::-1]

    def is_sorted(self) -> bool:
        """Return True if the values never decrease."""
        return all(a <= b for a, b in pairwise(self))

    def has_cycle(self) -> bool:
        """Return True if the links starting at the head form a loop."""
        return has_cycle(self.head)
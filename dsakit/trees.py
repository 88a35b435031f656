"""Binary tree nodes, binary-search-tree insertion, traversals and measures."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(eq=False)
class TreeNode:
    """A binary tree node that also knows its parent."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = field(default=None, repr=False)


def bst_insert(root: TreeNode | None, data: Any) -> TreeNode:
    """Insert ``data`` into the search tree at ``root`` and return the root.

    Values equal to a node's go into its left subtree.
    """
    new = TreeNode(data)
    if root is None:
        return new
    node = root
    while True:
        if data <= node.data:
            if node.left is None:
                node.left = new
                break
            node = node.left
        else:
            if node.right is None:
                node.right = new
                break
            node = node.right
    new.parent = node
    return root


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then the node, then the right subtree."""
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.data
        node = node.right


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield each node's value before those of its subtrees."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node.data
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield each node's value after those of its subtrees."""
    pending = [(root, False)] if root is not None else []
    while pending:
        node, expanded = pending.pop()
        if expanded:
            yield node.data
            continue
        pending.append((node, True))
        if node.right is not None:
            pending.append((node.right, False))
        if node.left is not None:
            pending.append((node.left, False))


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values level by level, left to right within each level."""
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        yield node.data
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def spiral_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values level by level, alternating direction from one level to the next.

    The root level is followed by the second level read right to left.
    """
    current: list[TreeNode] = [root] if root is not None else []
    other: list[TreeNode] = []
    while current or other:
        while current:
            node = current.pop()
            yield node.data
            if node.left is not None:
                other.append(node.left)
            if node.right is not None:
                other.append(node.right)
        while other:
            node = other.pop()
            yield node.data
            if node.right is not None:
                current.append(node.right)
            if node.left is not None:
                current.append(node.left)


def height(root: TreeNode | None) -> int:
    """Return the number of levels in the tree; an empty tree has height 0."""
    levels = 0
    level = [root] if root is not None else []
    while level:
        levels += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return levels


def size(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in preorder(root))


def is_bst(root: TreeNode | None) -> bool:
    """Return True if every node is greater than its left subtree and less than its right."""
    pending: list[tuple[TreeNode | None, Any, Any]] = [(root, None, None)]
    while pending:
        node, low, high = pending.pop()
        if node is None:
            continue
        if (low is not None and node.data <= low) or (high is not None and node.data >= high):
            return False
        pending.append((node.left, low, node.data))
        pending.append((node.right, node.data, high))
    return True
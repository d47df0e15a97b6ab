"""Binary tree nodes built from a preorder listing with a marker for empty."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

NO_NODE = -1


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def build_tree(values: Iterable[Any]) -> Optional[Node]:
    """Build a tree from values given in preorder, -1 marking an empty child.

    Values left over once the tree is complete are ignored. Raises
    ValueError if the values run out before the tree is complete.
    """
    items = iter(values)

    def build() -> Optional[Node]:
        try:
            data = next(items)
        except StopIteration:
            raise ValueError("values ended before the tree was complete") from None
        if data == NO_NODE:
            return None
        node = Node(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: Optional[Node]) -> Iterator[Any]:
    """Yield node data in preorder: node, left subtree, right subtree."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.data
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
from __future__ import annotations

from typing import Generic, Optional

from .types import C, E, T


# -----------------------------
# Node Base Class
# -----------------------------
class NodeBase(Generic[T]):
    """Base class for nodes in trees and linked lists."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value: T = value


# -----------------------------
# Binary Tree Node
# -----------------------------
class BinaryTreeNode(NodeBase[C]):
    """A node in a binary tree with optional left and right children."""

    __slots__ = ("left", "right")

    def __init__(
        self,
        value: C,
        left: Optional[BinaryTreeNode[C]] = None,
        right: Optional[BinaryTreeNode[C]] = None,
    ) -> None:
        super().__init__(value)
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"


# -----------------------------
# Singly Linked List Node
# -----------------------------
class SLLNode(NodeBase[E]):
    """Singly-linked list node."""

    __slots__ = ("next",)

    def __init__(self, value: E, next: Optional[SLLNode[E]] = None) -> None:
        super().__init__(value)
        self.next: Optional[SLLNode[E]] = next

    def __repr__(self) -> str:
        return f"SLLNode(value={self.value!r}, next={getattr(self.next, 'value', None)!r})"

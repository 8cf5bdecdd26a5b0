"""
An ordered binary tree.

Values are placed by comparison: smaller values go left, everything else
(including equal values) goes right. There is no deletion and no
rebalancing, so the shape depends entirely on insertion order.

Time Complexity:
Append: O(h), where h is the height of the tree (O(n) worst case)
Reverse: O(n), since every node has its children swapped
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, List, NoReturn, Optional

from .config import DEFAULT_CONFIG, StructureConfig
from .errors import IncomparableValueError
from .nodes import BinaryTreeNode
from .types import C, supports_ordering

logger = logging.getLogger(__name__)


class BinaryTree(Generic[C]):
    """Binary tree ordered by ``<`` with ties sent to the right.

    Invariants:
        - Every value in a node's left subtree compares less than the node
        - Every value in a node's right subtree compares greater-or-equal
        - After an odd number of ``reverse()`` calls both sides are mirrored
    """

    __slots__ = ("_root", "_size", "_config")

    def __init__(self, config: StructureConfig | None = None) -> None:
        self._root: Optional[BinaryTreeNode[C]] = None
        self._size = 0
        self._config = config or DEFAULT_CONFIG

    @property
    def root(self) -> Optional[BinaryTreeNode[C]]:
        return self._root

    @property
    def size(self) -> int:
        return self._size

    @property
    def config(self) -> StructureConfig:
        return self._config

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    # -------------------------------
    # Append
    # -------------------------------
    def append(self, value: C) -> None:
        """
        Appends a value as a new leaf.
        Descends left while the value is smaller than the current node and
        right otherwise, so duplicates accumulate in the right subtree.
        Raises IncomparableValueError before any link is written if the
        value cannot be compared with the values already stored.
        """
        if self._config.check_values and not supports_ordering(value):
            self._reject(value, f"{type(value).__name__} does not define ordering")

        new_node = BinaryTreeNode(value)
        if self._root is None:
            self._root = new_node
        else:
            parent = self._root
            while True:
                try:
                    go_left = value < parent.value
                except TypeError as e:
                    self._reject(value, str(e), cause=e)
                if go_left:
                    if parent.left is None:
                        parent.left = new_node
                        break
                    parent = parent.left
                else:
                    if parent.right is None:
                        parent.right = new_node
                        break
                    parent = parent.right

        self._size += 1
        logger.debug(f"{self._label()} appended {value!r}, size={self._size}")

    def _reject(self, value: object, reason: str, cause: Exception | None = None) -> NoReturn:
        logger.warning(f"{self._label()} rejected {value!r}: {reason}")
        raise IncomparableValueError(
            f"cannot order {type(value).__name__} value {value!r}: {reason}"
        ) from cause

    # -------------------------------
    # Reverse
    # -------------------------------
    def reverse(self) -> None:
        """
        Mirrors the tree in place.
        Each node has its children swapped before its (new) left and right
        subtrees are visited. Values never move.
        Walks with an explicit stack, so depth is not bounded by the
        interpreter's recursion limit.
        Time Complexity: O(n)
        Space Complexity: O(h) for the stack
        """
        stack: List[BinaryTreeNode[C]] = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            # Right pushed first so the new left subtree is visited first.
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        logger.debug(f"{self._label()} reversed {self._size} nodes")

    # -------------------------------
    # Traversals
    # -------------------------------
    def inorder(self) -> Iterator[C]:
        stack: List[BinaryTreeNode[C]] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[C]:
        stack: List[BinaryTreeNode[C]] = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def __iter__(self) -> Iterator[C]:
        return self.inorder()

    # -------------------------------
    # Utility
    # -------------------------------
    def to_list(self) -> List[C]:
        """Return all values of the tree in inorder as a list."""
        return list(self.inorder())

    def _label(self) -> str:
        return f"BinaryTree[{self._config.name}]" if self._config.name else "BinaryTree"

    def __repr__(self) -> str:
        return f"BinaryTree({self.to_list()!r})"

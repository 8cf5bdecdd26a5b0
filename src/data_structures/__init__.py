"""Data structures - an ordered binary tree and a singly linked list."""

from .config import DEFAULT_CONFIG, StructureConfig
from .errors import (
    DataStructureError,
    IncomparableValueError,
    UnequatableValueError,
)
from .linkedlist import LinkedList, LinkedListIterator
from .nodes import BinaryTreeNode, NodeBase, SLLNode
from .tree import BinaryTree
from .types import SupportsEquality, SupportsOrdering

__all__ = [
    "DEFAULT_CONFIG",
    "StructureConfig",
    "DataStructureError",
    "IncomparableValueError",
    "UnequatableValueError",
    "LinkedList",
    "LinkedListIterator",
    "BinaryTreeNode",
    "NodeBase",
    "SLLNode",
    "BinaryTree",
    "SupportsEquality",
    "SupportsOrdering",
]

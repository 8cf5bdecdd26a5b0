"""
A singly linked list with tail append and first-match removal.

Time Complexity:
Append: O(n), since no tail pointer is kept
Remove: O(n), since in the worst case the entire list must be scanned
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
from collections.abc import Iterator
from typing import Generic, List, NoReturn, Optional

from .config import DEFAULT_CONFIG, StructureConfig
from .errors import UnequatableValueError
from .nodes import SLLNode
from .types import E, supports_equality

logger = logging.getLogger(__name__)


class LinkedListIterator(Generic[E]):
    """Forward iterator that only remembers the next node to visit."""

    __slots__ = ("_current",)

    def __init__(self, head: Optional[SLLNode[E]]) -> None:
        self._current = head

    def __iter__(self) -> LinkedListIterator[E]:
        return self

    def __next__(self) -> E:
        node = self._current
        if node is None:
            raise StopIteration
        self._current = node.next
        return node.value


class LinkedList(Generic[E]):
    """
    LinkedList implements a singly linked list of SLLNode containers.

    Invariants:
        - length equals the number of nodes reachable from head
        - values are kept in append order
    """

    __slots__ = ("_head", "_length", "_config")

    def __init__(self, config: StructureConfig | None = None) -> None:
        self._head: Optional[SLLNode[E]] = None
        self._length: int = 0
        self._config = config or DEFAULT_CONFIG

    @property
    def head(self) -> Optional[SLLNode[E]]:
        return self._head

    @property
    def length(self) -> int:
        return self._length

    @property
    def config(self) -> StructureConfig:
        return self._config

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._head is None

    def iter(self) -> LinkedListIterator[E]:
        """Returns a fresh forward iterator over the stored values."""
        return LinkedListIterator(self._head)

    def __iter__(self) -> Iterator[E]:
        return self.iter()

    def append(self, value: E) -> None:
        """
        Attaches a new node holding value after the last node.
        O(n) since the list is walked to find the tail.
        """
        self._check(value)
        new_node = SLLNode(value)
        if self._head is None:
            self._head = new_node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = new_node
        self._length += 1
        logger.debug(f"{self._label()} appended {value!r}, length={self._length}")

    def remove(self, value: E) -> bool:
        """
        Unlinks the first node whose value equals value.
        Returns True if a node was removed, False if there was no match.
        Later duplicates are left in place.
        """
        self._check(value)
        prior: Optional[SLLNode[E]] = None
        current = self._head
        while current is not None:
            if current.value == value:
                if prior is None:
                    self._head = current.next
                else:
                    prior.next = current.next
                self._length -= 1
                logger.debug(
                    f"{self._label()} removed {value!r}, length={self._length}"
                )
                return True
            prior, current = current, current.next

        logger.debug(f"{self._label()} has no {value!r} to remove")
        return False

    def to_list(self) -> List[E]:
        return list(self.iter())

    def _check(self, value: E) -> None:
        if self._config.check_values and not supports_equality(value):
            self._reject(value)

    def _reject(self, value: object) -> NoReturn:
        reason = f"{type(value).__name__} does not support equality"
        logger.warning(f"{self._label()} rejected {value!r}: {reason}")
        raise UnequatableValueError(reason)

    def _label(self) -> str:
        return f"LinkedList[{self._config.name}]" if self._config.name else "LinkedList"

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"

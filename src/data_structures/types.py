"""Comparison protocols and type variables used by the containers."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar


# A protocol expressing that a type supports ordering comparisons
class SupportsOrdering(Protocol):
    def __lt__(self, other: Any) -> bool: ...


# A protocol expressing that a type supports equality comparisons
class SupportsEquality(Protocol):
    def __eq__(self, other: Any) -> bool: ...


T = TypeVar("T")
C = TypeVar("C", bound=SupportsOrdering)
E = TypeVar("E", bound=SupportsEquality)


def supports_ordering(value: Any) -> bool:
    """True if the value's type defines its own ``<``.

    A heuristic only: it does not prove ``<`` is a total order. ``dict``
    passes even though its ``<`` always raises, and ``set`` passes although
    ``<`` means subset. Failures during tree descent are still caught there.
    """
    lt = getattr(type(value), "__lt__", None)
    return lt is not None and lt is not object.__lt__


def supports_equality(value: Any) -> bool:
    """True unless the value's type sets ``__eq__ = None``."""
    return getattr(type(value), "__eq__", None) is not None

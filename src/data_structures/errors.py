"""Exception hierarchy for the containers.

Defines all custom exceptions raised by the package.
"""

from __future__ import annotations


class DataStructureError(Exception):
    """Base exception for all container errors."""
    pass


class IncomparableValueError(DataStructureError, TypeError):
    """Raised when a value cannot be ordered against the tree's values."""
    pass


class UnequatableValueError(DataStructureError, TypeError):
    """Raised when a value's type has disabled equality comparison."""
    pass

"""Unit tests for shared configuration and value checks."""

import dataclasses
from dataclasses import dataclass

import pytest

from data_structures import DEFAULT_CONFIG, DataStructureError, StructureConfig
from data_structures.errors import IncomparableValueError, UnequatableValueError
from data_structures.types import supports_equality, supports_ordering


def test_default_config():
    assert DEFAULT_CONFIG.check_values is True
    assert DEFAULT_CONFIG.name is None


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.check_values = False


@dataclass(order=True)
class Version:
    major: int
    minor: int


class Plain:
    pass


class NoEquality:
    __eq__ = None


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, True),
        (1.5, True),
        ("a", True),
        ((1, 2), True),
        (Version(1, 0), True),
        (None, False),
        ({}, True),  # heuristic: dict defines __lt__
        (object(), False),
        (Plain(), False),
    ],
)
def test_supports_ordering(value, expected):
    assert supports_ordering(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, True),
        (None, True),
        (Plain(), True),
        (NoEquality(), False),
    ],
)
def test_supports_equality(value, expected):
    assert supports_equality(value) is expected


@pytest.mark.parametrize("error", [IncomparableValueError, UnequatableValueError])
def test_errors_share_base(error):
    assert issubclass(error, DataStructureError)
    assert issubclass(error, TypeError)

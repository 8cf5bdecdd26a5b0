"""Configuration shared by the containers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StructureConfig:
    """Configuration parameters for a container instance.

    Attributes:
        check_values: Reject values lacking the comparison the container
            relies on before any link is written
        name: Optional label included in log records
    """

    check_values: bool = True
    name: str | None = None


DEFAULT_CONFIG = StructureConfig()

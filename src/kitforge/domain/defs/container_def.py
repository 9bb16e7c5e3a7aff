"""Container capacity definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ContainerDef:
    """Capacity of a uniform, vest or backpack class."""

    id: str
    capacity: int

"""Item mass definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ItemDef:
    id: str
    mass: int

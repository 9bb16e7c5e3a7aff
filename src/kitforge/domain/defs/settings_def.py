"""Engine settings for loadout instantiation."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class EngineSettings:
    """Fallbacks and sentinels used by the instantiator.

    ``keep_when_empty`` lists randomized slots where an empty pool leaves the
    unit's current item in place instead of clearing it.
    """

    default_capacity: int = 100
    default_item_mass: int = 1
    keep_sentinel: str = "Default"
    keep_when_empty: frozenset[str] = field(default_factory=frozenset)

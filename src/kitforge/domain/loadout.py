"""Concrete per-unit loadout structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from kitforge.core.types import ContainerSlot, SlotAction


@dataclass(slots=True)
class SlotAssignment:
    """What happens to one slot when the loadout is applied to a unit."""

    slot: str
    action: SlotAction
    items: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {"action": self.action, "items": list(self.items)}


@dataclass(slots=True)
class ContainerContents:
    """Tracks the load of a uniform, vest or backpack."""

    slot: ContainerSlot
    container_id: str
    capacity: int
    load: int = 0
    contents: Dict[str, int] = field(default_factory=dict)

    def fits(self, mass: int) -> bool:
        return self.load + mass <= self.capacity

    def add(self, item_id: str, mass: int, quantity: int = 1) -> None:
        if quantity <= 0:
            return
        self.contents[item_id] = self.contents.get(item_id, 0) + quantity
        self.load += mass * quantity

    def to_dict(self) -> dict[str, object]:
        return {
            "container": self.container_id,
            "capacity": self.capacity,
            "load": self.load,
            "contents": dict(self.contents),
        }


@dataclass(frozen=True, slots=True)
class CallbackDescriptor:
    """Opaque post-equip hook for the engine to run with the unit as argument."""

    class_name: str
    code: str


@dataclass(slots=True)
class Loadout:
    """Equipment assignment for a single unit instance."""

    class_name: str
    display_name: str
    seed: int
    slots: Dict[str, SlotAssignment] = field(default_factory=dict)
    containers: Dict[ContainerSlot, ContainerContents] = field(default_factory=dict)
    callback: CallbackDescriptor | None = None

    def chosen(self, slot: str) -> List[str]:
        """Return the items granted in a slot (empty when cleared or kept)."""
        assignment = self.slots.get(slot)
        if assignment is None:
            return []
        return list(assignment.items)

    def to_dict(self) -> dict[str, object]:
        return {
            "class": self.class_name,
            "displayName": self.display_name,
            "seed": self.seed,
            "slots": {name: assignment.to_dict() for name, assignment in self.slots.items()},
            "containers": {name: box.to_dict() for name, box in self.containers.items()},
            "callback": self.callback.code if self.callback else None,
        }


@dataclass(frozen=True, slots=True)
class LoadoutWarning:
    """Non-fatal issue recorded while instantiating a loadout."""

    code: str
    message: str
    context: dict[str, str]


@dataclass(frozen=True, slots=True)
class CapacityExceededWarning(LoadoutWarning):
    """Entries that fit in no container and were dropped."""


def format_warning(warning: LoadoutWarning) -> str:
    context = " ".join(f"{key}={value}" for key, value in warning.context.items())
    suffix = f" ({context})" if context else ""
    return f"[WARN] {warning.code}: {warning.message}{suffix}"


@dataclass(slots=True)
class InstantiationResult:
    loadout: Loadout
    warnings: List[LoadoutWarning] = field(default_factory=list)

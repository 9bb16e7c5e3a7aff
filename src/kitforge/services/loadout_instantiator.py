"""Turns a resolved class into a concrete equipment assignment for one unit."""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping

from kitforge.core.rng import RNG
from kitforge.core.types import ContainerSlot
from kitforge.data.repositories import ContainersRepository, ItemsRepository, SettingsRepository
from kitforge.domain.defs import EngineSettings
from kitforge.domain.loadout import (
    CallbackDescriptor,
    CapacityExceededWarning,
    ContainerContents,
    InstantiationResult,
    Loadout,
    LoadoutWarning,
    SlotAssignment,
)
from kitforge.domain.records import ResolvedClass
from kitforge.domain.slots import (
    CONTAINER_FILL_SLOTS,
    CONTAINER_ORDER,
    FIXED_SLOTS,
    RANDOMIZED_SLOTS,
)

logger = logging.getLogger(__name__)


class LoadoutInstantiator:
    """Applies the per-slot policies to a resolved class.

    The instantiator only reads the resolved class and its definition
    repositories, so one instance may serve many units as long as every unit
    gets its own RNG.
    """

    def __init__(
        self,
        *,
        containers_repo: ContainersRepository | None = None,
        items_repo: ItemsRepository | None = None,
        settings: EngineSettings | None = None,
        base_path=None,
    ) -> None:
        self._containers_repo = containers_repo or ContainersRepository(base_path=base_path)
        self._items_repo = items_repo or ItemsRepository(base_path=base_path)
        self._settings = settings or SettingsRepository(base_path=base_path).get()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def instantiate(
        self,
        resolved: ResolvedClass,
        rng: RNG,
        *,
        current: Mapping[str, str] | None = None,
    ) -> InstantiationResult:
        """Build one unit's loadout.

        ``current`` maps slots to the items the unit already wears; it only
        matters for slots that end up kept, where a kept uniform, vest or
        backpack still provides its container.
        """
        current = current or {}
        loadout = Loadout(class_name=resolved.name, display_name=resolved.display_name, seed=rng.seed)
        warnings: List[LoadoutWarning] = []

        for slot in RANDOMIZED_SLOTS:
            loadout.slots[slot] = self._pick_randomized(slot, resolved.sequence(slot), rng)
        for slot in FIXED_SLOTS:
            loadout.slots[slot] = self._grant_fixed(slot, resolved.sequence(slot))

        self._open_containers(loadout, current)
        self._stow_backpack_items(loadout, warnings)
        for slot in CONTAINER_FILL_SLOTS:
            loadout.slots[slot] = self._fill_containers(loadout, slot, resolved.sequence(slot), warnings)

        if resolved.code.strip():
            loadout.callback = CallbackDescriptor(class_name=resolved.name, code=resolved.code)

        logger.debug(
            "Instantiated '%s' with seed %d (%d warnings)", resolved.name, rng.seed, len(warnings)
        )
        return InstantiationResult(loadout=loadout, warnings=warnings)

    def _pick_randomized(self, slot: str, pool: tuple[str, ...], rng: RNG) -> SlotAssignment:
        if not pool:
            if slot in self._settings.keep_when_empty:
                return SlotAssignment(slot=slot, action="keep")
            return SlotAssignment(slot=slot, action="clear")
        chosen = rng.choice(pool)
        if chosen == self._settings.keep_sentinel:
            return SlotAssignment(slot=slot, action="keep")
        return SlotAssignment(slot=slot, action="equip", items=[chosen])

    def _grant_fixed(self, slot: str, entries: tuple[str, ...]) -> SlotAssignment:
        if not entries:
            return SlotAssignment(slot=slot, action="clear")
        if entries == (self._settings.keep_sentinel,):
            return SlotAssignment(slot=slot, action="keep")
        return SlotAssignment(slot=slot, action="equip", items=list(entries))

    def _open_containers(self, loadout: Loadout, current: Mapping[str, str]) -> None:
        container_slot: ContainerSlot
        for container_slot in CONTAINER_ORDER:
            assignment = loadout.slots[container_slot]
            if assignment.action == "equip":
                container_id = assignment.items[0]
            elif assignment.action == "keep" and current.get(container_slot):
                container_id = current[container_slot]
            else:
                continue
            loadout.containers[container_slot] = ContainerContents(
                slot=container_slot,
                container_id=container_id,
                capacity=self._capacity_of(container_id),
            )

    def _stow_backpack_items(self, loadout: Loadout, warnings: List[LoadoutWarning]) -> None:
        entries = loadout.slots["backpackItems"].items
        if not entries:
            return
        backpack = loadout.containers.get("backpack")
        if backpack is None:
            warnings.append(
                LoadoutWarning(
                    code="NO_BACKPACK",
                    message="backpackItems were listed but the unit has no backpack.",
                    context={"class": loadout.class_name, "dropped": str(len(entries))},
                )
            )
            return
        # Listed backpack items are always granted, even past capacity.
        for item_id in entries:
            backpack.add(item_id, self._mass_of(item_id))

    def _fill_containers(
        self,
        loadout: Loadout,
        slot: str,
        entries: tuple[str, ...],
        warnings: List[LoadoutWarning],
    ) -> SlotAssignment:
        placed: List[str] = []
        dropped: Dict[str, int] = {}
        containers = [loadout.containers[name] for name in CONTAINER_ORDER if name in loadout.containers]
        for item_id in entries:
            mass = self._mass_of(item_id)
            target = next((box for box in containers if box.fits(mass)), None)
            if target is None:
                dropped[item_id] = dropped.get(item_id, 0) + 1
                continue
            target.add(item_id, mass)
            placed.append(item_id)

        for item_id, count in dropped.items():
            logger.warning(
                "Class '%s': %d x %s from %s did not fit and were dropped",
                loadout.class_name,
                count,
                item_id,
                slot,
            )
            warnings.append(
                CapacityExceededWarning(
                    code="CAPACITY_EXCEEDED",
                    message=f"{count} x {item_id} did not fit in any container and were dropped.",
                    context={
                        "class": loadout.class_name,
                        "slot": slot,
                        "item": item_id,
                        "dropped": str(count),
                    },
                )
            )
        action = "equip" if placed else "clear"
        return SlotAssignment(slot=slot, action=action, items=placed)

    def _capacity_of(self, container_id: str) -> int:
        container = self._containers_repo.find(container_id)
        if container is None:
            return self._settings.default_capacity
        return container.capacity

    def _mass_of(self, item_id: str) -> int:
        item = self._items_repo.find(item_id)
        if item is None:
            return self._settings.default_item_mass
        return item.mass

"""Service for rolling unit loadouts from a resolved universe."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Mapping

from kitforge.core.rng import RNG, derive_seed
from kitforge.domain.loadout import InstantiationResult
from kitforge.services.inheritance_resolver import ResolvedUniverse
from kitforge.services.loadout_instantiator import LoadoutInstantiator


class LoadoutService:
    """Instantiate units of a class with reproducible per-unit seeds."""

    def __init__(
        self,
        *,
        universe: ResolvedUniverse,
        instantiator: LoadoutInstantiator | None = None,
    ) -> None:
        self._universe = universe
        self._instantiator = instantiator or LoadoutInstantiator()

    @property
    def universe(self) -> ResolvedUniverse:
        return self._universe

    def roll(
        self,
        class_name: str,
        seed: int,
        *,
        current: Mapping[str, str] | None = None,
    ) -> InstantiationResult:
        try:
            resolved = self._universe.get(class_name)
        except KeyError as exc:
            raise ValueError(f"Class '{class_name}' is not defined.") from exc
        return self._instantiator.instantiate(resolved, RNG(seed), current=current)

    def roll_units(
        self,
        class_name: str,
        base_seed: int,
        count: int,
        *,
        max_workers: int | None = None,
    ) -> List[InstantiationResult]:
        """Roll ``count`` units, each with a seed derived from its index.

        Results do not depend on ``max_workers``; every unit owns its RNG.
        """
        if count < 0:
            raise ValueError("Unit count cannot be negative.")
        seeds = [unit_seed(base_seed, class_name, index) for index in range(count)]
        if not max_workers or max_workers <= 1:
            return [self.roll(class_name, seed) for seed in seeds]
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(lambda seed: self.roll(class_name, seed), seeds))


def unit_seed(base_seed: int, class_name: str, index: int) -> int:
    return derive_seed(base_seed, class_name, index)

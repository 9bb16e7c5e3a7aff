"""Service layer exports."""

from .inheritance_resolver import ResolvedUniverse, default_field_table, resolve_universe
from .loadout_instantiator import LoadoutInstantiator
from .loadout_service import LoadoutService, unit_seed
from .universe_loader import load_universe, resolve_text

__all__ = [
    "LoadoutInstantiator",
    "LoadoutService",
    "ResolvedUniverse",
    "default_field_table",
    "load_universe",
    "resolve_text",
    "resolve_universe",
    "unit_seed",
]

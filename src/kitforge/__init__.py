"""Resolution engine for inheriting loadout class files."""

from .core.rng import RNG
from .parser import parse_universe
from .services import LoadoutInstantiator, LoadoutService, load_universe, resolve_text, resolve_universe

__all__ = [
    "RNG",
    "LoadoutInstantiator",
    "LoadoutService",
    "load_universe",
    "parse_universe",
    "resolve_text",
    "resolve_universe",
]

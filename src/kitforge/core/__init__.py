"""Core helpers shared by every layer."""

from .rng import RNG, derive_seed

__all__ = ["RNG", "derive_seed"]

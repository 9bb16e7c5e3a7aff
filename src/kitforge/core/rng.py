"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

import hashlib
from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")

_SEED_MASK = 0x7FFFFFFF


def derive_seed(base_seed: int, *labels: object) -> int:
    """Mix a base seed with labels into a stable 31-bit seed."""
    material = ":".join([str(base_seed), *(str(label) for label in labels)])
    digest = hashlib.sha256(material.encode("utf-8")).hexdigest()[:16]
    return int(digest, 16) & _SEED_MASK


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._random = Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return seq[self._random.randrange(len(seq))]

    def child(self, *labels: object) -> "RNG":
        """Return an independent RNG derived from this RNG's seed and labels."""
        return RNG(derive_seed(self._seed, *labels))

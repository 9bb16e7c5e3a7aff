"""Closed catalog of loadout slots, grouped by how each one is instantiated."""
from __future__ import annotations

from kitforge.core.types import ContainerSlot

DISPLAY_NAME_FIELD = "displayName"
CODE_FIELD = "code"

RANDOMIZED_SLOTS: tuple[str, ...] = (
    "uniform",
    "vest",
    "backpack",
    "headgear",
    "goggles",
    "hmd",
    "faces",
    "insignias",
    "primaryWeapon",
    "scope",
    "bipod",
    "attachment",
    "silencer",
)

FIXED_SLOTS: tuple[str, ...] = (
    "secondaryWeapon",
    "secondaryAttachments",
    "sidearmWeapon",
    "sidearmAttachments",
    "linkedItems",
    "backpackItems",
)

# Filled in this order.
CONTAINER_FILL_SLOTS: tuple[str, ...] = ("magazines", "items")

SCALAR_FIELDS: tuple[str, ...] = (DISPLAY_NAME_FIELD, CODE_FIELD)

SEQUENCE_SLOTS: tuple[str, ...] = RANDOMIZED_SLOTS + FIXED_SLOTS + CONTAINER_FILL_SLOTS

# Fill order for magazines and items.
CONTAINER_ORDER: tuple[ContainerSlot, ...] = ("uniform", "vest", "backpack")


def is_sequence_field(name: str) -> bool:
    return name in SEQUENCE_SLOTS


def is_scalar_field(name: str) -> bool:
    return name in SCALAR_FIELDS

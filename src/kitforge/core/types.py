"""Shared type aliases for the core and domain layers."""
from typing import Literal

SlotAction = Literal["equip", "clear", "keep"]
ContainerSlot = Literal["uniform", "vest", "backpack"]

__all__ = ["ContainerSlot", "SlotAction"]

"""Domain definition exports."""

from .container_def import ContainerDef
from .item_def import ItemDef
from .settings_def import EngineSettings

__all__ = [
    "ContainerDef",
    "EngineSettings",
    "ItemDef",
]

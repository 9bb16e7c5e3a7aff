"""Repository exports."""

from .base import RepositoryBase
from .containers_repo import ContainersRepository
from .items_repo import ItemsRepository
from .settings_repo import SettingsRepository

__all__ = [
    "ContainersRepository",
    "ItemsRepository",
    "RepositoryBase",
    "SettingsRepository",
]

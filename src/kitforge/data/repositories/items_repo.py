"""Item mass repository."""
from __future__ import annotations

from typing import Dict

from kitforge.data.errors import DataValidationError
from kitforge.data.repositories.base import RepositoryBase
from kitforge.domain.defs import ItemDef


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads per-item mass used when filling containers."""

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or not raw_id:
                raise DataValidationError("Item IDs must be non-empty strings.")
            data = self._require_mapping(payload, f"item '{raw_id}'")
            self._assert_exact_fields(data, {"mass"}, f"item '{raw_id}'")
            mass = self._require_non_negative_int(data["mass"], f"item '{raw_id}' mass")
            items[raw_id] = ItemDef(id=raw_id, mass=mass)
        return items

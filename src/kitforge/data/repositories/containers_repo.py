"""Container capacities repository."""
from __future__ import annotations

from typing import Dict

from kitforge.data.errors import DataValidationError
from kitforge.data.repositories.base import RepositoryBase
from kitforge.domain.defs import ContainerDef


class ContainersRepository(RepositoryBase[ContainerDef]):
    """Loads uniform, vest and backpack capacities from containers.json."""

    def __init__(self, base_path=None) -> None:
        super().__init__("containers.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ContainerDef]:
        containers: Dict[str, ContainerDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or not raw_id:
                raise DataValidationError("Container IDs must be non-empty strings.")
            data = self._require_mapping(payload, f"container '{raw_id}'")
            self._assert_exact_fields(data, {"capacity"}, f"container '{raw_id}'")
            capacity = self._require_non_negative_int(data["capacity"], f"container '{raw_id}' capacity")
            containers[raw_id] = ContainerDef(id=raw_id, capacity=capacity)
        return containers

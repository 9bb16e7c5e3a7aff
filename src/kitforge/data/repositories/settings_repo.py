"""Engine settings repository."""
from __future__ import annotations

from pathlib import Path

from kitforge.data import paths
from kitforge.data.errors import DataValidationError
from kitforge.data.json_loader import load_json
from kitforge.domain.defs import EngineSettings
from kitforge.domain.slots import RANDOMIZED_SLOTS

_FIELDS = {"default_capacity", "default_item_mass", "keep_sentinel", "keep_when_empty"}


class SettingsRepository:
    """Loads the single EngineSettings object from settings.json."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else None
        self._settings: EngineSettings | None = None

    def get(self) -> EngineSettings:
        if self._settings is None:
            self._settings = self._build(self._load_raw())
        return self._settings

    def _load_raw(self) -> dict[str, object]:
        file_path = paths.get_definitions_path(self._base_path) / "settings.json"
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    @staticmethod
    def _build(raw: dict[str, object]) -> EngineSettings:
        actual = set(raw.keys())
        if actual != _FIELDS:
            missing = sorted(_FIELDS - actual)
            unknown = sorted(actual - _FIELDS)
            raise DataValidationError(
                f"settings has schema issues (missing fields: {missing}; unknown fields: {unknown})."
            )
        default_capacity = raw["default_capacity"]
        default_item_mass = raw["default_item_mass"]
        for key, value in (("default_capacity", default_capacity), ("default_item_mass", default_item_mass)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise DataValidationError(f"settings {key} must be a non-negative integer.")
        keep_sentinel = raw["keep_sentinel"]
        if not isinstance(keep_sentinel, str) or not keep_sentinel:
            raise DataValidationError("settings keep_sentinel must be a non-empty string.")
        keep_when_empty = raw["keep_when_empty"]
        if not isinstance(keep_when_empty, list) or not all(isinstance(slot, str) for slot in keep_when_empty):
            raise DataValidationError("settings keep_when_empty must be a list of slot names.")
        unknown_slots = sorted(set(keep_when_empty) - set(RANDOMIZED_SLOTS))
        if unknown_slots:
            raise DataValidationError(
                f"settings keep_when_empty references non-randomized slots: {unknown_slots}."
            )
        return EngineSettings(
            default_capacity=default_capacity,
            default_item_mass=default_item_mass,
            keep_sentinel=keep_sentinel,
            keep_when_empty=frozenset(keep_when_empty),
        )

from __future__ import annotations

import json
from pathlib import Path

EXAMPLE_LOADOUT = Path(__file__).resolve().parents[1] / "data" / "example_loadout.hpp"

DEFAULT_SETTINGS = {
    "default_capacity": 100,
    "default_item_mass": 1,
    "keep_sentinel": "Default",
    "keep_when_empty": [],
}


def write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def make_definitions_dir(
    tmp_path: Path,
    *,
    containers: dict | None = None,
    items: dict | None = None,
    settings: dict | None = None,
) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    write_json(definitions_dir / "containers.json", containers or {})
    write_json(definitions_dir / "items.json", items or {})
    write_json(definitions_dir / "settings.json", {**DEFAULT_SETTINGS, **(settings or {})})
    return definitions_dir


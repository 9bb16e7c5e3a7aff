"""Per-user CLI configuration loading."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_OUTPUT_FORMAT = "text"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "kitforge"
        return Path.home() / "kitforge"
    return Path.home() / ".config" / "kitforge"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_output_format(value: object) -> str:
    return "json" if value == "json" else _DEFAULT_OUTPUT_FORMAT


def _normalize_definitions_path(value: object) -> str | None:
    return value if isinstance(value, str) and value.strip() else None


def _defaults() -> Dict[str, str | None]:
    return {"output_format": _DEFAULT_OUTPUT_FORMAT, "definitions_path": None}


def load_config(path: Path | None = None) -> Dict[str, str | None]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return _defaults()
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "output_format": _normalize_output_format(raw.get("output_format")),
        "definitions_path": _normalize_definitions_path(raw.get("definitions_path")),
    }


"""Entry points that take loadout text or files to a resolved universe."""
from __future__ import annotations

import logging
from pathlib import Path

from kitforge.data.json_loader import read_text
from kitforge.parser import parse_universe
from kitforge.services.inheritance_resolver import ResolvedUniverse, resolve_universe

logger = logging.getLogger(__name__)


def resolve_text(text: str) -> ResolvedUniverse:
    """Parse and resolve one universe given as already-concatenated text."""
    records = parse_universe(text)
    logger.debug("Parsed %d class records", len(records))
    return resolve_universe(records)


def load_universe(path: Path | str) -> ResolvedUniverse:
    """Read a loadout file and resolve it."""
    file_path = Path(path)
    logger.debug("Loading loadout universe from %s", file_path)
    return resolve_text(read_text(file_path))

"""Shared CLI rendering helpers."""
from __future__ import annotations

import json
from typing import Sequence

from kitforge.domain.loadout import InstantiationResult, format_warning
from kitforge.domain.records import ResolvedClass, SequenceValue


def format_heading(title: str) -> str:
    return f"=== {title} ==="


def format_resolved_class(resolved: ResolvedClass) -> list[str]:
    """Return text lines describing one resolved class."""
    lines = [format_heading(f"{resolved.name} ({resolved.display_name or 'unnamed'})")]
    lines.append(f"lineage: {' -> '.join(resolved.lineage)}")
    for name, value in resolved.fields.items():
        if isinstance(value, SequenceValue):
            if not value.items:
                continue
            lines.append(f"{name}[] ({len(value.items)}): {', '.join(_collapse(value.items))}")
        elif value.value and name != "displayName":
            lines.append(f"{name} = {value.value}")
    return lines


def format_result(result: InstantiationResult) -> list[str]:
    """Return text lines describing one rolled unit."""
    loadout = result.loadout
    lines = [format_heading(f"{loadout.display_name or loadout.class_name} [seed {loadout.seed}]")]
    for slot, assignment in loadout.slots.items():
        if assignment.action == "clear":
            continue
        if assignment.action == "keep":
            lines.append(f"{slot}: (unchanged)")
            continue
        lines.append(f"{slot}: {', '.join(_collapse(assignment.items))}")
    for name, box in loadout.containers.items():
        lines.append(f"{name} load: {box.load}/{box.capacity} ({box.container_id})")
    if loadout.callback is not None:
        lines.append(f"on equip: {loadout.callback.code}")
    lines.extend(format_warning(warning) for warning in result.warnings)
    return lines


def to_json(payload: object) -> str:
    return json.dumps(payload, indent=2)


def _collapse(items: Sequence[str]) -> list[str]:
    """Collapse adjacent repeats: ['a', 'a', 'b'] -> ['2x a', 'b']."""
    collapsed: list[str] = []
    index = 0
    while index < len(items):
        run = 1
        while index + run < len(items) and items[index + run] == items[index]:
            run += 1
        collapsed.append(f"{run}x {items[index]}" if run > 1 else items[index])
        index += run
    return collapsed

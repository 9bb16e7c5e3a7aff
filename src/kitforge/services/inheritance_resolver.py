"""Flattening of single-inheritance class chains into resolved field tables."""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Mapping

from kitforge.domain.records import (
    ClassRecord,
    FieldValue,
    ResolvedClass,
    ScalarValue,
    SequenceValue,
    field_kind,
)
from kitforge.domain.slots import SCALAR_FIELDS, SEQUENCE_SLOTS
from kitforge.parser.errors import FieldTypeError, InheritanceCycleError, UnknownParentError

logger = logging.getLogger(__name__)


class ResolvedUniverse:
    """Read-only lookup of resolved classes by name."""

    def __init__(self, classes: Mapping[str, ResolvedClass], order: List[str]) -> None:
        self._classes = dict(classes)
        self._order = tuple(order)

    @property
    def resolution_order(self) -> tuple[str, ...]:
        """Class names with every parent listed before its children."""
        return self._order

    def get(self, class_name: str) -> ResolvedClass:
        try:
            return self._classes[class_name]
        except KeyError as exc:
            raise KeyError(class_name) from exc

    def names(self) -> list[str]:
        return list(self._classes.keys())

    def all(self) -> list[ResolvedClass]:
        return list(self._classes.values())

    def as_table(self) -> dict[str, dict[str, str | list[str]]]:
        """Return className -> {slot -> value} with plain Python values."""
        return {name: resolved.to_dict() for name, resolved in self._classes.items()}

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)


def default_field_table() -> Dict[str, FieldValue]:
    """Field values a root class starts from."""
    table: Dict[str, FieldValue] = {name: ScalarValue("") for name in SCALAR_FIELDS}
    table.update({slot: SequenceValue(()) for slot in SEQUENCE_SLOTS})
    return table


def resolve_universe(records: Mapping[str, ClassRecord]) -> ResolvedUniverse:
    """Resolve every class, parents before children.

    Unknown parents and cycles are reported before any merging happens, so a
    broken universe never yields partial results.
    """
    _check_parents_exist(records)
    _check_cycles(records)
    order = _resolution_order(records)
    logger.debug("Resolving %d classes in order: %s", len(order), ", ".join(order))

    tables: Dict[str, Dict[str, FieldValue]] = {}
    lineages: Dict[str, tuple[str, ...]] = {}
    for name in order:
        record = records[name]
        if record.parent is None:
            table = default_field_table()
            lineage: tuple[str, ...] = (name,)
        else:
            table = dict(tables[record.parent])
            lineage = (name,) + lineages[record.parent]
        for field_name, value in record.fields.items():
            inherited = table.get(field_name)
            if inherited is not None and field_kind(inherited) != field_kind(value):
                location = record.field_locations.get(field_name)
                raise FieldTypeError(
                    name,
                    field_name,
                    f"declared as {field_kind(value)} but inherited as {field_kind(inherited)}",
                    line=location.line if location else None,
                    column=location.column if location else None,
                )
            table[field_name] = value
        tables[name] = table
        lineages[name] = lineage

    resolved = {
        name: ResolvedClass(name=name, lineage=lineages[name], fields=tables[name])
        for name in records
    }
    return ResolvedUniverse(resolved, order)


def _check_parents_exist(records: Mapping[str, ClassRecord]) -> None:
    for record in records.values():
        if record.parent is not None and record.parent not in records:
            location = record.location
            raise UnknownParentError(
                record.name,
                record.parent,
                line=location.line if location else None,
                column=location.column if location else None,
            )


def _check_cycles(records: Mapping[str, ClassRecord]) -> None:
    acyclic: set[str] = set()
    for start in records:
        path: list[str] = []
        positions: dict[str, int] = {}
        current: str | None = start
        while current is not None and current not in acyclic:
            if current in positions:
                cycle = path[positions[current] :] + [current]
                raise InheritanceCycleError(cycle)
            positions[current] = len(path)
            path.append(current)
            current = records[current].parent
        acyclic.update(path)


def _resolution_order(records: Mapping[str, ClassRecord]) -> List[str]:
    order: List[str] = []
    placed: set[str] = set()
    for start in records:
        chain: List[str] = []
        current: str | None = start
        while current is not None and current not in placed:
            chain.append(current)
            current = records[current].parent
        for name in reversed(chain):
            order.append(name)
            placed.add(name)
    return order

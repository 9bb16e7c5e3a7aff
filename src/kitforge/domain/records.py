"""Class record structures produced by the parser and the resolver."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from kitforge.domain.slots import CODE_FIELD, DISPLAY_NAME_FIELD


@dataclass(frozen=True, slots=True)
class SourceLocation:
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class ScalarValue:
    """A single string value such as a display name."""

    value: str

    def to_plain(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SequenceValue:
    """An ordered list of string entries, already macro-expanded."""

    items: tuple[str, ...] = ()

    def to_plain(self) -> list[str]:
        return list(self.items)


FieldValue = Union[ScalarValue, SequenceValue]


def field_kind(value: FieldValue) -> str:
    return "sequence" if isinstance(value, SequenceValue) else "scalar"


@dataclass(frozen=True, slots=True)
class ClassRecord:
    """A class exactly as written in its own body, before inheritance."""

    name: str
    parent: str | None
    fields: Mapping[str, FieldValue]
    location: SourceLocation | None = None
    field_locations: Mapping[str, SourceLocation] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "field_locations", MappingProxyType(dict(self.field_locations)))

    @property
    def code(self) -> str | None:
        value = self.fields.get(CODE_FIELD)
        if isinstance(value, ScalarValue):
            return value.value
        return None


@dataclass(frozen=True, slots=True)
class ResolvedClass:
    """A class with its inheritance chain flattened into one field table."""

    name: str
    lineage: tuple[str, ...]
    fields: Mapping[str, FieldValue]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def display_name(self) -> str:
        return self.scalar(DISPLAY_NAME_FIELD)

    @property
    def code(self) -> str:
        return self.scalar(CODE_FIELD)

    def scalar(self, name: str) -> str:
        value = self.fields.get(name)
        if isinstance(value, ScalarValue):
            return value.value
        return ""

    def sequence(self, name: str) -> tuple[str, ...]:
        value = self.fields.get(name)
        if isinstance(value, SequenceValue):
            return value.items
        return ()

    def to_dict(self) -> dict[str, str | list[str]]:
        """Return a JSON-friendly slot -> value mapping."""
        return {name: value.to_plain() for name, value in self.fields.items()}

"""Domain exports."""

from .loadout import (
    CallbackDescriptor,
    CapacityExceededWarning,
    ContainerContents,
    InstantiationResult,
    Loadout,
    LoadoutWarning,
    SlotAssignment,
    format_warning,
)
from .records import (
    ClassRecord,
    FieldValue,
    ResolvedClass,
    ScalarValue,
    SequenceValue,
    SourceLocation,
)

__all__ = [
    "CallbackDescriptor",
    "CapacityExceededWarning",
    "ClassRecord",
    "ContainerContents",
    "FieldValue",
    "InstantiationResult",
    "Loadout",
    "LoadoutWarning",
    "ResolvedClass",
    "ScalarValue",
    "SequenceValue",
    "SlotAssignment",
    "SourceLocation",
    "format_warning",
]

"""Parsing of loadout class files into ClassRecords."""

from .class_parser import ClassParser, parse_universe
from .errors import (
    ConfigError,
    ConfigSyntaxError,
    DuplicateClassError,
    FieldTypeError,
    InheritanceCycleError,
    InheritanceError,
    MacroSyntaxError,
    UnknownParentError,
)
from .macros import expand_list_macros, expand_sequence_text

__all__ = [
    "ClassParser",
    "ConfigError",
    "ConfigSyntaxError",
    "DuplicateClassError",
    "FieldTypeError",
    "InheritanceCycleError",
    "InheritanceError",
    "MacroSyntaxError",
    "UnknownParentError",
    "expand_list_macros",
    "expand_sequence_text",
    "parse_universe",
]

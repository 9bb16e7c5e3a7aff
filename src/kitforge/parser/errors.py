"""Exceptions raised while parsing and resolving a loadout universe."""
from __future__ import annotations

from typing import Sequence


class ConfigError(Exception):
    """Base exception for a malformed loadout universe."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({where})"
        super().__init__(message)


class ConfigSyntaxError(ConfigError):
    """Raised on unexpected tokens or unterminated blocks, arrays and strings."""


class MacroSyntaxError(ConfigSyntaxError):
    """Raised when a LIST_n(...) invocation is malformed."""


class DuplicateClassError(ConfigError):
    """Raised when a class name is declared twice in one universe."""

    def __init__(self, class_name: str, *, line: int | None = None, column: int | None = None) -> None:
        self.class_name = class_name
        super().__init__(f"Class '{class_name}' is already declared.", line=line, column=column)


class FieldTypeError(ConfigError):
    """Raised when a field is given a scalar where a sequence belongs or vice versa."""

    def __init__(
        self,
        class_name: str,
        field_name: str,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.class_name = class_name
        self.field_name = field_name
        super().__init__(f"class '{class_name}' field '{field_name}': {message}", line=line, column=column)


class InheritanceError(ConfigError):
    """Base exception for broken inheritance chains."""


class InheritanceCycleError(InheritanceError):
    """Raised when parent references form a loop."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = tuple(cycle)
        super().__init__(f"Inheritance cycle detected: {' -> '.join(self.cycle)}")


class UnknownParentError(InheritanceError):
    """Raised when a class inherits from a name that is not declared."""

    def __init__(self, class_name: str, parent_name: str, *, line: int | None = None, column: int | None = None) -> None:
        self.class_name = class_name
        self.parent_name = parent_name
        super().__init__(
            f"Class '{class_name}' inherits from undeclared class '{parent_name}'.",
            line=line,
            column=column,
        )

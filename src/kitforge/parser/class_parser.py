"""Parser turning loadout class text into ClassRecords."""
from __future__ import annotations

from typing import Dict, List, Sequence

from kitforge.domain.records import (
    ClassRecord,
    FieldValue,
    ScalarValue,
    SequenceValue,
    SourceLocation,
)
from kitforge.domain.slots import is_scalar_field, is_sequence_field
from kitforge.parser.errors import ConfigSyntaxError, DuplicateClassError, FieldTypeError
from kitforge.parser.lexer import Token, TokenKind, tokenize
from kitforge.parser.macros import read_element

_SCALAR_KINDS = ("string", "ident", "number")


def parse_universe(text: str) -> Dict[str, ClassRecord]:
    """Parse every top-level class in text, keyed by name in declaration order."""
    return ClassParser(tokenize(text)).parse()


class ClassParser:
    """Recursive descent over the token stream of one universe."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._index = 0

    def parse(self) -> Dict[str, ClassRecord]:
        records: Dict[str, ClassRecord] = {}
        while self._peek().kind != "eof":
            record = self._parse_class()
            if record.name in records:
                location = record.location
                raise DuplicateClassError(
                    record.name,
                    line=location.line if location else None,
                    column=location.column if location else None,
                )
            records[record.name] = record
        return records

    def _parse_class(self) -> ClassRecord:
        keyword = self._peek()
        if keyword.kind != "ident" or keyword.text != "class":
            raise ConfigSyntaxError(
                f"Expected 'class', found {_describe(keyword)}", line=keyword.line, column=keyword.column
            )
        self._advance()
        name_token = self._expect("ident", "a class name")
        parent: str | None = None
        if self._peek().kind == "colon":
            self._advance()
            parent = self._expect("ident", "a parent class name").text
        location = SourceLocation(name_token.line, name_token.column)

        if self._peek().kind == "semicolon":
            # Forward declaration: `class Base;` declares a class with no fields.
            self._advance()
            return ClassRecord(name=name_token.text, parent=parent, fields={}, location=location)

        opening = self._expect("lbrace", "'{' to open the class body")
        fields: Dict[str, FieldValue] = {}
        locations: Dict[str, SourceLocation] = {}
        while True:
            token = self._peek()
            if token.kind == "rbrace":
                self._advance()
                break
            if token.kind == "eof":
                raise ConfigSyntaxError(
                    f"Unterminated body of class '{name_token.text}'",
                    line=opening.line,
                    column=opening.column,
                )
            if token.kind == "ident" and token.text == "class":
                raise ConfigSyntaxError(
                    f"Nested class declarations are not allowed inside '{name_token.text}'",
                    line=token.line,
                    column=token.column,
                )
            field_token, value = self._parse_statement(name_token.text)
            if field_token.text in fields:
                raise ConfigSyntaxError(
                    f"Field '{field_token.text}' is declared twice in class '{name_token.text}'",
                    line=field_token.line,
                    column=field_token.column,
                )
            fields[field_token.text] = value
            locations[field_token.text] = SourceLocation(field_token.line, field_token.column)
        self._expect("semicolon", f"';' after the body of class '{name_token.text}'")
        return ClassRecord(
            name=name_token.text,
            parent=parent,
            fields=fields,
            location=location,
            field_locations=locations,
        )

    def _parse_statement(self, class_name: str) -> tuple[Token, FieldValue]:
        field_token = self._expect("ident", "a field name")
        is_array = False
        if self._peek().kind == "lbracket":
            self._advance()
            self._expect("rbracket", "']' after '['")
            is_array = True
        self._expect("equals", f"'=' after field '{field_token.text}'")

        value_token = self._peek()
        if is_array:
            if value_token.kind != "lbrace":
                raise FieldTypeError(
                    class_name,
                    field_token.text,
                    "array field must be assigned a '{...}' sequence",
                    line=value_token.line,
                    column=value_token.column,
                )
            if is_scalar_field(field_token.text):
                raise FieldTypeError(
                    class_name,
                    field_token.text,
                    "scalar field cannot be declared as an array",
                    line=field_token.line,
                    column=field_token.column,
                )
            value: FieldValue = SequenceValue(tuple(self._parse_sequence(field_token)))
        else:
            if value_token.kind == "lbrace":
                raise FieldTypeError(
                    class_name,
                    field_token.text,
                    "sequence literal assigned to a scalar field (missing '[]')",
                    line=value_token.line,
                    column=value_token.column,
                )
            if is_sequence_field(field_token.text):
                raise FieldTypeError(
                    class_name,
                    field_token.text,
                    "sequence field must be declared with '[]'",
                    line=field_token.line,
                    column=field_token.column,
                )
            if value_token.kind not in _SCALAR_KINDS:
                raise ConfigSyntaxError(
                    f"Expected a value for field '{field_token.text}', found {_describe(value_token)}",
                    line=value_token.line,
                    column=value_token.column,
                )
            self._advance()
            value = ScalarValue(value_token.text)
        self._expect("semicolon", f"';' after field '{field_token.text}'")
        return field_token, value

    def _parse_sequence(self, field_token: Token) -> List[str]:
        opening = self._advance()
        entries: List[str] = []
        while True:
            token = self._peek()
            if token.kind == "rbrace":
                self._advance()
                return entries
            if token.kind == "eof":
                raise ConfigSyntaxError(
                    f"Unterminated array for field '{field_token.text}'",
                    line=opening.line,
                    column=opening.column,
                )
            expanded, self._index = read_element(self._tokens, self._index)
            entries.extend(expanded)
            separator = self._peek()
            if separator.kind == "comma":
                self._advance()
            elif separator.kind == "eof":
                raise ConfigSyntaxError(
                    f"Unterminated array for field '{field_token.text}'",
                    line=opening.line,
                    column=opening.column,
                )
            elif separator.kind != "rbrace":
                raise ConfigSyntaxError(
                    f"Expected ',' or '}}' in array '{field_token.text}', found {_describe(separator)}",
                    line=separator.line,
                    column=separator.column,
                )

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != "eof":
            self._index += 1
        return token

    def _expect(self, kind: TokenKind, description: str) -> Token:
        token = self._peek()
        if token.kind != kind:
            if token.kind == "eof":
                raise ConfigSyntaxError(
                    f"Unexpected end of input, expected {description}", line=token.line, column=token.column
                )
            raise ConfigSyntaxError(
                f"Expected {description}, found {_describe(token)}", line=token.line, column=token.column
            )
        return self._advance()


def _describe(token: Token) -> str:
    if token.kind == "eof":
        return "end of input"
    return repr(token.text)

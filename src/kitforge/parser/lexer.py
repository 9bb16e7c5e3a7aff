"""Tokenizer for loadout class files."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Literal

from kitforge.parser.errors import ConfigSyntaxError

TokenKind = Literal[
    "ident",
    "string",
    "number",
    "lbrace",
    "rbrace",
    "lbracket",
    "rbracket",
    "lparen",
    "rparen",
    "semicolon",
    "colon",
    "equals",
    "comma",
    "eof",
]

_PUNCTUATION: dict[str, TokenKind] = {
    "{": "lbrace",
    "}": "rbrace",
    "[": "lbracket",
    "]": "rbracket",
    "(": "lparen",
    ")": "rparen",
    ";": "semicolon",
    ":": "colon",
    "=": "equals",
    ",": "comma",
}

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
# Item ids such as 30Rnd_556x45_Stanag start with digits but are not numbers.
_BARE_RE = re.compile(r"\d+[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    line: int
    column: int


class _Cursor:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def advance(self, count: int = 1) -> str:
        consumed = self.text[self.pos : self.pos + count]
        for char in consumed:
            if char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += count
        return consumed


def tokenize(text: str) -> List[Token]:
    """Split text into tokens, dropping whitespace and comments."""
    return list(_iter_tokens(text))


def _iter_tokens(text: str) -> Iterator[Token]:
    cursor = _Cursor(text)
    while cursor.pos < len(text):
        char = cursor.peek()
        if char.isspace():
            cursor.advance()
            continue
        if char == "/" and cursor.peek(1) == "/":
            while cursor.peek() not in ("", "\n"):
                cursor.advance()
            continue
        if char == "/" and cursor.peek(1) == "*":
            _skip_block_comment(cursor)
            continue

        line, column = cursor.line, cursor.column
        if char == '"':
            yield Token("string", _read_string(cursor), line, column)
            continue
        if char in _PUNCTUATION:
            cursor.advance()
            yield Token(_PUNCTUATION[char], char, line, column)
            continue
        match = _IDENT_RE.match(text, cursor.pos)
        if match:
            yield Token("ident", cursor.advance(len(match.group())), line, column)
            continue
        match = _BARE_RE.match(text, cursor.pos)
        if match and not _NUMBER_RE.fullmatch(match.group()):
            yield Token("ident", cursor.advance(len(match.group())), line, column)
            continue
        match = _NUMBER_RE.match(text, cursor.pos)
        if match:
            yield Token("number", cursor.advance(len(match.group())), line, column)
            continue
        raise ConfigSyntaxError(f"Unexpected character {char!r}", line=line, column=column)
    yield Token("eof", "", cursor.line, cursor.column)


def _skip_block_comment(cursor: _Cursor) -> None:
    line, column = cursor.line, cursor.column
    cursor.advance(2)
    while cursor.pos < len(cursor.text):
        if cursor.peek() == "*" and cursor.peek(1) == "/":
            cursor.advance(2)
            return
        cursor.advance()
    raise ConfigSyntaxError("Unterminated block comment", line=line, column=column)


def _read_string(cursor: _Cursor) -> str:
    # A doubled quote inside a string is a literal quote.
    line, column = cursor.line, cursor.column
    cursor.advance()
    chars: List[str] = []
    while True:
        char = cursor.peek()
        if char == "":
            raise ConfigSyntaxError("Unterminated string literal", line=line, column=column)
        cursor.advance()
        if char == '"':
            if cursor.peek() == '"':
                cursor.advance()
                chars.append('"')
                continue
            return "".join(chars)
        chars.append(char)

"""Expansion of the LIST_n(item) repetition macro inside sequence literals."""
from __future__ import annotations

import re
from typing import List, Sequence

from kitforge.parser.errors import ConfigSyntaxError, MacroSyntaxError
from kitforge.parser.lexer import Token, tokenize

MACRO_PREFIX = "LIST_"
_COUNT_RE = re.compile(r"\d+")
_LITERAL_KINDS = ("string", "ident", "number")


def _at(tokens: Sequence[Token], index: int) -> Token:
    if index < len(tokens):
        return tokens[index]
    last = tokens[-1] if tokens else None
    line, column = (last.line, last.column) if last else (1, 1)
    return Token("eof", "", line, column)


def is_macro_token(token: Token) -> bool:
    return token.kind == "ident" and token.text.startswith(MACRO_PREFIX)


def macro_count(token: Token) -> int:
    """Return n for a LIST_n token or raise MacroSyntaxError."""
    raw_count = token.text[len(MACRO_PREFIX) :]
    if not raw_count:
        raise MacroSyntaxError(
            f"Macro '{token.text}' is missing its repeat count", line=token.line, column=token.column
        )
    if not _COUNT_RE.fullmatch(raw_count):
        raise MacroSyntaxError(
            f"Macro '{token.text}' has a non-numeric repeat count", line=token.line, column=token.column
        )
    count = int(raw_count)
    if count <= 0:
        raise MacroSyntaxError(
            f"Macro '{token.text}' repeat count must be positive", line=token.line, column=token.column
        )
    return count


def read_element(tokens: Sequence[Token], index: int) -> tuple[List[str], int]:
    """Read one sequence element at index and return its expansion and the next index.

    A literal yields itself. ``LIST_n(element)`` yields n copies of the
    expansion of its argument, which may itself be a macro.
    """
    token = _at(tokens, index)
    if is_macro_token(token):
        count = macro_count(token)
        opening = _at(tokens, index + 1)
        if opening.kind != "lparen":
            raise MacroSyntaxError(
                f"Expected '(' after '{token.text}'", line=opening.line, column=opening.column
            )
        argument = _at(tokens, index + 2)
        if argument.kind not in _LITERAL_KINDS:
            raise MacroSyntaxError(
                f"Macro '{token.text}' needs exactly one item argument",
                line=argument.line,
                column=argument.column,
            )
        inner, next_index = read_element(tokens, index + 2)
        closing = _at(tokens, next_index)
        if closing.kind != "rparen":
            raise MacroSyntaxError(
                f"Unmatched '(' in '{token.text}', expected ')'", line=closing.line, column=closing.column
            )
        return inner * count, next_index + 1
    if token.kind in _LITERAL_KINDS:
        return [token.text], index + 1
    raise ConfigSyntaxError(
        f"Expected a sequence entry, found {token.text or 'end of input'!r}",
        line=token.line,
        column=token.column,
    )


def expand_list_macros(tokens: Sequence[Token]) -> List[str]:
    """Expand a comma separated run of elements into flat literal strings."""
    entries: List[str] = []
    index = 0
    while index < len(tokens) and tokens[index].kind != "eof":
        expanded, index = read_element(tokens, index)
        entries.extend(expanded)
        if index < len(tokens) and tokens[index].kind == "comma":
            index += 1
            continue
        if index < len(tokens) and tokens[index].kind != "eof":
            stray = tokens[index]
            raise ConfigSyntaxError(
                f"Unexpected {stray.text!r} between sequence entries",
                line=stray.line,
                column=stray.column,
            )
    return entries


def expand_sequence_text(text: str) -> List[str]:
    """Expand the body of a sequence literal given as text, e.g. '"a", LIST_2("b")'."""
    return expand_list_macros(tokenize(text))

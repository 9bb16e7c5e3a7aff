import pytest

from kitforge.parser.errors import ConfigSyntaxError
from kitforge.parser.lexer import tokenize


def _kinds(text: str) -> list[str]:
    return [token.kind for token in tokenize(text)]


def test_tokenizes_array_statement() -> None:
    assert _kinds('vest[] = {"a"};') == [
        "ident",
        "lbracket",
        "rbracket",
        "equals",
        "lbrace",
        "string",
        "rbrace",
        "semicolon",
        "eof",
    ]


def test_comments_are_skipped() -> None:
    tokens = tokenize('// line comment\n/* block\ncomment */ displayName = "x"; // trailing')

    assert [token.text for token in tokens[:-1]] == ["displayName", "=", "x", ";"]
    assert tokens[0].line == 3


def test_comment_markers_inside_strings_are_text() -> None:
    tokens = tokenize('code = "a // not a comment";')

    assert tokens[2].text == "a // not a comment"


def test_doubled_quote_is_an_escaped_quote() -> None:
    tokens = tokenize('code = "hint ""hi"";";')

    assert tokens[2].text == 'hint "hi";'


def test_numbers_are_bare_tokens() -> None:
    tokens = tokenize("weight = -1.5e3;")

    assert (tokens[2].kind, tokens[2].text) == ("number", "-1.5e3")


def test_positions_are_one_based() -> None:
    tokens = tokenize('class a\n{\n  x = "y";\n};')

    field = tokens[3]
    assert (field.text, field.line, field.column) == ("x", 3, 3)


def test_unterminated_string_raises() -> None:
    with pytest.raises(ConfigSyntaxError) as excinfo:
        tokenize('x = "open;')

    assert excinfo.value.line == 1
    assert excinfo.value.column == 5


def test_unterminated_block_comment_raises() -> None:
    with pytest.raises(ConfigSyntaxError):
        tokenize("/* never closed")


def test_unexpected_character_raises() -> None:
    with pytest.raises(ConfigSyntaxError) as excinfo:
        tokenize("x = @;")

    assert "Unexpected character" in str(excinfo.value)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("30Rnd_556x45_Stanag", [("ident", "30Rnd_556x45_Stanag")]),
        ("9Rnd_45ACP_Mag", [("ident", "9Rnd_45ACP_Mag")]),
        ("12", [("number", "12")]),
        ("1e5", [("number", "1e5")]),
        ("-2.5", [("number", "-2.5")]),
    ],
)
def test_digit_leading_ids_are_single_tokens(text: str, expected: list[tuple[str, str]]) -> None:
    tokens = tokenize(text)

    assert [(token.kind, token.text) for token in tokens[:-1]] == expected

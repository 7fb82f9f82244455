import pytest

from mcp_dice_expr.errors import LexError, NumberOutOfRangeError, UnexpectedCharacterError
from mcp_dice_expr.lexer import tokenize
from mcp_dice_expr.models import Token


def kinds(text):
    return [t.kind for t in tokenize(text)]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ["EOF"]),
        ("   ", ["EOF"]),
        ("2d6", ["NUMBER", "DICE", "NUMBER", "EOF"]),
        ("12D8", ["NUMBER", "DICE", "NUMBER", "EOF"]),
        (
            "(1 + 2) * 3 / -4",
            ["LPAREN", "NUMBER", "PLUS", "NUMBER", "RPAREN", "STAR", "NUMBER", "SLASH", "MINUS", "NUMBER", "EOF"],
        ),
        ("d", ["DICE", "EOF"]),
    ],
)
def test_token_kinds(text, expected):
    assert kinds(text) == expected


def test_number_values_and_positions():
    tokens = tokenize(" 12.5 d 3")
    assert tokens == [
        Token(kind="NUMBER", position=1, value=12.5),
        Token(kind="DICE", position=6),
        Token(kind="NUMBER", position=8, value=3.0),
        Token(kind="EOF", position=9),
    ]


def test_number_is_maximal_munch():
    tokens = tokenize("123456")
    assert len(tokens) == 2
    assert tokens[0].value == 123456.0


@pytest.mark.parametrize(
    ("text", "char", "position"),
    [
        ("-2^3", "^", 2),
        ("10 % 3", "%", 3),
        ("1.", ".", 1),
        ("2x6", "x", 1),
        ("٣", "٣", 0),
    ],
)
def test_unexpected_character(text, char, position):
    with pytest.raises(UnexpectedCharacterError) as exc:
        tokenize(text)
    assert exc.value.char == char
    assert exc.value.position == position
    assert isinstance(exc.value, LexError)
    assert str(exc.value).startswith("[UNEXPECTED_CHARACTER]")


def test_number_too_large_for_float():
    text = "1 + " + "9" * 400
    with pytest.raises(NumberOutOfRangeError) as exc:
        tokenize(text)
    assert exc.value.position == 4
    assert isinstance(exc.value, LexError)
    assert str(exc.value).startswith("[NUMBER_OUT_OF_RANGE]")


def test_large_finite_number_is_kept():
    tokens = tokenize("9" * 300)
    assert tokens[0].value == float("9" * 300)

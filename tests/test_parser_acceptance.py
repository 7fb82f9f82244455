import pytest

from mcp_dice_expr.lexer import tokenize
from mcp_dice_expr.models import BinaryOp, Constant, Dice, Negate, Token
from mcp_dice_expr.parser import parse, parse_expression


@pytest.mark.parametrize(
    ("text", "tree"),
    [
        ("7", Constant(7.0)),
        ("2.5", Constant(2.5)),
        ("2d6", Dice(count=2, sides=6)),
        ("12D8", Dice(count=12, sides=8)),
        ("0d6", Dice(count=0, sides=6)),
        ("2.0d6", Dice(count=2, sides=6)),
        (
            "2+3*4",
            BinaryOp("+", Constant(2.0), BinaryOp("*", Constant(3.0), Constant(4.0))),
        ),
        (
            "(2+3)*4",
            BinaryOp("*", BinaryOp("+", Constant(2.0), Constant(3.0)), Constant(4.0)),
        ),
        (
            "8 - 3 - 2",
            BinaryOp("-", BinaryOp("-", Constant(8.0), Constant(3.0)), Constant(2.0)),
        ),
        (
            "10/2/5",
            BinaryOp("/", BinaryOp("/", Constant(10.0), Constant(2.0)), Constant(5.0)),
        ),
        ("--5", Negate(Negate(Constant(5.0)))),
        (
            "-2*3",
            BinaryOp("*", Negate(Constant(2.0)), Constant(3.0)),
        ),
        (
            "(12d8 + 34)/2",
            BinaryOp("/", BinaryOp("+", Dice(12, 8), Constant(34.0)), Constant(2.0)),
        ),
        ("((1))", Constant(1.0)),
    ],
)
def test_parse_acceptance(text, tree):
    assert parse_expression(text) == tree


def test_parse_accepts_tokens_without_eof():
    tokens = [Token(kind="NUMBER", position=0, value=4.0)]
    assert parse(tokens) == Constant(4.0)


def test_parse_takes_lexer_output():
    assert parse(tokenize("1d20 + 5")) == BinaryOp("+", Dice(1, 20), Constant(5.0))

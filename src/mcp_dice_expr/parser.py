from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import (
    InvalidDiceOperandError,
    NestingTooDeepError,
    TrailingTokensError,
    UnbalancedParenthesesError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .lexer import tokenize
from .models import BinaryOp, Constant, Dice, Expression, Negate, Token


logger = logging.getLogger("mcp_dice_expr.parser")

# Bounds both open parentheses/unary minuses and the height of the built tree,
# keeping parsing, evaluation and formatting well inside the recursion limit.
MAX_DEPTH = 100


class _Parser:
    """Recursive-descent parser over a token list ending in ``EOF``.

    expression     := term (('+' | '-') term)*
    term           := unary (('*' | '/') unary)*
    unary          := '-' unary | primary
    primary        := dice_or_number | '(' expression ')'
    dice_or_number := NUMBER [ DICE NUMBER ]

    Each rule returns the subtree together with its height.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        if not tokens or tokens[-1].kind != "EOF":
            end = tokens[-1].position + 1 if tokens else 0
            tokens = [*tokens, Token(kind="EOF", position=end)]
        self.tokens = tokens
        self.index = 0
        self.nesting = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> Token:
        tok = self.tokens[self.index]
        if tok.kind != "EOF":
            self.index += 1
        return tok

    def enter(self, tok: Token) -> None:
        self.nesting += 1
        if self.nesting > MAX_DEPTH:
            raise NestingTooDeepError(tok.position, MAX_DEPTH)

    def check_height(self, height: int, tok: Token) -> int:
        if height > MAX_DEPTH:
            raise NestingTooDeepError(tok.position, MAX_DEPTH)
        return height

    def parse(self) -> Expression:
        expr, _ = self.expression()
        if self.current.kind != "EOF":
            raise TrailingTokensError(self.current)
        return expr

    def expression(self) -> tuple[Expression, int]:
        left, height = self.term()
        while self.current.kind in ("PLUS", "MINUS"):
            tok = self.advance()
            op = "+" if tok.kind == "PLUS" else "-"
            right, right_height = self.term()
            left = BinaryOp(op=op, left=left, right=right)
            height = self.check_height(max(height, right_height) + 1, tok)
        return left, height

    def term(self) -> tuple[Expression, int]:
        left, height = self.unary()
        while self.current.kind in ("STAR", "SLASH"):
            tok = self.advance()
            op = "*" if tok.kind == "STAR" else "/"
            right, right_height = self.unary()
            left = BinaryOp(op=op, left=left, right=right)
            height = self.check_height(max(height, right_height) + 1, tok)
        return left, height

    def unary(self) -> tuple[Expression, int]:
        if self.current.kind == "MINUS":
            tok = self.advance()
            self.enter(tok)
            operand, height = self.unary()
            self.nesting -= 1
            return Negate(operand=operand), self.check_height(height + 1, tok)
        return self.primary()

    def primary(self) -> tuple[Expression, int]:
        tok = self.current

        if tok.kind == "NUMBER":
            return self.dice_or_number(), 1

        if tok.kind == "LPAREN":
            self.advance()
            self.enter(tok)
            inner, height = self.expression()
            if self.current.kind == "EOF":
                raise UnbalancedParenthesesError(tok.position)
            if self.current.kind != "RPAREN":
                raise UnexpectedTokenError(self.current)
            self.advance()
            self.nesting -= 1
            return inner, height

        if tok.kind == "EOF":
            raise UnexpectedEndOfInputError(tok.position)
        raise UnexpectedTokenError(tok)

    def dice_or_number(self) -> Expression:
        count_tok = self.advance()
        if self.current.kind != "DICE":
            return Constant(value=count_tok.value)

        self.advance()
        sides_tok = self.current
        if sides_tok.kind == "EOF":
            raise UnexpectedEndOfInputError(sides_tok.position)
        if sides_tok.kind != "NUMBER":
            raise UnexpectedTokenError(sides_tok)
        self.advance()

        return Dice(count=_whole(count_tok), sides=_whole(sides_tok))


def _whole(tok: Token) -> int:
    value = float(tok.value)
    if value < 0 or not value.is_integer():
        raise InvalidDiceOperandError(value, tok.position)
    return int(value)


def parse(tokens: Sequence[Token]) -> Expression:
    """Build an expression tree from ``tokens``; the whole stream must be consumed."""

    expr = _Parser(tokens).parse()
    logger.debug("parsed %r", expr)
    return expr


def parse_expression(text: str) -> Expression:
    return parse(tokenize(text))

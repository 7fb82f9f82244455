"""Exception hierarchy for dice expressions.

Every message starts with a stable bracketed code (``[DIVISION_BY_ZERO]``)
so callers such as the MCP server can surface it verbatim.
"""

from __future__ import annotations

from .models import Token, format_number


class DiceError(ValueError):
    """User-facing errors raised while lexing, parsing or evaluating."""

    code = "DICE_ERROR"

    def __init__(self, detail: str) -> None:
        super().__init__(f"[{self.code}] {detail}")
        self.detail = detail


class ConfigError(ValueError):
    """Raised for invalid environment configuration."""


# -- lexing -----------------------------------------------------------------


class LexError(DiceError):
    code = "LEX_ERROR"


class UnexpectedCharacterError(LexError):
    code = "UNEXPECTED_CHARACTER"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(
            f"Unexpected character {char!r} at position {position}. "
            "Only digits, 'd', + - * / and parentheses are allowed. Example: '(2d6 + 3) * 2'."
        )
        self.char = char
        self.position = position


class NumberOutOfRangeError(LexError):
    code = "NUMBER_OUT_OF_RANGE"

    def __init__(self, text: str, position: int) -> None:
        shown = text if len(text) <= 20 else f"{text[:17]}..."
        super().__init__(
            f"Number {shown} at position {position} is too large to represent. Example: '10d6 * 1000'."
        )
        self.text = text
        self.position = position


# -- parsing ----------------------------------------------------------------


class ParseError(DiceError):
    code = "PARSE_ERROR"


class UnbalancedParenthesesError(ParseError):
    code = "UNBALANCED_PARENTHESES"

    def __init__(self, position: int) -> None:
        super().__init__(
            f"Parenthesis opened at position {position} is never closed. Example: '(1 + 2) * 3'."
        )
        self.position = position


class InvalidDiceOperandError(ParseError):
    code = "INVALID_DICE_OPERAND"

    def __init__(self, value: float, position: int) -> None:
        super().__init__(
            f"Dice count and sides must be whole numbers, got {format_number(value)} at position {position}. "
            "Example: '2d6'."
        )
        self.value = value
        self.position = position


class UnexpectedTokenError(ParseError):
    code = "UNEXPECTED_TOKEN"

    def __init__(self, token: Token) -> None:
        super().__init__(f"Unexpected {token.describe()} at position {token.position}.")
        self.token = token


class TrailingTokensError(UnexpectedTokenError):
    """Tokens left over after a complete expression."""

    code = "TRAILING_TOKENS"


class UnexpectedEndOfInputError(ParseError):
    code = "UNEXPECTED_END_OF_INPUT"

    def __init__(self, position: int) -> None:
        super().__init__(
            f"Expression ended at position {position} where a number or '(' was expected. "
            "Example: '2d6 + 3'."
        )
        self.position = position


class NestingTooDeepError(ParseError):
    code = "NESTING_TOO_DEEP"

    def __init__(self, position: int, limit: int) -> None:
        super().__init__(
            f"Expression nests deeper than {limit} levels at position {position}. Example: '((1 + 2) * 3)'."
        )
        self.position = position
        self.limit = limit


# -- evaluation -------------------------------------------------------------


class EvalError(DiceError):
    code = "EVAL_ERROR"


class DivisionByZeroError(EvalError):
    code = "DIVISION_BY_ZERO"

    def __init__(self) -> None:
        super().__init__("Division by zero. Example: '10 / 2'.")


class InvalidDiceError(EvalError):
    code = "INVALID_DICE"

    def __init__(self, count: int, sides: int) -> None:
        super().__init__(
            f"Cannot roll {count}d{sides}: dice count and sides must be at least 1. Example: '1d20'."
        )
        self.count = count
        self.sides = sides


class TooManyDiceError(DiceError):
    code = "TOO_MANY_DICE"

    def __init__(self, total: int, limit: int) -> None:
        super().__init__(
            f"Expression rolls {total} dice but at most {limit} are allowed. Example: '10d6'."
        )
        self.total = total
        self.limit = limit

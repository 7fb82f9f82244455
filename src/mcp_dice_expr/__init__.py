"""Parse and evaluate arithmetic expressions with dice terms like ``(2d6 + 3) * 2``."""

from .dice import format_expression, roll_from_text
from .errors import (
    DiceError,
    DivisionByZeroError,
    EvalError,
    InvalidDiceError,
    InvalidDiceOperandError,
    LexError,
    NestingTooDeepError,
    NumberOutOfRangeError,
    ParseError,
    TooManyDiceError,
    TrailingTokensError,
    UnbalancedParenthesesError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .evaluator import evaluate
from .lexer import tokenize
from .models import (
    BinaryOp,
    Constant,
    Dice,
    DiceLogger,
    Expression,
    Negate,
    RollRecord,
    Token,
    format_number,
)
from .parser import parse, parse_expression
from .roller import DieRoller, FixedRoller, SeededRoller, SequenceRoller, SystemRoller

__all__ = [
    "BinaryOp",
    "Constant",
    "Dice",
    "DiceError",
    "DiceLogger",
    "DieRoller",
    "DivisionByZeroError",
    "EvalError",
    "Expression",
    "FixedRoller",
    "InvalidDiceError",
    "InvalidDiceOperandError",
    "LexError",
    "Negate",
    "NestingTooDeepError",
    "NumberOutOfRangeError",
    "ParseError",
    "RollRecord",
    "SeededRoller",
    "SequenceRoller",
    "SystemRoller",
    "Token",
    "TooManyDiceError",
    "TrailingTokensError",
    "UnbalancedParenthesesError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "evaluate",
    "format_expression",
    "format_number",
    "parse",
    "parse_expression",
    "roll_from_text",
    "tokenize",
]

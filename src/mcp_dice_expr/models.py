from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, TypeAlias


TokenKind: TypeAlias = Literal[
    "NUMBER",
    "PLUS",
    "MINUS",
    "STAR",
    "SLASH",
    "LPAREN",
    "RPAREN",
    "DICE",
    "EOF",
]
Operator: TypeAlias = Literal["+", "-", "*", "/"]


_TOKEN_LABELS: dict[str, str] = {
    "PLUS": "'+'",
    "MINUS": "'-'",
    "STAR": "'*'",
    "SLASH": "'/'",
    "LPAREN": "'('",
    "RPAREN": "')'",
    "DICE": "'d'",
    "EOF": "end of input",
}


def format_number(value: float) -> str:
    """Render ``value`` in plain positional notation the lexer reads back.

    Non-finite values have no such form and fall back to ``repr``.
    """

    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    position: int
    value: float | None = None

    def describe(self) -> str:
        if self.kind == "NUMBER":
            return f"number {format_number(self.value)}"
        return _TOKEN_LABELS[self.kind]


@dataclass(frozen=True)
class Constant:
    value: float


@dataclass(frozen=True)
class BinaryOp:
    op: Operator
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Negate:
    operand: Expression


@dataclass(frozen=True)
class Dice:
    count: int
    sides: int


Expression: TypeAlias = Constant | BinaryOp | Negate | Dice


@dataclass(frozen=True)
class RollRecord:
    sides: int
    outcome: int


class DiceLogger:
    """Ordered, append-only record of every die rolled during evaluation.

    The caller owns the logger: it is never cleared between evaluations, so
    reusing one accumulates records across calls.
    """

    def __init__(self) -> None:
        self._records: list[RollRecord] = []

    def record(self, sides: int, outcome: int) -> None:
        self._records.append(RollRecord(sides=sides, outcome=outcome))

    @property
    def records(self) -> tuple[RollRecord, ...]:
        return tuple(self._records)

    def outcomes(self) -> list[int]:
        return [r.outcome for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RollRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> RollRecord:
        return self._records[index]

    def __str__(self) -> str:
        if not self._records:
            return "No dice rolled"
        return ", ".join(str(o) for o in self.outcomes())

    def __repr__(self) -> str:
        return f"DiceLogger({self._records!r})"

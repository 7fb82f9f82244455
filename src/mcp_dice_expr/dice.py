from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from .errors import TooManyDiceError
from .evaluator import evaluate
from .models import BinaryOp, Constant, Dice, DiceLogger, Expression, Negate, format_number
from .parser import parse_expression
from .roller import DieRoller, SystemRoller


logger = logging.getLogger("mcp_dice_expr.dice")

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_UNARY_PRECEDENCE = 3
_ATOM_PRECEDENCE = 4


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _precedence(expr: Expression) -> int:
    if isinstance(expr, BinaryOp):
        return _PRECEDENCE[expr.op]
    if isinstance(expr, Negate):
        return _UNARY_PRECEDENCE
    return _ATOM_PRECEDENCE


def format_expression(expr: Expression) -> str:
    """Render ``expr`` back to text with only the parentheses it needs."""

    if isinstance(expr, Constant):
        return format_number(expr.value)
    if isinstance(expr, Dice):
        return f"{expr.count}d{expr.sides}"
    if isinstance(expr, Negate):
        inner = format_expression(expr.operand)
        if _precedence(expr.operand) < _UNARY_PRECEDENCE:
            inner = f"({inner})"
        return f"-{inner}"

    prec = _PRECEDENCE[expr.op]
    left = format_expression(expr.left)
    right = format_expression(expr.right)
    if _precedence(expr.left) < prec:
        left = f"({left})"
    # Left-associative: an equal-precedence right operand keeps its grouping.
    if _precedence(expr.right) <= prec:
        right = f"({right})"
    return f"{left} {expr.op} {right}"


def _dice_terms(expr: Expression) -> list[Dice]:
    """Dice nodes in evaluation order."""

    if isinstance(expr, Dice):
        return [expr]
    if isinstance(expr, Negate):
        return _dice_terms(expr.operand)
    if isinstance(expr, BinaryOp):
        return _dice_terms(expr.left) + _dice_terms(expr.right)
    return []


def roll_from_text(
    text: str,
    *,
    roller: DieRoller | None = None,
    max_dice: int | None = None,
) -> dict[str, Any]:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    expr = parse_expression(text)
    terms = _dice_terms(expr)

    requested = sum(t.count for t in terms)
    if max_dice is not None and requested > max_dice:
        raise TooManyDiceError(requested, max_dice)

    if roller is None:
        roller = SystemRoller()

    rolls = DiceLogger()
    total = evaluate(expr, rolls, roller)

    evaluated_terms: list[dict[str, Any]] = []
    all_outcomes = rolls.outcomes()
    offset = 0
    for term in terms:
        outcomes = all_outcomes[offset : offset + term.count]
        offset += term.count
        evaluated_terms.append(
            {
                "count": term.count,
                "sides": term.sides,
                "rolls": outcomes,
                "subtotal": sum(outcomes),
            }
        )

    explanation_parts = [
        f"{t['count']}d{t['sides']}: rolls {t['rolls']} => {t['subtotal']}" for t in evaluated_terms
    ]
    explanation_parts.append(f"total {format_number(total)}")
    explanation = "; ".join(explanation_parts)

    logger.info("rolled %r: %d dice, total %s", text, len(rolls), total)

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": text,
        "normalized_expression": format_expression(expr),
        "rng": {
            "source": getattr(roller, "source", type(roller).__name__),
            "nonce": str(uuid.uuid4()),
        },
        "terms": evaluated_terms,
        "rolls": [{"sides": r.sides, "outcome": r.outcome} for r in rolls],
        "total": total,
        "explanation": explanation,
    }

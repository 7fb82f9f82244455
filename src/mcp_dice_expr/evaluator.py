from __future__ import annotations

import logging

from .errors import DivisionByZeroError, InvalidDiceError
from .models import BinaryOp, Constant, Dice, DiceLogger, Expression, Negate
from .roller import DieRoller, SystemRoller


log = logging.getLogger("mcp_dice_expr.evaluator")


def evaluate(
    expr: Expression,
    logger: DiceLogger | None = None,
    roller: DieRoller | None = None,
) -> float:
    """Evaluate ``expr`` to a float.

    Operands are evaluated left before right and dice are rolled first to
    last, so a deterministic ``roller`` gives a reproducible ``logger``.
    Each roll is recorded as it happens: if evaluation later fails, the
    records already appended stay in ``logger``.

    Raises DivisionByZeroError or InvalidDiceError.
    """

    result = _eval(expr, logger, roller if roller is not None else SystemRoller())
    log.debug("evaluated %r -> %s", expr, result)
    return result


def _eval(expr: Expression, logger: DiceLogger | None, roller: DieRoller) -> float:
    if isinstance(expr, Constant):
        return expr.value

    if isinstance(expr, Negate):
        return -_eval(expr.operand, logger, roller)

    if isinstance(expr, BinaryOp):
        left = _eval(expr.left, logger, roller)
        right = _eval(expr.right, logger, roller)
        if expr.op == "+":
            return left + right
        if expr.op == "-":
            return left - right
        if expr.op == "*":
            return left * right
        if expr.op == "/":
            if right == 0:
                raise DivisionByZeroError()
            return left / right
        raise TypeError(f"unknown operator {expr.op!r}")

    if isinstance(expr, Dice):
        return float(_roll(expr, logger, roller))

    raise TypeError(f"not an expression node: {expr!r}")


def _roll(dice: Dice, logger: DiceLogger | None, roller: DieRoller) -> int:
    if dice.count == 0 or dice.sides == 0:
        raise InvalidDiceError(dice.count, dice.sides)

    total = 0
    for _ in range(dice.count):
        outcome = roller(dice.sides)
        if logger is not None:
            logger.record(dice.sides, outcome)
        total += outcome

    log.debug("rolled %dd%d -> %d", dice.count, dice.sides, total)
    return total

from mcp_dice_expr.evaluator import evaluate
from mcp_dice_expr.models import DiceLogger
from mcp_dice_expr.parser import parse_expression
from mcp_dice_expr.roller import SeededRoller, SequenceRoller


def test_parse_is_deterministic():
    text = "(12d8 + 34) / 2 - -3d4 * 2"
    a = parse_expression(text)
    b = parse_expression(text)

    assert a == b


def test_reevaluation_is_deterministic():
    expr = parse_expression("3d6 + 2d4 * 2")

    first_log = DiceLogger()
    first = evaluate(expr, first_log, SequenceRoller([1, 2, 3, 4]))
    second_log = DiceLogger()
    second = evaluate(expr, second_log, SequenceRoller([1, 2, 3, 4]))

    assert first == second
    assert first_log.records == second_log.records


def test_seeded_rollers_agree():
    expr = parse_expression("10d20")

    a, b = DiceLogger(), DiceLogger()
    evaluate(expr, a, SeededRoller(42))
    evaluate(expr, b, SeededRoller(42))

    assert a.outcomes() == b.outcomes()

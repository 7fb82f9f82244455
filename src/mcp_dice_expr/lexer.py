from __future__ import annotations

import logging
import math
import re

from .errors import NumberOutOfRangeError, UnexpectedCharacterError
from .models import Token, TokenKind


logger = logging.getLogger("mcp_dice_expr.lexer")

# fmt: off
_TOKEN_SPEC = [
    ("NUMBER",   r"\d+(?:\.\d+)?"),   # Integer or decimal, maximal munch
    ("DICE",     r"[dD]"),
    ("OP",       r"[+\-*/()]"),
    ("SKIP",     r"\s+"),
    ("MISMATCH", r"."),
]
_TOKEN_RE = re.compile(
    "|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC), re.ASCII
)
# fmt: on

_OPERATORS: dict[str, TokenKind] = {
    "+": "PLUS",
    "-": "MINUS",
    "*": "STAR",
    "/": "SLASH",
    "(": "LPAREN",
    ")": "RPAREN",
}


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, always ending with an ``EOF`` token.

    Raises UnexpectedCharacterError for any character outside the grammar
    (including operators this language does not have, such as ``^`` or ``%``)
    and NumberOutOfRangeError for literals too large for a float.
    """

    tokens: list[Token] = []

    for m in _TOKEN_RE.finditer(text):
        kind = m.lastgroup
        value = m.group()
        pos = m.start()

        if kind == "SKIP":
            continue
        if kind == "NUMBER":
            number = float(value)
            if not math.isfinite(number):
                raise NumberOutOfRangeError(value, pos)
            tokens.append(Token(kind="NUMBER", position=pos, value=number))
        elif kind == "DICE":
            tokens.append(Token(kind="DICE", position=pos))
        elif kind == "OP":
            tokens.append(Token(kind=_OPERATORS[value], position=pos))
        else:
            raise UnexpectedCharacterError(value, pos)

    tokens.append(Token(kind="EOF", position=len(text)))
    logger.debug("tokenized %r into %d tokens", text, len(tokens))
    return tokens

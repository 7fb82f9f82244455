from __future__ import annotations

import logging
import sys
from functools import lru_cache

from mcp.server.fastmcp import FastMCP

from .config import DiceConfig, load_config
from .dice import roll_from_text
from .errors import DiceError
from .roller import DieRoller


mcp = FastMCP("mcp-dice-expr")


@lru_cache(maxsize=1)
def _settings() -> tuple[DiceConfig, DieRoller]:
    config = load_config()
    return config, config.make_roller()


@mcp.tool()
def roll_dice(text: str):
    """Evaluate an arithmetic dice expression such as '(2d6 + 3) * 2'.

    Input: text (string) using numbers, NdM dice terms, + - * / and parentheses
    Output: structured JSON with every die rolled, the total and an explanation

    Raises a hard error (exception) on invalid input.
    """

    config, roller = _settings()
    try:
        return roll_from_text(text, roller=roller, max_dice=config.max_dice)
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    config, _ = _settings()
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run()


if __name__ == "__main__":
    run()

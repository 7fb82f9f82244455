"""Environment configuration for the dice server.

Only reads environment variables and performs light validation; nothing here
touches the network or the filesystem.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError
from .roller import DieRoller, SeededRoller, SystemRoller


ENV_SEED = "MCP_DICE_EXPR_SEED"
ENV_MAX_DICE = "MCP_DICE_EXPR_MAX_DICE"
ENV_LOG_LEVEL = "MCP_DICE_EXPR_LOG_LEVEL"

DEFAULT_MAX_DICE = 1000
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class DiceConfig:
    seed: int | None = None
    max_dice: int = DEFAULT_MAX_DICE
    log_level: str = DEFAULT_LOG_LEVEL

    def make_roller(self) -> DieRoller:
        if self.seed is not None:
            return SeededRoller(self.seed)
        return SystemRoller()


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_config(environ: Mapping[str, str] | None = None) -> DiceConfig:
    env = os.environ if environ is None else environ

    seed: int | None = None
    raw_seed = env.get(ENV_SEED, "").strip()
    if raw_seed:
        seed = _parse_int(ENV_SEED, raw_seed)

    max_dice = DEFAULT_MAX_DICE
    raw_max = env.get(ENV_MAX_DICE, "").strip()
    if raw_max:
        max_dice = _parse_int(ENV_MAX_DICE, raw_max)
        if max_dice < 1:
            raise ConfigError(f"{ENV_MAX_DICE} must be >= 1, got {max_dice}")

    log_level = env.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"{ENV_LOG_LEVEL} must be one of {', '.join(sorted(_LOG_LEVELS))}, got {log_level!r}"
        )

    return DiceConfig(seed=seed, max_dice=max_dice, log_level=log_level)

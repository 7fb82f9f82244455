from __future__ import annotations

import itertools
import random
import secrets
from collections.abc import Iterable
from typing import Protocol


class DieRoller(Protocol):
    """Produces one face value in ``[1, sides]`` per call."""

    def __call__(self, sides: int) -> int: ...


class SystemRoller:
    """Rolls from the operating system's entropy source."""

    source = "secrets.SystemRandom"

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def __call__(self, sides: int) -> int:
        return self._rng.randint(1, sides)


class SeededRoller:
    """Reproducible rolls from ``random.Random(seed)``."""

    source = "random.Random"

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def __call__(self, sides: int) -> int:
        return self._rng.randint(1, sides)


class FixedRoller:
    """Always rolls ``outcome``, clamped to the die's side count."""

    source = "fixed"

    def __init__(self, outcome: int) -> None:
        if outcome < 1:
            raise ValueError(f"outcome must be at least 1, got {outcome}")
        self.outcome = outcome

    def __call__(self, sides: int) -> int:
        return min(self.outcome, sides)


class SequenceRoller:
    """Replays ``outcomes`` in order, cycling when exhausted."""

    source = "sequence"

    def __init__(self, outcomes: Iterable[int]) -> None:
        self.outcomes = list(outcomes)
        if not self.outcomes:
            raise ValueError("SequenceRoller needs at least one outcome")
        self._cycle = itertools.cycle(self.outcomes)

    def __call__(self, sides: int) -> int:
        return next(self._cycle)

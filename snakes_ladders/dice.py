"""Dice sources — the one swappable dependency of the rules engine."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

DICE_SIDES = 6


@runtime_checkable
class DiceSource(Protocol):
    """Anything that can produce the next die value."""

    def roll(self) -> int: ...


class DiceExhausted(RuntimeError):
    """A scripted dice sequence ran out of values."""


class RandomDice:
    """Uniform die backed by a private :class:`random.Random`."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, DICE_SIDES)


class ScriptedDice:
    """Deterministic die for tests and replays — returns *values* in order."""

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._idx = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._idx

    def roll(self) -> int:
        if self._idx >= len(self._values):
            raise DiceExhausted(f"Scripted dice exhausted after {self._idx} rolls.")
        value = self._values[self._idx]
        self._idx += 1
        return value

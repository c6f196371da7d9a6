"""Weighted random pin counts for a single ball.

The thresholds below shape the distribution; they are a tuning choice and
not a rule of bowling:

Full rack (10 pins standing):
  - 20% strike
  - 15% nine pins
  - 15% eight pins
  - 50% uniform over 0-10

Partial rack (second or later ball):
  - 30% every remaining pin
  - 20% all but one
  - 30% all but two
  - 20% uniform over 0-remaining
"""
from __future__ import annotations

import random
from typing import Optional, Protocol

from ..models import MAX_PINS


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


def generate_ball(pins_standing: int, rng: RandomSource) -> int:
    """Return the number of pins knocked down, between 0 and ``pins_standing``."""
    if isinstance(pins_standing, bool) or not 0 <= pins_standing <= MAX_PINS:
        raise ValueError("pins_standing out of range")

    r = rng.randrange(100)
    if pins_standing == MAX_PINS:
        if r < 20:
            return pins_standing
        if r < 35:
            return pins_standing - 1
        if r < 50:
            return pins_standing - 2
        return rng.randint(0, pins_standing)

    if r < 30:
        return pins_standing
    if r < 50:
        return max(pins_standing - 1, 0)
    if r < 80:
        return max(pins_standing - 2, 0)
    return rng.randint(0, pins_standing)


class PinGenerator:
    """Owns the random source for one run and throws balls from it."""

    def __init__(
        self, seed: Optional[int] = None, *, rng: Optional[RandomSource] = None
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either seed or rng, not both")
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    def ball(self, pins_standing: int) -> int:
        return generate_ball(pins_standing, self._rng)

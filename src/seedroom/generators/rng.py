"""Seeded random streams.

Generators accept any zero-argument callable that yields floats in [0, 1).
``seeded_rng`` expands an integer seed with Mulberry32, a 32-bit mix
function; ``random.Random(seed).random`` works just as well.
"""

from __future__ import annotations

import math
from typing import Callable

Rng = Callable[[], float]

_MASK32 = 0xFFFFFFFF


class Mulberry32:
    """Mulberry32 generator. Each call returns the next float in [0, 1)."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK32

    def __call__(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        a = self._state
        t = ((a ^ (a >> 15)) * (a | 1)) & _MASK32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296


def seeded_rng(seed: int) -> Rng:
    """Deterministic float stream for ``seed``."""
    return Mulberry32(seed)


def rand_int(rng: Rng, span: float) -> int:
    """``floor(rng() * span)``; span may be fractional or negative."""
    return math.floor(rng() * span)

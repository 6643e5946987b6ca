"""Shared random number source for the whole simulation."""

from __future__ import annotations

import random

_GENERATOR = random.Random()


def generator() -> random.Random:
    """Return the process-wide random generator."""
    return _GENERATOR


def seed(value: int | str | bytes | None) -> None:
    """Reseed the shared generator, making subsequent draws reproducible."""
    _GENERATOR.seed(value)


def rand_upto(max_value: int) -> int:
    """Return a uniformly distributed integer in ``[0, max_value]``."""
    if max_value < 0:
        raise ValueError(f"max_value must be non-negative, got {max_value}")
    return _GENERATOR.randint(0, int(max_value))


def uniform(low: float, high: float) -> float:
    """Return a uniformly distributed float in ``[low, high)``."""
    if high < low:
        raise ValueError(f"high ({high}) must not be below low ({low})")
    return low + (high - low) * _GENERATOR.random()
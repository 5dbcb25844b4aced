"""Pseudo-random source used by the simulation."""

from __future__ import annotations

import random
from typing import Any, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of :class:`random.Random` the simulation draws from."""

    def random(self) -> float:
        ...

    def randint(self, a: int, b: int) -> int:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...

    def sample(self, population: Sequence[T], k: int) -> list:
        ...


def make_random(seed: Optional[Any] = None) -> random.Random:
    """Return an isolated generator; the same seed reproduces the same run."""

    return random.Random(seed)


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw from the half-open interval [low, high)."""

    return low + (high - low) * rng.random()


__all__ = ["RandomSource", "make_random", "uniform"]

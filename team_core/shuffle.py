# FILE: team_core/shuffle.py
"""
Unbiased shuffling over an injectable random source.

A ``RandInt`` is any callable ``(low, high) -> int`` returning a uniform
integer in ``[low, high]`` inclusive. Production code wraps a
``numpy.random.Generator``; tests can pass a seeded generator or a stub.
"""
from __future__ import annotations
from typing import Callable, List, Optional, Sequence, TypeVar
import numpy as np

T = TypeVar("T")
RandInt = Callable[[int, int], int]


def numpy_randint(rng: np.random.Generator) -> RandInt:
    def _randint(low: int, high: int) -> int:
        return int(rng.integers(low, high + 1))
    return _randint


def make_randint(seed: Optional[int] = None) -> RandInt:
    return numpy_randint(np.random.default_rng(seed))


def shuffle(items: Sequence[T], randint: Optional[RandInt] = None) -> List[T]:
    """Fisher-Yates on a copy; the caller's sequence is never touched."""
    out = list(items)
    if len(out) < 2:
        return out
    randint = randint or make_randint()
    for i in range(len(out) - 1, 0, -1):
        j = randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out

from __future__ import annotations

"""Deterministic pseudo-random sequences keyed by a string or number.

The generator is a sine-based transform of an incrementing counter. It is
not statistically rigorous; callers only rely on the :class:`RandomSource`
protocol, so it can be swapped as long as equal seeds keep producing
equal sequences.
"""

import math
from typing import Protocol, Union


Seed = Union[str, int, float]


class RandomSource(Protocol):
    """Reproducible stream of floats in [0, 1)."""

    def next(self) -> float: ...

    def next_float(self, min_value: float, max_value: float) -> float: ...


def _to_int32(x: int) -> int:
    x &= 0xFFFFFFFF
    return x - 0x100000000 if x & 0x80000000 else x


def hash_seed(text: str) -> int:
    """Rolling string hash: ``hash = c + (hash << 5) - hash`` per UTF-16 unit.

    The shift follows 32-bit signed integer semantics; the accumulator
    itself does not wrap. The absolute value is returned.
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = code_unit + _to_int32(_to_int32(h) << 5) - h
    return abs(h)


class SeededRandom:
    """Sine-based deterministic generator.

    Parameters
    ----------
    seed:
        A string (hashed with :func:`hash_seed`) or a number used as the
        starting counter directly.
    """

    __slots__ = ("_counter",)

    def __init__(self, seed: Seed) -> None:
        self._counter = hash_seed(seed) if isinstance(seed, str) else seed

    def next(self) -> float:
        x = math.sin(self._counter) * 10000.0
        self._counter += 1
        return x - math.floor(x)

    def next_float(self, min_value: float, max_value: float) -> float:
        return min_value + self.next() * (max_value - min_value)


__all__ = ["RandomSource", "SeededRandom", "Seed", "hash_seed"]

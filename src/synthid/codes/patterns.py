"""Pattern fill-in and batch helpers.

``fill_pattern`` replaces placeholder characters with drawn symbols:

``#``  decimal digit
``A``  uppercase ASCII letter
``X``  uppercase ASCII letter or digit

Every other character is copied verbatim.
"""

from __future__ import annotations

import math
import string
from collections.abc import Callable
from typing import TypeVar

from synthid.rng.engine import Random

__all__ = ["PLACEHOLDERS", "fill_pattern", "generate_many", "multiple"]

T = TypeVar("T")

PLACEHOLDERS: dict[str, str] = {
    "#": string.digits,
    "A": string.ascii_uppercase,
    "X": string.ascii_uppercase + string.digits,
}


def fill_pattern(rng: Random, pattern: str) -> str:
    """Return ``pattern`` with each placeholder replaced by a drawn symbol."""

    out: list[str] = []
    for ch in pattern:
        pool = PLACEHOLDERS.get(ch)
        out.append(ch if pool is None else pool[rng.int(0, len(pool) - 1)])
    return "".join(out)


def multiple(count: float, fn: Callable[[int], T]) -> list[T]:
    """Call ``fn(index)`` ``count`` times (floored, never negative)."""

    return [fn(i) for i in range(max(0, math.floor(count)))]


def generate_many(rng: Random, count: float, fn: Callable[[Random, int], T]) -> list[T]:
    """Call ``fn(rng, index)`` repeatedly with one shared engine."""

    return multiple(count, lambda i: fn(rng, i))

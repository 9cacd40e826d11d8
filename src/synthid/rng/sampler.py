"""Bounded integer sampling on top of a raw 32-bit source.

The helpers accept any object exposing ``next_uint32()`` so tests can feed a
scripted stream and exercise the rejection path deterministically.

``sample_int`` reduces a 32-bit draw into ``[min, max]`` with rejection
sampling.  The span is computed modulo ``2**32``; a span that wraps to zero
(an inclusive range of exactly ``2**32`` values) returns ``min`` without
drawing.  That edge case is not uniform and is kept as is.

``sample_big_int`` covers 64-bit ranges by assembling eight byte draws into a
big-endian integer and reducing it modulo the range size.  It is not
bias-corrected; for range sizes near ``2**64`` the low values are slightly
favoured.
"""

from __future__ import annotations

import math
import numbers
from typing import Final, Protocol

from synthid.utils.errors import InvalidRangeError

__all__ = [
    "MASK32",
    "UINT32_RANGE",
    "UintSource",
    "check_bounds",
    "draw_bytes",
    "sample_big_int",
    "sample_int",
]

UINT32_RANGE: Final = 0x1_0000_0000
MASK32: Final = 0xFFFFFFFF


class UintSource(Protocol):
    """Anything producing uniform unsigned 32-bit integers."""

    def next_uint32(self) -> int: ...


def _as_integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidRangeError(f"{name} must be a number, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    as_float = float(value)
    if not math.isfinite(as_float):
        raise InvalidRangeError("min/max must be finite")
    if not as_float.is_integer():
        raise InvalidRangeError("min/max must be integers")
    return int(as_float)


def check_bounds(low: object, high: object) -> tuple[int, int]:
    """Validate inclusive bounds and return them as Python ints."""

    lo = _as_integer(low, "min")
    hi = _as_integer(high, "max")
    if hi < lo:
        raise InvalidRangeError(f"max < min ({hi} < {lo})")
    return lo, hi


def sample_int(source: UintSource, low: object, high: object) -> int:
    """Return an integer uniformly drawn from ``[low, high]``."""

    lo, hi = check_bounds(low, high)
    span = (hi - lo + 1) & MASK32
    if span == 0:
        return lo

    limit = UINT32_RANGE - (UINT32_RANGE % span)
    while True:
        draw = source.next_uint32()
        if draw < limit:
            return lo + draw % span


def draw_bytes(source: UintSource, n: int) -> bytes:
    """Return ``n`` bytes, each drawn with ``sample_int(source, 0, 255)``."""

    return bytes(sample_int(source, 0, 255) for _ in range(max(0, n)))


def sample_big_int(source: UintSource, low: object, high: object) -> int:
    """Return an integer in ``[low, high]`` from 64 drawn bits (modulo reduced)."""

    lo, hi = check_bounds(low, high)
    value = int.from_bytes(draw_bytes(source, 8), "big")
    return lo + value % (hi - lo + 1)

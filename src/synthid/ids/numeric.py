"""Numeric identifier draws modelled on SQL integer column domains.

``small_int``/``integer``/``big_integer`` cover the signed 16-bit, 32-bit and
positive 63-bit domains.  The ``*_serial`` helpers and :func:`identity` draw
from the positive part of those domains to stand in for auto-increment keys.
They are not sequential: every call is an independent uniform draw, and any
ordering is left to the caller.

A 32-bit range covering exactly ``2**32`` values would hit the sampler's
degenerate-span shortcut and always return its lower bound, so such ranges
are drawn straight from :meth:`Random.next_uint32` instead.
"""

from __future__ import annotations

from typing import Final, Literal

from synthid.rng.engine import Random
from synthid.rng.sampler import UINT32_RANGE, check_bounds, sample_big_int
from synthid.utils.errors import UnknownKindError

__all__ = [
    "BIGINT_MAX",
    "INT_MAX",
    "INT_MIN",
    "SMALLINT_MAX",
    "SMALLINT_MIN",
    "big_integer",
    "big_serial",
    "identity",
    "integer",
    "serial",
    "small_int",
    "small_serial",
]

SMALLINT_MIN: Final = -(1 << 15)
SMALLINT_MAX: Final = (1 << 15) - 1
INT_MIN: Final = -(1 << 31)
INT_MAX: Final = (1 << 31) - 1
BIGINT_MAX: Final = (1 << 63) - 1

IdentityType = Literal["smallint", "integer", "bigint"]
IdentityMode = Literal["ALWAYS", "BY DEFAULT"]


def _draw(rng: Random, low: int, high: int) -> int:
    lo, hi = check_bounds(low, high)
    if hi - lo + 1 == UINT32_RANGE:
        return lo + rng.next_uint32()
    return rng.int(lo, hi)


def small_int(
    rng: Random, *, signed: bool = True, min: int | None = None, max: int | None = None
) -> int:
    """Draw a ``smallint``: ``[-32768, 32767]`` or ``[0, 65535]`` unsigned."""

    low = SMALLINT_MIN if signed else 0
    high = SMALLINT_MAX if signed else (1 << 16) - 1
    return _draw(rng, low if min is None else min, high if max is None else max)


def integer(
    rng: Random, *, signed: bool = True, min: int | None = None, max: int | None = None
) -> int:
    """Draw an ``integer``: signed 32-bit, or ``[0, 2**32 - 1]`` unsigned."""

    low = INT_MIN if signed else 0
    high = INT_MAX if signed else UINT32_RANGE - 1
    return _draw(rng, low if min is None else min, high if max is None else max)


def big_integer(rng: Random, *, min: int = 0, max: int = BIGINT_MAX) -> int:
    """Draw a ``bigint`` from 64 random bits (modulo reduced, not bias corrected)."""

    return sample_big_int(rng, min, max)


def small_serial(rng: Random) -> int:
    return rng.int(1, SMALLINT_MAX)


def serial(rng: Random) -> int:
    return rng.int(1, INT_MAX)


def big_serial(rng: Random) -> int:
    return sample_big_int(rng, 1, BIGINT_MAX)


_IDENTITY_DRAWS = {
    "smallint": small_serial,
    "integer": serial,
    "bigint": big_serial,
}
_IDENTITY_MODES = ("ALWAYS", "BY DEFAULT")


def identity(
    rng: Random, *, mode: IdentityMode = "BY DEFAULT", type: IdentityType = "integer"
) -> int:
    """Draw a value for a ``GENERATED <mode> AS IDENTITY`` column of ``type``.

    ``mode`` does not change the value; it is validated so misspelt options
    fail loudly.
    """

    if mode not in _IDENTITY_MODES:
        raise UnknownKindError(f"Unknown identity mode: {mode!r}")
    try:
        draw = _IDENTITY_DRAWS[type]
    except KeyError:
        raise UnknownKindError(f"Unknown identity type: {type!r}") from None
    return draw(rng)

"""Mulberry32 pseudo random engine.

:class:`Random` owns a single unsigned 32-bit state word.  Every draw advances
the state by a Weyl increment and then mixes the bits (xor-shift followed by an
odd multiply, twice, and a final xor-shift) to produce a uniform 32-bit output.
Python integers are unbounded, so every step is masked back to 32 bits to
match two's-complement 32x32->32 truncating multiplication exactly.

The engine is deterministic and **not** cryptographically secure.  Instances
are independent; nothing is shared at module level.  A single instance must
not be used from several threads without external locking because draw order
determines output.
"""

from __future__ import annotations

import builtins
from typing import Final

from .sampler import MASK32, UINT32_RANGE, draw_bytes, sample_int

__all__ = ["DEFAULT_SEED", "WEYL_INCREMENT", "Random"]

DEFAULT_SEED: Final = 0xDEADBEEF
WEYL_INCREMENT: Final = 0x6D2B79F5


class Random:
    """Mulberry32 generator with an unbiased inclusive integer sampler."""

    __slots__ = ("_state",)

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state = seed & MASK32

    @property
    def state(self) -> int:
        """Current 32-bit state word."""

        return self._state

    def seed(self, seed: int) -> None:
        """Reset the state to ``seed`` reduced to an unsigned 32-bit value."""

        self._state = seed & MASK32

    def next_uint32(self) -> int:
        """Return the next uniform integer in ``[0, 2**32)``."""

        self._state = (self._state + WEYL_INCREMENT) & MASK32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & MASK32)) & MASK32
        return (t ^ (t >> 14)) & MASK32

    def next(self) -> float:
        """Return a float in ``[0, 1)``."""

        return self.next_uint32() / UINT32_RANGE

    def __repr__(self) -> str:
        return f"Random(state=0x{self._state:08x})"

    # ``int`` and ``bytes`` shadow the builtins inside the class body from here on.

    def int(self, min: builtins.int, max: builtins.int) -> builtins.int:
        """Inclusive integer in ``[min, max]`` without modulo bias."""

        return sample_int(self, min, max)

    def bytes(self, n: builtins.int) -> builtins.bytes:
        """Return ``n`` uniform bytes."""

        return draw_bytes(self, n)

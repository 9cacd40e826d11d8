"""Deterministic random engine and bounded samplers."""

from .engine import DEFAULT_SEED, Random
from .sampler import UINT32_RANGE, UintSource, draw_bytes, sample_big_int, sample_int

__all__ = [
    "DEFAULT_SEED",
    "Random",
    "UINT32_RANGE",
    "UintSource",
    "draw_bytes",
    "sample_big_int",
    "sample_int",
]

"""synthid: reproducible synthetic identifiers.

The package is built around a seeded mulberry32 engine
(:class:`synthid.rng.Random`) and an unbiased bounded-integer sampler.  On top
of those sit identifier encoders (UUIDv4, ULID, nanoid, ObjectId, base58 short
UUID, cuid), numeric identifier draws, UPC-A/EAN-13 checksums and commerce
style codes.  :class:`synthid.generator.SyntheticGenerator` bundles them
behind one configured, seeded object; the command line interface lives in
:mod:`synthid.cli`.
"""

from .generator import KINDS, SyntheticGenerator
from .rng import Random
from .utils.errors import ChecksumInputError, InvalidRangeError, SynthidError, UnknownKindError

__version__ = "0.1.0"

__all__ = [
    "KINDS",
    "ChecksumInputError",
    "InvalidRangeError",
    "Random",
    "SynthidError",
    "SyntheticGenerator",
    "UnknownKindError",
]

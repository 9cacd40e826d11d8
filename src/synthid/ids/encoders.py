"""Binary-to-text identifier encoders driven by :class:`synthid.rng.Random`.

Every encoder draws its bytes from the engine it is given, so the same seed
and call order always reproduce the same identifiers.  None of the outputs
carry real timestamps or host information unless the caller supplies a time.

Formats
-------
``uuid_v4``     ``xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx`` with ``y`` in ``89ab``
``ulid``        26 Crockford base32 symbols (no ``I L O U``)
``nanoid``      21 symbols from ``[A-Za-z0-9_-]`` by default
``object_id``   24 lowercase hex characters
``short_uuid``  base58 rendering of a UUIDv4, 20-24 symbols
``cuid``        ``c`` followed by lowercase base36 symbols
"""

from __future__ import annotations

import math
import uuid
from typing import Final

from synthid.rng.engine import Random
from synthid.rng.sampler import UINT32_RANGE
from synthid.utils.errors import InvalidRangeError

__all__ = [
    "BASE58_ALPHABET",
    "CROCKFORD32_ALPHABET",
    "NANOID_ALPHABET",
    "cuid",
    "nanoid",
    "object_id",
    "short_uuid",
    "to_base58",
    "ulid",
    "uuid_v4",
]

CROCKFORD32_ALPHABET: Final = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
BASE58_ALPHABET: Final = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
NANOID_ALPHABET: Final = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_BASE36_ALPHABET: Final = "0123456789abcdefghijklmnopqrstuvwxyz"

_TIME_BITS: Final = 48
_ULID_RANDOM_BYTES: Final = 10
_ULID_LENGTH: Final = 26


# ---------------------------------------------------------------------------
# UUID family
# ---------------------------------------------------------------------------


def _uuid4_bytes(rng: Random) -> bytes:
    raw = bytearray(rng.bytes(16))
    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80
    return bytes(raw)


def uuid_v4(rng: Random) -> str:
    """Return an RFC 4122 version 4 UUID string."""

    return str(uuid.UUID(bytes=_uuid4_bytes(rng)))


def to_base58(data: bytes) -> str:
    """Encode ``data`` as base58, keeping one ``'1'`` per leading zero byte.

    The conversion uses integer arithmetic only.  An empty or all-zero input
    yields a run of ``'1'`` characters, at least one long.
    """

    value = int.from_bytes(data, "big")
    symbols: list[str] = []
    while value > 0:
        value, rem = divmod(value, 58)
        symbols.append(BASE58_ALPHABET[rem])
    symbols.reverse()

    zeros = len(data) - len(data.lstrip(b"\x00"))
    encoded = BASE58_ALPHABET[0] * zeros + "".join(symbols)
    return encoded or BASE58_ALPHABET[0]


def short_uuid(rng: Random) -> str:
    """Return a UUIDv4 rendered compactly in base58."""

    return to_base58(_uuid4_bytes(rng))


# ---------------------------------------------------------------------------
# Time-prefixed identifiers
# ---------------------------------------------------------------------------


def _finite_time(time: float) -> float:
    if not math.isfinite(time):
        raise InvalidRangeError(f"time must be finite, got {time!r}")
    return time


def ulid(rng: Random, *, time: float | None = None) -> str:
    """Return a 26 character ULID.

    ``time`` is milliseconds since the epoch.  When omitted, a 48-bit
    timestamp is synthesized from the engine (16 high bits, then 32 low bits)
    so output stays reproducible.  The 128-bit value is cut into 5-bit groups
    from the most significant end; the last group is zero-padded on the right.
    """

    if time is None:
        high = rng.int(0, 0xFFFF)
        low = rng.next_uint32()
        stamp = (high << 32) | low
    else:
        stamp = max(0, math.floor(_finite_time(time))) % (1 << _TIME_BITS)

    randomness = int.from_bytes(rng.bytes(_ULID_RANDOM_BYTES), "big")
    value = (stamp << (8 * _ULID_RANDOM_BYTES)) | randomness
    # 128 bits -> 130 bits so the final 5-bit group is right padded
    value <<= _ULID_LENGTH * 5 - 128

    out = []
    for i in range(_ULID_LENGTH):
        shift = (_ULID_LENGTH - 1 - i) * 5
        out.append(CROCKFORD32_ALPHABET[(value >> shift) & 0x1F])
    return "".join(out)


def object_id(rng: Random, *, time: float | None = None) -> str:
    """Return a MongoDB style ObjectId as 24 lowercase hex characters.

    The first four bytes hold ``time`` (seconds, big-endian) when given,
    otherwise a full 32-bit draw.  A given ``time`` is truncated toward zero
    and wrapped to 32 bits, so ``-1`` becomes ``ffffffff``.  The remaining
    eight bytes are random.
    """

    if time is None:
        stamp = rng.next_uint32()
    else:
        stamp = math.trunc(_finite_time(time)) % UINT32_RANGE
    return (stamp.to_bytes(4, "big") + rng.bytes(8)).hex()


# ---------------------------------------------------------------------------
# Alphabet based identifiers
# ---------------------------------------------------------------------------


def nanoid(rng: Random, *, length: int = 21, alphabet: str = NANOID_ALPHABET) -> str:
    """Return a nanoid-like identifier of ``length`` symbols from ``alphabet``.

    ``length`` is floored and raised to at least one.  An empty alphabet
    raises :class:`~synthid.utils.errors.InvalidRangeError`.
    """

    size = max(1, math.floor(length))
    top = len(alphabet) - 1
    return "".join(alphabet[rng.int(0, top)] for _ in range(size))


def cuid(rng: Random, *, length: int = 25) -> str:
    """Return a CUID-looking identifier: ``c`` plus lowercase base36."""

    size = max(2, math.floor(length))
    top = len(_BASE36_ALPHABET) - 1
    return "c" + "".join(_BASE36_ALPHABET[rng.int(0, top)] for _ in range(size - 1))

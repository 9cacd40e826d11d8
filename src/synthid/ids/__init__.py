"""Identifier encoders and numeric identifier draws."""

from .encoders import (
    BASE58_ALPHABET,
    CROCKFORD32_ALPHABET,
    NANOID_ALPHABET,
    cuid,
    nanoid,
    object_id,
    short_uuid,
    to_base58,
    ulid,
    uuid_v4,
)
from .numeric import (
    big_integer,
    big_serial,
    identity,
    integer,
    serial,
    small_int,
    small_serial,
)

__all__ = [
    "BASE58_ALPHABET",
    "CROCKFORD32_ALPHABET",
    "NANOID_ALPHABET",
    "big_integer",
    "big_serial",
    "cuid",
    "identity",
    "integer",
    "nanoid",
    "object_id",
    "serial",
    "short_uuid",
    "small_int",
    "small_serial",
    "to_base58",
    "ulid",
    "uuid_v4",
]

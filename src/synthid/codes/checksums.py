"""Check digit algorithms for UPC-A and EAN-13 product codes.

Both take a sequence of digits (ints in ``[0, 9]`` or a string of decimal
digits) and are pure.  Positions are 1-indexed from the left:

* UPC-A: ``3 * sum(odd positions) + sum(even positions)`` over 11 digits.
* EAN-13: ``sum(odd positions) + 3 * sum(even positions)`` over 12 digits.

The check digit is ``(10 - total % 10) % 10`` in both cases.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, Union

from synthid.utils.errors import ChecksumInputError

__all__ = [
    "EAN13_PAYLOAD_LENGTH",
    "UPC_PAYLOAD_LENGTH",
    "Digits",
    "ean13_check_digit",
    "is_valid_ean13",
    "is_valid_upc",
    "upc_check_digit",
]

UPC_PAYLOAD_LENGTH: Final = 11
EAN13_PAYLOAD_LENGTH: Final = 12

Digits = Union[str, Sequence[int]]


def _digits(value: Digits, expected: int) -> list[int]:
    if isinstance(value, str):
        if not value.isascii() or not value.isdigit():
            raise ChecksumInputError(f"Expected decimal digits, got {value!r}")
        out = [int(ch) for ch in value]
    else:
        out = list(value)
        for d in out:
            if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 9:
                raise ChecksumInputError(f"Digit out of range: {d!r}")
    if len(out) != expected:
        raise ChecksumInputError(f"Expected {expected} digits, got {len(out)}")
    return out


def _weighted(digits: list[int], odd_weight: int, even_weight: int) -> int:
    total = sum(digits[0::2]) * odd_weight + sum(digits[1::2]) * even_weight
    return (10 - total % 10) % 10


def upc_check_digit(digits: Digits) -> int:
    """Return the UPC-A check digit for 11 payload digits."""

    return _weighted(_digits(digits, UPC_PAYLOAD_LENGTH), 3, 1)


def ean13_check_digit(digits: Digits) -> int:
    """Return the EAN-13 check digit for 12 payload digits."""

    return _weighted(_digits(digits, EAN13_PAYLOAD_LENGTH), 1, 3)


def is_valid_upc(code: str) -> bool:
    """Return ``True`` when ``code`` is 12 digits with a correct check digit."""

    if len(code) != UPC_PAYLOAD_LENGTH + 1 or not (code.isascii() and code.isdigit()):
        return False
    return upc_check_digit(code[:-1]) == int(code[-1])


def is_valid_ean13(code: str) -> bool:
    """Return ``True`` when ``code`` is 13 digits with a correct check digit."""

    if len(code) != EAN13_PAYLOAD_LENGTH + 1 or not (code.isascii() and code.isdigit()):
        return False
    return ean13_check_digit(code[:-1]) == int(code[-1])

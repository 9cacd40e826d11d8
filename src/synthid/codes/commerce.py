"""Commerce style codes: product barcodes, SKUs and document numbers."""

from __future__ import annotations

import builtins
import math

from synthid.rng.engine import Random

from .checksums import EAN13_PAYLOAD_LENGTH, UPC_PAYLOAD_LENGTH, ean13_check_digit, upc_check_digit
from .patterns import fill_pattern

__all__ = [
    "ean13",
    "invoice_number",
    "price",
    "purchase_order_number",
    "quantity",
    "sku",
    "transaction_id",
    "upc",
]


def _digit_payload(rng: Random, n: int) -> list[int]:
    return [rng.int(0, 9) for _ in range(n)]


def upc(rng: Random) -> str:
    """Return a 12 digit UPC-A code with a valid check digit."""

    payload = _digit_payload(rng, UPC_PAYLOAD_LENGTH)
    return "".join(map(str, payload)) + str(upc_check_digit(payload))


def ean13(rng: Random) -> str:
    """Return a 13 digit EAN-13 code with a valid check digit."""

    payload = _digit_payload(rng, EAN13_PAYLOAD_LENGTH)
    return "".join(map(str, payload)) + str(ean13_check_digit(payload))


def sku(rng: Random, *, pattern: str = "AAA-####") -> str:
    return fill_pattern(rng, pattern)


def purchase_order_number(rng: Random, *, prefix: str = "PO") -> str:
    """Return ``<prefix>-XXXXXX-XXXX`` with uppercase alphanumerics."""

    return fill_pattern(rng, f"{prefix}-XXXXXX-XXXX")


def invoice_number(rng: Random, *, prefix: str = "INV") -> str:
    """Return ``<prefix>-#########``."""

    return fill_pattern(rng, f"{prefix}-#########")


def transaction_id(rng: Random, *, length: int = 16) -> str:
    """Return ``length`` lowercase hex characters (at least one)."""

    size = max(1, math.floor(length))
    return "".join(f"{rng.int(0, 15):x}" for _ in range(size))


def quantity(rng: Random, *, min: int = 1, max: int = 100) -> int:
    """Return an order quantity in ``[min, max]``; ``min`` is floored at 1."""

    low = builtins.max(1, min)
    return rng.int(low, builtins.max(low, max))


def price(
    rng: Random, *, min: float = 1.0, max: float = 1000.0, decimals: int = 2
) -> float:
    """Return a price in ``[min, max]`` rounded to ``decimals`` places.

    The value is drawn as a whole number of minor units so every representable
    price in the range is equally likely.  ``decimals`` is clamped to
    ``[0, 4]`` and negative bounds are raised to zero.
    """

    low = builtins.max(0.0, min)
    high = builtins.max(low, max)
    places = builtins.min(4, builtins.max(0, decimals))
    scale = 10**places
    units = rng.int(round(low * scale), round(high * scale))
    return round(units / scale, places)


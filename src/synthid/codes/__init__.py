"""Checksum algorithms, pattern fill and commerce style codes."""

from .checksums import ean13_check_digit, is_valid_ean13, is_valid_upc, upc_check_digit
from .commerce import (
    ean13,
    invoice_number,
    price,
    purchase_order_number,
    quantity,
    sku,
    transaction_id,
    upc,
)
from .patterns import fill_pattern, generate_many, multiple

__all__ = [
    "ean13",
    "ean13_check_digit",
    "fill_pattern",
    "generate_many",
    "invoice_number",
    "is_valid_ean13",
    "is_valid_upc",
    "multiple",
    "price",
    "purchase_order_number",
    "quantity",
    "sku",
    "transaction_id",
    "upc",
    "upc_check_digit",
]

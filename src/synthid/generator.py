"""Deterministic synthetic identifier generator.

:class:`SyntheticGenerator` owns one :class:`~synthid.rng.engine.Random` and
exposes every identifier, numeric and commerce helper as a method.  It is
seeded from a :class:`~synthid.config.ConfigModel` (or an explicit seed) so
the same configuration and call order always yield the same values.

Defaults such as the nanoid length or the SKU pattern come from the
configuration; keyword arguments passed to a method take precedence.

The generator is not thread-safe.  Give each worker its own instance, or
guard a shared one with a lock, since draw order determines output.
"""

from __future__ import annotations

import builtins
from collections.abc import Callable
from typing import Any

from synthid.codes import checksums, commerce, patterns
from synthid.config import ConfigModel, load_config
from synthid.ids import encoders, numeric
from synthid.rng.engine import Random
from synthid.utils.errors import UnknownKindError
from synthid.utils.logging import get_logger

__all__ = ["KINDS", "SyntheticGenerator"]

logger = get_logger(__name__)


class SyntheticGenerator:
    """Generate reproducible identifiers from a single seeded engine."""

    def __init__(self, cfg: ConfigModel | None = None, *, seed: int | None = None) -> None:
        """Initialize the generator.

        Parameters
        ----------
        cfg:
            Configuration providing the default seed and per-kind defaults.
            Loaded with :func:`synthid.config.load_config` when omitted.
        seed:
            Optional seed overriding ``cfg.seed.value``.
        """

        self.cfg: ConfigModel = cfg if cfg is not None else load_config()
        initial = self.cfg.seed.value if seed is None else seed
        self.rng: Random = Random(initial)
        logger.debug("Generator seeded with 0x%08x", self.rng.state)

    def set_seed(self, seed: int) -> None:
        """Reseed the engine; later draws restart from ``seed``."""

        self.rng.seed(seed)
        logger.debug("Generator reseeded with 0x%08x", self.rng.state)

    # -- Primitives ---------------------------------------------------------

    def next_float(self) -> float:
        return self.rng.next()

    # -- Identifiers --------------------------------------------------------

    def uuid_v4(self) -> str:
        return encoders.uuid_v4(self.rng)

    def ulid(self, *, time: float | None = None) -> str:
        return encoders.ulid(self.rng, time=time)

    def nanoid(self, *, length: int | None = None, alphabet: str | None = None) -> str:
        ids = self.cfg.ids
        return encoders.nanoid(
            self.rng,
            length=ids.nanoid_length if length is None else length,
            alphabet=ids.nanoid_alphabet if alphabet is None else alphabet,
        )

    def object_id(self, *, time: float | None = None) -> str:
        return encoders.object_id(self.rng, time=time)

    def short_uuid(self) -> str:
        return encoders.short_uuid(self.rng)

    def cuid(self, *, length: int | None = None) -> str:
        default = self.cfg.ids.cuid_length
        return encoders.cuid(self.rng, length=default if length is None else length)

    # -- Numeric identifiers ------------------------------------------------

    def small_int(
        self, *, signed: bool = True, min: int | None = None, max: int | None = None
    ) -> int:
        return numeric.small_int(self.rng, signed=signed, min=min, max=max)

    def integer(
        self, *, signed: bool = True, min: int | None = None, max: int | None = None
    ) -> int:
        return numeric.integer(self.rng, signed=signed, min=min, max=max)

    def big_integer(self, *, min: int = 0, max: int = numeric.BIGINT_MAX) -> int:
        return numeric.big_integer(self.rng, min=min, max=max)

    def small_serial(self) -> int:
        return numeric.small_serial(self.rng)

    def serial(self) -> int:
        return numeric.serial(self.rng)

    def big_serial(self) -> int:
        return numeric.big_serial(self.rng)

    def identity(
        self,
        *,
        mode: numeric.IdentityMode = "BY DEFAULT",
        type: numeric.IdentityType = "integer",
    ) -> int:
        return numeric.identity(self.rng, mode=mode, type=type)

    # -- Commerce -----------------------------------------------------------

    def upc(self) -> str:
        return commerce.upc(self.rng)

    def ean13(self) -> str:
        return commerce.ean13(self.rng)

    def sku(self, *, pattern: str | None = None) -> str:
        default = self.cfg.commerce.sku_pattern
        return commerce.sku(self.rng, pattern=default if pattern is None else pattern)

    def purchase_order_number(self, *, prefix: str | None = None) -> str:
        default = self.cfg.commerce.po_prefix
        return commerce.purchase_order_number(
            self.rng, prefix=default if prefix is None else prefix
        )

    def invoice_number(self, *, prefix: str | None = None) -> str:
        default = self.cfg.commerce.invoice_prefix
        return commerce.invoice_number(self.rng, prefix=default if prefix is None else prefix)

    def transaction_id(self, *, length: int | None = None) -> str:
        default = self.cfg.commerce.transaction_id_length
        return commerce.transaction_id(self.rng, length=default if length is None else length)

    def quantity(self, *, min: int | None = None, max: int | None = None) -> int:
        c = self.cfg.commerce
        return commerce.quantity(
            self.rng,
            min=c.quantity_min if min is None else min,
            max=c.quantity_max if max is None else max,
        )

    def price(
        self,
        *,
        min: float | None = None,
        max: float | None = None,
        decimals: int | None = None,
    ) -> float:
        c = self.cfg.commerce
        return commerce.price(
            self.rng,
            min=c.price_min if min is None else min,
            max=c.price_max if max is None else max,
            decimals=c.price_decimals if decimals is None else decimals,
        )

    def pattern(self, pattern: str) -> str:
        """Fill ``#``/``A``/``X`` placeholders in ``pattern``."""

        return patterns.fill_pattern(self.rng, pattern)

    # -- Checksums ----------------------------------------------------------

    @staticmethod
    def upc_check_digit(digits: checksums.Digits) -> int:
        return checksums.upc_check_digit(digits)

    @staticmethod
    def ean13_check_digit(digits: checksums.Digits) -> int:
        return checksums.ean13_check_digit(digits)

    # -- Batches ------------------------------------------------------------

    def many(self, kind: str, count: int, **opts: Any) -> list[Any]:
        """Return ``count`` values of generator ``kind`` (see :data:`KINDS`)."""

        method = _resolve(self, kind)
        logger.debug("Generating %d x %s", max(0, count), kind)
        return patterns.multiple(count, lambda _i: method(**opts))

    # -- Raw draws ----------------------------------------------------------
    # Kept last: ``int`` and ``bytes`` shadow the builtins in the class body.

    def int(self, min: builtins.int, max: builtins.int) -> builtins.int:
        return self.rng.int(min, max)

    def bytes(self, n: builtins.int) -> builtins.bytes:
        return self.rng.bytes(n)


# Public generator names mapped to method names; used by ``many`` and the CLI.
KINDS: dict[str, str] = {
    "uuid": "uuid_v4",
    "ulid": "ulid",
    "nanoid": "nanoid",
    "objectid": "object_id",
    "shortuuid": "short_uuid",
    "cuid": "cuid",
    "smallint": "small_int",
    "integer": "integer",
    "bigint": "big_integer",
    "smallserial": "small_serial",
    "serial": "serial",
    "bigserial": "big_serial",
    "identity": "identity",
    "upc": "upc",
    "ean13": "ean13",
    "sku": "sku",
    "po": "purchase_order_number",
    "invoice": "invoice_number",
    "txn": "transaction_id",
    "quantity": "quantity",
    "price": "price",
}


def _resolve(gen: SyntheticGenerator, kind: str) -> Callable[..., Any]:
    try:
        return getattr(gen, KINDS[kind])
    except KeyError:
        raise UnknownKindError(f"Unknown generator kind: {kind!r}") from None

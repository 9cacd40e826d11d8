"""Typed configuration schema and loader for the synthid package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, constr, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Seed of the facade engine and the environment variable overriding it."""

    value: conint(ge=0, le=0xFFFFFFFF)
    env: str

    model_config = ConfigDict(extra="forbid")


class IdSettings(BaseModel):
    """Defaults for alphabet based identifiers."""

    nanoid_length: conint(ge=1)
    nanoid_alphabet: constr(min_length=1)
    cuid_length: conint(ge=2)

    model_config = ConfigDict(extra="forbid")


class CommerceSettings(BaseModel):
    """Defaults for commerce style codes."""

    sku_pattern: str
    po_prefix: str
    invoice_prefix: str
    transaction_id_length: conint(ge=1)
    price_min: confloat(ge=0.0)
    price_max: confloat(ge=0.0)
    price_decimals: conint(ge=0, le=4)
    quantity_min: conint(ge=1)
    quantity_max: conint(ge=1)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_ranges(self) -> "CommerceSettings":
        if self.price_max < self.price_min:
            raise ValueError("price_max must be >= price_min")
        if self.quantity_max < self.quantity_min:
            raise ValueError("quantity_max must be >= quantity_min")
        return self


class LoggingSettings(BaseModel):
    """Package log level."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: SeedSettings
    ids: IdSettings
    commerce: CommerceSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _parse_seed(raw: str) -> int | str:
    """Parse ``raw`` as a decimal/hex/octal/binary literal.

    Unparseable values are returned unchanged so validation reports them.
    """

    try:
        return int(raw.strip(), 0)
    except ValueError:
        return raw


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed.env``.
    """

    with (
        importlib_resources.files("synthid.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.env
    if seed_env in environ:
        data = cfg.model_dump()
        data["seed"]["value"] = _parse_seed(environ[seed_env])
        cfg = ConfigModel.model_validate(data)

    return cfg


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "IdSettings",
    "CommerceSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]

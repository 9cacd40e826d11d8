"""Typer-based command line interface for synthid.

Commands
--------
``generate``     print values of one generator kind, one per line
``kinds``        list the available generator kinds
``check-digit``  complete a UPC-A or EAN-13 payload with its check digit
``validate``     validate a UPC-A/EAN-13 code with ``python-stdnum``

Exit codes
----------
0 success
2 usage error (reported by typer)
4 configuration error
5 invalid argument (bad range, unknown kind, malformed digits)
6 validation failure
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError
from stdnum import ean
from stdnum.exceptions import ValidationError as StdnumValidationError

from .codes import checksums
from .config import ConfigModel, load_config
from .generator import KINDS, SyntheticGenerator
from .utils.errors import SynthidError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="synthid",
    help="Reproducible synthetic identifiers. Use 'synthid generate KIND' to print values.",
)

logger = get_logger(__name__)


class CodeKind(str, Enum):
    upc = "upc"
    ean13 = "ean13"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config: Optional[Path], verbose: bool) -> ConfigModel:
    try:
        cfg = load_config(config)
    except (OSError, ValidationError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(4, f"Configuration error: {exc}")
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _kind_options(
    kind: str,
    *,
    time: Optional[float],
    length: Optional[int],
    pattern: Optional[str],
    prefix: Optional[str],
) -> dict[str, Any]:
    """Map CLI flags onto the keyword arguments ``kind`` understands."""

    opts: dict[str, Any] = {}
    if time is not None and kind in {"ulid", "objectid"}:
        opts["time"] = time
    if length is not None and kind in {"nanoid", "cuid", "txn"}:
        opts["length"] = length
    if pattern is not None and kind == "sku":
        opts["pattern"] = pattern
    if prefix is not None and kind in {"po", "invoice"}:
        opts["prefix"] = prefix
    return opts


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def generate(
    kind: str = typer.Argument(..., help="Generator kind, see 'synthid kinds'."),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Override the configured seed."),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML config."),
    time: Optional[float] = typer.Option(None, "--time", help="Timestamp for ulid/objectid."),
    length: Optional[int] = typer.Option(None, "--length", help="Length for nanoid/cuid/txn."),
    pattern: Optional[str] = typer.Option(None, "--pattern", help="Pattern for sku."),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Prefix for po/invoice."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print COUNT values of KIND, one per line."""

    cfg = _load(config, verbose)
    if kind not in KINDS:
        _safe_exit(5, f"Unknown kind '{kind}'. Available: {', '.join(sorted(KINDS))}")

    gen = SyntheticGenerator(cfg, seed=seed)
    opts = _kind_options(kind, time=time, length=length, pattern=pattern, prefix=prefix)
    try:
        values = gen.many(kind, count, **opts)
    except SynthidError as exc:
        _safe_exit(5, str(exc))
    logger.info("Generated %d %s value(s)", len(values), kind)
    for value in values:
        typer.echo(str(value))


@app.command()
def kinds() -> None:
    """List available generator kinds."""

    for name in sorted(KINDS):
        typer.echo(name)


@app.command("check-digit")
def check_digit(
    kind: CodeKind = typer.Argument(..., help="Code family."),
    digits: str = typer.Argument(..., help="Payload digits (11 for upc, 12 for ean13)."),
) -> None:
    """Print DIGITS completed with its check digit."""

    compute = checksums.upc_check_digit if kind is CodeKind.upc else checksums.ean13_check_digit
    try:
        check = compute(digits)
    except SynthidError as exc:
        _safe_exit(5, str(exc))
    typer.echo(f"{digits}{check}")


@app.command()
def validate(code: str = typer.Argument(..., help="UPC-A or EAN-13 code.")) -> None:
    """Validate CODE with python-stdnum's EAN/UPC validator."""

    try:
        ean.validate(code)
    except StdnumValidationError as exc:
        _safe_exit(6, f"{code}: {exc}")
    typer.echo(f"{ean.compact(code)}: valid")


def main() -> None:  # pragma: no cover - console entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    main()

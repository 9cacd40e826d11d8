from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from synthid import KINDS
from synthid.cli import app


def test_generate_uuid_reference() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "uuid", "--seed", "1"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "f3c9ebfd-2b30-405c-b071-0a2ebd22e0b2"


def test_generate_count_and_determinism() -> None:
    runner = CliRunner()
    first = runner.invoke(app, ["generate", "ulid", "-n", "5", "--seed", "9"])
    second = runner.invoke(app, ["generate", "ulid", "-n", "5", "--seed", "9"])
    assert first.exit_code == 0
    lines = first.stdout.strip().splitlines()
    assert len(lines) == 5
    assert all(re.fullmatch(r"[0-9A-HJKMNP-TV-Z]{26}", line) for line in lines)
    assert first.stdout == second.stdout


def test_generate_options_forwarded() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "objectid", "--time", "0", "--seed", "3"])
    assert result.stdout.startswith("00000000")
    result = runner.invoke(app, ["generate", "nanoid", "--length", "8"])
    assert len(result.stdout.strip()) == 8
    result = runner.invoke(app, ["generate", "po", "--prefix", "ACME"])
    assert result.stdout.startswith("ACME-")
    result = runner.invoke(app, ["generate", "sku", "--pattern", "##"])
    assert re.fullmatch(r"\d{2}", result.stdout.strip())


def test_generate_seed_from_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("SYNTHID_SEED", "1")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "uuid"])
    assert result.stdout.strip() == "f3c9ebfd-2b30-405c-b071-0a2ebd22e0b2"


def test_generate_with_config_file(tmp_path: Path, monkeypatch: Any) -> None:
    monkeypatch.delenv("SYNTHID_SEED", raising=False)
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("seed:\n  value: 1\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "uuid", "--config", str(cfg)])
    assert result.stdout.strip() == "f3c9ebfd-2b30-405c-b071-0a2ebd22e0b2"


def test_kinds_lists_everything() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["kinds"])
    assert result.exit_code == 0
    assert result.stdout.split() == sorted(KINDS)


def test_check_digit() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["check-digit", "upc", "03600029145"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "036000291452"
    result = runner.invoke(app, ["check-digit", "ean13", "400638133393"])
    assert result.stdout.strip() == "4006381333931"


def test_validate_ok() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["validate", "4006381333931"])
    assert result.exit_code == 0
    assert "valid" in result.stdout

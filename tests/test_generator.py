from __future__ import annotations

import logging
import re
import typing

import pytest

from synthid import KINDS, SyntheticGenerator, UnknownKindError
from synthid.config import load_config
from synthid.ids import uuid_v4
from synthid.rng import Random


def test_same_seed_same_values() -> None:
    g1 = SyntheticGenerator(seed=123)
    g2 = SyntheticGenerator(seed=123)
    seq1 = [g1.uuid_v4(), g1.ulid(), g1.nanoid(), g1.ean13(), g1.integer(), g1.price()]
    seq2 = [g2.uuid_v4(), g2.ulid(), g2.nanoid(), g2.ean13(), g2.integer(), g2.price()]
    assert seq1 == seq2


def test_matches_module_functions() -> None:
    gen = SyntheticGenerator(seed=1)
    assert gen.uuid_v4() == uuid_v4(Random(1))


def test_default_seed_from_config() -> None:
    cfg = load_config(env={})
    gen = SyntheticGenerator(cfg)
    assert gen.rng.state == cfg.seed.value == 0xC0FFEE


def test_set_seed_resets_sequence() -> None:
    gen = SyntheticGenerator(seed=9)
    first = gen.short_uuid()
    gen.object_id()
    gen.set_seed(9)
    assert gen.short_uuid() == first


def test_config_defaults_applied() -> None:
    cfg = load_config(env={})
    ids = cfg.ids.model_copy(update={"nanoid_length": 8})
    commerce = cfg.commerce.model_copy(update={"sku_pattern": "##-AA", "invoice_prefix": "BILL"})
    cfg = cfg.model_copy(update={"ids": ids, "commerce": commerce})
    gen = SyntheticGenerator(cfg, seed=3)
    assert len(gen.nanoid()) == 8
    assert len(gen.nanoid(length=4)) == 4
    assert re.fullmatch(r"\d{2}-[A-Z]{2}", gen.sku())
    assert gen.invoice_number().startswith("BILL-")


def test_primitives() -> None:
    gen = SyntheticGenerator(seed=1)
    assert gen.int(0, 9) == 7
    assert 0.0 <= gen.next_float() < 1.0
    assert len(gen.bytes(5)) == 5
    assert gen.pattern("#").isdigit()


def test_checksum_helpers() -> None:
    assert SyntheticGenerator.upc_check_digit("03600029145") == 2
    assert SyntheticGenerator.ean13_check_digit("400638133393") == 1


def test_many_every_kind() -> None:
    gen = SyntheticGenerator(seed=55)
    for kind in KINDS:
        values = gen.many(kind, 3)
        assert len(values) == 3


def test_many_passes_options() -> None:
    gen = SyntheticGenerator(seed=55)
    values = gen.many("objectid", 2, time=0)
    assert all(v.startswith("00000000") for v in values)
    assert gen.many("uuid", 0) == []


def test_many_unknown_kind() -> None:
    with pytest.raises(UnknownKindError):
        SyntheticGenerator(seed=1).many("isbn", 1)


def test_seed_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="synthid"):
        SyntheticGenerator(seed=0xABC)
    assert "0x00000abc" in caplog.text


def test_method_annotations_resolve_to_builtins() -> None:
    hints = typing.get_type_hints(SyntheticGenerator.small_int)
    assert hints["return"] is int
    assert typing.get_type_hints(SyntheticGenerator.int)["return"] is int
    assert typing.get_type_hints(SyntheticGenerator.bytes) == {"n": int, "return": bytes}
    assert typing.get_type_hints(SyntheticGenerator.price)["return"] is float

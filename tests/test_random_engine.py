from __future__ import annotations

import typing

from synthid.rng import DEFAULT_SEED, Random


def test_reference_sequence() -> None:
    rng = Random(0)
    assert [rng.next_uint32() for _ in range(3)] == [1144304738, 1416247, 958946056]


def test_reference_sequences_other_seeds() -> None:
    rng = Random(42)
    assert [rng.next_uint32() for _ in range(3)] == [2581720956, 1925393290, 3661312704]
    default = Random()
    assert default.state == DEFAULT_SEED
    assert [default.next_uint32() for _ in range(2)] == [4043151706, 1147597007]


def test_float_is_scaled_uint32() -> None:
    rng = Random(0)
    value = rng.next()
    assert value == 1144304738 / 2**32
    assert 0.0 <= value < 1.0


def test_determinism_for_same_seed() -> None:
    a = Random(1234)
    b = Random(1234)
    assert [a.next_uint32() for _ in range(50)] == [b.next_uint32() for _ in range(50)]
    assert [a.int(-5, 5) for _ in range(50)] == [b.int(-5, 5) for _ in range(50)]
    assert a.bytes(16) == b.bytes(16)


def test_reseed_restarts_sequence() -> None:
    rng = Random(7)
    first = [rng.next_uint32() for _ in range(5)]
    rng.seed(7)
    assert [rng.next_uint32() for _ in range(5)] == first


def test_seed_is_reduced_to_32_bits() -> None:
    assert Random(2**32 + 5).state == 5
    assert Random(-1).state == 0xFFFFFFFF


def test_outputs_fit_in_32_bits() -> None:
    rng = Random(99)
    for _ in range(1000):
        assert 0 <= rng.next_uint32() <= 0xFFFFFFFF


def test_independent_instances() -> None:
    a = Random(1)
    b = Random(1)
    a.next_uint32()
    assert a.state != b.state


def test_method_annotations_resolve_to_builtins() -> None:
    assert typing.get_type_hints(Random.int) == {"min": int, "max": int, "return": int}
    assert typing.get_type_hints(Random.bytes) == {"n": int, "return": bytes}
    assert typing.get_type_hints(Random.next_uint32) == {"return": int}

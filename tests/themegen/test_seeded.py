from __future__ import annotations

import pytest

from themegen.seeded import SeededRandom, hash_seed


def test_hash_seed_pinned_values() -> None:
    assert hash_seed("") == 0
    assert hash_seed("abc") == 96354
    assert hash_seed("demo") == 3079651
    assert hash_seed("#3B82F6") == 1774351876


def test_hash_seed_is_case_sensitive() -> None:
    assert hash_seed("#3B82F6") != hash_seed("#3b82f6")


def test_numeric_seed_sequence_pinned() -> None:
    rng = SeededRandom(42)
    values = [rng.next(), rng.next(), rng.next()]
    assert values == pytest.approx(
        [0.7845208436629036, 0.2525737140167621, 0.01925105413576489], abs=1e-9
    )


def test_same_seed_same_sequence() -> None:
    a = SeededRandom("#10B981")
    b = SeededRandom("#10B981")
    assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]


def test_different_seeds_diverge() -> None:
    a = SeededRandom("alpha")
    b = SeededRandom("beta")
    assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]


def test_values_in_unit_interval() -> None:
    rng = SeededRandom("bounds")
    for _ in range(5000):
        v = rng.next()
        assert 0.0 <= v < 1.0


def test_next_float_rescales() -> None:
    a = SeededRandom(7)
    b = SeededRandom(7)
    for _ in range(100):
        raw = a.next()
        scaled = b.next_float(0.0, 360.0)
        assert scaled == pytest.approx(raw * 360.0)
        assert 0.0 <= scaled < 360.0

# tests/test_rng.py
"""
Deterministic tests for the string hash, the LCG, and per-bubble seeds/drift.
"""

from __future__ import annotations

import pytest

from bubblemap.core.rng import (
    FNV_OFFSET_BASIS,
    SeededRng,
    drift_params,
    hash_string,
    item_seed,
    random_between,
)
from bubblemap.core.types import Item


def test_hash_empty_is_offset_basis() -> None:
    assert hash_string("") == FNV_OFFSET_BASIS == 2166136261


def test_hash_matches_fnv1a_vectors() -> None:
    # Standard FNV-1a 32-bit vectors; ASCII code units equal bytes
    assert hash_string("a") == 0xE40C292C
    assert hash_string("foobar") == 0xBF9CF968


def test_hash_is_unsigned_32bit() -> None:
    for text in ("x", "Learn to cook Thai curry", "ünïcode ✓", "emoji 🎈"):
        h = hash_string(text)
        assert 0 <= h < 2**32
        assert hash_string(text) == h


def test_hash_uses_utf16_code_units() -> None:
    # U+1F388 is the surrogate pair D83C DF88
    expected = 2166136261
    for unit in (0xD83C, 0xDF88):
        expected ^= unit
        expected = (expected * 16777619) & 0xFFFFFFFF
    assert hash_string("🎈") == expected
    assert hash_string("ab") != hash_string("ba")


def test_lcg_sequence_from_zero() -> None:
    rng = SeededRng(0)
    assert rng() == pytest.approx(1013904223 / 2**32)
    assert rng() == pytest.approx(1196435762 / 2**32)


def test_lcg_same_seed_same_sequence() -> None:
    a = SeededRng(12345)
    b = SeededRng(12345)
    seq_a = [a() for _ in range(50)]
    seq_b = [b() for _ in range(50)]
    assert seq_a == seq_b
    assert all(0.0 <= v < 1.0 for v in seq_a)


def test_lcg_different_seeds_diverge() -> None:
    a = SeededRng(1)
    b = SeededRng(2)
    assert [a() for _ in range(5)] != [b() for _ in range(5)]


def test_random_between_in_range() -> None:
    rng = SeededRng(7)
    for _ in range(100):
        v = random_between(rng, 10.0, 20.0)
        assert 10.0 <= v < 20.0


def test_random_between_degenerate_range_keeps_state() -> None:
    rng = SeededRng(99)
    state = rng.state
    assert random_between(rng, 50.0, 50.0) == 50.0
    assert random_between(rng, 80.0, 20.0) == 80.0
    assert rng.state == state


def test_item_seed_depends_on_index() -> None:
    item = Item(id="n1", text="Read more")
    assert item_seed(item, 0) == item_seed(item, 0)
    assert item_seed(item, 0) != item_seed(item, 1)
    assert item_seed(item, 0) == hash_string("n1-Read more-0")


def test_drift_params_stable_and_bounded() -> None:
    d1 = drift_params("node-42")
    d2 = drift_params("node-42")
    assert d1 == d2
    assert -3 * 1.6 <= d1.dx <= 3 * 1.6
    assert -3 * 1.4 <= d1.dy <= 3 * 1.4
    assert 4.8 <= d1.duration_s <= 7.2
    assert -1.3 <= d1.delay_s <= 0.0

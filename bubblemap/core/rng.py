# bubblemap/core/rng.py
"""
Deterministic randomness for layout: FNV-1a string hash and a 32-bit LCG.
Each bubble gets its own generator seeded from its identity, so a pass never
depends on a process-wide random state.
"""

from __future__ import annotations

from dataclasses import dataclass

from bubblemap.core.types import Item

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223

_UINT32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0


def _utf16_code_units(text: str):
    data = text.encode("utf-16-le", "surrogatepass")
    for k in range(0, len(data), 2):
        yield data[k] | (data[k + 1] << 8)


def hash_string(text: str) -> int:
    """FNV-1a over UTF-16 code units; unsigned 32-bit result."""
    h = FNV_OFFSET_BASIS
    for unit in _utf16_code_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & _UINT32
    return h


class SeededRng:
    """Linear congruential generator; each call returns a float in [0, 1)."""

    def __init__(self, seed: int) -> None:
        self.state = seed & _UINT32

    def __call__(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & _UINT32
        return self.state / _TWO_POW_32


def random_between(rng: SeededRng, lo: float, hi: float) -> float:
    """Uniform in [lo, hi); degenerate range collapses to lo without consuming rng."""
    if hi <= lo:
        return lo
    return lo + (hi - lo) * rng()


def item_seed(item: Item, index: int) -> int:
    """Seed from id, text and position so duplicate texts still diverge."""
    return hash_string(f"{item.id}-{item.text}-{index}")


@dataclass(frozen=True)
class Drift:
    """Idle-float animation parameters for one bubble."""
    dx: float
    dy: float
    duration_s: float
    delay_s: float


def drift_params(item_id: str) -> Drift:
    """Small per-bubble float offsets, stable for a given id."""
    seed = hash_string(f"{item_id}-drift")
    return Drift(
        dx=((seed % 7) - 3) * 1.6,
        dy=(((seed >> 3) % 7) - 3) * 1.4,
        duration_s=4.8 + (seed % 25) / 10.0,
        delay_s=-((seed % 14) / 10.0),
    )

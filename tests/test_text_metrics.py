# tests/test_text_metrics.py
"""
Size estimate: placeholder for empty text, width clamping, height growth with length.
"""

from __future__ import annotations

import pytest

from bubblemap.core.config import LayoutConfig
from bubblemap.core.text_metrics import (
    chars_per_line,
    estimate_bubble_size,
    normalize_text,
    wrap_bubble_text,
)


def test_empty_text_uses_placeholder() -> None:
    assert normalize_text("") == "Untitled"
    assert normalize_text("   \n ") == "Untitled"
    assert normalize_text(None) == "Untitled"
    assert estimate_bubble_size("") == estimate_bubble_size("Untitled")


def test_short_text_clamped_to_min_width() -> None:
    box = estimate_bubble_size("Run a 5k before summer")
    assert box.width == 130.0
    # floor((130 - 24) / 2.2) = 48 chars per line; 22 chars is one line
    assert box.height == pytest.approx(18.0 + 20.0)


def test_long_word_clamped_to_max_width() -> None:
    box = estimate_bubble_size("x" * 200)
    assert box.width == 260.0
    # floor(236 / 2.2) = 107 chars per line -> 2 lines
    assert box.height == pytest.approx(2 * 18.0 + 20.0)


def test_width_follows_longest_word() -> None:
    word = "y" * 60
    box = estimate_bubble_size(f"a {word} b")
    assert box.width == pytest.approx(60 * 2.2 + 24.0)


def test_height_monotonic_in_length() -> None:
    heights = [estimate_bubble_size("word " * n).height for n in range(1, 80, 5)]
    assert heights == sorted(heights)
    assert heights[-1] > heights[0]


def test_chars_per_line_floor() -> None:
    cfg = LayoutConfig(min_width=10.0)
    assert chars_per_line(30.0, cfg) == 10
    assert chars_per_line(130.0, cfg) == 48


def test_config_overrides_apply() -> None:
    cfg = LayoutConfig(line_height=30.0, padding_y=0.0, placeholder_text="New idea")
    box = estimate_bubble_size("", cfg)
    assert box.height == 30.0


def test_invalid_config_rejected() -> None:
    with pytest.raises(ValueError):
        LayoutConfig(min_width=300.0, max_width=200.0)
    with pytest.raises(ValueError):
        LayoutConfig(grid_step=0.0)


def test_wrap_bubble_text_splits_lines() -> None:
    wrapped = wrap_bubble_text("one two three four five six seven eight nine ten", 60.0)
    assert "\n" in wrapped
    assert wrap_bubble_text("", 200.0) == "Untitled"


def test_wrap_bubble_text_scales_with_font_size() -> None:
    text = "Practice Spanish verbs for ten minutes a day"
    small = wrap_bubble_text(text, 130.0, font_size_px=8.0)
    large = wrap_bubble_text(text, 130.0, font_size_px=13.0)
    assert small.count("\n") < large.count("\n")
    # 130 / (13 * 0.6) = 16 characters per line
    assert max(len(line) for line in large.split("\n")) <= 16

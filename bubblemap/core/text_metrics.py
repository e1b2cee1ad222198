# bubblemap/core/text_metrics.py
"""
Estimate bubble width/height in px from text length alone.
No font is loaded: width follows the longest word, height the wrapped line count.
"""

from __future__ import annotations

import math
import re
import textwrap

from bubblemap.core.config import DEFAULT_CONFIG, GLYPH_WIDTH_FACTOR, SVG_FONT_SIZE_PX, LayoutConfig
from bubblemap.core.types import BoundingBox

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None, placeholder: str = DEFAULT_CONFIG.placeholder_text) -> str:
    """Strip text; empty or whitespace-only becomes the placeholder."""
    stripped = (text or "").strip()
    return stripped or placeholder


def longest_word_length(text: str) -> int:
    return max((len(word) for word in _WHITESPACE.split(text)), default=0)


def chars_per_line(width: float, config: LayoutConfig = DEFAULT_CONFIG) -> int:
    """Characters that fit on one wrapped line of a bubble this wide."""
    return max(
        config.min_chars_per_line,
        math.floor((width - config.padding_x) / config.avg_char_width),
    )


def estimate_bubble_size(text: str | None, config: LayoutConfig = DEFAULT_CONFIG) -> BoundingBox:
    """
    Return the bubble box for text.
    Width: longest word * avg char width + padding, clamped to [min_width, max_width].
    Height: ceil(len / chars_per_line) lines * line_height + vertical padding.
    """
    safe_text = normalize_text(text, config.placeholder_text)
    longest_word_width = longest_word_length(safe_text) * config.avg_char_width
    width = min(config.max_width, max(config.min_width, longest_word_width + config.padding_x))

    line_count = max(1, math.ceil(len(safe_text) / chars_per_line(width, config)))
    height = line_count * config.line_height + config.padding_y
    return BoundingBox(width=float(width), height=float(height))


def wrap_bubble_text(text: str | None, width_px: float, font_size_px: float = SVG_FONT_SIZE_PX) -> str:
    """Hard-wrap text so each line fits width_px at font_size_px."""
    per_line = max(4, int(width_px / (font_size_px * GLYPH_WIDTH_FACTOR)))
    return textwrap.fill(normalize_text(text), width=per_line, break_long_words=True)

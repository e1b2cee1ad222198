# bubblemap/core/config.py
"""
Central configuration for bubble layout.
All tunable values live here; no magic numbers in other modules.
LayoutConfig bundles them so the engine can be run with varied parameters.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Bubble sizing -----
BUBBLE_MAX_WIDTH: float = 260.0
BUBBLE_MIN_WIDTH: float = 130.0

BUBBLE_PADDING_X: float = 24.0
"""Horizontal padding (px) added to the longest word width."""

BUBBLE_PADDING_Y: float = 20.0
"""Vertical padding (px) added to the wrapped text height."""

BUBBLE_LINE_HEIGHT: float = 18.0

AVG_CHAR_WIDTH: float = 2.2
"""Average rendered character width (px) used by the size estimate."""

MIN_CHARS_PER_LINE: int = 10
"""Lower bound on characters per wrapped line."""

PLACEHOLDER_TEXT: str = "Untitled"
"""Stand-in text for empty ideas so a box is always produced."""

# ----- Spacing -----
BUBBLE_GAP: float = 14.0
"""Minimum clearance (px) between bubbles and from the canvas edge."""

# ----- Connectors -----
LINE_SCORE_THRESHOLD: float = 0.12
"""Pairs scoring below this are not drawn."""

# ----- Exclusion zones -----
CENTER_EXCLUSION_WIDTH_RATIO: float = 0.34
CENTER_EXCLUSION_HEIGHT_RATIO: float = 0.24
CENTER_EXCLUSION_MIN_WIDTH: float = 260.0
CENTER_EXCLUSION_MIN_HEIGHT: float = 130.0

CORNER_EXCLUSION_LEFT: float = 10.0
CORNER_EXCLUSION_TOP: float = 12.0
CORNER_EXCLUSION_WIDTH: float = 120.0
CORNER_EXCLUSION_HEIGHT: float = 80.0
"""Top-left control area; clamped to the canvas."""

# ----- Search budget -----
RANDOM_ATTEMPTS: int = 220
"""Random candidates tried per bubble before the grid scan."""

GRID_STEP: float = 20.0
"""Step (px) of the deterministic grid scan."""

# ----- Canvas -----
DEFAULT_CANVAS_WIDTH: float = 1000.0
DEFAULT_CANVAS_HEIGHT: float = 700.0

# ----- Rendering -----
RENDER_DPI: int = 100
BUBBLE_FONT_SIZE_PT: float = 8.0
"""PNG bubble text size (pt); wrapped at BUBBLE_FONT_SIZE_PT * RENDER_DPI / 72 px."""

SVG_FONT_SIZE_PX: float = 13.0
"""SVG bubble text size (px); also the wrap width basis for SVG text."""

GLYPH_WIDTH_FACTOR: float = 0.6
"""Rendered glyph width as a fraction of font size; used to wrap text inside drawn bubbles."""

# ----- Debug flags -----
LAYOUT_DEBUG: bool = os.environ.get("LAYOUT_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every fallback escalation. Set env LAYOUT_DEBUG=1 to enable."""


@dataclass(frozen=True)
class LayoutConfig:
    """Tunables for one layout pass. Defaults mirror the module constants."""
    max_width: float = BUBBLE_MAX_WIDTH
    min_width: float = BUBBLE_MIN_WIDTH
    padding_x: float = BUBBLE_PADDING_X
    padding_y: float = BUBBLE_PADDING_Y
    line_height: float = BUBBLE_LINE_HEIGHT
    avg_char_width: float = AVG_CHAR_WIDTH
    min_chars_per_line: int = MIN_CHARS_PER_LINE
    placeholder_text: str = PLACEHOLDER_TEXT
    gap: float = BUBBLE_GAP
    score_threshold: float = LINE_SCORE_THRESHOLD
    center_width_ratio: float = CENTER_EXCLUSION_WIDTH_RATIO
    center_height_ratio: float = CENTER_EXCLUSION_HEIGHT_RATIO
    center_min_width: float = CENTER_EXCLUSION_MIN_WIDTH
    center_min_height: float = CENTER_EXCLUSION_MIN_HEIGHT
    corner_left: float = CORNER_EXCLUSION_LEFT
    corner_top: float = CORNER_EXCLUSION_TOP
    corner_width: float = CORNER_EXCLUSION_WIDTH
    corner_height: float = CORNER_EXCLUSION_HEIGHT
    random_attempts: int = RANDOM_ATTEMPTS
    grid_step: float = GRID_STEP

    def __post_init__(self) -> None:
        if self.min_width > self.max_width:
            raise ValueError("min_width must not exceed max_width")
        if self.avg_char_width <= 0:
            raise ValueError("avg_char_width must be positive")
        if self.grid_step <= 0:
            raise ValueError("grid_step must be positive")
        if self.gap < 0:
            raise ValueError("gap must be non-negative")
        if self.random_attempts < 0:
            raise ValueError("random_attempts must be non-negative")
        if self.min_chars_per_line < 1:
            raise ValueError("min_chars_per_line must be at least 1")

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_CONFIG = LayoutConfig()

# bubblemap/core/geometry.py
"""
Geometry helpers: rectangles from centers, gap-aware overlap test,
exclusion zones, valid center ranges, shapely conversion.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from shapely.geometry import Polygon, box

from bubblemap.core.config import DEFAULT_CONFIG, LayoutConfig
from bubblemap.core.types import BoundingBox, CanvasSize, ExclusionZone, Rect


def rect_from_center(x: float, y: float, width: float, height: float) -> Rect:
    return Rect(
        left=x - width / 2.0,
        right=x + width / 2.0,
        top=y - height / 2.0,
        bottom=y + height / 2.0,
        width=width,
        height=height,
    )


def overlaps(a: Rect, b: Rect, gap: float = 0.0) -> bool:
    """
    True unless a and b are separated by at least gap on some axis.
    Touching at exactly gap counts as separated.
    """
    separated = (
        a.right + gap <= b.left
        or a.left >= b.right + gap
        or a.bottom + gap <= b.top
        or a.top >= b.bottom + gap
    )
    return not separated


def is_overlapping(candidate: Rect, placed: Iterable[Rect], gap: float) -> bool:
    """True if candidate overlaps any already-placed rect."""
    return any(overlaps(candidate, p, gap) for p in placed)


def center_exclusion(canvas: CanvasSize, config: LayoutConfig = DEFAULT_CONFIG) -> ExclusionZone:
    """Box reserved for the centered title overlay; scales with the canvas."""
    width = max(config.center_min_width, canvas.width * config.center_width_ratio)
    height = max(config.center_min_height, canvas.height * config.center_height_ratio)
    cx = canvas.width / 2.0
    cy = canvas.height / 2.0
    return ExclusionZone(
        name="center",
        left=cx - width / 2.0,
        right=cx + width / 2.0,
        top=cy - height / 2.0,
        bottom=cy + height / 2.0,
    )


def corner_exclusion(canvas: CanvasSize, config: LayoutConfig = DEFAULT_CONFIG) -> ExclusionZone:
    """Fixed top-left box reserved for the logout control, clamped to canvas."""
    return ExclusionZone(
        name="corner",
        left=config.corner_left,
        right=min(canvas.width, config.corner_left + config.corner_width),
        top=config.corner_top,
        bottom=min(canvas.height, config.corner_top + config.corner_height),
    )


def exclusion_zones(canvas: CanvasSize, config: LayoutConfig = DEFAULT_CONFIG) -> list[ExclusionZone]:
    return [center_exclusion(canvas, config), corner_exclusion(canvas, config)]


def intersects_exclusion(rect: Rect, zone: ExclusionZone) -> bool:
    """Same separating-axis test as overlaps(), with no gap."""
    return not (
        rect.right <= zone.left
        or rect.left >= zone.right
        or rect.bottom <= zone.top
        or rect.top >= zone.bottom
    )


def intersects_any_exclusion(rect: Rect, zones: Sequence[ExclusionZone]) -> bool:
    return any(intersects_exclusion(rect, z) for z in zones)


def valid_center_range(
    bbox: BoundingBox, canvas: CanvasSize, gap: float
) -> tuple[float, float, float, float]:
    """
    Return (min_x, max_x, min_y, max_y) for bubble centers that keep the
    bubble gap px inside the canvas. max < min when the bubble cannot fit.
    """
    min_x = bbox.width / 2.0 + gap
    max_x = canvas.width - bbox.width / 2.0 - gap
    min_y = bbox.height / 2.0 + gap
    max_y = canvas.height - bbox.height / 2.0 - gap
    return min_x, max_x, min_y, max_y


def rect_to_polygon(rect: Rect | ExclusionZone) -> Polygon:
    """Shapely box for area metrics and drawing."""
    return box(rect.left, rect.top, rect.right, rect.bottom)

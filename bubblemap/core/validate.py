# bubblemap/core/validate.py
"""
Quality checks on a finished layout: gap violations between bubbles,
exclusion-zone intrusions, and bubbles leaving the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from bubblemap.core.config import DEFAULT_CONFIG, LayoutConfig
from bubblemap.core.geometry import exclusion_zones, intersects_exclusion, rect_to_polygon
from bubblemap.core.types import CanvasSize, Placement

BOUNDS_EPS: float = 1e-6


@dataclass
class LayoutQuality:
    """Counts of layout defects. All zero for a clean layout."""
    overlap_pairs: list[tuple[int, int]] = field(default_factory=list)
    exclusion_hits: int = 0
    exclusion_area: float = 0.0
    out_of_bounds: int = 0

    @property
    def overlap_count(self) -> int:
        return len(self.overlap_pairs)

    @property
    def is_clean(self) -> bool:
        return not self.overlap_pairs and self.exclusion_hits == 0 and self.out_of_bounds == 0


def gap_violations(placements: Sequence[Placement], gap: float) -> list[tuple[int, int]]:
    """
    Index pairs (i < j) closer than gap on both axes.
    Vectorized form of geometry.overlaps over all pairs.
    """
    n = len(placements)
    if n < 2:
        return []
    left = np.array([p.left for p in placements])
    right = np.array([p.right for p in placements])
    top = np.array([p.top for p in placements])
    bottom = np.array([p.bottom for p in placements])
    separated = (
        (right[:, None] + gap <= left[None, :])
        | (left[:, None] >= right[None, :] + gap)
        | (bottom[:, None] + gap <= top[None, :])
        | (top[:, None] >= bottom[None, :] + gap)
    )
    overlapping = np.triu(~separated, k=1)
    rows, cols = np.nonzero(overlapping)
    return [(int(i), int(j)) for i, j in zip(rows, cols)]


def layout_quality(
    placements: Sequence[Placement],
    canvas: CanvasSize,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> LayoutQuality:
    quality = LayoutQuality(overlap_pairs=gap_violations(placements, config.gap))
    zones = exclusion_zones(canvas, config)
    zone_polys = [rect_to_polygon(z) for z in zones]
    for p in placements:
        for zone, zone_poly in zip(zones, zone_polys):
            if intersects_exclusion(p.rect, zone):
                quality.exclusion_hits += 1
                quality.exclusion_area += float(rect_to_polygon(p.rect).intersection(zone_poly).area)
        if (
            p.left < -BOUNDS_EPS
            or p.top < -BOUNDS_EPS
            or p.right > canvas.width + BOUNDS_EPS
            or p.bottom > canvas.height + BOUNDS_EPS
        ):
            quality.out_of_bounds += 1
    return quality

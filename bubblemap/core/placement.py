# bubblemap/core/placement.py
"""
Bubble placement: per item, try an ordered chain of strategies
(random sampling -> grid scan -> anchor points -> forced) and keep the first hit.
Every item gets a placement; overlap is only possible once the chain reaches "forced".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from bubblemap.core.config import DEFAULT_CONFIG, LAYOUT_DEBUG, LayoutConfig
from bubblemap.core.geometry import (
    exclusion_zones,
    intersects_any_exclusion,
    is_overlapping,
    rect_from_center,
    valid_center_range,
)
from bubblemap.core.rng import SeededRng, item_seed, random_between
from bubblemap.core.text_metrics import estimate_bubble_size
from bubblemap.core.types import (
    BoundingBox,
    CanvasSize,
    ExclusionZone,
    Item,
    Placement,
    PlacementMode,
    Rect,
)

logger = logging.getLogger(__name__)
if LAYOUT_DEBUG:
    logger.setLevel(logging.DEBUG)


@dataclass
class PlacementContext:
    """State shared by the strategies during one pass."""
    canvas: CanvasSize
    config: LayoutConfig
    zones: list[ExclusionZone]
    placed: list[Rect] = field(default_factory=list)

    def accepts(self, rect: Rect) -> bool:
        """Exclusion zones first, then overlap with what is already placed."""
        if intersects_any_exclusion(rect, self.zones):
            return False
        return not is_overlapping(rect, self.placed, self.config.gap)


class PlacementStrategy(Protocol):
    mode: PlacementMode

    def attempt(self, bbox: BoundingBox, ctx: PlacementContext, rng: SeededRng) -> Placement | None:
        """Return a placement for bbox or None to hand over to the next strategy."""


def _placement_at(x: float, y: float, bbox: BoundingBox, mode: PlacementMode) -> Placement:
    return Placement(x=x, y=y, rect=rect_from_center(x, y, bbox.width, bbox.height), mode=mode)


class RandomSampleStrategy:
    """Uniform samples from the item's own generator; organic scatter when space is plentiful."""

    mode: PlacementMode = "random"

    def attempt(self, bbox: BoundingBox, ctx: PlacementContext, rng: SeededRng) -> Placement | None:
        min_x, max_x, min_y, max_y = valid_center_range(bbox, ctx.canvas, ctx.config.gap)
        for _ in range(ctx.config.random_attempts):
            x = random_between(rng, min_x, max_x)
            y = random_between(rng, min_y, max_y)
            candidate = _placement_at(x, y, bbox, self.mode)
            if ctx.accepts(candidate.rect):
                return candidate
        return None


class GridScanStrategy:
    """Row-major scan over the valid center range with a fixed step."""

    mode: PlacementMode = "grid"

    def attempt(self, bbox: BoundingBox, ctx: PlacementContext, rng: SeededRng) -> Placement | None:
        min_x, max_x, min_y, max_y = valid_center_range(bbox, ctx.canvas, ctx.config.gap)
        step = ctx.config.grid_step
        y = min_y
        while y <= max_y:
            x = min_x
            while x <= max_x:
                candidate = _placement_at(x, y, bbox, self.mode)
                if ctx.accepts(candidate.rect):
                    return candidate
                x += step
            y += step
        return None


class AnchorPointStrategy:
    """Four corners of the valid range, then left/right at mid height."""

    mode: PlacementMode = "anchor"

    def anchor_points(self, bbox: BoundingBox, ctx: PlacementContext) -> list[tuple[float, float]]:
        min_x, max_x, min_y, max_y = valid_center_range(bbox, ctx.canvas, ctx.config.gap)
        mid_y = max(min_y, min(ctx.canvas.height / 2.0, max_y))
        return [
            (min_x, min_y),
            (max_x, min_y),
            (min_x, max_y),
            (max_x, max_y),
            (min_x, mid_y),
            (max_x, mid_y),
        ]

    def attempt(self, bbox: BoundingBox, ctx: PlacementContext, rng: SeededRng) -> Placement | None:
        for x, y in self.anchor_points(bbox, ctx):
            candidate = _placement_at(x, y, bbox, self.mode)
            if ctx.accepts(candidate.rect):
                return candidate
        return None


class ForcedStrategy:
    """Top-left-most valid center, unconditionally. May overlap."""

    mode: PlacementMode = "forced"

    def attempt(self, bbox: BoundingBox, ctx: PlacementContext, rng: SeededRng) -> Placement:
        min_x, _, min_y, _ = valid_center_range(bbox, ctx.canvas, ctx.config.gap)
        return _placement_at(min_x, min_y, bbox, self.mode)


DEFAULT_STRATEGIES: tuple[PlacementStrategy, ...] = (
    RandomSampleStrategy(),
    GridScanStrategy(),
    AnchorPointStrategy(),
    ForcedStrategy(),
)


def place_item(
    item: Item,
    index: int,
    ctx: PlacementContext,
    strategies: Sequence[PlacementStrategy] = DEFAULT_STRATEGIES,
) -> Placement:
    """
    Place one item against ctx.placed and record it there.
    Falls through strategies in order; ForcedStrategy always ends the chain.
    """
    bbox = estimate_bubble_size(item.text, ctx.config)
    rng = SeededRng(item_seed(item, index))
    placement: Placement | None = None
    for strategy in strategies:
        placement = strategy.attempt(bbox, ctx, rng)
        if placement is not None:
            break
        logger.debug("Item %r (#%d): %s strategy exhausted", item.id, index, strategy.mode)
    if placement is None:
        placement = ForcedStrategy().attempt(bbox, ctx, rng)
    ctx.placed.append(placement.rect)
    return placement


def place_all(
    items: Sequence[Item],
    canvas: CanvasSize,
    config: LayoutConfig | None = None,
    strategies: Sequence[PlacementStrategy] = DEFAULT_STRATEGIES,
) -> list[Placement]:
    """
    One placement per item, same order. Recomputed from scratch on every call;
    earlier items get first pick, so the result depends on item order.
    Empty list for no items or a zero-sized canvas.
    """
    config = config or DEFAULT_CONFIG
    if not items or canvas.is_empty:
        return []

    ctx = PlacementContext(canvas=canvas, config=config, zones=exclusion_zones(canvas, config))
    placements = [place_item(item, idx, ctx, strategies) for idx, item in enumerate(items)]

    forced = sum(1 for p in placements if p.mode == "forced")
    if forced:
        logger.warning(
            "%d of %d bubbles forced into place on a %.0fx%.0f canvas; overlaps possible.",
            forced, len(placements), canvas.width, canvas.height,
        )
    return placements

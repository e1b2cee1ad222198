# bubblemap/core/layout.py
"""
One full placement pass: place every idea, then pick and resolve connector lines.
Nothing is carried between passes; call again whenever ideas, scores or canvas change.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from bubblemap.core.config import DEFAULT_CONFIG, LayoutConfig
from bubblemap.core.connectors import (
    link_pairs,
    resolve_connectors,
    resolve_linked_connectors,
    select_connectors,
)
from bubblemap.core.error_codes import DROPPED_CONNECTORS, EMPTY_CANVAS, FORCED_PLACEMENT, NO_ITEMS
from bubblemap.core.placement import place_all
from bubblemap.core.types import CanvasSize, Connector, Item, Placement, ScorePair
from bubblemap.core.validate import LayoutQuality, layout_quality


@dataclass
class LayoutSummary:
    """Summary of one layout pass."""
    n_items: int
    placements: list[Placement]
    connectors: list[Connector]
    mode_counts: dict[str, int]
    quality: LayoutQuality
    warnings: list[str] = field(default_factory=list)

    @property
    def forced_count(self) -> int:
        return self.mode_counts.get("forced", 0)


def run_bubble_layout(
    items: Sequence[Item],
    canvas: CanvasSize,
    score_pairs: Sequence[ScorePair | Mapping[str, Any]] | None = None,
    config: LayoutConfig | None = None,
    scored_items: Sequence[Item] | None = None,
) -> LayoutSummary:
    """
    Place items and resolve connectors above the configured threshold.
    When scored_items (the snapshot the scores were computed on) is given,
    pairs are rekeyed by id first, so reordering items since scoring is safe.
    Otherwise indices are taken against items as-is.
    """
    config = config or DEFAULT_CONFIG
    warnings: list[str] = []
    if not items:
        warnings.append(NO_ITEMS)
    elif canvas.is_empty:
        warnings.append(EMPTY_CANVAS)

    placements = place_all(items, canvas, config)

    connectors: list[Connector] = []
    if len(items) >= 2 and score_pairs:
        if scored_items is not None:
            linked = link_pairs(score_pairs, scored_items)
            wanted = sum(1 for p in linked if p.score >= config.score_threshold)
            connectors = resolve_linked_connectors(linked, items, placements, config.score_threshold)
        else:
            selected = select_connectors(score_pairs, config.score_threshold)
            wanted = len(selected)
            connectors = resolve_connectors(selected, placements, items)
        if placements and len(connectors) < wanted:
            warnings.append(DROPPED_CONNECTORS)

    mode_counts = dict(Counter(p.mode for p in placements))
    if mode_counts.get("forced"):
        warnings.append(FORCED_PLACEMENT)

    return LayoutSummary(
        n_items=len(items),
        placements=placements,
        connectors=connectors,
        mode_counts=mode_counts,
        quality=layout_quality(placements, canvas, config),
        warnings=warnings,
    )

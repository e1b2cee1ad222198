# bubblemap/core/types.py
"""
Dataclasses for ideas, boxes, rectangles, placements, and score pairs.
Schema aligns with layout.json written by reporting.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


PlacementMode = Literal["random", "grid", "anchor", "forced"]


@dataclass(frozen=True)
class Item:
    """One idea as handed to the layout. Read-only."""
    id: str
    text: str


@dataclass(frozen=True)
class CanvasSize:
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class BoundingBox:
    """Estimated bubble size (px)."""
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; y grows downward as on screen."""
    left: float
    right: float
    top: float
    bottom: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class ExclusionZone:
    """Region no bubble may intersect (reserved for fixed UI chrome)."""
    name: str
    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Placement:
    """Final bubble rectangle plus the center it was built from."""
    x: float
    y: float
    rect: Rect
    mode: PlacementMode = "random"

    @property
    def left(self) -> float:
        return self.rect.left

    @property
    def right(self) -> float:
        return self.rect.right

    @property
    def top(self) -> float:
        return self.rect.top

    @property
    def bottom(self) -> float:
        return self.rect.bottom

    @property
    def width(self) -> float:
        return self.rect.width

    @property
    def height(self) -> float:
        return self.rect.height


@dataclass(frozen=True)
class ScorePair:
    """
    Relatedness between items i and j of the item array the scores were
    computed from. Indices go stale if that array is reordered.
    """
    i: int
    j: int
    score: float


@dataclass(frozen=True)
class LinkedPair:
    """Score pair keyed by stable item ids; survives reordering."""
    source_id: str
    target_id: str
    score: float


@dataclass(frozen=True)
class Connector:
    """A line to draw between two placed bubbles."""
    source_id: str
    target_id: str
    score: float
    x1: float
    y1: float
    x2: float
    y2: float

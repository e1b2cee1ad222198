# tests/test_connectors.py
"""
Connector selection (threshold filter, malformed pairs) and resolution against placements,
by index and by stable item id.
"""

from __future__ import annotations

import math

from bubblemap.core.connectors import (
    coerce_score_pair,
    link_pairs,
    resolve_connectors,
    resolve_linked_connectors,
    select_connectors,
)
from bubblemap.core.geometry import rect_from_center
from bubblemap.core.types import Item, LinkedPair, Placement, ScorePair


def _placement(x: float, y: float) -> Placement:
    return Placement(x=x, y=y, rect=rect_from_center(x, y, 130, 38))


def test_select_keeps_pairs_at_or_above_threshold() -> None:
    pairs = [{"i": 0, "j": 1, "score": 0.5}, {"i": 1, "j": 2, "score": 0.05}]
    assert select_connectors(pairs, 0.12) == [ScorePair(0, 1, 0.5)]


def test_select_threshold_inclusive_and_order_preserved() -> None:
    pairs = [ScorePair(2, 3, 0.12), ScorePair(0, 1, 0.9), ScorePair(0, 2, 0.11)]
    assert select_connectors(pairs, 0.12) == [ScorePair(2, 3, 0.12), ScorePair(0, 1, 0.9)]


def test_select_drops_malformed_pairs() -> None:
    pairs = [
        None,
        {"i": "0", "j": 1, "score": 0.9},
        {"i": True, "j": 1, "score": 0.9},
        {"i": 0, "j": 1, "score": math.nan},
        {"i": 0, "score": 0.9},
        "0-1",
        {"i": 0, "j": 1, "score": 1},
    ]
    assert select_connectors(pairs) == [ScorePair(0, 1, 1.0)]


def test_coerce_score_pair() -> None:
    assert coerce_score_pair({"i": 3, "j": 4, "score": 0.25}) == ScorePair(3, 4, 0.25)
    assert coerce_score_pair(ScorePair(1, 2, 0.5)) == ScorePair(1, 2, 0.5)
    assert coerce_score_pair({"i": 0, "j": 1, "score": "high"}) is None


def test_resolve_uses_bubble_centers() -> None:
    items = [Item("a", "A"), Item("b", "B")]
    placements = [_placement(100, 100), _placement(400, 300)]
    [conn] = resolve_connectors([ScorePair(0, 1, 0.7)], placements, items)
    assert (conn.source_id, conn.target_id) == ("a", "b")
    assert (conn.x1, conn.y1, conn.x2, conn.y2) == (100, 100, 400, 300)
    assert conn.score == 0.7


def test_resolve_drops_pair_without_placement() -> None:
    placements = [_placement(100, 100), _placement(400, 300)]
    pairs = [ScorePair(0, 2, 0.9), ScorePair(-1, 0, 0.9), ScorePair(1, 0, 0.9)]
    connectors = resolve_connectors(pairs, placements)
    assert len(connectors) == 1
    assert (connectors[0].source_id, connectors[0].target_id) == ("1", "0")


def test_resolve_with_no_placements_yet() -> None:
    assert resolve_connectors([ScorePair(0, 1, 0.9)], []) == []


def test_link_pairs_rekeys_by_id() -> None:
    scored = [Item("a", "A"), Item("b", "B"), Item("c", "C")]
    linked = link_pairs([{"i": 0, "j": 2, "score": 0.8}, {"i": 1, "j": 9, "score": 0.8}, {"i": 1, "j": 1, "score": 1.0}], scored)
    assert linked == [LinkedPair("a", "c", 0.8)]


def test_linked_connectors_survive_reordering() -> None:
    scored = [Item("a", "A"), Item("b", "B"), Item("c", "C")]
    linked = link_pairs([ScorePair(0, 1, 0.9)], scored)
    current = [scored[2], scored[0], scored[1]]
    placements = [_placement(10, 10), _placement(200, 200), _placement(600, 100)]
    [conn] = resolve_linked_connectors(linked, current, placements)
    assert (conn.source_id, conn.target_id) == ("a", "b")
    assert (conn.x1, conn.y1) == (200, 200)
    assert (conn.x2, conn.y2) == (600, 100)


def test_linked_connectors_drop_removed_items_and_low_scores() -> None:
    linked = [LinkedPair("a", "b", 0.9), LinkedPair("a", "c", 0.9), LinkedPair("a", "c", 0.05)]
    current = [Item("a", "A"), Item("c", "C")]
    placements = [_placement(100, 100), _placement(500, 500)]
    connectors = resolve_linked_connectors(linked, current, placements, threshold=0.12)
    assert [(c.source_id, c.target_id, c.score) for c in connectors] == [("a", "c", 0.9)]


def test_select_accepts_whole_number_float_indices() -> None:
    pairs = [
        {"i": 0.0, "j": 1.0, "score": 0.5},
        {"i": 0.5, "j": 1, "score": 0.9},
        {"i": float("nan"), "j": 1, "score": 0.9},
        {"i": 0, "j": float("inf"), "score": 0.9},
    ]
    [pair] = select_connectors(pairs, 0.12)
    assert pair == ScorePair(0, 1, 0.5)
    assert isinstance(pair.i, int) and isinstance(pair.j, int)
    placements = [_placement(100, 100), _placement(400, 300)]
    assert len(resolve_connectors([pair], placements)) == 1

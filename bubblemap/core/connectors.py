# bubblemap/core/connectors.py
"""
Pick which score pairs become connector lines and resolve them to placed bubbles.
Malformed or stale pairs are dropped, never raised.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping, Sequence

from bubblemap.core.config import LINE_SCORE_THRESHOLD
from bubblemap.core.types import Connector, Item, LinkedPair, Placement, ScorePair

logger = logging.getLogger(__name__)


def _is_index(value: Any) -> bool:
    """Ints, or whole-number floats as json.loads returns for 1.0. Bools are not indices."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def _is_score(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)


def coerce_score_pair(raw: ScorePair | Mapping[str, Any] | None) -> ScorePair | None:
    """ScorePair from a ScorePair or an {"i", "j", "score"} mapping; None when malformed."""
    if raw is None:
        return None
    if isinstance(raw, ScorePair):
        i, j, score = raw.i, raw.j, raw.score
    elif isinstance(raw, Mapping):
        i, j, score = raw.get("i"), raw.get("j"), raw.get("score")
    else:
        return None
    if not (_is_index(i) and _is_index(j) and _is_score(score)):
        return None
    return ScorePair(i=int(i), j=int(j), score=float(score))


def select_connectors(
    score_pairs: Iterable[ScorePair | Mapping[str, Any] | None],
    threshold: float = LINE_SCORE_THRESHOLD,
) -> list[ScorePair]:
    """Keep structurally valid pairs with score >= threshold, input order preserved."""
    kept: list[ScorePair] = []
    dropped = 0
    for raw in score_pairs:
        pair = coerce_score_pair(raw)
        if pair is None:
            dropped += 1
            continue
        if pair.score >= threshold:
            kept.append(pair)
    if dropped:
        logger.debug("Dropped %d malformed score pair(s)", dropped)
    return kept


def _placement_at(placements: Sequence[Placement], index: int) -> Placement | None:
    if 0 <= index < len(placements):
        return placements[index]
    return None


def resolve_connectors(
    pairs: Iterable[ScorePair],
    placements: Sequence[Placement],
    items: Sequence[Item] | None = None,
) -> list[Connector]:
    """
    Turn selected pairs into line segments between bubble centers.
    A pair whose endpoint has no placement yet is skipped.
    """
    out: list[Connector] = []
    for pair in pairs:
        a = _placement_at(placements, pair.i)
        b = _placement_at(placements, pair.j)
        if a is None or b is None:
            continue
        source_id = items[pair.i].id if items is not None and pair.i < len(items) else str(pair.i)
        target_id = items[pair.j].id if items is not None and pair.j < len(items) else str(pair.j)
        out.append(
            Connector(
                source_id=source_id,
                target_id=target_id,
                score=pair.score,
                x1=a.x, y1=a.y, x2=b.x, y2=b.y,
            )
        )
    return out


def link_pairs(
    score_pairs: Iterable[ScorePair | Mapping[str, Any] | None],
    items: Sequence[Item],
) -> list[LinkedPair]:
    """
    Rekey index pairs by item id against the exact item snapshot they were
    scored from. Out-of-range indices are dropped here, once.
    """
    linked: list[LinkedPair] = []
    for raw in score_pairs:
        pair = coerce_score_pair(raw)
        if pair is None:
            continue
        if not (0 <= pair.i < len(items) and 0 <= pair.j < len(items)) or pair.i == pair.j:
            continue
        linked.append(LinkedPair(source_id=items[pair.i].id, target_id=items[pair.j].id, score=pair.score))
    return linked


def resolve_linked_connectors(
    linked: Iterable[LinkedPair],
    items: Sequence[Item],
    placements: Sequence[Placement],
    threshold: float = LINE_SCORE_THRESHOLD,
) -> list[Connector]:
    """
    Resolve id-keyed pairs against the current items and their placements.
    Items that were reordered still connect; removed items drop their lines.
    """
    by_id: dict[str, Placement] = {}
    for item, placement in zip(items, placements):
        by_id.setdefault(item.id, placement)
    out: list[Connector] = []
    for pair in linked:
        if pair.score < threshold:
            continue
        a = by_id.get(pair.source_id)
        b = by_id.get(pair.target_id)
        if a is None or b is None:
            continue
        out.append(
            Connector(
                source_id=pair.source_id,
                target_id=pair.target_id,
                score=pair.score,
                x1=a.x, y1=a.y, x2=b.x, y2=b.y,
            )
        )
    return out

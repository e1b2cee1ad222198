# bubblemap/core/similarity.py
"""
Relatedness scores between ideas and the text shaping around the AI collaborator.
The remote model call lives outside this package; this module builds its prompts,
parses its replies, and supplies the local token-overlap fallback.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Sequence

from bubblemap.core.connectors import coerce_score_pair
from bubblemap.core.types import ScorePair

logger = logging.getLogger(__name__)

_NON_WORD = re.compile(r"\W+", re.ASCII)
_CODE_FENCE = re.compile(r"```json|```")
_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")

STEPS_PER_GOAL = 3
FALLBACK_STEPS: tuple[str, ...] = (
    "Break it down and start with the first small action.",
    "Set a 5-minute timer.",
    "Celebrate when done.",
)


def tokenize(text: str) -> set[str]:
    return {tok for tok in _NON_WORD.split(text.lower()) if tok}


def local_similarities(texts: Sequence[str]) -> list[ScorePair]:
    """
    Jaccard overlap of word sets for every pair i < j, best first.
    Fewer than two texts gives no pairs.
    """
    if len(texts) < 2:
        return []
    token_sets = [tokenize(t) for t in texts]
    pairs: list[ScorePair] = []
    for i in range(len(token_sets)):
        for j in range(i + 1, len(token_sets)):
            a, b = token_sets[i], token_sets[j]
            union = len(a | b) or 1
            pairs.append(ScorePair(i=i, j=j, score=len(a & b) / union))
    pairs.sort(key=lambda p: p.score, reverse=True)
    return pairs


def _strip_fences(raw: str) -> str:
    return _CODE_FENCE.sub("", raw or "").strip()


def parse_similarity_response(raw: str) -> list[ScorePair]:
    """Parse a model reply holding a JSON array of {i, j, score}; [] if unusable."""
    try:
        data: Any = json.loads(_strip_fences(raw))
    except json.JSONDecodeError:
        logger.warning("Similarity reply is not valid JSON; ignoring it.")
        return []
    if isinstance(data, dict):
        data = data.get("similarities", [])
    if not isinstance(data, list):
        return []
    pairs = [coerce_score_pair(entry) for entry in data]
    return [p for p in pairs if p is not None]


def similarities_or_fallback(texts: Sequence[str], remote_pairs: Sequence[ScorePair] | None) -> list[ScorePair]:
    """Remote pairs when there are any, else the local overlap scores."""
    if len(texts) < 2:
        return []
    if remote_pairs:
        return list(remote_pairs)
    return local_similarities(texts)


def build_similarity_prompt(texts: Sequence[str]) -> str:
    return (
        "You are a productivity assistant. Given these goals/ideas, identify which pairs are "
        "meaningfully related (e.g., same domain, can be done together, one enables the other).\n"
        f"Goals: {json.dumps(list(texts), ensure_ascii=False)}\n\n"
        'Return ONLY a valid JSON array of objects. Each object: { "i": number, "j": number, "score": number }\n'
        "- i and j are 0-based indices into the ideas array\n"
        "- score is 0.0 to 1.0 (0.8+ = strongly related, 0.6-0.8 = somewhat related, below 0.6 = skip)\n"
        "- Only include pairs you judge meaningfully connected. No duplicates.\n"
        'Example: [{"i":0,"j":1,"score":0.9},{"i":1,"j":2,"score":0.75}]'
    )


def build_steps_prompt(goal: str) -> str:
    return (
        f"Goal: {goal.strip()}.\n"
        f"As a productivity assistant, break this goal into {STEPS_PER_GOAL} tiny, actionable starting steps.\n"
        f"Return ONLY a valid JSON array of {STEPS_PER_GOAL} strings, no other text.\n"
        'Example: ["Step 1", "Step 2", "Step 3"]'
    )


def parse_steps_response(raw: str) -> list[str]:
    """
    Micro-task list from a model reply. Falls back to the first bracketed
    array in the text, then to FALLBACK_STEPS.
    """
    cleaned = _strip_fences(raw)
    steps: Any = None
    try:
        steps = json.loads(cleaned)
    except json.JSONDecodeError:
        match = _JSON_ARRAY.search(cleaned)
        if match:
            try:
                steps = json.loads(match.group(0))
            except json.JSONDecodeError:
                steps = None
    if not isinstance(steps, list) or not steps:
        return list(FALLBACK_STEPS)
    return [str(s) for s in steps[:STEPS_PER_GOAL]]

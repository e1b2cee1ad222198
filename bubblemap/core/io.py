# bubblemap/core/io.py
"""
Load ideas and score pairs from JSON.
Ideas: a list of {"id", "text"} objects, or node rows as the backend returns them
({"id", "text", "status", ...}). Score pairs: a list of {"i", "j", "score"} or
{"similarities": [...]}.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from bubblemap.core.connectors import coerce_score_pair
from bubblemap.core.types import Item, ScorePair


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _read_json(path: str | Path, repo_root: Path | None) -> Any:
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"File not found: {resolved}")
    try:
        return json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {resolved}: {exc}") from exc


def items_from_records(records: Iterable[Any]) -> list[Item]:
    """
    Build Items from strings or mappings. A record without an id gets
    "local-<n>"; text is kept as given (normalized later by the size estimate).
    """
    items: list[Item] = []
    for n, rec in enumerate(records):
        if isinstance(rec, str):
            items.append(Item(id=f"local-{n}", text=rec))
            continue
        if not isinstance(rec, Mapping):
            raise ValueError(f"Idea #{n} must be a string or an object, got {type(rec).__name__}")
        raw_id = rec.get("id")
        item_id = str(raw_id) if raw_id is not None and str(raw_id) != "" else f"local-{n}"
        text = rec.get("text")
        items.append(Item(id=item_id, text="" if text is None else str(text)))
    return items


def parse_items_text(text: str) -> list[Item]:
    """One idea per non-blank line, ids numbered by line."""
    lines = [line.strip() for line in (text or "").splitlines()]
    return [Item(id=f"line-{n}", text=line) for n, line in enumerate(lines) if line]


def load_items(path: str | Path, repo_root: Path | None = None) -> list[Item]:
    """
    Load ideas from a JSON file.
    Raises FileNotFoundError if path is missing, ValueError if the content is not a list of ideas.
    """
    data = _read_json(path, repo_root)
    if isinstance(data, Mapping):
        data = data.get("ideas", data.get("nodes"))
    if not isinstance(data, list):
        raise ValueError("Ideas file must hold a JSON list (or an object with 'ideas'/'nodes')")
    return items_from_records(data)


def load_score_pairs(path: str | Path, repo_root: Path | None = None) -> list[ScorePair]:
    """Load score pairs; malformed entries are skipped."""
    data = _read_json(path, repo_root)
    if isinstance(data, Mapping):
        data = data.get("similarities", [])
    if not isinstance(data, list):
        raise ValueError("Scores file must hold a JSON list (or an object with 'similarities')")
    pairs = [coerce_score_pair(entry) for entry in data]
    return [p for p in pairs if p is not None]

# tests/test_io_reporting.py
"""
Loading ideas/score files and the layout.json / run_metadata.json contract.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bubblemap.core.config import LayoutConfig
from bubblemap.core.io import items_from_records, load_items, load_score_pairs, parse_items_text
from bubblemap.core.layout import run_bubble_layout
from bubblemap.core.reporting import (
    SCHEMA_VERSION,
    ensure_report_dir,
    layout_to_dict,
    run_metadata_dict,
    write_layout_json,
    write_run_metadata_json,
)
from bubblemap.core.types import CanvasSize, Item, ScorePair


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_items_from_records_mixed() -> None:
    items = items_from_records(["plain", {"id": 7, "text": "seven"}, {"text": "no id"}, {"id": "", "text": None}])
    assert items == [
        Item("local-0", "plain"),
        Item("7", "seven"),
        Item("local-2", "no id"),
        Item("local-3", ""),
    ]


def test_items_from_records_rejects_other_types() -> None:
    with pytest.raises(ValueError):
        items_from_records([42])


def test_parse_items_text_skips_blank_lines() -> None:
    assert parse_items_text("one\n\n  two  \n") == [Item("line-0", "one"), Item("line-2", "two")]
    assert parse_items_text("") == []


def test_load_items_list_and_nodes(tmp_path: Path) -> None:
    _write(tmp_path / "ideas.json", [{"id": "a", "text": "A"}])
    _write(tmp_path / "nodes.json", {"nodes": [{"id": "b", "text": "B", "status": "active"}]})
    assert load_items("ideas.json", repo_root=tmp_path) == [Item("a", "A")]
    assert load_items(tmp_path / "nodes.json") == [Item("b", "B")]


def test_load_items_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_items("missing.json", repo_root=tmp_path)
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_items("bad.json", repo_root=tmp_path)
    _write(tmp_path / "scalar.json", 5)
    with pytest.raises(ValueError):
        load_items("scalar.json", repo_root=tmp_path)


def test_load_score_pairs_skips_malformed(tmp_path: Path) -> None:
    _write(
        tmp_path / "scores.json",
        {"similarities": [{"i": 0, "j": 1, "score": 0.8}, {"i": 0, "j": "x", "score": 0.8}, {"i": 2.0, "j": 3.0, "score": 0.4}]},
    )
    assert load_score_pairs("scores.json", repo_root=tmp_path) == [ScorePair(0, 1, 0.8), ScorePair(2, 3, 0.4)]


def test_layout_to_dict_shape() -> None:
    items = [Item("a", "Learn Spanish"), Item("b", "Practice Spanish")]
    canvas = CanvasSize(1000, 700)
    summary = run_bubble_layout(items, canvas, [ScorePair(0, 1, 0.9)])
    data = layout_to_dict(items, summary, canvas)
    assert data["schema_version"] == SCHEMA_VERSION
    assert set(data) == {"schema_version", "canvas", "exclusion_zones", "bubbles", "connectors", "metrics", "warnings"}
    assert [z["name"] for z in data["exclusion_zones"]] == ["center", "corner"]
    assert [b["id"] for b in data["bubbles"]] == ["a", "b"]
    bubble = data["bubbles"][0]
    assert set(bubble) == {"id", "text", "mode", "center", "rect"}
    assert bubble["rect"]["right"] - bubble["rect"]["left"] == pytest.approx(bubble["rect"]["width"])
    assert data["connectors"][0]["source_id"] == "a"
    assert data["metrics"]["n_items"] == 2
    assert data["metrics"]["overlap_count"] == 0
    json.dumps(data)


def test_write_reports(tmp_path: Path) -> None:
    items = [Item("a", "One")]
    canvas = CanvasSize(800, 600)
    config = LayoutConfig(gap=10.0)
    summary = run_bubble_layout(items, canvas, config=config)
    report_dir = ensure_report_dir(tmp_path, "demo")
    assert report_dir == (tmp_path / "reports" / "demo").resolve()
    assert report_dir.is_dir()

    layout_path = write_layout_json(report_dir, items, summary, canvas, config)
    meta_path = write_run_metadata_json(report_dir, "demo", "ideas.json", None, canvas, config)
    layout = json.loads(layout_path.read_text(encoding="utf-8"))
    meta = json.loads(meta_path.read_text(encoding="utf-8"))
    assert layout["bubbles"][0]["id"] == "a"
    assert meta["run_name"] == "demo"
    assert meta["scores_path"] is None
    assert meta["config"]["gap"] == 10.0


def test_ensure_report_dir_custom_output(tmp_path: Path) -> None:
    out = ensure_report_dir(tmp_path, "r1", output_dir="out")
    assert out == (tmp_path / "out" / "r1").resolve()


def test_run_metadata_dict_config_snapshot() -> None:
    meta = run_metadata_dict("r", "ideas.json", "scores.json", CanvasSize(10, 20))
    assert meta["canvas"] == {"width": 10, "height": 20}
    assert meta["config"]["random_attempts"] == 220
    assert "timestamp_utc" in meta

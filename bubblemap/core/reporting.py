# bubblemap/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json, run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from bubblemap.core.config import DEFAULT_CONFIG, REPORTS_DIR, LayoutConfig
from bubblemap.core.geometry import exclusion_zones
from bubblemap.core.layout import LayoutSummary
from bubblemap.core.types import CanvasSize, Item, Placement

SCHEMA_VERSION = "1.0"


def placement_to_dict(item: Item, placement: Placement) -> dict:
    """One bubble entry for layout.json."""
    return {
        "id": item.id,
        "text": item.text,
        "mode": placement.mode,
        "center": {"x": placement.x, "y": placement.y},
        "rect": {
            "left": placement.left,
            "top": placement.top,
            "right": placement.right,
            "bottom": placement.bottom,
            "width": placement.width,
            "height": placement.height,
        },
    }


def layout_to_dict(
    items: Sequence[Item],
    summary: LayoutSummary,
    canvas: CanvasSize,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> dict:
    """Exact structure for layout.json."""
    return {
        "schema_version": SCHEMA_VERSION,
        "canvas": {"width": canvas.width, "height": canvas.height},
        "exclusion_zones": [
            {"name": z.name, "left": z.left, "top": z.top, "right": z.right, "bottom": z.bottom}
            for z in exclusion_zones(canvas, config)
        ],
        "bubbles": [placement_to_dict(item, p) for item, p in zip(items, summary.placements)],
        "connectors": [
            {
                "source_id": c.source_id,
                "target_id": c.target_id,
                "score": c.score,
                "from": {"x": c.x1, "y": c.y1},
                "to": {"x": c.x2, "y": c.y2},
            }
            for c in summary.connectors
        ],
        "metrics": {
            "n_items": summary.n_items,
            "mode_counts": summary.mode_counts,
            "overlap_count": summary.quality.overlap_count,
            "exclusion_hits": summary.quality.exclusion_hits,
            "exclusion_area": summary.quality.exclusion_area,
            "out_of_bounds": summary.quality.out_of_bounds,
        },
        "warnings": summary.warnings,
    }


def run_metadata_dict(
    run_name: str,
    items_path: str,
    scores_path: str | None,
    canvas: CanvasSize,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "items_path": items_path,
        "scores_path": scores_path,
        "canvas": {"width": canvas.width, "height": canvas.height},
        "config": config.to_dict(),
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(
    report_dir: Path,
    items: Sequence[Item],
    summary: LayoutSummary,
    canvas: CanvasSize,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    data = layout_to_dict(items, summary, canvas, config)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    items_path: str,
    scores_path: str | None,
    canvas: CanvasSize,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, items_path, scores_path, canvas, config)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path

# bubblemap/core/runner.py
"""
CLI entrypoint: load ideas (and optional scores), lay out bubbles, render, export.
Without --scores, connector scores come from the local word-overlap fallback.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from bubblemap.core.config import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    LINE_SCORE_THRESHOLD,
    REPORTS_DIR,
    LayoutConfig,
)
from bubblemap.core.error_codes import user_message
from bubblemap.core.io import load_items, load_score_pairs
from bubblemap.core.layout import run_bubble_layout
from bubblemap.core.render import render_debug, render_layout
from bubblemap.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)
from bubblemap.core.similarity import similarities_or_fallback
from bubblemap.core.types import CanvasSize

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Lay out idea bubbles on a board.")
    p.add_argument("--items", type=str, required=True, help="Ideas JSON path (repo-relative)")
    p.add_argument("--scores", type=str, default=None, help="Score pairs JSON path; local fallback if omitted")
    p.add_argument("--width", type=float, default=DEFAULT_CANVAS_WIDTH, help="Canvas width (px)")
    p.add_argument("--height", type=float, default=DEFAULT_CANVAS_HEIGHT, help="Canvas height (px)")
    p.add_argument("--threshold", type=float, default=LINE_SCORE_THRESHOLD, help="Connector score threshold")
    p.add_argument("--gap", type=float, default=None, help="Bubble gap (px)")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--svg", action="store_true", help="Also export layout.svg")
    p.add_argument("--no-png", action="store_true", dest="no_png", help="Skip PNG rendering")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> list[Path]:
    logging.basicConfig(level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    items = load_items(args.items, repo_root=repo_root)
    remote = load_score_pairs(args.scores, repo_root=repo_root) if args.scores else None
    scores = similarities_or_fallback([item.text for item in items], remote)

    overrides: dict = {"score_threshold": args.threshold}
    if args.gap is not None:
        overrides["gap"] = args.gap
    config = LayoutConfig(**overrides)
    canvas = CanvasSize(width=args.width, height=args.height)

    summary = run_bubble_layout(items, canvas, scores, config=config)
    for key in summary.warnings:
        logger.warning(user_message(key))

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    written = [
        write_layout_json(report_dir, items, summary, canvas, config),
        write_run_metadata_json(report_dir, args.run_name, args.items, args.scores, canvas, config),
    ]
    if not args.no_png:
        layout_path = report_dir / "layout.png"
        debug_path = report_dir / "debug.png"
        render_layout(items, summary.placements, summary.connectors, canvas, layout_path)
        render_debug(items, summary.placements, summary.connectors, canvas, debug_path, config)
        written += [layout_path, debug_path]
    if args.svg:
        from bubblemap.core.render_svg import export_layout_svg
        written.append(
            export_layout_svg(items, summary.placements, summary.connectors, canvas, report_dir / "layout.svg")
        )

    for path in written:
        print(path)
    print("Modes used:", summary.mode_counts)
    return written


if __name__ == "__main__":
    main()

# bubblemap/ui/app.py
"""
Streamlit UI: sidebar (ideas, board size, spacing, link threshold), tabs Board/Debug/Links.
Every widget change re-runs the whole layout; no positions are stored between runs.
Run with: streamlit run bubblemap/ui/app.py
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

# Ensure repo root is on path when Streamlit loads this file
_repo_root = Path(__file__).resolve().parent.parent.parent
if not (_repo_root / "bubblemap" / "__init__.py").exists():
    _repo_root = Path.cwd().resolve()
    if not (_repo_root / "bubblemap" / "__init__.py").exists():
        raise RuntimeError(
            f"Cannot find repo root. Run from repo root directory.\n"
            f"Expected 'bubblemap/__init__.py' in: {_repo_root}\n"
            f"Current working directory: {Path.cwd()}"
        )
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import streamlit as st

from bubblemap.core.config import (
    BUBBLE_GAP,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    LINE_SCORE_THRESHOLD,
    RANDOM_ATTEMPTS,
    LayoutConfig,
)
from bubblemap.core.io import parse_items_text
from bubblemap.core.layout import run_bubble_layout
from bubblemap.core.render_svg import layout_svg_string
from bubblemap.core.reporting import layout_to_dict
from bubblemap.core.similarity import parse_similarity_response, similarities_or_fallback
from bubblemap.core.types import CanvasSize
from bubblemap.ui import components as ui_components

logger = logging.getLogger(__name__)

SAMPLE_IDEAS = """Run a 5k before summer
Learn to cook Thai curry
Read one book a month
Cook dinner at home five nights a week
Train for a half marathon
Write a blog post every week
"""

st.set_page_config(page_title="Idea board", layout="wide")
st.title("Idea board")

with st.sidebar:
    ideas_text = st.text_area("Ideas (one per line)", value=SAMPLE_IDEAS, height=220)
    width = st.slider("Board width (px)", 320, 1800, int(DEFAULT_CANVAS_WIDTH), step=20)
    height = st.slider("Board height (px)", 240, 1200, int(DEFAULT_CANVAS_HEIGHT), step=20)
    gap = st.slider("Gap between bubbles (px)", 0, 60, int(BUBBLE_GAP))
    threshold = st.slider("Link threshold", 0.0, 1.0, LINE_SCORE_THRESHOLD, step=0.01)
    attempts = st.number_input("Random attempts per bubble", 0, 2000, RANDOM_ATTEMPTS, step=10)
    remote_reply = st.text_area(
        "Model similarity reply (optional)",
        height=100,
        placeholder='[{"i":0,"j":1,"score":0.9}]',
        help="Paste a JSON reply from the similarity model. Empty or invalid falls back to word overlap.",
    )

items = parse_items_text(ideas_text)
canvas = CanvasSize(width=float(width), height=float(height))
config = LayoutConfig(gap=float(gap), score_threshold=float(threshold), random_attempts=int(attempts))

texts = [item.text for item in items]
remote_pairs = parse_similarity_response(remote_reply) if remote_reply.strip() else None
scores = similarities_or_fallback(texts, remote_pairs)
summary = run_bubble_layout(items, canvas, scores, config=config)
svg = layout_svg_string(items, summary.placements, summary.connectors, canvas)
logger.debug("Layout pass: %d ideas, modes=%s", len(items), summary.mode_counts)

tab_board, tab_debug, tab_links = st.tabs(["Board", "Debug", "Links"])

with tab_board:
    ui_components.render_warnings(summary.warnings)
    ui_components.render_board_svg(svg, height)
    ui_components.render_downloads(layout_to_dict(items, summary, canvas, config), svg)

with tab_debug:
    ui_components.render_metrics(ui_components.summary_metrics(summary))
    if summary.quality.overlap_pairs:
        st.write("Overlapping pairs:", summary.quality.overlap_pairs)

with tab_links:
    source = "model reply" if remote_pairs else "word overlap"
    st.caption(f"Scores from {source}; links drawn at score >= {threshold:.2f}.")
    rows = [
        {"a": texts[p.i], "b": texts[p.j], "score": round(p.score, 3)}
        for p in scores
        if 0 <= p.i < len(texts) and 0 <= p.j < len(texts)
    ]
    if rows:
        import pandas as pd
        st.dataframe(pd.DataFrame(rows), width="stretch", hide_index=True)
    else:
        st.info("Add at least two ideas to see links.")

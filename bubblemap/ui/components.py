# bubblemap/ui/components.py
"""
Shared UI blocks for the Board and Debug tabs: board SVG, metrics table, warnings, downloads.
"""

from __future__ import annotations

import json

import streamlit as st

from bubblemap.core.error_codes import user_message
from bubblemap.core.layout import LayoutSummary


def board_svg_html(svg: str, height: int) -> str:
    """Wrapper document for the board; the SVG scales to fit height without stretching."""
    if "<svg" in svg and "style=" not in svg.split(">")[0]:
        svg = svg.replace("<svg", f'<svg style="max-width:100%; max-height:{height}px; height:auto;"', 1)
    return (
        f'<div style="overflow:auto; max-height:{height}px; text-align:center; border-radius:12px;">'
        f'<div style="display:inline-block; max-width:100%;">{svg}</div></div>'
    )


def render_board_svg(svg: str, height: int) -> None:
    """Board SVG in an iframe so its <style> animation survives; frame sized to the board height."""
    st.components.v1.html(board_svg_html(svg, height), height=height + 20, scrolling=True)


def summary_metrics(summary: LayoutSummary) -> dict:
    return {
        "ideas": summary.n_items,
        "connectors": len(summary.connectors),
        "random": summary.mode_counts.get("random", 0),
        "grid": summary.mode_counts.get("grid", 0),
        "anchor": summary.mode_counts.get("anchor", 0),
        "forced": summary.forced_count,
        "overlaps": summary.quality.overlap_count,
        "exclusion hits": summary.quality.exclusion_hits,
        "out of bounds": summary.quality.out_of_bounds,
    }


def render_metrics(metrics: dict) -> None:
    """DataFrame of metrics. All values as string for Arrow compatibility."""
    if not metrics:
        return
    rows = [{"Metric": str(k), "Value": "" if v is None else str(v)} for k, v in metrics.items()]
    import pandas as pd
    df = pd.DataFrame(rows)
    df = df.astype(str)
    st.dataframe(df, width="stretch", hide_index=True)


def render_warnings(warning_keys: list[str]) -> None:
    """One st.warning per warning key, as a user-facing message."""
    for key in warning_keys:
        st.warning(user_message(key))


def render_downloads(layout_dict: dict, svg: str) -> None:
    left, right = st.columns(2)
    with left:
        st.download_button(
            "Download layout.json",
            data=json.dumps(layout_dict, indent=2, ensure_ascii=False).encode("utf-8"),
            file_name="layout.json",
            mime="application/json",
            key="dl_layout_json",
        )
    with right:
        st.download_button(
            "Download layout.svg",
            data=svg.encode("utf-8"),
            file_name="layout.svg",
            mime="image/svg+xml",
            key="dl_layout_svg",
        )

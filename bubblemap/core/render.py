# bubblemap/core/render.py
"""
Matplotlib PNG rendering: layout.png (bubbles + connectors) and debug.png
(adds exclusion zones and colors bubbles by the strategy that placed them).
Canvas coordinates are screen pixels with y growing downward.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import FancyBboxPatch, Rectangle

from bubblemap.core.config import (
    BUBBLE_FONT_SIZE_PT,
    DEFAULT_CONFIG,
    RENDER_DPI,
    LayoutConfig,
)
from bubblemap.core.geometry import exclusion_zones
from bubblemap.core.text_metrics import wrap_bubble_text
from bubblemap.core.types import CanvasSize, Connector, Item, Placement

MODE_COLORS: dict[str, str] = {
    "random": "#9678ff",
    "grid": "#00c6ff",
    "anchor": "#f5a623",
    "forced": "#e0245e",
}


def _new_fig(canvas: CanvasSize) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(max(canvas.width, 1.0) / RENDER_DPI, max(canvas.height, 1.0) / RENDER_DPI),
        dpi=RENDER_DPI,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, canvas.width)
    ax.set_ylim(canvas.height, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    ax.set_facecolor("#0f0620")
    fig.patch.set_facecolor("#0f0620")
    return fig, ax


def _draw_connectors(ax: plt.Axes, connectors: Sequence[Connector]) -> None:
    for c in connectors:
        ax.plot([c.x1, c.x2], [c.y1, c.y2], color=(0.55, 0.55, 0.6, 0.72), linewidth=2, zorder=1)


def _draw_bubbles(
    ax: plt.Axes,
    items: Sequence[Item],
    placements: Sequence[Placement],
    color_by_mode: bool = False,
) -> None:
    for item, p in zip(items, placements):
        edge = MODE_COLORS.get(p.mode, "white") if color_by_mode else "white"
        ax.add_patch(
            FancyBboxPatch(
                (p.left, p.top),
                p.width,
                p.height,
                boxstyle="round,pad=0,rounding_size=12",
                facecolor=(150 / 255, 120 / 255, 1.0, 0.16),
                edgecolor=edge,
                linewidth=1,
                zorder=2,
            )
        )
        ax.text(
            p.x, p.y, wrap_bubble_text(item.text, p.width, BUBBLE_FONT_SIZE_PT * RENDER_DPI / 72.0),
            fontsize=BUBBLE_FONT_SIZE_PT,
            ha="center", va="center",
            color="white",
            zorder=3,
        )


def _save(fig: plt.Figure, output_path: str | Path) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=RENDER_DPI, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_layout(
    items: Sequence[Item],
    placements: Sequence[Placement],
    connectors: Sequence[Connector],
    canvas: CanvasSize,
    output_path: str | Path,
) -> None:
    """Render bubbles and connector lines as they appear on the board."""
    fig, ax = _new_fig(canvas)
    _draw_connectors(ax, connectors)
    _draw_bubbles(ax, items, placements)
    _save(fig, output_path)


def render_debug(
    items: Sequence[Item],
    placements: Sequence[Placement],
    connectors: Sequence[Connector],
    canvas: CanvasSize,
    output_path: str | Path,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> None:
    """Layout plus hatched exclusion zones; bubble edges colored by placement mode."""
    fig, ax = _new_fig(canvas)
    for zone in exclusion_zones(canvas, config):
        ax.add_patch(
            Rectangle(
                (zone.left, zone.top),
                zone.width,
                zone.height,
                facecolor="none",
                edgecolor="orange",
                hatch="//",
                linewidth=1,
                alpha=0.6,
                zorder=0,
            )
        )
    _draw_connectors(ax, connectors)
    _draw_bubbles(ax, items, placements, color_by_mode=True)
    _save(fig, output_path)

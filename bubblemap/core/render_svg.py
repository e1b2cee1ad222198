# bubblemap/core/render_svg.py
"""
Export the board as a self-contained SVG: connector lines, bubbles, text,
and per-bubble drift variables for the idle float animation.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence

from bubblemap.core.config import BUBBLE_LINE_HEIGHT, SVG_FONT_SIZE_PX
from bubblemap.core.rng import drift_params
from bubblemap.core.text_metrics import wrap_bubble_text
from bubblemap.core.types import CanvasSize, Connector, Item, Placement

SVG_NS = "http://www.w3.org/2000/svg"

_STYLE = """
@keyframes bubbleDrift {
  0% { transform: translate(0px, 0px); }
  50% { transform: translate(var(--drift-x), var(--drift-y)); }
  100% { transform: translate(0px, 0px); }
}
.bubble { animation-name: bubbleDrift; animation-timing-function: ease-in-out; animation-iteration-count: infinite; }
"""


def build_svg(
    items: Sequence[Item],
    placements: Sequence[Placement],
    connectors: Sequence[Connector],
    canvas: CanvasSize,
) -> ET.Element:
    """SVG element tree for the board; one <g class="bubble"> per placed item."""
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": f"{canvas.width:.0f}",
            "height": f"{canvas.height:.0f}",
            "viewBox": f"0 0 {canvas.width:.2f} {canvas.height:.2f}",
        },
    )
    style = ET.SubElement(root, "style")
    style.text = _STYLE
    ET.SubElement(root, "rect", {"width": "100%", "height": "100%", "fill": "#0f0620"})

    g_lines = ET.SubElement(root, "g", {"id": "connectors"})
    for c in connectors:
        ET.SubElement(
            g_lines,
            "line",
            {
                "x1": f"{c.x1:.2f}",
                "y1": f"{c.y1:.2f}",
                "x2": f"{c.x2:.2f}",
                "y2": f"{c.y2:.2f}",
                "stroke": "rgba(67, 72, 67, 0.72)",
                "stroke-width": "3",
                "data-score": f"{c.score:.3f}",
            },
        )

    g_bubbles = ET.SubElement(root, "g", {"id": "bubbles"})
    for item, p in zip(items, placements):
        drift = drift_params(item.id)
        g = ET.SubElement(
            g_bubbles,
            "g",
            {
                "class": "bubble",
                "data-id": item.id,
                "data-mode": p.mode,
                "style": (
                    f"--drift-x: {drift.dx:.1f}px; --drift-y: {drift.dy:.1f}px; "
                    f"animation-duration: {drift.duration_s:.1f}s; animation-delay: {drift.delay_s:.1f}s"
                ),
            },
        )
        ET.SubElement(
            g,
            "rect",
            {
                "x": f"{p.left:.2f}",
                "y": f"{p.top:.2f}",
                "width": f"{p.width:.2f}",
                "height": f"{p.height:.2f}",
                "rx": "18",
                "fill": "rgba(150,120,255,0.16)",
                "stroke": "rgba(255,255,255,0.18)",
            },
        )
        lines = wrap_bubble_text(item.text, p.width, SVG_FONT_SIZE_PX).split("\n")
        first_y = p.y - (len(lines) - 1) * BUBBLE_LINE_HEIGHT / 2.0
        text = ET.SubElement(
            g,
            "text",
            {
                "x": f"{p.x:.2f}",
                "y": f"{first_y:.2f}",
                "fill": "white",
                "font-size": f"{SVG_FONT_SIZE_PX:.0f}",
                "text-anchor": "middle",
                "dominant-baseline": "middle",
            },
        )
        for k, line in enumerate(lines):
            tspan = ET.SubElement(text, "tspan", {"x": f"{p.x:.2f}", "dy": "0" if k == 0 else f"{BUBBLE_LINE_HEIGHT:.0f}"})
            tspan.text = line
    return root


def export_layout_svg(
    items: Sequence[Item],
    placements: Sequence[Placement],
    connectors: Sequence[Connector],
    canvas: CanvasSize,
    out_path: str | Path,
) -> Path:
    """Write the board SVG to out_path and return the path."""
    root = build_svg(items, placements, connectors, canvas)
    out = Path(out_path)
    out_str = ET.tostring(root, encoding="unicode", method="xml")
    out.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + out_str, encoding="utf-8")
    return out


def layout_svg_string(
    items: Sequence[Item],
    placements: Sequence[Placement],
    connectors: Sequence[Connector],
    canvas: CanvasSize,
) -> str:
    return ET.tostring(build_svg(items, placements, connectors, canvas), encoding="unicode", method="xml")

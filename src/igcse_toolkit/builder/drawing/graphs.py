"""
Module: builder.drawing.graphs

Purpose:
    Sketch graphs: axes plus a polyline curve sampled every 5 mm.

Key Functions:
    - draw_enzyme_temperature(): Bell curve with an optimum label
    - draw_energy_profile(): Exothermic reaction profile
    - draw_rate_temp_graph(): Rise then slight fall

Dependencies:
    - builder.layout.canvas: PageCanvas

Used By:
    - builder.drawing.catalogue
"""

from __future__ import annotations

import math
from typing import Callable

from igcse_toolkit.builder.layout.canvas import PageCanvas
from igcse_toolkit.builder.layout.config import LayoutConfig

AXIS_WIDTH = 70.0
CURVE_HEIGHT = 30.0
GRAPH_ADVANCE = 60.0


def _axes(canvas: PageCanvas, x0: float, y0: float, width: float, height: float) -> None:
    canvas.line(x0, y0, x0 + width, y0)
    canvas.line(x0, y0, x0, y0 - height)


def _plot(canvas: PageCanvas, x0: float, y0: float, curve: Callable[[float], float]) -> None:
    """Polyline of curve(rel) for rel in [0, 1], one segment per 5 mm."""
    prev_x, prev_y = x0, y0
    for t in range(0, int(AXIS_WIDTH) + 1, 5):
        x = x0 + t
        y = y0 - curve(t / AXIS_WIDTH) * CURVE_HEIGHT
        if t > 0:
            canvas.line(prev_x, prev_y, x, y)
        prev_x, prev_y = x, y


def enzyme_activity(rel: float) -> float:
    """Relative activity, peaking at the middle of the axis."""
    return math.exp(-(((rel - 0.5) / 0.25) ** 2))


def reaction_rate(rel: float) -> float:
    """Relative rate rising to 1 at 60% of the axis, then falling slowly."""
    return rel / 0.6 if rel < 0.6 else 1 - (rel - 0.6) * 0.4


def draw_enzyme_temperature(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    x0, y0, height = x, y + 40, 35.0
    _axes(canvas, x0, y0, AXIS_WIDTH, height)
    canvas.text(x0 + AXIS_WIDTH / 2 - 10, y0 + 6, "Temp (°C)")
    canvas.text(x0 - 8, y0 - height / 2, "Activity")
    _plot(canvas, x0, y0, enzyme_activity)
    canvas.text(x0 + 30, y0 - 25, "Optimum ~37°C")
    return GRAPH_ADVANCE


def draw_energy_profile(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    x0, y0, height = x, y + 35, 30.0
    _axes(canvas, x0, y0, AXIS_WIDTH, height)
    peak_x = x0 + AXIS_WIDTH * 0.3
    peak_y = y0 - height * 0.9
    canvas.line(x0, y0 - height * 0.2, peak_x, peak_y)
    canvas.line(peak_x, peak_y, x0 + AXIS_WIDTH, y0 - height * 0.6)
    canvas.text(peak_x - 5, peak_y - 5, "Activation energy")
    canvas.text(x0 - 8, y0 - height / 2, "Energy")
    canvas.text(x0 + AXIS_WIDTH / 2 - 10, y0 + 6, "Progress")
    return GRAPH_ADVANCE


def draw_rate_temp_graph(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    x0, y0, height = x, y + 40, 35.0
    _axes(canvas, x0, y0, AXIS_WIDTH, height)
    canvas.text(x0 + AXIS_WIDTH / 2 - 10, y0 + 6, "Temp (°C)")
    canvas.text(x0 - 6, y0 - height / 2, "Rate")
    _plot(canvas, x0, y0, reaction_rate)
    canvas.text(x0 + 25, y0 - 28, "Trend")
    return GRAPH_ADVANCE

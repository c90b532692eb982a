"""
Module: builder.drawing.diagrams

Purpose:
    Hand-authored apparatus diagrams built from primitive shapes.
    Each routine draws relative to (x, y), the top-left of its area,
    and returns the vertical space it consumed.

Key Functions:
    - draw_plant_cell()
    - draw_simple_circuit()
    - draw_gas_collection()
    - draw_transpiration_setup()
    - draw_density_apparatus()

Dependencies:
    - builder.layout.canvas: PageCanvas

Used By:
    - builder.drawing.catalogue
"""

from __future__ import annotations

from igcse_toolkit.builder.layout.canvas import PageCanvas
from igcse_toolkit.builder.layout.config import LayoutConfig


def draw_plant_cell(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    canvas.rect(x, y, 60, 40)  # cell wall
    canvas.rect(x + 2, y + 2, 56, 36)  # membrane
    canvas.set_fill_color((255, 235, 235))
    canvas.circle(x + 42, y + 20, 8, fill=True)
    canvas.text(x + 37, y + 20, "nucleus")
    canvas.set_fill_color((180, 240, 180))
    for i in range(4):
        canvas.ellipse(x + 15, y + 8 + i * 7, 8, 3, fill=True, stroke=False)
    canvas.set_fill_color(None)
    canvas.text(x - 3, y + 5, "A")
    canvas.text(x - 3, y + 20, "B")
    canvas.text(x - 3, y + 35, "C")
    return 50


def draw_simple_circuit(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    # Cell
    canvas.line(x, y + 10, x + 15, y + 10)
    canvas.line(x + 15, y + 6, x + 15, y + 14)
    canvas.line(x + 18, y + 6, x + 18, y + 14)
    canvas.line(x + 18, y + 10, x + 45, y + 10)
    # Lamp
    canvas.circle(x + 50, y + 10, 5)
    canvas.text(x + 45, y + 22, "lamp")
    canvas.line(x + 55, y + 10, x + 80, y + 10)
    # Open switch
    canvas.line(x + 80, y + 10, x + 92, y + 10)
    canvas.line(x + 92, y + 10, x + 98, y + 5)
    canvas.line(x + 98, y + 5, x + 100, y + 5)
    canvas.text(x + 90, y + 22, "switch")
    # Ammeter and return path
    canvas.line(x + 50, y + 15, x + 50, y + 30)
    canvas.circle(x + 50, y + 35, 5)
    canvas.text(x + 48, y + 36, "A")
    canvas.line(x + 50, y + 40, x, y + 40)
    canvas.line(x, y + 40, x, y + 10)
    return 55


def draw_gas_collection(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    canvas.ellipse(x + 20, y + 25, 12, 18)  # flask
    canvas.rect(x + 18, y + 5, 4, 12)  # neck
    canvas.line(x + 20, y + 5, x + 50, y + 5)  # delivery tube
    canvas.line(x + 50, y + 5, x + 50, y + 10)
    canvas.rect(x + 45, y + 10, 10, 30)  # inverted cylinder
    # Standard fonts have no subscript two
    canvas.text(x + 47, y + 25, "H2")
    canvas.text(x + 10, y + 50, "Mg + HCl")
    return 60


def draw_transpiration_setup(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    canvas.rect(x, y + 10, 20, 30)  # reservoir
    canvas.text(x + 2, y + 27, "Water")
    canvas.line(x + 20, y + 25, x + 60, y + 25)  # capillary tube
    canvas.circle(x + 40, y + 25, 2)
    canvas.text(x + 34, y + 20, "Air bubble")
    canvas.line(x + 60, y + 25, x + 60, y + 5)  # stem
    canvas.ellipse(x + 60, y + 2, 6, 3)  # leaves
    canvas.text(x + 50, y + 45, "Plant shoot")
    return 65


def draw_density_apparatus(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    canvas.rect(x, y + 30, 25, 10)
    canvas.text(x, y + 28, "Balance")
    canvas.rect(x + 40, y + 10, 15, 35)
    canvas.text(x + 38, y + 50, "Measuring")
    canvas.text(x + 40, y + 55, "cylinder")
    canvas.rect(x + 46, y + 25, 5, 5)
    canvas.text(x + 44, y + 23, "Sample")
    return 60

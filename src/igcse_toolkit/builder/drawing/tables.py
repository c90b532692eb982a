"""
Module: builder.drawing.tables

Purpose:
    Ruled data tables. draw_simple_table() is shared by the named
    tables and by the mark summary page.

Key Functions:
    - draw_simple_table(): Header row plus data rows, equal column widths
    - draw_states_of_matter()
    - draw_reaction_temperature_table()
    - draw_fertilizer_growth()

Dependencies:
    - builder.layout.canvas: PageCanvas

Used By:
    - builder.drawing.catalogue
    - builder.layout.engine: Mark summary table
"""

from __future__ import annotations

from typing import Sequence

from igcse_toolkit.builder.layout.canvas import PageCanvas
from igcse_toolkit.builder.layout.config import LayoutConfig

ROW_HEIGHT = 6.0
TABLE_SPACING = 5.0

STATES_OF_MATTER = (
    ("State", "Shape", "Volume", "Particle arrangement"),
    (
        ("Solid", "fixed", "fixed", "regular"),
        ("Liquid", "not fixed", "fixed", "close"),
        ("Gas", "not fixed", "not fixed", "random"),
    ),
)

REACTION_TEMPERATURE = (
    ("Temp (°C)", "Time (s)"),
    (("20", "120"), ("30", "80"), ("40", "55"), ("50", "40"), ("60", "30")),
)

FERTILIZER_GROWTH = (
    ("Fertilizer conc. (%)", "Mean height (cm)"),
    (("0", "4.2"), ("1", "6.8"), ("2", "8.1"), ("3", "8.4"), ("4", "7.9")),
)


def draw_simple_table(
    canvas: PageCanvas,
    x: float,
    y: float,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    width: float,
    *,
    font_size: float = 8,
    font: str = "Helvetica",
    bold_font: str = "Helvetica-Bold",
) -> float:
    """
    Draw a ruled table with equal column widths.

    Args:
        canvas: Display list
        x: Left edge (mm)
        y: Top edge (mm)
        headers: Header cells (bold)
        rows: Data rows, each as long as headers
        width: Total table width (mm)

    Returns:
        Vertical space consumed including trailing spacing:
        one header row, one row per data row, then TABLE_SPACING

    Example:
        >>> draw_simple_table(canvas, 30, 40, ("Q", "Marks"), [("1", "3")], 150)
        17.0
    """
    if not headers:
        raise ValueError("Table needs at least one column")
    col_width = width / len(headers)

    def draw_row(cells: Sequence[str], row_y: float) -> None:
        for i, cell in enumerate(cells):
            cell_x = x + i * col_width
            canvas.rect(cell_x, row_y, col_width, ROW_HEIGHT)
            canvas.text(cell_x + 2, row_y + 4, cell)

    canvas.set_font(bold_font, font_size)
    draw_row(headers, y)
    canvas.set_font(font, font_size)
    for index, row in enumerate(rows):
        if len(row) != len(headers):
            raise ValueError(f"Row {index} has {len(row)} cells, expected {len(headers)}")
        draw_row(row, y + ROW_HEIGHT + index * ROW_HEIGHT)
    return ROW_HEIGHT + len(rows) * ROW_HEIGHT + TABLE_SPACING


def draw_states_of_matter(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    headers, rows = STATES_OF_MATTER
    return draw_simple_table(canvas, x, y, headers, rows, config.table_width)


def draw_reaction_temperature_table(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    headers, rows = REACTION_TEMPERATURE
    return draw_simple_table(canvas, x, y, headers, rows, config.table_width)


def draw_fertilizer_growth(canvas: PageCanvas, x: float, y: float, config: LayoutConfig) -> float:
    headers, rows = FERTILIZER_GROWTH
    return draw_simple_table(canvas, x, y, headers, rows, config.table_width)

"""
Module: builder.drawing

Purpose:
    Vector drawing library: a closed catalogue of scientific diagrams,
    data tables and sketch graphs drawn with primitive operations onto
    the layout display list.

Key Functions:
    - draw_visual(): Draw a catalogued visual (placeholder when unknown)
    - draw_simple_table(): Ruled table helper
"""

from .catalogue import (
    DIAGRAMS,
    GRAPHS,
    TABLES,
    DiagramId,
    Drawing,
    GraphId,
    TableId,
    draw_visual,
    lookup,
    parse_id,
    placeholder_text,
)
from .tables import draw_simple_table

__all__ = [
    "DIAGRAMS",
    "GRAPHS",
    "TABLES",
    "DiagramId",
    "Drawing",
    "GraphId",
    "TableId",
    "draw_simple_table",
    "draw_visual",
    "lookup",
    "parse_id",
    "placeholder_text",
]

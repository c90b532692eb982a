"""
Module: builder.layout

Purpose:
    Page layout for question papers. Selected questions are typeset into
    a per-page display list of primitive drawing operations that the
    output renderer replays onto a PDF canvas.

Key Classes:
    - LayoutConfig: Page geometry, thresholds and fonts
    - LayoutCursor: Immutable write position
    - PageCanvas: Display list builder
    - LayoutEngine: Question, MCQ, summary and footer typesetting
    - LayoutResult: Final display list for all pages
"""

from .config import LayoutConfig
from .models import (
    CircleOp,
    DrawOp,
    EllipseOp,
    LayoutCursor,
    LayoutResult,
    LineOp,
    PagePlan,
    RectOp,
    TextOp,
)
from .canvas import PageCanvas
from .engine import LayoutEngine, part_letter
from .cover import CoverLayout, render_cover, write_page_count

__all__ = [
    "CircleOp",
    "CoverLayout",
    "DrawOp",
    "EllipseOp",
    "LayoutConfig",
    "LayoutCursor",
    "LayoutEngine",
    "LayoutResult",
    "LineOp",
    "PageCanvas",
    "PagePlan",
    "RectOp",
    "TextOp",
    "part_letter",
    "render_cover",
    "write_page_count",
]

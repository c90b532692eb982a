"""
Module: builder.layout.canvas

Purpose:
    Display-list canvas. Mirrors the small subset of the reportlab canvas
    API that the layout engine and drawing routines need (font and fill
    state, lines, rectangles, ellipses, circles, aligned text) but records
    operations per page in millimetre coordinates instead of emitting PDF.
    Pages can be revisited, so footers and the page count are added once
    the final page count is known.

Key Classes:
    - PageCanvas: Records DrawOps per page

Dependencies:
    - reportlab: Font metrics (stringWidth) and text wrapping (simpleSplit)

Used By:
    - builder.layout.engine
    - builder.drawing
"""

from __future__ import annotations

import logging
from typing import List, Optional

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from .models import (
    RGB,
    CircleOp,
    DrawOp,
    EllipseOp,
    LayoutResult,
    LineOp,
    PagePlan,
    RectOp,
    TextAlign,
    TextOp,
)

logger = logging.getLogger(__name__)


class PageCanvas:
    """
    Multi-page display list builder.

    Starts with one empty page. Drawing calls go to the current page;
    add_page() appends a page and makes it current.

    Example:
        >>> canvas = PageCanvas(210, 297)
        >>> canvas.set_font("Helvetica", 8)
        >>> canvas.text(20, 30, "Hello")
        >>> canvas.build().pages[0].texts
        ('Hello',)
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._pages: List[List[DrawOp]] = [[]]
        self._current = 0
        self._font = "Helvetica"
        self._font_size = 10.0
        self._fill: Optional[RGB] = None
        self._warnings: List[str] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def current_page(self) -> int:
        return self._current

    def add_page(self) -> int:
        """Append a page, make it current and return its index."""
        self._pages.append([])
        self._current = len(self._pages) - 1
        return self._current

    def set_page(self, index: int) -> None:
        """Select an existing page for drawing."""
        if not 0 <= index < len(self._pages):
            raise IndexError(f"Page {index} out of range (0..{len(self._pages) - 1})")
        self._current = index

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def font(self) -> str:
        return self._font

    @property
    def font_size(self) -> float:
        return self._font_size

    def set_font(self, name: str, size: Optional[float] = None) -> None:
        self._font = name
        if size is not None:
            self._font_size = size

    def set_font_size(self, size: float) -> None:
        self._font_size = size

    def set_fill_color(self, rgb: Optional[RGB]) -> None:
        """Fill colour used by shapes drawn with fill=True (None clears it)."""
        self._fill = rgb

    def warn(self, message: str) -> None:
        """Attach a warning to the layout result."""
        logger.warning(message)
        self._warnings.append(message)

    # ─────────────────────────────────────────────────────────────────────────
    # Primitives
    # ─────────────────────────────────────────────────────────────────────────

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record(LineOp(x1, y1, x2, y2))

    def rect(self, x: float, y: float, width: float, height: float,
             *, fill: bool = False, stroke: bool = True) -> None:
        self._record(RectOp(x, y, width, height, stroke, self._fill_for(fill)))

    def ellipse(self, cx: float, cy: float, rx: float, ry: float,
                *, fill: bool = False, stroke: bool = True) -> None:
        self._record(EllipseOp(cx, cy, rx, ry, stroke, self._fill_for(fill)))

    def circle(self, cx: float, cy: float, r: float,
               *, fill: bool = False, stroke: bool = True) -> None:
        self._record(CircleOp(cx, cy, r, stroke, self._fill_for(fill)))

    def text(self, x: float, y: float, text: str, align: TextAlign = "left") -> None:
        self._record(TextOp(x, y, text, self._font, self._font_size, align))

    # ─────────────────────────────────────────────────────────────────────────
    # Metrics
    # ─────────────────────────────────────────────────────────────────────────

    def string_width(self, text: str) -> float:
        """Width of text in the current font (mm)."""
        return stringWidth(text, self._font, self._font_size) / mm

    def split_text(self, text: str, max_width: float) -> List[str]:
        """
        Wrap text to max_width (mm) in the current font.

        Always returns at least one line so callers can advance the cursor.
        """
        lines = simpleSplit(text, self._font, self._font_size, max_width * mm)
        return lines or [""]

    # ─────────────────────────────────────────────────────────────────────────
    # Output
    # ─────────────────────────────────────────────────────────────────────────

    def build(self) -> LayoutResult:
        """Freeze the recorded pages into a LayoutResult."""
        pages = tuple(
            PagePlan(index=i, ops=tuple(ops))
            for i, ops in enumerate(self._pages)
        )
        return LayoutResult(
            pages=pages,
            page_width=self.width,
            page_height=self.height,
            warnings=list(self._warnings),
        )

    def _record(self, op: DrawOp) -> None:
        self._pages[self._current].append(op)

    def _fill_for(self, fill: bool) -> Optional[RGB]:
        if not fill:
            return None
        return self._fill if self._fill is not None else (0, 0, 0)

"""
Module: builder.layout.models

Purpose:
    Data models for page layout. The layout engine does not draw on a
    PDF directly; it records a display list of primitive operations per
    page that the renderer replays. All coordinates are millimetres
    from the top-left corner; text y is the baseline.

Key Classes:
    - LayoutCursor: Immutable (y, page index) position
    - LineOp, RectOp, EllipseOp, CircleOp, TextOp: Drawing primitives
    - PagePlan: Operations recorded for one page
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.canvas: Records operations
    - builder.layout.engine: Threads cursors through routines
    - builder.output.renderer: Replays operations onto reportlab
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple, Union

RGB = Tuple[int, int, int]
TextAlign = Literal["left", "center", "right"]


@dataclass(frozen=True)
class LayoutCursor:
    """
    Vertical write position on a page (immutable).

    Layout routines take a cursor and return the next one instead of
    mutating shared state.

    Attributes:
        y: Distance from the top edge (mm)
        page_index: Page number (0-indexed)

    Example:
        >>> cursor = LayoutCursor(20.0)
        >>> cursor.advance(6).y
        26.0
    """

    y: float
    page_index: int = 0

    def advance(self, dy: float) -> LayoutCursor:
        """Move down by dy on the same page."""
        return LayoutCursor(self.y + dy, self.page_index)

    def moved_to(self, y: float) -> LayoutCursor:
        """Jump to an absolute position on the same page."""
        return LayoutCursor(y, self.page_index)

    def on_new_page(self, y: float) -> LayoutCursor:
        """Position on the following page."""
        return LayoutCursor(y, self.page_index + 1)


@dataclass(frozen=True)
class LineOp:
    """Straight stroked line."""
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RectOp:
    """Rectangle with top-left corner (x, y)."""
    x: float
    y: float
    width: float
    height: float
    stroke: bool = True
    fill: Optional[RGB] = None


@dataclass(frozen=True)
class EllipseOp:
    """Ellipse by centre and radii."""
    cx: float
    cy: float
    rx: float
    ry: float
    stroke: bool = True
    fill: Optional[RGB] = None


@dataclass(frozen=True)
class CircleOp:
    """Circle by centre and radius."""
    cx: float
    cy: float
    r: float
    stroke: bool = True
    fill: Optional[RGB] = None


@dataclass(frozen=True)
class TextOp:
    """
    Single line of text.

    Attributes:
        x: Anchor x; left edge, centre or right edge depending on align
        y: Baseline
        text: Text to draw (no line breaks)
        font: reportlab standard font name
        size: Font size in points
        align: left, center or right
    """
    x: float
    y: float
    text: str
    font: str
    size: float
    align: TextAlign = "left"


DrawOp = Union[LineOp, RectOp, EllipseOp, CircleOp, TextOp]


@dataclass(frozen=True)
class PagePlan:
    """
    Complete display list for a single page.

    Attributes:
        index: Page number (0-indexed)
        ops: Operations in drawing order

    Example:
        >>> page = PagePlan(index=0, ops=(TextOp(20, 20, "1", "Times-Roman", 10),))
        >>> page.texts
        ('1',)
    """

    index: int
    ops: Tuple[DrawOp, ...]

    @property
    def op_count(self) -> int:
        return len(self.ops)

    @property
    def is_empty(self) -> bool:
        return not self.ops

    @property
    def texts(self) -> Tuple[str, ...]:
        """All text strings on the page in drawing order."""
        return tuple(op.text for op in self.ops if isinstance(op, TextOp))


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans
        page_width: Page width (mm)
        page_height: Page height (mm)
        warnings: Layout warnings (overflowing content, placeholders)

    Example:
        >>> result.page_count
        6
    """

    pages: Tuple[PagePlan, ...]
    page_width: float
    page_height: float
    warnings: List[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_ops(self) -> int:
        return sum(p.op_count for p in self.pages)

    def all_texts(self) -> List[str]:
        """Every text string across all pages."""
        return [text for page in self.pages for text in page.texts]

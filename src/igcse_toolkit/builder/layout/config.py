"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page dimensions, margins, break thresholds and fonts. All
    lengths are millimetres on a top-down page.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.engine: Cursor arithmetic and page breaks
    - builder.drawing: Drawing origin and table widths
    - builder.output.renderer: Page size
"""

from __future__ import annotations

import math
from dataclasses import dataclass


# A4 portrait in millimetres
DEFAULT_PAGE_WIDTH_MM = 210.0
DEFAULT_PAGE_HEIGHT_MM = 297.0


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Break thresholds are distances from the bottom edge: a question
    starts on a new page once the cursor is lower than
    page_height - question_break, and so on.

    Attributes:
        page_width: Page width (mm)
        page_height: Page height (mm)
        margin: Left, right and top margin (mm)
        line_height: Baseline-to-baseline distance for wrapped text
        mark_gutter: Right-hand space reserved for "[n]" annotations
        part_indent: Indent of the second and later parts
        min_answer_lines: Fewest ruled lines for a marked part
        max_answer_lines: Most ruled lines for a marked part
        question_break: Break distance checked before a question
        line_break: Break distance checked after each part
        mcq_break: Break distance checked before an MCQ item
        heading_break: Break distance checked before a category heading
        drawing_bottom: Clearance a drawing must keep above the page bottom
        summary_bottom: Clearance the summary table keeps above the page bottom
        running_header_y: Baseline of the running header
        header_clearance: Cursor position after a running header
        unmarked_gap: Gap after a part without marks
        blank_line_gap: Gap for an empty text line
        question_spacing: Gap after each question
        drawing_inset: Horizontal inset of drawings from the margin

    Example:
        >>> config = LayoutConfig()
        >>> config.text_width
        154.0
        >>> config.answer_lines_for(5)
        3
    """

    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_MM
    page_height: float = DEFAULT_PAGE_HEIGHT_MM

    # Margins and text geometry
    margin: float = 20.0
    line_height: float = 6.0
    mark_gutter: float = 16.0
    part_indent: float = 8.0

    # Answer space
    min_answer_lines: int = 1
    max_answer_lines: int = 8

    # Break thresholds (distance from page bottom)
    question_break: float = 70.0
    line_break: float = 40.0
    mcq_break: float = 50.0
    heading_break: float = 40.0
    drawing_bottom: float = 20.0
    summary_bottom: float = 30.0

    # Running header
    running_header_y: float = 10.0
    header_clearance: float = 20.0

    # Spacing
    unmarked_gap: float = 2.0
    blank_line_gap: float = 3.0
    question_spacing: float = 4.0
    drawing_inset: float = 10.0

    # Fonts (reportlab standard Type-1 names)
    body_font: str = "Times-Roman"
    body_bold_font: str = "Times-Bold"
    body_font_size: float = 10.0
    sans_font: str = "Helvetica"
    sans_bold_font: str = "Helvetica-Bold"
    sans_italic_font: str = "Helvetica-Oblique"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")
        if self.text_width <= 0:
            raise ValueError("Margins and mark gutter exceed page width")
        if not 1 <= self.min_answer_lines <= self.max_answer_lines:
            raise ValueError(
                f"Answer line range invalid: [{self.min_answer_lines}, {self.max_answer_lines}]"
            )
        if self.question_break >= self.page_height - self.margin:
            raise ValueError("question_break leaves no room for content")

    @property
    def content_width(self) -> float:
        """Width between the left and right margins."""
        return self.page_width - 2 * self.margin

    @property
    def text_width(self) -> float:
        """Wrapping width for question text (content minus mark gutter)."""
        return self.content_width - self.mark_gutter

    @property
    def right_edge(self) -> float:
        return self.page_width - self.margin

    @property
    def drawing_x(self) -> float:
        """Left edge of drawings and tables."""
        return self.margin + self.drawing_inset

    @property
    def table_width(self) -> float:
        return self.content_width - 2 * self.drawing_inset

    def limit(self, distance_from_bottom: float) -> float:
        """Cursor position beyond which a break threshold triggers."""
        return self.page_height - distance_from_bottom

    def answer_lines_for(self, marks: int) -> int:
        """Ruled answer lines for a part: ceil(marks / 2) clamped to the range."""
        return max(self.min_answer_lines, min(self.max_answer_lines, math.ceil(marks / 2)))

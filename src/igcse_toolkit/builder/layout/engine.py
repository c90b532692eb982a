"""
Module: builder.layout.engine

Purpose:
    Typeset questions onto fixed-size pages. Every routine takes a
    LayoutCursor and returns the cursor after the content it placed, so
    the only mutable state is the display list held by the PageCanvas.

Key Classes:
    - LayoutEngine: Page breaks, running header, wrapped text, question
      and MCQ rendering, mark summary table and footers

Rules:
    - Parts are lettered (a), (b), ... per question; the first part also
      carries the display number and starts at the margin, later parts
      are indented
    - Marked parts get a bold right-aligned "[n]" and ruled answer lines
      (ceil(marks / 2) clamped to [1, 8]); unmarked parts get a small gap
    - Visual parts are handed to the drawing library
    - Breaks redraw the running header and reset the cursor
    - A part's text and answer lines move to a new page together rather
      than cross the drawing bottom margin

Dependencies:
    - builder.layout.canvas: PageCanvas display list
    - builder.drawing: draw_visual, draw_simple_table

Used By:
    - builder.controller: Paper assembly
    - builder.layout.cover: Front page
"""

from __future__ import annotations

import logging
import string
from typing import List, Optional, Sequence

from igcse_toolkit.core.models import Category, MarkBreakdownEntry, MCQItem, PartKind, SelectionPlan

from .canvas import PageCanvas
from .config import LayoutConfig
from .models import LayoutCursor

logger = logging.getLogger(__name__)

SUMMARY_TITLE = "Question Mark Summary"
SUMMARY_HEADERS = ("Q", "Marks")


def part_letter(index: int) -> str:
    """Letter for the index-th part: a, b, ..., z, aa, ab, ..."""
    letters = string.ascii_lowercase
    if index < len(letters):
        return letters[index]
    return part_letter(index // len(letters) - 1) + letters[index % len(letters)]


class LayoutEngine:
    """
    Stateless layout routines over a shared display list.

    Attributes:
        canvas: Display list receiving drawing operations
        config: Page geometry and thresholds
        header_left: Running header text at the left margin (paper code)
        header_right: Running header text at the right margin (session/year)

    Example:
        >>> engine = LayoutEngine(PageCanvas(210, 297), LayoutConfig(), "0653/21", "M/2025")
        >>> cursor = engine.render_structured_question(LayoutCursor(20.0), plan)
    """

    def __init__(
        self,
        canvas: PageCanvas,
        config: Optional[LayoutConfig] = None,
        header_left: str = "",
        header_right: str = "",
    ) -> None:
        self.canvas = canvas
        self.config = config or LayoutConfig()
        self.header_left = header_left
        self.header_right = header_right

    # ─────────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────────

    def sync(self, cursor: LayoutCursor) -> None:
        """Point the canvas at the cursor's page."""
        if self.canvas.current_page != cursor.page_index:
            self.canvas.set_page(cursor.page_index)

    def new_page(self, cursor: LayoutCursor) -> LayoutCursor:
        """
        Start a page after the cursor's page.

        Draws the running header when one is configured.

        Returns:
            Cursor at the top of the new page
        """
        index = self.canvas.add_page()
        if index != cursor.page_index + 1:
            raise RuntimeError(
                f"Cursor on page {cursor.page_index} but canvas appended page {index}"
            )
        if not (self.header_left or self.header_right):
            return cursor.on_new_page(self.config.margin)

        cfg = self.config
        self.canvas.set_font(cfg.sans_italic_font, 8)
        if self.header_left:
            self.canvas.text(cfg.margin, cfg.running_header_y, self.header_left)
        if self.header_right:
            self.canvas.text(cfg.right_edge, cfg.running_header_y, self.header_right, align="right")
        logger.debug(f"Started page {index + 1}")
        return cursor.on_new_page(cfg.header_clearance)

    def break_if_below(self, cursor: LayoutCursor, distance_from_bottom: float) -> LayoutCursor:
        """New page if the cursor is past page_height - distance_from_bottom."""
        if cursor.y > self.config.limit(distance_from_bottom):
            return self.new_page(cursor)
        return cursor

    def ensure_space(self, cursor: LayoutCursor, height: float) -> LayoutCursor:
        """
        New page unless height fits above the drawing bottom clearance.

        A cursor already at the top of a page stays put; content taller
        than a page is left to break line by line.
        """
        if cursor.y <= self.config.header_clearance:
            return cursor
        if cursor.y + height > self.config.limit(self.config.drawing_bottom):
            return self.new_page(cursor)
        return cursor

    # ─────────────────────────────────────────────────────────────────────────
    # Text
    # ─────────────────────────────────────────────────────────────────────────

    def write_wrapped(
        self,
        cursor: LayoutCursor,
        text: str,
        x: float,
        max_width: float,
    ) -> LayoutCursor:
        """
        Write text wrapped to max_width in the current font.

        The first baseline is at cursor.y; the returned cursor is one
        line height below the last baseline. A line that would fall below
        the drawing bottom continues on a new page in the same font.
        """
        font, size = self.canvas.font, self.canvas.font_size
        lines = self.canvas.split_text(text, max_width)
        for line in lines:
            fitted = self.ensure_space(cursor, self.config.line_height)
            if fitted.page_index != cursor.page_index:
                self.canvas.set_font(font, size)
            cursor = fitted
            self.sync(cursor)
            self.canvas.text(x, cursor.y, line)
            cursor = cursor.advance(self.config.line_height)
        return cursor

    def insert_category_heading(self, cursor: LayoutCursor, category: Category) -> LayoutCursor:
        """Upper-case section heading before the first question of a category."""
        cursor = self.break_if_below(cursor, self.config.heading_break)
        self.sync(cursor)
        self.canvas.set_font(self.config.sans_bold_font, 11)
        self.canvas.text(self.config.margin, cursor.y, str(category).upper())
        return cursor.advance(self.config.line_height)

    # ─────────────────────────────────────────────────────────────────────────
    # Questions
    # ─────────────────────────────────────────────────────────────────────────

    def render_structured_question(self, cursor: LayoutCursor, plan: SelectionPlan) -> LayoutCursor:
        """
        Typeset one applied question.

        Args:
            cursor: Position before the question
            plan: Applied (possibly truncated) question

        Returns:
            Cursor after the question and its trailing spacing
        """
        from igcse_toolkit.builder.drawing import draw_visual

        cfg = self.config
        cursor = self.break_if_below(cursor, cfg.question_break)
        part_index = 0

        for applied in plan.parts:
            part = applied.part
            if part.is_visual:
                cursor = draw_visual(self, cursor, part.kind, part.ref_id or "")
                continue

            text = part.text.strip()
            if not text:
                cursor = cursor.advance(cfg.blank_line_gap)
                continue

            prefix = f"({part_letter(part_index)}) "
            is_first = part_index == 0
            part_index += 1
            label = f"{plan.display_number} {prefix}{text}" if is_first else f"{prefix}{text}"
            indent = 0.0 if is_first else cfg.part_indent
            width = cfg.text_width - indent

            marks = applied.awarded_marks
            answer_lines = cfg.answer_lines_for(marks) if marks > 0 else 0
            self.canvas.set_font(cfg.body_font, cfg.body_font_size)
            text_lines = len(self.canvas.split_text(label, width))
            cursor = self.ensure_space(cursor, (text_lines + answer_lines) * cfg.line_height)

            self.canvas.set_font(cfg.body_font, cfg.body_font_size)
            cursor = self.write_wrapped(cursor, label, cfg.margin + indent, width)

            if marks > 0:
                mark_y = cursor.y - cfg.line_height + 1.5
                self.canvas.set_font(cfg.body_bold_font, cfg.body_font_size)
                self.canvas.text(cfg.right_edge - 1, mark_y, f"[{marks}]", align="right")
                self.canvas.set_font(cfg.body_font, cfg.body_font_size)
                for _ in range(answer_lines):
                    cursor = self.ensure_space(cursor, cfg.line_height)
                    self.sync(cursor)
                    self.canvas.line(cfg.margin + cfg.part_indent, cursor.y, cfg.right_edge, cursor.y)
                    cursor = cursor.advance(cfg.line_height)
            else:
                cursor = cursor.advance(cfg.unmarked_gap)

            cursor = self.break_if_below(cursor, cfg.line_break)

        logger.debug(f"Laid out Q{plan.display_number} ending at page {cursor.page_index + 1}, y={cursor.y:.1f}")
        return cursor.advance(cfg.question_spacing)

    def render_mcq_item(self, cursor: LayoutCursor, number: int, item: MCQItem) -> LayoutCursor:
        """
        Typeset one multiple choice item: stem, optional diagram, options A-D.

        Returns:
            Cursor after the item and its trailing spacing
        """
        from igcse_toolkit.builder.drawing import draw_visual

        cfg = self.config
        cursor = self.break_if_below(cursor, cfg.mcq_break)
        stem_x = cfg.margin + cfg.part_indent
        stem_width = cfg.content_width - cfg.part_indent
        options_height = len(item.options) * 5

        self.canvas.set_font(cfg.sans_font, 10)
        stem_lines = len(self.canvas.split_text(item.question, stem_width))
        cursor = self.ensure_space(cursor, stem_lines * cfg.line_height + 8 + options_height)
        self.sync(cursor)
        self.canvas.set_font(cfg.sans_font, 10)
        self.canvas.text(cfg.margin, cursor.y, str(number))
        cursor = self.write_wrapped(cursor, item.question, stem_x, stem_width)
        cursor = cursor.advance(8)

        if item.diagram:
            cursor = draw_visual(self, cursor, PartKind.DIAGRAM, item.diagram)
            cursor = self.ensure_space(cursor, options_height)
            self.sync(cursor)
            self.canvas.set_font(cfg.sans_font, 10)

        for option in item.options:
            self.canvas.text(cfg.margin + 5, cursor.y, f"    {option}")
            cursor = cursor.advance(5)
        return cursor.advance(6)

    # ─────────────────────────────────────────────────────────────────────────
    # Summary and footers
    # ─────────────────────────────────────────────────────────────────────────

    def render_mark_summary(
        self,
        cursor: LayoutCursor,
        breakdown: Sequence[MarkBreakdownEntry],
        total: int,
    ) -> LayoutCursor:
        """
        Dedicated summary page(s): question number to marks, plus Total row.

        The table continues on further pages when it does not fit; the
        header row is repeated on each page.
        """
        from igcse_toolkit.builder.drawing import draw_simple_table

        cfg = self.config
        cursor = self.new_page(cursor)
        self.canvas.set_font(cfg.sans_bold_font, 12)
        self.canvas.text(cfg.page_width / 2, cursor.y, SUMMARY_TITLE, align="center")
        cursor = cursor.advance(10)

        rows: List[Sequence[str]] = [(entry.number, str(entry.marks)) for entry in breakdown]
        rows.append(("Total", str(total)))

        row_height = 6.0
        while rows:
            available = cfg.limit(cfg.summary_bottom) - cursor.y - row_height
            fit = max(1, int(available // row_height))
            chunk, rows = rows[:fit], rows[fit:]
            self.sync(cursor)
            height = draw_simple_table(
                self.canvas, cfg.drawing_x, cursor.y, SUMMARY_HEADERS, chunk, cfg.table_width,
                font_size=9, font=cfg.sans_font, bold_font=cfg.sans_bold_font,
            )
            cursor = cursor.advance(height)
            if rows:
                cursor = self.new_page(cursor)
        return cursor.advance(10)

    def render_footers(self, left_text: str, center_text: str, status_line: Optional[str] = None) -> None:
        """
        Footer on every page; "[Turn over" on all but the last.

        Args:
            left_text: Copyright line
            center_text: Paper code
            status_line: Allocated-marks line drawn on the last page only
        """
        cfg = self.config
        last = self.canvas.page_count - 1
        footer_y = cfg.page_height - 10
        for index in range(self.canvas.page_count):
            self.canvas.set_page(index)
            self.canvas.set_font(cfg.sans_font, 8)
            self.canvas.text(cfg.margin, footer_y, left_text)
            self.canvas.text(cfg.page_width / 2, footer_y, center_text, align="center")
            if index < last:
                self.canvas.text(cfg.right_edge, footer_y, "[Turn over", align="right")
        if status_line:
            self.canvas.set_page(last)
            self.canvas.set_font(cfg.sans_font, 9)
            self.canvas.text(cfg.right_edge - 5, cfg.page_height - 20, status_line, align="right")

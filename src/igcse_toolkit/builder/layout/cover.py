"""
Module: builder.layout.cover

Purpose:
    Front matter of a question paper: examination board header block,
    subject and component codes, duration, candidate instructions,
    candidate information boxes and the examiner's box. The
    "This document consists of N printed pages." line is written after
    the rest of the document has been laid out.

Key Functions:
    - render_cover(): Lay out the front page and move to page two
    - write_page_count(): Fill in the printed page count

Key Classes:
    - CoverLayout: Cursor after the cover plus the page count anchor

Dependencies:
    - common.papers: Codes, duration and marks
    - builder.layout.engine: LayoutEngine

Used By:
    - builder.controller: Paper assembly
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from igcse_toolkit.common.papers import (
    SUBJECT_TITLE,
    paper_code,
    resolve_duration,
    resolve_target_marks,
)
from igcse_toolkit.core.models import QuestionPaperConfig

from .canvas import PageCanvas
from .engine import LayoutEngine
from .models import LayoutCursor

BOARD_NAME = "CAMBRIDGE INTERNATIONAL EXAMINATIONS"
QUALIFICATION = "Cambridge International General Certificate of Secondary Education"

# Empty strings are paragraph breaks
INSTRUCTIONS: Tuple[str, ...] = (
    "Write your Centre number, candidate number and name on all the work you hand in.",
    "Write in dark blue or black pen.",
    "You may use an HB pencil for any diagrams or graphs.",
    "Do not use staples, paper clips, glue or correction fluid.",
    "DO NOT WRITE IN ANY BARCODES.",
    "",
    "Answer all questions.",
    "",
    "The use of an approved scientific calculator is expected, where appropriate.",
    "You may lose marks if you do not show your working or if you do not use appropriate units.",
    "",
    "At the end of the examination, fasten all your work securely together.",
    "",
    "The number of marks is given in brackets [ ] at the end of each question or part question.",
)

MATERIALS = (
    "Candidates answer on the Question Paper.",
    "No additional materials are required.",
)


@dataclass(frozen=True)
class CoverLayout:
    """
    Result of laying out the front page.

    Attributes:
        cursor: Top of the first question page
        page_count_anchor: (x, y) of the printed-pages line on page one
    """

    cursor: LayoutCursor
    page_count_anchor: Tuple[float, float]


def session_label(config: QuestionPaperConfig) -> str:
    """Session and year as printed in headers ("M25/2025")."""
    return f"{config.session.upper()}/{config.year}"


def page_count_text(page_count: int) -> str:
    noun = "page" if page_count == 1 else "pages"
    return f"This document consists of {page_count} printed {noun}."


def render_cover(engine: LayoutEngine, config: QuestionPaperConfig) -> CoverLayout:
    """
    Lay out the front page on page one.

    Args:
        engine: Layout engine whose canvas is still on page one
        config: Paper configuration

    Returns:
        CoverLayout with the cursor at the top of page two
    """
    canvas = engine.canvas
    cfg = engine.config
    centre = cfg.page_width / 2
    cursor = LayoutCursor(cfg.margin, 0)
    engine.sync(cursor)

    canvas.set_font(cfg.sans_font, 10)
    canvas.text(centre, 15, BOARD_NAME, align="center")
    cursor = cursor.moved_to(25)
    canvas.set_font_size(9)
    canvas.text(centre, cursor.y, QUALIFICATION, align="center")
    cursor = cursor.advance(15)

    canvas.set_font(cfg.sans_bold_font, 11)
    canvas.text(cfg.margin, cursor.y, SUBJECT_TITLE)
    canvas.text(cfg.right_edge, cursor.y, paper_code(config), align="right")
    cursor = cursor.advance(8)
    canvas.text(cfg.margin, cursor.y, f"Paper {config.paper_number}")
    canvas.text(cfg.right_edge, cursor.y, session_label(config), align="right")
    cursor = cursor.advance(15)

    canvas.set_font(cfg.sans_font, 11)
    canvas.text(cfg.right_edge, cursor.y, f"{resolve_duration(config)} minutes", align="right")
    cursor = cursor.advance(10)

    canvas.set_font_size(9)
    for line in MATERIALS:
        canvas.text(cfg.margin, cursor.y, line)
        cursor = cursor.advance(5)
    cursor = cursor.advance(10)

    cursor = _render_instructions(engine, cursor)
    cursor = _render_candidate_boxes(canvas, cfg.margin, cursor)
    cursor = _render_examiner_box(canvas, cfg.page_width, cursor, resolve_target_marks(config))

    anchor = (cfg.margin, cursor.y)
    return CoverLayout(cursor=engine.new_page(cursor), page_count_anchor=anchor)


def write_page_count(canvas: PageCanvas, cover: CoverLayout, page_count: int) -> None:
    """Draw the printed-pages line on page one once the count is known."""
    canvas.set_page(0)
    canvas.set_font("Helvetica", 8)
    x, y = cover.page_count_anchor
    canvas.text(x, y, page_count_text(page_count))


def _render_instructions(engine: LayoutEngine, cursor: LayoutCursor) -> LayoutCursor:
    canvas = engine.canvas
    cfg = engine.config
    canvas.set_font(cfg.sans_bold_font, 10)
    canvas.text(cfg.margin, cursor.y, "READ THESE INSTRUCTIONS FIRST")
    cursor = cursor.advance(10)

    canvas.set_font(cfg.sans_font, 9)
    for instruction in INSTRUCTIONS:
        if not instruction:
            cursor = cursor.advance(3)
            continue
        cursor = engine.write_wrapped(cursor, instruction, cfg.margin, cfg.content_width)
        cursor = cursor.advance(5)
    return cursor.advance(10)


def _render_candidate_boxes(canvas: PageCanvas, margin: float, cursor: LayoutCursor) -> LayoutCursor:
    canvas.set_font("Helvetica", 8)
    boxes = (
        (0, 50, "Centre Number"),
        (55, 50, "Candidate Number"),
        (110, 60, "Candidate Name"),
    )
    for offset, width, label in boxes:
        canvas.rect(margin + offset, cursor.y, width, 15)
        canvas.text(margin + offset + 2, cursor.y + 5, label)
    return cursor.advance(20)


def _render_examiner_box(canvas: PageCanvas, page_width: float, cursor: LayoutCursor, total_marks: int) -> LayoutCursor:
    left = page_width - 60
    centre = page_width - 40
    canvas.rect(left, cursor.y, 40, 20)
    canvas.set_font("Helvetica", 8)
    canvas.text(centre, cursor.y + 5, "For Examiner's Use", align="center")
    canvas.text(centre, cursor.y + 15, f"Total: {total_marks}", align="center")
    return cursor.advance(25)

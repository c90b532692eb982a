"""
Unit tests for the front page layout and PageCanvas.
"""

import pytest

from igcse_toolkit.builder.layout import (
    LayoutConfig,
    LayoutCursor,
    PageCanvas,
    RectOp,
    render_cover,
    write_page_count,
)
from igcse_toolkit.builder.layout.cover import BOARD_NAME, page_count_text, session_label
from igcse_toolkit.core.models import QuestionPaperConfig


class TestCover:
    """Tests for render_cover() and write_page_count()."""

    def test_render_cover_when_paper_two_then_header_block(self, engine):
        config = QuestionPaperConfig("2", variant="1", session="m", year="2025")

        render_cover(engine, config)

        texts = engine.canvas.build().pages[0].texts
        assert BOARD_NAME in texts
        assert "0653/21" in texts
        assert "Paper 2" in texts
        assert "M/2025" in texts
        assert "75 minutes" in texts
        assert "Total: 80" in texts
        assert "READ THESE INSTRUCTIONS FIRST" in texts

    def test_render_cover_when_done_then_cursor_on_page_two(self, engine):
        cover = render_cover(engine, QuestionPaperConfig("3"))

        assert cover.cursor == LayoutCursor(20.0, 1)
        assert engine.canvas.page_count == 2

    def test_render_cover_when_done_then_fits_above_footer(self, engine):
        cover = render_cover(engine, QuestionPaperConfig("4"))
        _, anchor_y = cover.page_count_anchor
        assert anchor_y < 287

    def test_render_cover_when_explicit_duration_then_printed(self, engine):
        render_cover(engine, QuestionPaperConfig("6", duration=90, total_marks=50))
        texts = engine.canvas.build().pages[0].texts
        assert "90 minutes" in texts
        assert "Total: 50" in texts

    def test_render_cover_when_drawn_then_candidate_and_examiner_boxes(self, engine):
        render_cover(engine, QuestionPaperConfig("2"))
        rects = [op for op in engine.canvas.build().pages[0].ops if isinstance(op, RectOp)]
        assert len(rects) == 4

    def test_write_page_count_when_called_then_on_first_page(self, engine):
        cover = render_cover(engine, QuestionPaperConfig("2"))
        engine.canvas.add_page()

        write_page_count(engine.canvas, cover, 3)

        assert "This document consists of 3 printed pages." in engine.canvas.build().pages[0].texts

    def test_page_count_text_when_one_then_singular(self):
        assert page_count_text(1) == "This document consists of 1 printed page."

    def test_session_label_when_lower_case_then_upper(self):
        assert session_label(QuestionPaperConfig("2", session="s", year="2024")) == "S/2024"


class TestPageCanvas:
    """Tests for the display list canvas."""

    def test_init_when_created_then_one_empty_page(self):
        canvas = PageCanvas(210, 297)
        assert canvas.page_count == 1
        assert canvas.build().pages[0].is_empty

    def test_set_page_when_out_of_range_then_raises_error(self):
        with pytest.raises(IndexError):
            PageCanvas(210, 297).set_page(1)

    def test_text_when_recorded_then_carries_current_font(self):
        canvas = PageCanvas(210, 297)
        canvas.set_font("Times-Bold", 12)

        canvas.text(20, 30, "Hello", align="right")

        op = canvas.build().pages[0].ops[0]
        assert (op.font, op.size, op.align) == ("Times-Bold", 12, "right")

    def test_rect_when_fill_without_colour_then_black(self):
        canvas = PageCanvas(210, 297)
        canvas.rect(0, 0, 10, 10, fill=True)
        canvas.set_fill_color((200, 230, 200))
        canvas.rect(0, 0, 10, 10, fill=True)
        canvas.rect(0, 0, 10, 10)

        fills = [op.fill for op in canvas.build().pages[0].ops]

        assert fills == [(0, 0, 0), (200, 230, 200), None]

    def test_split_text_when_empty_then_single_blank_line(self):
        assert PageCanvas(210, 297).split_text("", 100) == [""]

    def test_split_text_when_long_then_each_line_fits(self):
        canvas = PageCanvas(210, 297)
        canvas.set_font("Times-Roman", 10)

        lines = canvas.split_text("word " * 80, 100)

        assert len(lines) > 1
        assert all(canvas.string_width(line) <= 100 for line in lines)

    def test_warn_when_called_then_in_build_result(self):
        canvas = PageCanvas(210, 297)
        canvas.warn("something odd")
        assert canvas.build().warnings == ["something odd"]


class TestLayoutConfig:
    """Tests for LayoutConfig derived geometry."""

    def test_geometry_when_default_then_a4_values(self):
        config = LayoutConfig()
        assert config.content_width == 170
        assert config.text_width == 154
        assert config.right_edge == 190
        assert config.drawing_x == 30
        assert config.table_width == 150

    @pytest.mark.parametrize("marks,lines", [(1, 1), (2, 1), (3, 2), (5, 3), (16, 8), (30, 8)])
    def test_answer_lines_for_when_marks_then_clamped_half(self, marks, lines):
        assert LayoutConfig().answer_lines_for(marks) == lines

    def test_init_when_margins_exceed_width_then_raises_error(self):
        with pytest.raises(ValueError):
            LayoutConfig(page_width=40)

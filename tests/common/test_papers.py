"""
Unit Tests for Paper Metadata and Naming

Tests the paper metadata table, target resolution and the code and
filename conventions.
"""

import pytest

from igcse_toolkit.common.papers import (
    DEFAULT_PAPER_INFO,
    PaperNumber,
    get_paper_info,
    paper_code,
    paper_filename,
    resolve_duration,
    resolve_target_marks,
    session_code,
)
from igcse_toolkit.core.models import QuestionPaperConfig


class TestPaperNumber:
    """Tests for PaperNumber enum."""

    def test_parse_when_int_then_returns_member(self):
        assert PaperNumber.parse(3) is PaperNumber.THREE

    def test_parse_when_unknown_then_none(self):
        assert PaperNumber.parse("9") is None
        assert PaperNumber.parse("") is None

    def test_is_practical_when_five_or_six_then_true(self):
        assert PaperNumber.FIVE.is_practical
        assert PaperNumber.SIX.is_practical
        assert not PaperNumber.FOUR.is_practical

    def test_is_multiple_choice_when_one_then_true(self):
        assert PaperNumber.ONE.is_multiple_choice
        assert not PaperNumber.TWO.is_multiple_choice


class TestPaperInfo:
    """Tests for the metadata table."""

    @pytest.mark.parametrize("paper,duration,marks", [
        ("1", 45, 40),
        ("2", 75, 80),
        ("3", 75, 80),
        ("4", 105, 120),
        ("5", 75, 60),
        ("6", 60, 60),
    ])
    def test_get_paper_info_when_known_then_table_values(self, paper, duration, marks):
        info = get_paper_info(paper)
        assert info.duration == duration
        assert info.total_marks == marks

    def test_get_paper_info_when_unknown_then_default(self, caplog):
        """Unknown papers fall back to default metadata with a warning."""
        info = get_paper_info("9")

        assert info is DEFAULT_PAPER_INFO
        assert info.title == "Unknown"
        assert "Unknown paper number" in caplog.text


class TestResolution:
    """Tests for explicit overrides versus table defaults."""

    def test_resolve_target_marks_when_explicit_then_used(self):
        assert resolve_target_marks(QuestionPaperConfig("2", total_marks=50)) == 50

    def test_resolve_target_marks_when_absent_then_table_value(self):
        assert resolve_target_marks(QuestionPaperConfig("4")) == 120

    def test_resolve_duration_when_absent_then_table_value(self):
        assert resolve_duration(QuestionPaperConfig("6")) == 60
        assert resolve_duration(QuestionPaperConfig("6", duration=90)) == 90


class TestNaming:
    """Tests for paper code, session code and filename."""

    def test_paper_code_when_variant_then_joined(self):
        assert paper_code(QuestionPaperConfig("2", variant="2")) == "0653/22"

    def test_session_code_when_letter_then_appends_year_suffix(self):
        assert session_code(QuestionPaperConfig("2", session="S", year="2024")) == "s24"

    def test_session_code_when_already_suffixed_then_unchanged(self):
        assert session_code(QuestionPaperConfig("2", session="m25", year="2025")) == "m25"

    def test_paper_filename_when_paper_one_then_expected_pattern(self):
        config = QuestionPaperConfig("1", variant="2", session="m", year="2025")
        assert paper_filename(config) == "0653_m25_qp_12.pdf"


class TestQuestionPaperConfig:
    """Tests for QuestionPaperConfig validation."""

    def test_init_when_ints_given_then_coerced_to_strings(self):
        config = QuestionPaperConfig(paper_number=3, variant=1, year=2026)  # type: ignore
        assert config.paper_number == "3"
        assert config.variant == "1"
        assert config.year_suffix == "26"

    def test_init_when_non_positive_total_then_raises_error(self):
        with pytest.raises(ValueError, match="total_marks must be positive"):
            QuestionPaperConfig("2", total_marks=0)

    def test_init_when_bad_difficulty_then_raises_error(self):
        with pytest.raises(ValueError, match="difficulty"):
            QuestionPaperConfig("2", difficulty="expert")  # type: ignore

    def test_init_when_unknown_paper_then_accepted(self):
        """Unknown papers are a configuration gap, not an error."""
        assert QuestionPaperConfig("9").paper_number == "9"

"""
Unit tests for mark-constrained selection.

Uses small synthetic banks so quota and truncation outcomes do not
depend on shuffle order.
"""

import logging

import pytest

from igcse_toolkit.bank import get_blueprint, get_mcq_bank, get_structured_bank
from igcse_toolkit.builder.selection import SeededRandom, SelectionConfig
from igcse_toolkit.builder.selection.config import FILLER_TEXT
from igcse_toolkit.builder.selection.selector import (
    SelectionError,
    apply_parts,
    select_mcq,
    select_structured,
)
from igcse_toolkit.core.models import (
    BlueprintCategory,
    Category,
    PaperBlueprint,
    PartKind,
    QuestionPart,
    StructuredQuestion,
)


def _blueprint(total, *minimums):
    return PaperBlueprint("t", total, tuple(BlueprintCategory(c, m) for c, m in minimums))


class TestApplyParts:
    """Tests for the truncation rule."""

    def test_apply_when_budget_short_then_clips_and_stops(self, make_question):
        q = make_question("1", Category.PHYSICS, 2, 3, 1)

        parts = apply_parts(q, remaining=3)

        assert [p.awarded_marks for p in parts] == [2, 1]
        assert parts[1].is_clipped

    def test_apply_when_budget_ample_then_all_parts(self, make_question):
        q = make_question("1", Category.PHYSICS, 2, 3)
        assert [p.awarded_marks for p in apply_parts(q, remaining=10)] == [2, 3]

    def test_apply_when_no_budget_then_empty(self, make_question):
        assert apply_parts(make_question("1", Category.PHYSICS, 2), remaining=0) == ()

    def test_apply_when_visual_part_then_kept_without_cost(self):
        q = StructuredQuestion("1", Category.BIOLOGY, (
            QuestionPart("Cell", kind=PartKind.DIAGRAM, ref_id="plant_cell"),
            QuestionPart("Label the nucleus.", marks=2),
        ))

        parts = apply_parts(q, remaining=2)

        assert [p.awarded_marks for p in parts] == [0, 2]

    def test_apply_when_budget_exhausted_then_trailing_visual_dropped(self):
        q = StructuredQuestion("1", Category.BIOLOGY, (
            QuestionPart("Label the nucleus.", marks=2),
            QuestionPart("Cell", kind=PartKind.DIAGRAM, ref_id="plant_cell"),
        ))
        assert len(apply_parts(q, remaining=2)) == 1


class TestSelectStructured:
    """Tests for select_structured()."""

    # ─────────────────────────────────────────────────────────────────────────
    # Quotas
    # ─────────────────────────────────────────────────────────────────────────

    def test_select_when_blueprint_then_minimums_met_first(self, make_question):
        """Pass 1 meets both minimums before pass 2 tops up."""
        bank = [make_question(f"b{i}", Category.BIOLOGY, 4) for i in range(3)]
        bank += [make_question(f"p{i}", Category.PHYSICS, 4) for i in range(3)]
        bp = _blueprint(16, (Category.PHYSICS, 8), (Category.BIOLOGY, 4))

        for seed in ("one", "two", "three"):
            result = select_structured(bank, bp, SelectionConfig(16), SeededRandom(seed))

            assert result.total_marks == 16
            assert result.marks_for(Category.PHYSICS) >= 8
            assert result.marks_for(Category.BIOLOGY) >= 4
            assert all(q.is_met for q in result.quotas.values())

    def test_select_when_quota_unreachable_then_warns(self, make_question, caplog):
        bank = [make_question("p1", Category.PHYSICS, 4), make_question("b1", Category.BIOLOGY, 10)]
        bp = _blueprint(14, (Category.PHYSICS, 10))

        with caplog.at_level(logging.WARNING):
            result = select_structured(bank, bp, SelectionConfig(14), SeededRandom("q"))

        assert "Quota for Physics not met" in caplog.text
        assert result.total_marks == 14
        assert result.quotas[Category.PHYSICS].allocated == 4

    def test_select_when_no_blueprint_then_greedy_only(self, make_question):
        bank = [make_question(str(i), Category.CHEMISTRY, 3) for i in range(5)]
        result = select_structured(bank, None, SelectionConfig(9), SeededRandom("g"))
        assert result.total_marks == 9
        assert result.quotas == {}

    # ─────────────────────────────────────────────────────────────────────────
    # Marks and numbering
    # ─────────────────────────────────────────────────────────────────────────

    def test_select_when_target_mid_question_then_truncated(self, make_question):
        bank = [make_question("1", Category.PHYSICS, 3, 3, 3)]

        result = select_structured(bank, None, SelectionConfig(4, allow_auto_fill=False), SeededRandom("t"))

        assert result.total_marks == 4
        assert [p.awarded_marks for p in result.plans[0].parts] == [3, 1]
        assert result.plans[0].is_truncated

    def test_select_when_run_then_no_question_reused(self, make_question):
        bank = [make_question(str(i), Category.BIOLOGY, 2, 2) for i in range(10)]
        result = select_structured(bank, None, SelectionConfig(30), SeededRandom("u"))
        assert len(result.question_ids) == len(set(result.question_ids))

    def test_select_when_run_then_display_numbers_sequential(self, make_question):
        bank = [make_question(str(i), Category.BIOLOGY, 3) for i in range(5, 12)]
        result = select_structured(bank, None, SelectionConfig(12), SeededRandom("n"))
        assert [p.display_number for p in result.plans] == ["1", "2", "3", "4"]

    def test_select_when_same_seed_then_same_selection(self):
        bank = get_structured_bank("3")
        config = SelectionConfig(80)
        a = select_structured(bank, get_blueprint("3"), config, SeededRandom("same"))
        b = select_structured(bank, get_blueprint("3"), config, SeededRandom("same"))
        assert a.question_ids == b.question_ids
        assert a.breakdown == b.breakdown

    def test_select_when_bank_not_mutated(self, make_question):
        bank = [make_question(str(i), Category.PHYSICS, 5) for i in range(4)]
        before = list(bank)
        select_structured(bank, None, SelectionConfig(7), SeededRandom("m"))
        assert bank == before
        assert bank[1].total_marks == 5

    def test_select_when_duplicate_numbers_then_raises_error(self, make_question):
        bank = [make_question("1", Category.PHYSICS, 2), make_question("1", Category.BIOLOGY, 2)]
        with pytest.raises(SelectionError, match="duplicate"):
            select_structured(bank, None, SelectionConfig(4), SeededRandom("d"))

    @pytest.mark.parametrize("paper,target", [("2", 80), ("3", 80), ("4", 120), ("5", 60), ("6", 60)])
    def test_select_when_real_bank_then_exact_target(self, paper, target):
        result = select_structured(
            get_structured_bank(paper), get_blueprint(paper), SelectionConfig(target), SeededRandom("bank")
        )
        assert result.total_marks == target

    # ─────────────────────────────────────────────────────────────────────────
    # Auto-fill
    # ─────────────────────────────────────────────────────────────────────────

    def test_select_when_bank_short_then_fillers_close_gap(self, make_question):
        bank = [make_question("1", Category.PHYSICS, 5)]

        result = select_structured(bank, None, SelectionConfig(10), SeededRandom("f"))

        fillers = [p for p in result.plans if p.is_filler]
        assert result.total_marks == 10
        assert [p.marks for p in fillers] == [2, 2, 1]
        assert all(p.question.category == Category.MIXED for p in fillers)
        assert all(p.parts[0].part.text == FILLER_TEXT for p in fillers)
        assert [p.question.number for p in fillers] == ["auto-2", "auto-3", "auto-4"]
        assert result.question_ids == ("1",)

    def test_select_when_auto_fill_disabled_then_under_target(self, make_question, caplog):
        """Practical papers stop short instead of inventing items."""
        bank = [make_question("1", Category.PRACTICAL_SKILLS, 5)]

        with caplog.at_level(logging.WARNING):
            result = select_structured(
                bank, None, SelectionConfig(10, allow_auto_fill=False), SeededRandom("p")
            )

        assert result.total_marks == 5
        assert result.deficit == 5
        assert result.filler_count == 0
        assert "auto-fill is disabled" in caplog.text

    def test_select_when_practical_bank_reduced_then_under(self):
        bank = get_structured_bank("5")[:3]
        total = sum(q.total_marks for q in bank)

        result = select_structured(
            bank, get_blueprint("5"), SelectionConfig(60, allow_auto_fill=False), SeededRandom("r")
        )

        assert result.total_marks == total < 60
        assert result.filler_count == 0


class TestSelectionConfig:
    """Tests for SelectionConfig validation."""

    def test_init_when_non_positive_target_then_raises_error(self):
        with pytest.raises(ValueError, match="target_marks must be positive"):
            SelectionConfig(0)

    def test_filler_marks_for_when_small_deficit_then_deficit(self):
        assert SelectionConfig(10).filler_marks_for(1) == 1
        assert SelectionConfig(10).filler_marks_for(7) == 2


class TestSelectMCQ:
    """Tests for select_mcq()."""

    def test_select_when_count_within_bank_then_prefix_of_shuffle(self):
        items = select_mcq(get_mcq_bank(), 40, SeededRandom("reproducible"))
        assert len(items) == 40
        assert len({i.id for i in items}) == 40

    def test_select_when_count_exceeds_bank_then_capped(self, caplog):
        with caplog.at_level(logging.WARNING):
            items = select_mcq(get_mcq_bank(), 100, SeededRandom("cap"))
        assert len(items) == len(get_mcq_bank())
        assert "Requested 100 MCQ items" in caplog.text

    def test_select_when_negative_count_then_raises_error(self):
        with pytest.raises(SelectionError):
            select_mcq(get_mcq_bank(), -1, SeededRandom("x"))

    def test_select_when_same_seed_then_same_items(self):
        a = select_mcq(get_mcq_bank(), 10, SeededRandom("k"))
        b = select_mcq(get_mcq_bank(), 10, SeededRandom("k"))
        assert a == b

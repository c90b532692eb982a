"""
Unit Tests for Question, Blueprint and Selection Models

Tests validation on construction and calculated mark totals.
"""

import pytest

from igcse_toolkit.core.models import (
    AppliedPart,
    BlueprintCategory,
    Category,
    CategoryQuota,
    MCQItem,
    PaperBlueprint,
    PartKind,
    QuestionPart,
    SelectionPlan,
    SelectionResult,
    StructuredQuestion,
)


class TestQuestionPart:
    """Tests for QuestionPart dataclass."""

    def test_init_when_negative_marks_then_raises_error(self):
        """Negative marks should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            QuestionPart("Bad part", marks=-1)

    def test_init_when_visual_without_ref_id_then_raises_error(self):
        """Diagram parts must name a drawing routine."""
        with pytest.raises(ValueError, match="requires a ref_id"):
            QuestionPart("Circuit", kind=PartKind.DIAGRAM)

    def test_mark_value_when_marks_none_then_zero(self):
        """Absent marks count as zero."""
        assert QuestionPart("Look at the diagram.").mark_value == 0

    def test_is_visual_when_graph_then_true(self):
        part = QuestionPart("Graph", kind=PartKind.GRAPH, ref_id="energy_profile")
        assert part.is_visual
        assert not QuestionPart("Text", marks=1).is_visual

    def test_init_when_frozen_then_immutable(self):
        """Parts should be immutable (frozen)."""
        part = QuestionPart("State Ohm's law.", marks=2)
        with pytest.raises(AttributeError):
            part.marks = 3  # type: ignore


class TestStructuredQuestion:
    """Tests for StructuredQuestion dataclass."""

    def test_total_marks_when_mixed_parts_then_sums_declared_marks(self):
        """Visual and unmarked parts contribute nothing."""
        q = StructuredQuestion("7", Category.PHYSICS, (
            QuestionPart("Circuit", kind=PartKind.DIAGRAM, ref_id="simple_circuit"),
            QuestionPart("Intro text."),
            QuestionPart("Calculate resistance.", marks=3),
            QuestionPart("State units.", marks=1),
        ))
        assert q.total_marks == 4

    def test_init_when_no_parts_then_raises_error(self):
        with pytest.raises(ValueError, match="no parts"):
            StructuredQuestion("1", Category.BIOLOGY, ())

    def test_init_when_empty_number_then_raises_error(self):
        with pytest.raises(ValueError, match="must not be empty"):
            StructuredQuestion("", Category.BIOLOGY, (QuestionPart("x", marks=1),))

    def test_id_when_accessed_then_equals_number(self):
        q = StructuredQuestion("12", Category.CHEMISTRY, (QuestionPart("x", marks=1),))
        assert q.id == "12"


class TestMCQItem:
    """Tests for MCQItem dataclass."""

    def test_init_when_three_options_then_raises_error(self):
        with pytest.raises(ValueError, match="must have 4 options"):
            MCQItem("x", Category.PHYSICS, "Q?", ("A", "B", "C"))  # type: ignore

    def test_init_when_defaults_then_one_mark_no_diagram(self):
        item = MCQItem("x", Category.PHYSICS, "Q?", ("A", "B", "C", "D"))
        assert item.marks == 1
        assert item.diagram is None


class TestPaperBlueprint:
    """Tests for PaperBlueprint dataclass."""

    def test_quota_total_when_categories_then_sums_minimums(self):
        bp = PaperBlueprint("4", 120, (
            BlueprintCategory(Category.PLANNING, 40),
            BlueprintCategory(Category.PRACTICAL_SKILLS, 40),
            BlueprintCategory(Category.ANALYSIS_EVALUATION, 30),
        ))
        assert bp.quota_total == 110

    def test_minimum_for_when_unlisted_then_zero(self):
        bp = PaperBlueprint("5", 60, (BlueprintCategory(Category.PRACTICAL_SKILLS, 60),))
        assert bp.minimum_for(Category.PRACTICAL_SKILLS) == 60
        assert bp.minimum_for(Category.PHYSICS) == 0

    def test_init_when_duplicate_categories_then_raises_error(self):
        with pytest.raises(ValueError, match="Duplicate categories"):
            PaperBlueprint("2", 80, (
                BlueprintCategory(Category.BIOLOGY, 10),
                BlueprintCategory(Category.BIOLOGY, 20),
            ))

    def test_init_when_non_positive_total_then_raises_error(self):
        with pytest.raises(ValueError, match="total_marks must be positive"):
            PaperBlueprint("2", 0, ())

    def test_init_when_negative_minimum_then_raises_error(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            BlueprintCategory(Category.BIOLOGY, -1)


class TestSelectionModels:
    """Tests for AppliedPart, SelectionPlan and SelectionResult."""

    # ─────────────────────────────────────────────────────────────────────────
    # AppliedPart
    # ─────────────────────────────────────────────────────────────────────────

    def test_applied_part_when_awarded_exceeds_declared_then_raises_error(self):
        with pytest.raises(ValueError, match="outside"):
            AppliedPart(QuestionPart("x", marks=2), 3)

    def test_applied_part_when_fewer_marks_then_clipped(self):
        assert AppliedPart(QuestionPart("x", marks=4), 1).is_clipped
        assert not AppliedPart(QuestionPart("x", marks=4), 4).is_clipped

    # ─────────────────────────────────────────────────────────────────────────
    # SelectionPlan
    # ─────────────────────────────────────────────────────────────────────────

    def test_plan_when_prefix_applied_then_truncated(self):
        """Dropping trailing parts marks the plan as truncated."""
        p1, p2 = QuestionPart("a", marks=2), QuestionPart("b", marks=3)
        q = StructuredQuestion("3", Category.BIOLOGY, (p1, p2))

        plan = SelectionPlan(q, "1", (AppliedPart(p1, 2),))

        assert plan.marks == 2
        assert plan.is_truncated

    def test_plan_when_all_parts_applied_then_not_truncated(self):
        p1 = QuestionPart("a", marks=2)
        q = StructuredQuestion("3", Category.BIOLOGY, (p1,))
        assert not SelectionPlan(q, "1", (AppliedPart(p1, 2),)).is_truncated

    # ─────────────────────────────────────────────────────────────────────────
    # SelectionResult
    # ─────────────────────────────────────────────────────────────────────────

    def test_result_when_filler_present_then_excluded_from_ids(self):
        """Fillers count toward marks but not toward question ids."""
        p = QuestionPart("a", marks=2)
        bank_q = StructuredQuestion("9", Category.PHYSICS, (p,))
        filler = StructuredQuestion("auto-2", Category.MIXED, (p,))
        result = SelectionResult(
            plans=(
                SelectionPlan(bank_q, "1", (AppliedPart(p, 2),)),
                SelectionPlan(filler, "2", (AppliedPart(p, 2),), is_filler=True),
            ),
            target_marks=6,
        )

        assert result.total_marks == 4
        assert result.deficit == 2
        assert result.question_ids == ("9",)
        assert result.filler_count == 1
        assert [(e.number, e.marks) for e in result.breakdown] == [("1", 2), ("2", 2)]
        assert result.marks_for(Category.PHYSICS) == 2
        assert result.marks_for(Category.MIXED) == 0

    def test_result_when_over_target_then_deficit_zero(self):
        p = QuestionPart("a", marks=5)
        q = StructuredQuestion("1", Category.PHYSICS, (p,))
        result = SelectionResult((SelectionPlan(q, "1", (AppliedPart(p, 5),)),), target_marks=3)
        assert result.deficit == 0

    def test_category_quota_when_allocated_reaches_needed_then_met(self):
        assert CategoryQuota(needed=4, allocated=4).is_met
        assert not CategoryQuota(needed=4, allocated=3).is_met

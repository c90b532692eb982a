"""
Module: selection

Purpose:
    Provides the selection result data structures. A SelectionPlan records
    which parts of a bank question were applied and how many marks each
    part was awarded after truncation; a SelectionResult is the ordered
    list of plans for one paper.

Key Classes:
    - AppliedPart: Part plus awarded (possibly clipped) marks
    - SelectionPlan: One applied question with its display number
    - SelectionResult: All plans, target and category quota ledger
    - CategoryQuota: (needed, allocated) pair for one category
    - MarkBreakdownEntry: (display number, marks) pair for the audit

Dependencies:
    - dataclasses (std)
    - .questions

Used By:
    - builder.selection.selector
    - builder.controller
    - builder.output.audit
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Tuple

from .questions import Category, QuestionPart, StructuredQuestion


@dataclass(frozen=True, slots=True)
class AppliedPart:
    """
    A question part as applied to the paper.

    Attributes:
        part: The bank part (never modified)
        awarded_marks: Marks printed and counted for this part

    Invariants:
        - 0 <= awarded_marks <= part.mark_value
    """

    part: QuestionPart
    awarded_marks: int

    def __post_init__(self) -> None:
        if not 0 <= self.awarded_marks <= self.part.mark_value:
            raise ValueError(
                f"awarded_marks {self.awarded_marks} outside 0..{self.part.mark_value} "
                f"for {self.part.text!r}"
            )

    @property
    def is_clipped(self) -> bool:
        """True if fewer marks were awarded than declared."""
        return self.awarded_marks < self.part.mark_value


@dataclass(frozen=True)
class SelectionPlan:
    """
    Plan for one question on the paper.

    Attributes:
        question: Source bank question (or a synthetic filler)
        display_number: Sequential number printed on the paper
        parts: Applied parts in original order (a prefix of question.parts)
        is_filler: True for auto-generated filler items

    Example:
        >>> plan.marks  # Sum of awarded marks
        5
        >>> plan.is_truncated
        False
    """

    question: StructuredQuestion
    display_number: str
    parts: Tuple[AppliedPart, ...]
    is_filler: bool = False

    @property
    def marks(self) -> int:
        """Awarded marks for this question."""
        return sum(p.awarded_marks for p in self.parts)

    @property
    def is_truncated(self) -> bool:
        """True if parts were dropped or clipped."""
        return (
            len(self.parts) < len(self.question.parts)
            or any(p.is_clipped for p in self.parts)
        )


@dataclass(frozen=True)
class CategoryQuota:
    """Marks still needed versus allocated for one blueprint category."""

    needed: int
    allocated: int = 0

    @property
    def is_met(self) -> bool:
        return self.allocated >= self.needed


@dataclass(frozen=True)
class MarkBreakdownEntry:
    """Marks recorded against one printed question number."""

    number: str
    marks: int


@dataclass(frozen=True)
class SelectionResult:
    """
    Ordered selection for a structured paper.

    Attributes:
        plans: Applied questions in paper order
        target_marks: Target total
        quotas: Final category ledger (empty when no blueprint)
    """

    plans: Tuple[SelectionPlan, ...]
    target_marks: int
    quotas: Mapping[Category, CategoryQuota] = field(default_factory=dict)

    @property
    def total_marks(self) -> int:
        return sum(p.marks for p in self.plans)

    @property
    def deficit(self) -> int:
        """Marks still missing (never negative)."""
        return max(0, self.target_marks - self.total_marks)

    @property
    def question_ids(self) -> Tuple[str, ...]:
        """Stable ids of bank questions used, in order (fillers excluded)."""
        return tuple(p.question.id for p in self.plans if not p.is_filler)

    @property
    def filler_count(self) -> int:
        return sum(1 for p in self.plans if p.is_filler)

    @property
    def breakdown(self) -> Tuple[MarkBreakdownEntry, ...]:
        return tuple(MarkBreakdownEntry(p.display_number, p.marks) for p in self.plans)

    def marks_for(self, category: Category) -> int:
        """Awarded marks from bank questions in one category."""
        return sum(
            p.marks for p in self.plans
            if not p.is_filler and p.question.category == category
        )

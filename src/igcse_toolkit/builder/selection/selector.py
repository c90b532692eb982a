"""
Module: builder.selection.selector

Purpose:
    Mark-constrained question selection. Walks a shuffled bank and
    applies questions, truncating their parts, until an exact mark
    target is reached while satisfying blueprint category minimums
    first.

Key Functions:
    - select_structured(): Main entry point for papers 2-6
    - select_mcq(): Shuffled prefix of the multiple choice bank
    - apply_parts(): Truncation rule for one question

Key Classes:
    - StructuredSelector: Orchestrates the two passes and auto-fill
    - SelectionError: Invalid selection input

Algorithm:
    1. Shuffle the bank (Fisher-Yates, seeded source)
    2. Pass 1: apply unused questions whose category is under its minimum
    3. Pass 2: apply any unused question
    4. Auto-fill residual deficit with 1-2 mark synthetic items (theory only)
    Every pass stops as soon as the target is reached.

Dependencies:
    - core.models: StructuredQuestion, SelectionPlan, SelectionResult
    - builder.selection.quota: Category ledger reducer
    - builder.selection.random_source: Shuffling

Used By:
    - builder.controller: Paper handlers
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from igcse_toolkit.core.models import (
    AppliedPart,
    Category,
    CategoryQuota,
    MCQItem,
    PaperBlueprint,
    QuestionPart,
    SelectionPlan,
    SelectionResult,
    StructuredQuestion,
)

from .config import FILLER_TEXT, SelectionConfig
from .quota import allocate, init_quotas, is_unmet, unmet_categories
from .random_source import SeededRandom, shuffled

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Error in selection input."""
    pass


def apply_parts(question: StructuredQuestion, remaining: int) -> Tuple[AppliedPart, ...]:
    """
    Apply a question's parts in order against a mark budget.

    Rules:
        - Stop as soon as no budget remains
        - Visual and zero-mark parts are kept without consuming budget
        - A part worth more than the remaining budget is clipped to it

    Args:
        question: Bank question (not modified)
        remaining: Marks still available before this question

    Returns:
        Applied parts, a prefix of question.parts (possibly empty)

    Example:
        >>> parts = apply_parts(question_worth_6, remaining=3)
        >>> [p.awarded_marks for p in parts]
        [2, 1]
    """
    applied: List[AppliedPart] = []
    for part in question.parts:
        if remaining <= 0:
            break
        if part.is_visual or part.mark_value == 0:
            applied.append(AppliedPart(part, 0))
            continue
        awarded = min(part.mark_value, remaining)
        applied.append(AppliedPart(part, awarded))
        remaining -= awarded
    return tuple(applied)


def select_structured(
    bank: Sequence[StructuredQuestion],
    blueprint: Optional[PaperBlueprint],
    config: SelectionConfig,
    rng: SeededRandom,
) -> SelectionResult:
    """
    Select and truncate structured questions to hit a mark target.

    Args:
        bank: Candidate questions (never mutated)
        blueprint: Category minimums, or None for pass 2 only
        config: Target and auto-fill policy
        rng: Random source for the shuffle

    Returns:
        SelectionResult with sequentially numbered plans

    Raises:
        SelectionError: If the bank repeats a question number

    Invariants:
        - result.total_marks <= config.target_marks
        - No bank question appears twice
        - With auto-fill enabled, result.total_marks == config.target_marks

    Example:
        >>> result = select_structured(PAPER2_QUESTIONS, get_blueprint("2"),
        ...                            SelectionConfig(80), SeededRandom("x"))
        >>> result.total_marks
        80
    """
    selector = StructuredSelector(list(bank), blueprint, config, rng)
    return selector.run()


@dataclass
class StructuredSelector:
    """
    Two-pass selection orchestrator.

    Attributes:
        bank: Candidate questions
        blueprint: Optional category minimums
        config: Selection configuration
        rng: Random source
    """

    bank: List[StructuredQuestion]
    blueprint: Optional[PaperBlueprint]
    config: SelectionConfig
    rng: SeededRandom

    # Internal state
    _plans: List[SelectionPlan] = field(init=False, default_factory=list)
    _used_numbers: Set[str] = field(init=False, default_factory=set)
    _ledger: Dict[Category, CategoryQuota] = field(init=False, default_factory=dict)
    _current_marks: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        numbers = [q.number for q in self.bank]
        if len(numbers) != len(set(numbers)):
            raise SelectionError("Question bank contains duplicate question numbers")

    def run(self) -> SelectionResult:
        """
        Execute selection.

        Returns:
            SelectionResult with applied plans and final ledger
        """
        self._plans = []
        self._used_numbers = set()
        self._ledger = init_quotas(self.blueprint)
        self._current_marks = 0

        order = shuffled(self.bank, self.rng)
        logger.debug(f"Shuffled order: {[q.number for q in order]}")

        # Pass 1: satisfy category minimums
        if self._ledger:
            for question in order:
                if self._target_reached:
                    break
                if is_unmet(self._ledger, question.category):
                    self._apply(question)
            for category in unmet_categories(self._ledger):
                quota = self._ledger[category]
                logger.warning(
                    f"Quota for {category} not met after pass 1: "
                    f"{quota.allocated}/{quota.needed} marks"
                )

        # Pass 2: greedy fill
        for question in order:
            if self._target_reached:
                break
            if question.number not in self._used_numbers:
                self._apply(question)

        if not self._target_reached:
            if self.config.allow_auto_fill:
                self._auto_fill()
            else:
                logger.warning(
                    f"Bank exhausted at {self._current_marks}/{self.config.target_marks} "
                    f"marks and auto-fill is disabled"
                )

        result = SelectionResult(
            plans=tuple(self._plans),
            target_marks=self.config.target_marks,
            quotas=dict(self._ledger),
        )
        logger.info(
            f"Selected {len(result.question_ids)} questions "
            f"(+{result.filler_count} filler), "
            f"{result.total_marks}/{result.target_marks} marks"
        )
        return result

    @property
    def _target_reached(self) -> bool:
        return self._current_marks >= self.config.target_marks

    def _apply(self, question: StructuredQuestion) -> None:
        """Apply one question; questions yielding no parts are not recorded."""
        if self._target_reached or question.number in self._used_numbers:
            return
        remaining = self.config.target_marks - self._current_marks
        parts = apply_parts(question, remaining)
        if not parts:
            return
        plan = SelectionPlan(
            question=question,
            display_number=str(len(self._plans) + 1),
            parts=parts,
        )
        self._plans.append(plan)
        self._used_numbers.add(question.number)
        self._current_marks += plan.marks
        self._ledger = allocate(self._ledger, question.category, plan.marks)
        logger.debug(
            f"Applied bank Q{question.number} as Q{plan.display_number} "
            f"({question.category}): {plan.marks}/{question.total_marks} marks"
            + (" [truncated]" if plan.is_truncated else "")
        )

    def _auto_fill(self) -> None:
        """Append synthetic filler items until the target is met."""
        filler_count = 0
        while not self._target_reached:
            deficit = self.config.target_marks - self._current_marks
            marks = self.config.filler_marks_for(deficit)
            display_number = str(len(self._plans) + 1)
            part = QuestionPart(FILLER_TEXT, marks=marks)
            filler = StructuredQuestion(
                number=f"auto-{display_number}",
                category=Category.MIXED,
                parts=(part,),
            )
            self._plans.append(SelectionPlan(
                question=filler,
                display_number=display_number,
                parts=(AppliedPart(part, marks),),
                is_filler=True,
            ))
            self._current_marks += marks
            filler_count += 1
        logger.info(f"Auto-filled {filler_count} items to reach {self.config.target_marks} marks")


def select_mcq(bank: Sequence[MCQItem], count: int, rng: SeededRandom) -> Tuple[MCQItem, ...]:
    """
    Shuffle the multiple choice bank and take the first count items.

    Args:
        bank: MCQ items (never mutated)
        count: Items wanted; capped at the bank size
        rng: Random source for the shuffle

    Returns:
        Selected items in paper order
    """
    if count < 0:
        raise SelectionError(f"count must be non-negative: {count}")
    pool = shuffled(bank, rng)
    if count > len(pool):
        logger.warning(f"Requested {count} MCQ items but bank holds {len(pool)}")
    selected = tuple(pool[:count])
    logger.info(f"Selected {len(selected)} MCQ items")
    return selected

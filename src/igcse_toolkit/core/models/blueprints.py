"""
Module: blueprints

Purpose:
    Per-paper specification of the total target marks and the ordered
    category minimums that must be met before generic filling begins.

Key Classes:
    - BlueprintCategory: (category, minimum marks) pair
    - PaperBlueprint: Paper number, total target, ordered categories

Dependencies:
    - dataclasses (std)
    - .questions.Category

Used By:
    - igcse_toolkit.bank.blueprints: Static registry
    - builder.selection.quota: Quota ledger initialisation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .questions import Category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlueprintCategory:
    """Minimum marks to allocate from one category."""

    name: Category
    min_marks: int

    def __post_init__(self) -> None:
        if self.min_marks < 0:
            raise ValueError(f"min_marks cannot be negative: {self.min_marks}")


@dataclass(frozen=True)
class PaperBlueprint:
    """
    Blueprint for one paper (immutable).

    Attributes:
        paper: Paper number as a string ("2".."6")
        total_marks: Target total marks
        categories: Ordered category minimums

    Invariants:
        - total_marks > 0
        - quota_total <= total_marks is expected; a violation is logged,
          not raised, because pass-2 filling absorbs any shortfall

    Example:
        >>> bp = PaperBlueprint("5", 60, (BlueprintCategory(Category.PRACTICAL_SKILLS, 60),))
        >>> bp.quota_total
        60
    """

    paper: str
    total_marks: int
    categories: Tuple[BlueprintCategory, ...]

    def __post_init__(self) -> None:
        if self.total_marks <= 0:
            raise ValueError(f"total_marks must be positive: {self.total_marks}")
        names = [c.name for c in self.categories]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate categories in blueprint for paper {self.paper}")
        if self.quota_total > self.total_marks:
            logger.warning(
                f"Blueprint for paper {self.paper} asks for {self.quota_total} "
                f"category marks but totals {self.total_marks}"
            )

    @property
    def quota_total(self) -> int:
        """Sum of category minimums."""
        return sum(c.min_marks for c in self.categories)

    def minimum_for(self, category: Category) -> int:
        """Minimum marks for a category (0 if not listed)."""
        for entry in self.categories:
            if entry.name == category:
                return entry.min_marks
        return 0

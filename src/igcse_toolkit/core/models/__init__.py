"""
Core data models.

All models are frozen dataclasses. Mark totals are always calculated from
parts or applied parts, never stored.
"""

from .questions import Category, PartKind, QuestionPart, StructuredQuestion, MCQItem
from .blueprints import BlueprintCategory, PaperBlueprint
from .paper_config import QuestionPaperConfig
from .selection import (
    AppliedPart,
    CategoryQuota,
    MarkBreakdownEntry,
    SelectionPlan,
    SelectionResult,
)

__all__ = [
    "Category",
    "PartKind",
    "QuestionPart",
    "StructuredQuestion",
    "MCQItem",
    "BlueprintCategory",
    "PaperBlueprint",
    "QuestionPaperConfig",
    "AppliedPart",
    "CategoryQuota",
    "MarkBreakdownEntry",
    "SelectionPlan",
    "SelectionResult",
]

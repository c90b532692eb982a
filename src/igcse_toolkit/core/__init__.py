"""
IGCSE Toolkit Core Package

Shared data models used by the banks, the selector, the layout engine and
the auditor.

**DESIGN RULES:**

1. **Immutable Data Models**
   - Bank questions are frozen; truncation produces a SelectionPlan, the
     bank entry is never touched.

2. **Calculated Marks (Never Stored)**
   - `StructuredQuestion.total_marks`, `SelectionPlan.marks` and
     `SelectionResult.total_marks` are always summed from parts.
"""

from .models import (
    Category,
    PartKind,
    QuestionPart,
    StructuredQuestion,
    MCQItem,
    PaperBlueprint,
    QuestionPaperConfig,
)
from .models.selection import SelectionPlan, SelectionResult

__all__ = [
    "Category",
    "PartKind",
    "QuestionPart",
    "StructuredQuestion",
    "MCQItem",
    "PaperBlueprint",
    "QuestionPaperConfig",
    "SelectionPlan",
    "SelectionResult",
]

"""
Module: questions

Purpose:
    Provides the question bank data structures: structured (part-based)
    questions for papers 2-6 and multiple-choice items for paper 1.
    Bank entries are immutable; marks are always calculated from parts.

Key Classes:
    - Category: Fixed enumeration of question categories
    - PartKind: line / diagram / table / graph
    - QuestionPart: One line of a structured question
    - StructuredQuestion: Categorised, ordered list of parts
    - MCQItem: Four-option multiple choice item

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - igcse_toolkit.bank: Static question banks
    - core.models.selection.SelectionPlan
    - builder.selection.selector
    - builder.layout.engine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Category(str, Enum):
    """Question category used for blueprint quotas and section headings."""
    BIOLOGY = "Biology"
    CHEMISTRY = "Chemistry"
    PHYSICS = "Physics"
    PRACTICAL_SKILLS = "Practical Skills"
    PLANNING = "Planning"
    ANALYSIS_EVALUATION = "Analysis & Evaluation"
    MIXED = "Mixed"

    def __str__(self) -> str:
        return self.value


class PartKind(str, Enum):
    """Type of structured question part."""
    LINE = "line"        # Text, optionally with marks and answer space
    DIAGRAM = "diagram"  # Named drawing routine
    TABLE = "table"      # Named data table
    GRAPH = "graph"      # Named graph

    def __str__(self) -> str:
        return self.value

    @property
    def is_visual(self) -> bool:
        """True for parts rendered by the drawing library."""
        return self is not PartKind.LINE


@dataclass(frozen=True, slots=True)
class QuestionPart:
    """
    A single part (line) of a structured question.

    Attributes:
        text: Part text. For visual parts this is a caption that is not printed.
        marks: Declared marks; None or 0 means no mark annotation and no answer space
        kind: line, diagram, table or graph
        ref_id: Drawing routine identifier (required for visual kinds)

    Invariants:
        - marks is None or marks >= 0
        - visual kinds carry a ref_id

    Example:
        >>> part = QuestionPart("State Ohm's law.", marks=2)
        >>> part.mark_value
        2
        >>> QuestionPart("Simple circuit", kind=PartKind.DIAGRAM, ref_id="simple_circuit").is_visual
        True
    """

    text: str
    marks: Optional[int] = None
    kind: PartKind = PartKind.LINE
    ref_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate part on construction."""
        if self.marks is not None and self.marks < 0:
            raise ValueError(f"Part marks cannot be negative: {self.marks}")
        if self.kind.is_visual and not self.ref_id:
            raise ValueError(f"{self.kind} part requires a ref_id: {self.text!r}")

    @property
    def mark_value(self) -> int:
        """Declared marks with absence treated as zero."""
        return self.marks or 0

    @property
    def is_visual(self) -> bool:
        return self.kind.is_visual


@dataclass(frozen=True)
class StructuredQuestion:
    """
    Multi-part question from a structured bank (immutable).

    The bank copy is never mutated; truncation happens on a
    SelectionPlan at assembly time.

    Attributes:
        number: Stable question number within its bank (used for de-duplication)
        category: Question category
        parts: Ordered parts

    Example:
        >>> q = StructuredQuestion("7", Category.PHYSICS, (
        ...     QuestionPart("State Newton's first law.", marks=2),
        ...     QuestionPart("Calculate average speed.", marks=2),
        ... ))
        >>> q.total_marks
        4
    """

    number: str
    category: Category
    parts: Tuple[QuestionPart, ...]

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.number:
            raise ValueError("Question number must not be empty")
        if not self.parts:
            raise ValueError(f"Question {self.number} has no parts")

    @property
    def id(self) -> str:
        """Stable identifier (alias of number)."""
        return self.number

    @property
    def total_marks(self) -> int:
        """Sum of declared part marks. Always calculated, never stored."""
        return sum(p.mark_value for p in self.parts)


@dataclass(frozen=True)
class MCQItem:
    """
    Multiple choice item for paper 1 (immutable).

    Attributes:
        id: Stable identifier like "bio_cell_membrane"
        subject: Biology, Chemistry or Physics
        question: Question stem
        options: Exactly four options, already lettered ("A  ...")
        diagram: Optional diagram identifier from the drawing catalogue
        marks: Marks for the item (1 on every paper 1 item)
    """

    id: str
    subject: Category
    question: str
    options: Tuple[str, str, str, str]
    diagram: Optional[str] = None
    marks: int = 1

    def __post_init__(self) -> None:
        if len(self.options) != 4:
            raise ValueError(f"MCQ {self.id} must have 4 options, got {len(self.options)}")
        if self.marks < 0:
            raise ValueError(f"MCQ {self.id} marks cannot be negative: {self.marks}")

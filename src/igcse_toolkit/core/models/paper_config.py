"""
Module: paper_config

Purpose:
    Immutable input to a single paper generation run, supplied by the
    surrounding application.

Key Classes:
    - QuestionPaperConfig: Paper number, variant, session, year, targets

Dependencies:
    - dataclasses (std)

Used By:
    - builder.controller: PaperAssembler.generate_paper()
    - common.papers: paper_code(), paper_filename()
    - builder.output.preview: Cover text
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

Difficulty = Literal["foundation", "higher"]

DEFAULT_SUBJECT_CODE = "0653"


@dataclass(frozen=True)
class QuestionPaperConfig:
    """
    Configuration for one generated paper (immutable).

    An unknown paper number is a configuration gap, not an error: the
    generator falls back to default metadata and an empty question set.

    Attributes:
        paper_number: "1".."6"
        variant: Variant digit like "2"
        session: Session code like "m" or "m25"
        year: Four digit year like "2025"
        duration: Minutes; None uses the paper metadata table
        total_marks: Target marks; None uses the paper metadata table
        subjects: Subjects covered (carried for the caller; banks are fixed)
        difficulty: "foundation" or "higher"
        question_types: Free-form question type labels
        subject_code: Syllabus code printed in headers and filenames

    Example:
        >>> config = QuestionPaperConfig(paper_number="2", variant="1", session="m", year="2025")
        >>> config.year_suffix
        '25'
    """

    paper_number: str
    variant: str = "1"
    session: str = "m"
    year: str = "2025"
    duration: Optional[int] = None
    total_marks: Optional[int] = None
    subjects: Tuple[str, ...] = ("Biology", "Chemistry", "Physics")
    difficulty: Difficulty = "foundation"
    question_types: Tuple[str, ...] = field(default_factory=tuple)
    subject_code: str = DEFAULT_SUBJECT_CODE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Accept ints for the code-like fields
        for name in ("paper_number", "variant", "year"):
            object.__setattr__(self, name, str(getattr(self, name)).strip())
        if self.total_marks is not None and self.total_marks <= 0:
            raise ValueError(f"total_marks must be positive: {self.total_marks}")
        if self.duration is not None and self.duration <= 0:
            raise ValueError(f"duration must be positive: {self.duration}")
        if self.difficulty not in ("foundation", "higher"):
            raise ValueError(f"difficulty must be foundation or higher: {self.difficulty!r}")
        if not self.subject_code:
            raise ValueError("subject_code must not be empty")

    @property
    def year_suffix(self) -> str:
        """Last two digits of the year."""
        return self.year[-2:]

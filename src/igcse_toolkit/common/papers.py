"""
Module: common.papers

Purpose:
    Static per-paper metadata (duration, marks, title, question style) and
    the naming conventions shared by the document header, the preview and
    the output filename.

Key Functions:
    - get_paper_info(): Metadata for a paper number (with fallback)
    - paper_code(): "0653/22" style code
    - paper_filename(): "0653_m25_qp_22.pdf" style filename

Key Classes:
    - PaperNumber: Enumeration of the six papers
    - PaperInfo: Metadata row

Dependencies:
    - core.models.paper_config: QuestionPaperConfig

Used By:
    - builder.controller: Targets and dispatch
    - builder.layout.cover: Header block
    - builder.output.preview: Cover text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from igcse_toolkit.core.models.paper_config import QuestionPaperConfig

logger = logging.getLogger(__name__)

__all__ = [
    "PaperNumber",
    "PaperInfo",
    "PAPER_INFO",
    "DEFAULT_PAPER_INFO",
    "SUBJECT_TITLE",
    "get_paper_info",
    "resolve_target_marks",
    "resolve_duration",
    "paper_code",
    "session_code",
    "paper_filename",
]

SUBJECT_TITLE = "SCIENCE – COMBINED"


class PaperNumber(str, Enum):
    """The six examination components."""
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: object) -> Optional[PaperNumber]:
        """
        Parse a paper number, returning None for unknown values.

        Example:
            >>> PaperNumber.parse("3")
            <PaperNumber.THREE: '3'>
            >>> PaperNumber.parse("9") is None
            True
        """
        try:
            return cls(str(value).strip())
        except ValueError:
            return None

    @property
    def is_practical(self) -> bool:
        """Papers 5 and 6 are practical papers (no auto-fill)."""
        return self in (PaperNumber.FIVE, PaperNumber.SIX)

    @property
    def is_multiple_choice(self) -> bool:
        return self is PaperNumber.ONE


@dataclass(frozen=True)
class PaperInfo:
    """
    Fixed metadata for one paper.

    Attributes:
        duration: Minutes
        total_marks: Marks available
        title: Short title ("Core Theory")
        question_types: Question style description
        description: One-line description for previews
    """

    duration: int
    total_marks: int
    title: str
    question_types: str
    description: str


PAPER_INFO: Dict[PaperNumber, PaperInfo] = {
    PaperNumber.ONE: PaperInfo(
        45, 40, "Multiple Choice", "Multiple Choice Questions",
        "40 multiple choice questions covering all three sciences",
    ),
    PaperNumber.TWO: PaperInfo(
        75, 80, "Core Theory", "Short Answer & Structured Questions",
        "Core curriculum questions for Foundation and Higher tiers",
    ),
    PaperNumber.THREE: PaperInfo(
        75, 80, "Extended Theory", "Extended Structured Questions",
        "Extended curriculum questions requiring detailed responses",
    ),
    PaperNumber.FOUR: PaperInfo(
        105, 120, "Coursework Alternative", "Extended Response Questions",
        "Alternative to coursework with comprehensive coverage",
    ),
    PaperNumber.FIVE: PaperInfo(
        75, 60, "Practical Test", "Practical Skills Assessment",
        "Laboratory-based practical skills assessment",
    ),
    PaperNumber.SIX: PaperInfo(
        60, 60, "Alternative to Practical", "Paper-based Practical Questions",
        "Paper-based alternative to practical assessment",
    ),
}

DEFAULT_PAPER_INFO = PaperInfo(
    60, 60, "Unknown", "Mixed Questions", "Standard examination paper",
)


def get_paper_info(paper_number: object) -> PaperInfo:
    """
    Get metadata for a paper, falling back to defaults for unknown papers.

    Args:
        paper_number: Paper number as string, int or PaperNumber

    Returns:
        PaperInfo (DEFAULT_PAPER_INFO when unknown)

    Example:
        >>> get_paper_info("4").duration
        105
        >>> get_paper_info("9").total_marks
        60
    """
    paper = PaperNumber.parse(paper_number)
    if paper is None:
        logger.warning(f"Unknown paper number {paper_number!r}, using default metadata")
        return DEFAULT_PAPER_INFO
    return PAPER_INFO[paper]


def resolve_target_marks(config: QuestionPaperConfig) -> int:
    """Target marks: explicit config value, else the paper's fixed total."""
    if config.total_marks is not None:
        return config.total_marks
    return get_paper_info(config.paper_number).total_marks


def resolve_duration(config: QuestionPaperConfig) -> int:
    """Duration in minutes: explicit config value, else the paper's fixed duration."""
    if config.duration is not None:
        return config.duration
    return get_paper_info(config.paper_number).duration


def paper_code(config: QuestionPaperConfig) -> str:
    """
    Component code printed in headers.

    Example:
        >>> paper_code(QuestionPaperConfig(paper_number="2", variant="2"))
        '0653/22'
    """
    return f"{config.subject_code}/{config.paper_number}{config.variant}"


def session_code(config: QuestionPaperConfig) -> str:
    """
    Session plus two digit year ("m25").

    A session that already ends in two digits is used as-is.
    """
    session = config.session.strip().lower()
    if len(session) >= 2 and session[-2:].isdigit():
        return session
    return f"{session}{config.year_suffix}"


def paper_filename(config: QuestionPaperConfig) -> str:
    """
    Deterministic download filename.

    Format: <subjectCode>_<session><yy>_qp_<paper><variant>.pdf

    Example:
        >>> paper_filename(QuestionPaperConfig(paper_number="1", variant="2", session="m", year="2025"))
        '0653_m25_qp_12.pdf'
    """
    return (
        f"{config.subject_code}_{session_code(config)}_qp_"
        f"{config.paper_number}{config.variant}.pdf"
    )

"""
Static question banks for the six combined science papers.

Banks are immutable module-level tuples. Lookups never fail: an unknown
paper yields an empty bank and no blueprint.
"""

from __future__ import annotations

from typing import Dict, Tuple

from igcse_toolkit.core.models import MCQItem, StructuredQuestion

from .blueprints import PAPER_BLUEPRINTS, get_blueprint
from .paper1_mcq import PAPER1_MCQ_BANK
from .paper2_core import PAPER2_QUESTIONS
from .paper3_extended import PAPER3_QUESTIONS
from .paper4_coursework_alt import PAPER4_QUESTIONS
from .paper5_practical import PAPER5_QUESTIONS
from .paper6_alt_practical import PAPER6_QUESTIONS

STRUCTURED_BANKS: Dict[str, Tuple[StructuredQuestion, ...]] = {
    "2": PAPER2_QUESTIONS,
    "3": PAPER3_QUESTIONS,
    "4": PAPER4_QUESTIONS,
    "5": PAPER5_QUESTIONS,
    "6": PAPER6_QUESTIONS,
}


def get_mcq_bank() -> Tuple[MCQItem, ...]:
    """Paper 1 multiple choice items."""
    return PAPER1_MCQ_BANK


def get_structured_bank(paper: object) -> Tuple[StructuredQuestion, ...]:
    """Structured questions for papers 2-6 (empty tuple otherwise)."""
    return STRUCTURED_BANKS.get(str(paper).strip(), ())


__all__ = [
    "PAPER1_MCQ_BANK",
    "PAPER2_QUESTIONS",
    "PAPER3_QUESTIONS",
    "PAPER4_QUESTIONS",
    "PAPER5_QUESTIONS",
    "PAPER6_QUESTIONS",
    "PAPER_BLUEPRINTS",
    "STRUCTURED_BANKS",
    "get_blueprint",
    "get_mcq_bank",
    "get_structured_bank",
]

"""
Module: bank.blueprints

Purpose:
    Static registry of per-paper mark blueprints. Paper 1 has no
    blueprint: it is filled by item count rather than category quotas.

Key Functions:
    - get_blueprint(): Blueprint lookup by paper number (None on a gap)

Dependencies:
    - core.models.blueprints: PaperBlueprint, BlueprintCategory

Used By:
    - builder.controller: Structured paper handlers
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from igcse_toolkit.core.models import BlueprintCategory, Category, PaperBlueprint

logger = logging.getLogger(__name__)


def _blueprint(paper: str, total: int, *minimums: tuple) -> PaperBlueprint:
    return PaperBlueprint(
        paper=paper,
        total_marks=total,
        categories=tuple(BlueprintCategory(name, marks) for name, marks in minimums),
    )


PAPER_BLUEPRINTS: Dict[str, PaperBlueprint] = {
    "2": _blueprint("2", 80,
        (Category.BIOLOGY, 26), (Category.CHEMISTRY, 26), (Category.PHYSICS, 26)),
    "3": _blueprint("3", 80,
        (Category.BIOLOGY, 26), (Category.CHEMISTRY, 26), (Category.PHYSICS, 26)),
    "4": _blueprint("4", 120,
        (Category.PLANNING, 40), (Category.PRACTICAL_SKILLS, 40), (Category.ANALYSIS_EVALUATION, 30)),
    "5": _blueprint("5", 60, (Category.PRACTICAL_SKILLS, 60)),
    "6": _blueprint("6", 60, (Category.PRACTICAL_SKILLS, 60)),
}


def get_blueprint(paper: object) -> Optional[PaperBlueprint]:
    """
    Look up the blueprint for a paper.

    Args:
        paper: Paper number as string, int or PaperNumber

    Returns:
        PaperBlueprint, or None when the paper has no blueprint

    Example:
        >>> get_blueprint("4").quota_total
        110
        >>> get_blueprint("1") is None
        True
    """
    blueprint = PAPER_BLUEPRINTS.get(str(paper).strip())
    if blueprint is None:
        logger.debug(f"No blueprint registered for paper {paper!r}")
    return blueprint

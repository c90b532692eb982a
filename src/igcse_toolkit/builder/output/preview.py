"""
Module: builder.output.preview

Purpose:
    Plain-text renditions for preview surfaces: the front page of a
    paper and a short excerpt of the first structured question. Uses
    the same metadata table as the PDF header.

Key Functions:
    - render_cover_text(): Front page as text
    - render_structured_preview(): First question of a bank, abbreviated
"""

from __future__ import annotations

from typing import List, Optional

from igcse_toolkit.bank import get_structured_bank
from igcse_toolkit.builder.layout.cover import (
    BOARD_NAME,
    INSTRUCTIONS,
    MATERIALS,
    QUALIFICATION,
    page_count_text,
    session_label,
)
from igcse_toolkit.common.papers import (
    SUBJECT_TITLE,
    get_paper_info,
    paper_code,
    resolve_duration,
    resolve_target_marks,
)
from igcse_toolkit.core.models import QuestionPaperConfig

PREVIEW_WIDTH = 78


def _two_column(left: str, right: str, width: int = PREVIEW_WIDTH) -> str:
    gap = max(1, width - len(left) - len(right))
    return f"{left}{' ' * gap}{right}"


def render_cover_text(config: QuestionPaperConfig, page_count: Optional[int] = None) -> str:
    """
    Front page as plain text.

    Args:
        config: Paper configuration
        page_count: Printed pages, when known (line omitted otherwise)

    Returns:
        Multi-line string

    Example:
        >>> print(render_cover_text(QuestionPaperConfig(paper_number="2", variant="1")))
        CAMBRIDGE INTERNATIONAL EXAMINATIONS
        ...
    """
    lines: List[str] = [
        BOARD_NAME,
        QUALIFICATION,
        "",
        _two_column(SUBJECT_TITLE, paper_code(config)),
        _two_column(f"Paper {config.paper_number}", session_label(config)),
        _two_column(get_paper_info(config.paper_number).title, f"{resolve_duration(config)} minutes"),
        "",
        *MATERIALS,
        "",
        "READ THESE INSTRUCTIONS FIRST",
        "",
        *INSTRUCTIONS,
        "",
        "For Examiner's Use",
        f"Total: {resolve_target_marks(config)}",
    ]
    if page_count is not None:
        lines.extend(["", page_count_text(page_count)])
    lines.extend(["", _two_column(f"© UCLES {config.year}", "[Turn over")])
    return "\n".join(lines)


def render_structured_preview(paper_number: object, max_parts: int = 4) -> str:
    """
    First question of a structured bank with its first few parts.

    Returns:
        Text excerpt, or "No preview available." for papers without a bank
    """
    bank = get_structured_bank(paper_number)
    if not bank:
        return "No preview available."
    question = bank[0]
    lines = [f"Question {question.number}"]
    for part in question.parts[:max_parts]:
        suffix = f"  [{part.marks}]" if part.marks else ""
        lines.append(f"  {part.text}{suffix}")
    if len(question.parts) > max_parts:
        lines.append("  ...more parts in full paper")
    return "\n".join(lines)

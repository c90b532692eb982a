"""Shared helpers: paper metadata and naming conventions."""

from .papers import (
    PaperNumber,
    PaperInfo,
    PAPER_INFO,
    get_paper_info,
    paper_code,
    paper_filename,
)

__all__ = [
    "PaperNumber",
    "PaperInfo",
    "PAPER_INFO",
    "get_paper_info",
    "paper_code",
    "paper_filename",
]

"""
Module: builder

Purpose:
    Question paper builder: selection, layout, drawing, rendering and
    audit, orchestrated by the controller.

Key Functions:
    - generate_paper(): Build a paper from a QuestionPaperConfig
    - generate_paper_async(): Awaitable variant

Key Classes:
    - PaperAssembler: One run at a time per instance
    - GeneratedPaper: PDF bytes, audit report and metadata
"""

from .controller import (
    GeneratedPaper,
    PaperAssembler,
    PaperGenerationError,
    generate_paper,
    generate_paper_async,
)

__all__ = [
    "GeneratedPaper",
    "PaperAssembler",
    "PaperGenerationError",
    "generate_paper",
    "generate_paper_async",
]

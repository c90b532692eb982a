"""
Module: builder.output

Purpose:
    Output stage: PDF rendering of the layout display list, the mark
    audit and plain-text previews.

Key Functions:
    - render_to_pdf(): LayoutResult -> PDF bytes
    - audit_marks(): Reconcile breakdown against target
    - render_cover_text(): Front page preview
"""

from .audit import AuditReport, AuditRow, audit_marks, log_audit, mark_status
from .preview import render_cover_text, render_structured_preview
from .renderer import render_to_pdf, write_pdf

__all__ = [
    "AuditReport",
    "AuditRow",
    "audit_marks",
    "log_audit",
    "mark_status",
    "render_cover_text",
    "render_structured_preview",
    "render_to_pdf",
    "write_pdf",
]

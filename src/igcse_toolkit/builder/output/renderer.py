"""
Module: builder.output.renderer

Purpose:
    Render a LayoutResult to PDF using ReportLab. Each PagePlan becomes
    one PDF page; its display list is replayed in order after converting
    top-down millimetre coordinates to bottom-up points.

Key Functions:
    - render_to_pdf(): LayoutResult -> PDF bytes
    - write_pdf(): LayoutResult -> PDF file

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult, PagePlan, DrawOps

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from igcse_toolkit.builder.layout.models import (
    CircleOp,
    DrawOp,
    EllipseOp,
    LayoutResult,
    LineOp,
    PagePlan,
    RectOp,
    TextOp,
)

logger = logging.getLogger(__name__)

LINE_WIDTH_MM = 0.2
PRODUCER = "IGCSE Toolkit"


def render_to_pdf(
    layout: LayoutResult,
    *,
    title: Optional[str] = None,
    subject: Optional[str] = None,
) -> bytes:
    """
    Render layout result to PDF bytes.

    The canvas is created in invariant mode, so an identical layout
    always produces identical bytes.

    Args:
        layout: Display lists from the layout engine
        title: PDF document title
        subject: PDF document subject

    Returns:
        PDF document as bytes

    Example:
        >>> pdf = render_to_pdf(layout, title="0653/22")
        >>> pdf[:5]
        b'%PDF-'
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    page_size = (layout.page_width * mm, layout.page_height * mm)
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=page_size, invariant=1)
    c.setCreator(PRODUCER)
    if title:
        c.setTitle(title)
    if subject:
        c.setSubject(subject)

    for page in layout.pages:
        _render_page(c, page, layout.page_height * mm)
        c.showPage()

    c.save()
    pdf = buffer.getvalue()
    logger.info(f"Rendered {layout.page_count} pages ({len(pdf)} bytes)")
    return pdf


def write_pdf(layout: LayoutResult, output_path: Path, **kwargs) -> Path:
    """Render and write to output_path, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(render_to_pdf(layout, **kwargs))
    logger.info(f"Wrote PDF: {output_path}")
    return output_path


def _render_page(c: canvas.Canvas, page: PagePlan, page_height_pt: float) -> None:
    """
    Replay one page's operations.

    Args:
        c: ReportLab canvas
        page: Page display list
        page_height_pt: Page height in points (for the y flip)
    """
    c.setLineWidth(LINE_WIDTH_MM * mm)
    c.setStrokeColorRGB(0, 0, 0)
    for op in page.ops:
        _draw_op(c, op, page_height_pt)


def _draw_op(c: canvas.Canvas, op: DrawOp, page_height_pt: float) -> None:
    if isinstance(op, TextOp):
        c.setFillColorRGB(0, 0, 0)
        c.setFont(op.font, op.size)
        x = op.x * mm
        y = _transform_y(page_height_pt, op.y)
        if op.align == "right":
            c.drawRightString(x, y, op.text)
        elif op.align == "center":
            c.drawCentredString(x, y, op.text)
        else:
            c.drawString(x, y, op.text)
    elif isinstance(op, LineOp):
        c.line(
            op.x1 * mm, _transform_y(page_height_pt, op.y1),
            op.x2 * mm, _transform_y(page_height_pt, op.y2),
        )
    elif isinstance(op, RectOp):
        _set_fill(c, op.fill)
        c.rect(
            op.x * mm,
            _transform_y(page_height_pt, op.y + op.height),
            op.width * mm,
            op.height * mm,
            stroke=int(op.stroke),
            fill=int(op.fill is not None),
        )
    elif isinstance(op, EllipseOp):
        _set_fill(c, op.fill)
        c.ellipse(
            (op.cx - op.rx) * mm, _transform_y(page_height_pt, op.cy + op.ry),
            (op.cx + op.rx) * mm, _transform_y(page_height_pt, op.cy - op.ry),
            stroke=int(op.stroke),
            fill=int(op.fill is not None),
        )
    elif isinstance(op, CircleOp):
        _set_fill(c, op.fill)
        c.circle(
            op.cx * mm, _transform_y(page_height_pt, op.cy), op.r * mm,
            stroke=int(op.stroke),
            fill=int(op.fill is not None),
        )
    else:
        raise TypeError(f"Unsupported draw operation: {type(op).__name__}")


def _set_fill(c: canvas.Canvas, rgb) -> None:
    if rgb is not None:
        r, g, b = rgb
        c.setFillColorRGB(r / 255, g / 255, b / 255)


def _transform_y(page_height_pt: float, y_mm: float) -> float:
    """
    Convert a top-down millimetre y to a bottom-up point y.

    Args:
        page_height_pt: Page height in points
        y_mm: Distance from the top edge in millimetres

    Returns:
        Distance from the bottom edge in points
    """
    return page_height_pt - y_mm * mm

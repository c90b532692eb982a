"""
Module: builder.controller

Purpose:
    Orchestrate the complete paper generation pipeline.
    Cover → Select → Lay out → Summary → Footers → Render → Audit

Key Functions:
    - generate_paper(): Main entry point, fresh assembler per call
    - generate_paper_async(): generate_paper() in a worker thread

Key Classes:
    - PaperAssembler: Owns one run at a time
    - GeneratedPaper: PDF bytes, audit and metadata
    - PaperGenerationError: Misuse of an assembler or failed save

Dependencies:
    - bank: Question banks and blueprints
    - builder.selection: Seeded shuffling and mark-constrained selection
    - builder.layout: Cover, question layout, summary and footers
    - builder.output: PDF rendering and mark audit

Used By:
    - External callers supplying a QuestionPaperConfig
"""

from __future__ import annotations

import asyncio
import json
import logging
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set, Tuple

from igcse_toolkit.bank import get_blueprint, get_mcq_bank, get_structured_bank
from igcse_toolkit.common.papers import (
    PaperNumber,
    get_paper_info,
    paper_code,
    paper_filename,
    resolve_duration,
    resolve_target_marks,
)
from igcse_toolkit.core.models import (
    Category,
    MarkBreakdownEntry,
    QuestionPaperConfig,
    SelectionResult,
)

from .layout import (
    LayoutConfig,
    LayoutCursor,
    LayoutEngine,
    PageCanvas,
    render_cover,
    write_page_count,
)
from .layout.cover import session_label
from .output.audit import AuditReport, audit_marks, log_audit, mark_status
from .output.renderer import render_to_pdf
from .selection import SeededRandom, SelectionConfig, select_mcq, select_structured

logger = logging.getLogger(__name__)


class PaperGenerationError(Exception):
    """Error during paper generation or saving."""
    pass


@dataclass(frozen=True)
class GeneratedPaper:
    """
    Complete generation result (immutable).

    Attributes:
        pdf: PDF document bytes
        filename: Download filename ("0653_m25_qp_22.pdf")
        config: Configuration used
        selected_ids: Bank ids in paper order (fillers excluded)
        breakdown: (display number, marks) per printed question
        audit: Mark audit, or None if auditing failed
        total_marks: Allocated marks
        target_marks: Target marks
        page_count: Number of pages
        metadata: JSON-serialisable run metadata
        warnings: Warnings collected during the run

    Example:
        >>> paper = generate_paper(QuestionPaperConfig(paper_number="2"), seed="demo")
        >>> paper.audit.status
        'OK'
        >>> paper.save(Path("output"))
        PosixPath('output/0653_m25_qp_21.pdf')
    """

    pdf: bytes
    filename: str
    config: QuestionPaperConfig
    selected_ids: Tuple[str, ...]
    breakdown: Tuple[MarkBreakdownEntry, ...]
    audit: Optional[AuditReport]
    total_marks: int
    target_marks: int
    page_count: int
    metadata: dict = field(default_factory=dict)
    warnings: Tuple[str, ...] = ()

    @property
    def audit_csv(self) -> Optional[str]:
        return self.audit.to_csv() if self.audit else None

    def save(self, output_dir: Path) -> Path:
        """
        Write the PDF, the audit CSV and the metadata JSON.

        Files share the PDF's stem: <stem>.pdf, <stem>_audit.csv,
        <stem>_metadata.json. The CSV is skipped when the audit failed.

        Args:
            output_dir: Target directory (created if missing)

        Returns:
            Path of the written PDF

        Raises:
            PaperGenerationError: If any file cannot be written
        """
        output_dir = Path(output_dir)
        pdf_path = output_dir / self.filename
        stem = pdf_path.stem
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            pdf_path.write_bytes(self.pdf)
            if self.audit is not None:
                (output_dir / f"{stem}_audit.csv").write_text(self.audit.to_csv() + "\n", encoding="utf-8")
            with open(output_dir / f"{stem}_metadata.json", "w", encoding="utf-8") as f:
                json.dump(self.metadata, f, indent=2)
        except OSError as e:
            raise PaperGenerationError(f"Failed to save paper to {output_dir}: {e}") from e
        logger.info(f"Saved {pdf_path}")
        return pdf_path


@dataclass
class _QuestionRun:
    """Outcome of a paper handler."""
    cursor: LayoutCursor
    breakdown: List[MarkBreakdownEntry]
    selected_ids: Tuple[str, ...] = ()
    selection: Optional[SelectionResult] = None


Handler = Callable[[LayoutEngine, LayoutCursor, QuestionPaperConfig, int, SeededRandom], _QuestionRun]


class PaperAssembler:
    """
    Builds one paper per generate_paper() call.

    Run state (cursor, display list, marks, used questions) lives only
    inside a call. One instance must not be used concurrently; a
    re-entrant call raises PaperGenerationError.

    Attributes:
        layout_config: Page geometry
        seed: Reproducibility seed, or None for a different paper each run
    """

    def __init__(self, layout_config: Optional[LayoutConfig] = None, seed: Optional[str] = None) -> None:
        self.layout_config = layout_config or LayoutConfig()
        self.seed = seed
        self._lock = threading.Lock()
        self._handlers: Dict[PaperNumber, Handler] = {
            PaperNumber.ONE: self._add_mcq_questions,
            PaperNumber.TWO: self._add_structured_questions,
            PaperNumber.THREE: self._add_structured_questions,
            PaperNumber.FOUR: self._add_structured_questions,
            PaperNumber.FIVE: self._add_structured_questions,
            PaperNumber.SIX: self._add_structured_questions,
        }

    def generate_paper(self, config: QuestionPaperConfig) -> GeneratedPaper:
        """
        Generate a complete paper.

        Args:
            config: Paper configuration

        Returns:
            GeneratedPaper with PDF bytes and the mark audit

        Raises:
            PaperGenerationError: If this assembler is already generating
        """
        if not self._lock.acquire(blocking=False):
            raise PaperGenerationError("PaperAssembler is already generating a paper")
        try:
            return self._generate(config)
        finally:
            self._lock.release()

    def _generate(self, config: QuestionPaperConfig) -> GeneratedPaper:
        start_time = time.perf_counter()
        warnings: List[str] = []
        target = resolve_target_marks(config)
        code = paper_code(config)
        paper = PaperNumber.parse(config.paper_number)

        logger.info(f"Starting paper {code} ({session_label(config)}) targeting {target} marks")

        rng = SeededRandom(self.seed)
        cfg = self.layout_config
        canvas = PageCanvas(cfg.page_width, cfg.page_height)
        engine = LayoutEngine(canvas, cfg, header_left=code, header_right=session_label(config))

        # 1. Front page
        cover = render_cover(engine, config)

        # 2. Questions
        handler = self._handlers.get(paper, self._add_no_questions) if paper else self._add_no_questions
        run = handler(engine, cover.cursor, config, target, rng)
        total = sum(entry.marks for entry in run.breakdown)
        logger.info(f"Laid out {len(run.breakdown)} questions, {total}/{target} marks")

        # 3. Summary page, footers, page count
        engine.render_mark_summary(run.cursor, run.breakdown, total)
        engine.render_footers(
            left_text=f"© UCLES {config.year}",
            center_text=code,
            status_line=f"Allocated marks: {total} / {target} ({mark_status(total, target)})",
        )
        write_page_count(canvas, cover, canvas.page_count)
        layout = canvas.build()
        warnings.extend(layout.warnings)

        # 4. Render
        pdf = render_to_pdf(
            layout,
            title=f"{code} {get_paper_info(config.paper_number).title}",
            subject=f"Question paper {session_label(config)}",
        )

        # 5. Audit (never aborts the finished document)
        audit: Optional[AuditReport] = None
        try:
            audit = audit_marks(run.breakdown, target)
            log_audit(audit)
            if not audit.is_ok:
                warnings.append(f"Mark audit: {audit.status}")
        except Exception as e:
            logger.exception("Mark audit failed")
            warnings.append(f"Mark audit failed: {e}")

        elapsed = time.perf_counter() - start_time
        logger.info(f"Paper generation completed in {elapsed:.2f}s")

        metadata = _build_metadata(config, self.seed, run, total, target, layout.page_count, audit)
        return GeneratedPaper(
            pdf=pdf,
            filename=paper_filename(config),
            config=config,
            selected_ids=run.selected_ids,
            breakdown=tuple(run.breakdown),
            audit=audit,
            total_marks=total,
            target_marks=target,
            page_count=layout.page_count,
            metadata=metadata,
            warnings=tuple(warnings),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Paper handlers
    # ─────────────────────────────────────────────────────────────────────────

    def _add_mcq_questions(
        self,
        engine: LayoutEngine,
        cursor: LayoutCursor,
        config: QuestionPaperConfig,
        target: int,
        rng: SeededRandom,
    ) -> _QuestionRun:
        """Paper 1: one item per mark, numbered from 1."""
        items = select_mcq(get_mcq_bank(), target, rng)
        breakdown: List[MarkBreakdownEntry] = []
        for number, item in enumerate(items, start=1):
            cursor = engine.render_mcq_item(cursor, number, item)
            breakdown.append(MarkBreakdownEntry(str(number), item.marks))
        return _QuestionRun(cursor, breakdown, tuple(item.id for item in items))

    def _add_structured_questions(
        self,
        engine: LayoutEngine,
        cursor: LayoutCursor,
        config: QuestionPaperConfig,
        target: int,
        rng: SeededRandom,
    ) -> _QuestionRun:
        """Papers 2-6: blueprint-driven selection, category headings, typesetting."""
        paper = PaperNumber(config.paper_number)
        blueprint = get_blueprint(paper)
        if blueprint is not None and blueprint.total_marks != target:
            logger.info(
                f"Target {target} differs from blueprint total {blueprint.total_marks} "
                f"for paper {paper}"
            )
        selection = select_structured(
            get_structured_bank(paper),
            blueprint,
            SelectionConfig(target_marks=target, allow_auto_fill=not paper.is_practical),
            rng,
        )

        headed: Set[Category] = set()
        for plan in selection.plans:
            category = plan.question.category
            if not plan.is_filler and category not in headed:
                cursor = engine.insert_category_heading(cursor, category)
                headed.add(category)
            cursor = engine.render_structured_question(cursor, plan)
        return _QuestionRun(cursor, list(selection.breakdown), selection.question_ids, selection)

    def _add_no_questions(
        self,
        engine: LayoutEngine,
        cursor: LayoutCursor,
        config: QuestionPaperConfig,
        target: int,
        rng: SeededRandom,
    ) -> _QuestionRun:
        """Fallback for an unknown paper number: empty question set."""
        logger.warning(f"No question handler for paper {config.paper_number!r}, paper has no questions")
        return _QuestionRun(cursor, [])


def generate_paper(
    config: QuestionPaperConfig,
    seed: Optional[str] = None,
    layout_config: Optional[LayoutConfig] = None,
) -> GeneratedPaper:
    """
    Generate a paper with a fresh assembler.

    Args:
        config: Paper configuration
        seed: Reproducibility seed; same seed and config give the same paper
        layout_config: Page geometry override

    Returns:
        GeneratedPaper

    Example:
        >>> paper = generate_paper(QuestionPaperConfig(paper_number="1", variant="2"), seed="reproducible")
        >>> paper.total_marks
        40
    """
    return PaperAssembler(layout_config=layout_config, seed=seed).generate_paper(config)


async def generate_paper_async(
    config: QuestionPaperConfig,
    seed: Optional[str] = None,
    layout_config: Optional[LayoutConfig] = None,
) -> GeneratedPaper:
    """Awaitable entry point; generation runs in a worker thread."""
    return await asyncio.to_thread(generate_paper, config, seed, layout_config)


def _build_metadata(
    config: QuestionPaperConfig,
    seed: Optional[str],
    run: _QuestionRun,
    total: int,
    target: int,
    page_count: int,
    audit: Optional[AuditReport],
) -> dict:
    """
    Build metadata dictionary for a generated paper.

    Returns:
        Metadata dictionary ready for JSON serialization
    """
    from datetime import datetime

    info = get_paper_info(config.paper_number)
    metadata = {
        "generated_at": datetime.now().isoformat(),
        "paper_code": paper_code(config),
        "paper_number": config.paper_number,
        "variant": config.variant,
        "session": config.session,
        "year": config.year,
        "title": info.title,
        "duration": resolve_duration(config),
        "target_marks": target,
        "actual_marks": total,
        "seed": seed,
        "page_count": page_count,
        "question_count": len(run.breakdown),
        "selected_ids": list(run.selected_ids),
        "breakdown": [{"number": e.number, "marks": e.marks} for e in run.breakdown],
        "audit": audit.to_dict() if audit else None,
    }
    if run.selection is not None:
        metadata["filler_count"] = run.selection.filler_count
        metadata["marks_per_category"] = {
            str(category): run.selection.marks_for(category)
            for category in {plan.question.category for plan in run.selection.plans if not plan.is_filler}
        }
        metadata["quotas"] = {
            str(category): {"needed": quota.needed, "allocated": quota.allocated}
            for category, quota in run.selection.quotas.items()
        }
    return metadata

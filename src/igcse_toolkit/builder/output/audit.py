"""
Module: builder.output.audit

Purpose:
    Mark audit: reconcile the recorded mark breakdown against the
    target total. Duplicate question numbers are consolidated, rows are
    sorted numerically and the run is classified OK, UNDER by N or
    OVER by N. Mismatches are reported, never raised.

Key Functions:
    - mark_status(): Classification string for (total, target)
    - audit_marks(): Build an AuditReport from a breakdown
    - log_audit(): Log the table (INFO) and any mismatch (WARNING)

Key Classes:
    - AuditRow: One consolidated question
    - AuditReport: Rows, recomputed total, target, status, CSV

Dependencies:
    - csv (std)
    - core.models: MarkBreakdownEntry

Used By:
    - builder.controller: Final pipeline step
"""

from __future__ import annotations

import csv
import io
import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from igcse_toolkit.core.models import MarkBreakdownEntry

logger = logging.getLogger(__name__)

CSV_HEADER = ("Question", "Marks")


def mark_status(total: int, target: int) -> str:
    """
    Classify an achieved total against a target.

    Example:
        >>> mark_status(80, 80)
        'OK'
        >>> mark_status(57, 60)
        'UNDER by 3'
        >>> mark_status(62, 60)
        'OVER by 2'
    """
    diff = target - total
    if diff == 0:
        return "OK"
    if diff > 0:
        return f"UNDER by {diff}"
    return f"OVER by {-diff}"


@dataclass(frozen=True)
class AuditRow:
    question: str
    marks: int


@dataclass(frozen=True)
class AuditReport:
    """
    Result of a mark audit (immutable).

    Attributes:
        rows: Consolidated rows in numeric question order
        total: Total recomputed from rows
        target: Declared target

    Example:
        >>> report = audit_marks([MarkBreakdownEntry("1", 3)], target=3)
        >>> report.status
        'OK'
    """

    rows: Tuple[AuditRow, ...]
    total: int
    target: int

    @property
    def difference(self) -> int:
        """Target minus total (positive when under)."""
        return self.target - self.total

    @property
    def status(self) -> str:
        return mark_status(self.total, self.target)

    @property
    def is_ok(self) -> bool:
        return self.difference == 0

    def to_csv(self) -> str:
        """Question,Marks rows then a Total row, newline separated."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for row in self.rows:
            writer.writerow((row.question, row.marks))
        writer.writerow(("Total", self.total))
        return buffer.getvalue().rstrip("\n")

    def to_dict(self) -> dict:
        return {
            "rows": [{"question": r.question, "marks": r.marks} for r in self.rows],
            "total": self.total,
            "target": self.target,
            "status": self.status,
        }


def _numeric_key(number: str) -> float:
    digits = re.sub(r"\D", "", number)
    return int(digits) if digits else math.inf


def audit_marks(breakdown: Iterable[MarkBreakdownEntry], target: int) -> AuditReport:
    """
    Consolidate a mark breakdown and compare it to a target.

    Args:
        breakdown: Recorded (display number, marks) entries
        target: Declared target total

    Returns:
        AuditReport whose total is recomputed from the consolidated rows
    """
    consolidated: Dict[str, int] = {}
    for entry in breakdown:
        consolidated[entry.number] = consolidated.get(entry.number, 0) + entry.marks
    ordered = sorted(consolidated.items(), key=lambda item: _numeric_key(item[0]))
    rows = tuple(AuditRow(number, marks) for number, marks in ordered)
    return AuditReport(rows=rows, total=sum(r.marks for r in rows), target=target)


def log_audit(report: AuditReport) -> None:
    """Log the audit table at INFO and a mismatch at WARNING."""
    lines = [f"{'Question':>8}  {'Marks':>5}"]
    lines.extend(f"{row.question:>8}  {row.marks:>5}" for row in report.rows)
    logger.info("Mark audit\n" + "\n".join(lines))
    logger.info(f"Total allocated: {report.total} Target: {report.target} Status: {report.status}")
    if report.difference > 0:
        logger.warning(
            f"Paper UNDER target by {report.difference} marks. "
            "Add more questions or increase part marks."
        )
    elif report.difference < 0:
        logger.warning(
            f"Paper OVER target by {-report.difference} marks. "
            "Consider trimming question parts."
        )

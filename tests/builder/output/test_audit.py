"""
Unit tests for the mark audit.
"""

import logging

import pytest

from igcse_toolkit.builder.output.audit import (
    AuditReport,
    AuditRow,
    audit_marks,
    log_audit,
    mark_status,
)
from igcse_toolkit.core.models import MarkBreakdownEntry


def _breakdown(*pairs):
    return [MarkBreakdownEntry(number, marks) for number, marks in pairs]


class TestMarkStatus:
    """Tests for mark_status()."""

    @pytest.mark.parametrize("total,target,status", [
        (80, 80, "OK"),
        (57, 60, "UNDER by 3"),
        (62, 60, "OVER by 2"),
        (0, 60, "UNDER by 60"),
    ])
    def test_mark_status_when_compared_then_classified(self, total, target, status):
        assert mark_status(total, target) == status


class TestAuditMarks:
    """Tests for audit_marks()."""

    def test_audit_when_totals_match_then_ok(self):
        report = audit_marks(_breakdown(("1", 5), ("2", 3)), target=8)

        assert report.total == 8
        assert report.is_ok
        assert report.status == "OK"
        assert report.difference == 0

    def test_audit_when_short_then_under(self):
        report = audit_marks(_breakdown(("1", 20), ("2", 37)), target=60)
        assert report.status == "UNDER by 3"
        assert report.difference == 3

    def test_audit_when_duplicate_numbers_then_consolidated(self):
        report = audit_marks(_breakdown(("2", 3), ("1", 4), ("2", 2)), target=9)

        assert report.rows == (AuditRow("1", 4), AuditRow("2", 5))
        assert report.total == 9

    def test_audit_when_unordered_then_numeric_order(self):
        report = audit_marks(_breakdown(("10", 1), ("9", 1), ("2", 1), ("x", 1)), target=4)
        assert [r.question for r in report.rows] == ["2", "9", "10", "x"]

    def test_audit_when_empty_then_zero_total(self):
        report = audit_marks([], target=60)
        assert report.rows == ()
        assert report.status == "UNDER by 60"


class TestAuditReport:
    """Tests for AuditReport serialisation."""

    def test_to_csv_when_rows_then_header_rows_total(self):
        report = AuditReport((AuditRow("1", 5), AuditRow("2", 3)), total=8, target=8)
        assert report.to_csv() == "Question,Marks\n1,5\n2,3\nTotal,8"

    def test_to_dict_when_called_then_status_included(self):
        report = AuditReport((AuditRow("1", 5),), total=5, target=6)
        assert report.to_dict() == {
            "rows": [{"question": "1", "marks": 5}],
            "total": 5,
            "target": 6,
            "status": "UNDER by 1",
        }


class TestLogAudit:
    """Tests for log_audit()."""

    def test_log_when_ok_then_no_warning(self, caplog):
        with caplog.at_level(logging.INFO):
            log_audit(audit_marks(_breakdown(("1", 2)), target=2))

        assert "Status: OK" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_log_when_under_then_warning(self, caplog):
        with caplog.at_level(logging.INFO):
            log_audit(audit_marks(_breakdown(("1", 2)), target=5))
        assert "UNDER target by 3" in caplog.text

    def test_log_when_over_then_warning(self, caplog):
        with caplog.at_level(logging.INFO):
            log_audit(audit_marks(_breakdown(("1", 7)), target=5))
        assert "OVER target by 2" in caplog.text

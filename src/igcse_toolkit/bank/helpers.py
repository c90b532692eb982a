"""Terse constructors used by the static structured banks."""

from __future__ import annotations

from typing import Optional

from igcse_toolkit.core.models import Category, PartKind, QuestionPart, StructuredQuestion


def question(number: str, category: Category, *parts: QuestionPart) -> StructuredQuestion:
    return StructuredQuestion(number=number, category=category, parts=tuple(parts))


def line(text: str, marks: Optional[int] = None) -> QuestionPart:
    return QuestionPart(text=text, marks=marks)


def diagram(text: str, ref_id: str) -> QuestionPart:
    return QuestionPart(text=text, kind=PartKind.DIAGRAM, ref_id=ref_id)


def table(text: str, ref_id: str) -> QuestionPart:
    return QuestionPart(text=text, kind=PartKind.TABLE, ref_id=ref_id)


def graph(text: str, ref_id: str) -> QuestionPart:
    return QuestionPart(text=text, kind=PartKind.GRAPH, ref_id=ref_id)

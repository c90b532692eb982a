"""
Practical Test (Paper 5) structured bank.

The bank totals 63 marks, so a 60 mark paper is filled from whole and
truncated questions only. Practical papers never receive auto-generated
filler items.
"""

from __future__ import annotations

from typing import Tuple

from igcse_toolkit.core.models import Category, StructuredQuestion

from .helpers import line, question

_SKILLS = Category.PRACTICAL_SKILLS

PAPER5_QUESTIONS: Tuple[StructuredQuestion, ...] = (
    question("1", _SKILLS,
        line("Measure volume of liquid accurately.", 2),
        line("Measure mass on balance.", 2),
        line("State equation for density.", 1),
        line("Record measurements in table.", 6),
        line("Identify highest density.", 1),
    ),
    question("2", _SKILLS,
        line("Plan experiment to determine boiling point of unknown liquid.", 4),
        line("List safety precautions.", 3),
        line("Describe data table structure.", 3),
        line("Explain how to improve accuracy.", 3),
    ),
    question("3", _SKILLS,
        line("Investigate effect of concentration on reaction rate: outline method.", 5),
        line("State variable to measure.", 1),
        line("Controlled variables list.", 3),
        line("Sample rate calculation.", 2),
        line("Suggest improvement for precision.", 2),
    ),
    question("4", _SKILLS,
        line("Design experiment to measure plant transpiration.", 5),
        line("Apparatus justification.", 3),
        line("Data recording method.", 3),
        line("Error sources and mitigation.", 3),
    ),
    question("5", _SKILLS,
        line("Plan test to determine energy content of a food sample.", 5),
        line("State formula for energy calculation.", 2),
        line("List safety measures.", 2),
        line("Suggest improvement for heat loss reduction.", 2),
    ),
)

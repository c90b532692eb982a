"""Alternative to Coursework (Paper 4) structured bank."""

from __future__ import annotations

from typing import Tuple

from igcse_toolkit.core.models import Category, StructuredQuestion

from .helpers import line, question, table

_PLAN = Category.PLANNING
_SKILLS = Category.PRACTICAL_SKILLS
_AE = Category.ANALYSIS_EVALUATION

PAPER4_QUESTIONS: Tuple[StructuredQuestion, ...] = (
    question("1", _PLAN,
        line("Investigate fertilizer concentration effect on growth: identify independent variable.", 1),
        line("State two dependent variables.", 2),
        line("State three controlled variables.", 3),
        line("Describe the experimental method.", 6),
        table("Table of fertilizer vs height", "fertilizer_growth"),
        line("Plot a graph of the results.", 4),
        line("Describe the relationship.", 2),
        line("Explain result at highest concentration.", 2),
    ),
    question("2", _PLAN,
        line("Design investigation: effect of pH on enzyme X (state independent variable).", 1),
        line("State dependent variable.", 1),
        line("List three controlled variables.", 3),
        line("Outline method steps.", 6),
        line("Describe data presentation.", 2),
        line("State one source of error and improvement.", 2),
        line("Explain how results support conclusion.", 2),
    ),
    question("3", _PLAN,
        line("Planning detail for investigating rate vs temperature.", 4),
        line("Risk assessment safety measures.", 3),
        line("Design data collection table.", 4),
        line("Show sample calculation.", 4),
        line("Evaluate method improvements.", 3),
    ),
    question("4", _SKILLS,
        line("Investigate osmosis in potato cores: hypothesis.", 2),
        line("List variables to control.", 3),
        line("Method outline with volumes and timing.", 5),
        line("Plot % change vs concentration graph description.", 3),
        line("Determine isotonic point from graph.", 2),
        line("Sources of error & improvements.", 3),
    ),
    question("5", _AE,
        line("Plan investigation into effect of light intensity on photosynthesis.", 5),
        line("Identify independent variable scale.", 2),
        line("Controlled variables list.", 3),
        line("Data table design requirements.", 3),
        line("Graph features (axes, units).", 2),
        line("Conclusion from hypothetical trend.", 2),
        line("Evaluation of limitations.", 3),
    ),
    question("6", _AE,
        line("Design experiment to measure reaction rate with catalyst.", 5),
        line("Apparatus justification.", 3),
        line("Data recording format.", 3),
        line("Analytical approach (rate calculation).", 3),
        line("Safety considerations.", 3),
        line("Improvements for reliability.", 3),
    ),
    question("7", _SKILLS,
        line("Plan investigation to determine factors affecting transpiration rate (outline).", 5),
        line("Describe method for measuring mass loss.", 4),
        line("List three environmental variables to control.", 3),
        line("Suggest two improvements to increase reliability.", 2),
        line("Explain how results inform plant adaptations.", 3),
    ),
)

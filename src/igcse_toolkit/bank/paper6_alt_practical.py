"""Alternative to Practical (Paper 6) structured bank."""

from __future__ import annotations

from typing import Tuple

from igcse_toolkit.core.models import Category, StructuredQuestion

from .helpers import diagram, graph, line, question

_SKILLS = Category.PRACTICAL_SKILLS

PAPER6_QUESTIONS: Tuple[StructuredQuestion, ...] = (
    question("1", _SKILLS,
        line("Calculate rate at 40°C.", 2),
        graph("Graph temperature vs rate", "rate_temp_graph"),
        line("Describe relationship.", 2),
        line("Explain collision theory temperature effect.", 3),
        line("State two other factors affecting rate.", 2),
    ),
    question("2", _SKILLS,
        diagram("Apparatus for collecting gas over water", "gas_collection"),
        line("Describe observation when magnesium reacts with acid.", 2),
        line("Explain effect of increasing surface area.", 2),
        line("Suggest control variable.", 1),
        line("State one safety precaution.", 1),
    ),
    question("3", _SKILLS,
        line("Describe method to test for presence of starch.", 2),
        line("Explain colour change.", 2),
        line("State a control test.", 1),
        line("Explain importance of control.", 2),
    ),
    question("4", _SKILLS,
        line("Outline test for carbon dioxide gas.", 2),
        line("State observation for positive result.", 1),
        line("Explain limewater reaction.", 2),
    ),
    question("5", _SKILLS,
        line("Plan method to determine density of irregular solid.", 3),
        line("List apparatus.", 2),
        line("State formula used.", 1),
        line("Explain step ensuring accuracy.", 2),
    ),
    question("6", _SKILLS,
        line("Describe test to identify reducing sugar.", 2),
        line("Explain colour sequence with increasing sugar.", 2),
        line("State why water bath is used.", 1),
        line("Give one error source and improvement.", 2),
    ),
    question("7", _SKILLS,
        line("Outline test for protein.", 2),
        line("State colour change for positive test.", 1),
        line("Explain why control is needed.", 2),
    ),
    question("8", _SKILLS,
        line("Describe method to determine rate of photosynthesis using counting bubbles.", 3),
        line("List two variables to control.", 2),
        line("Suggest improvement for more accurate rate measurement.", 2),
    ),
    question("9", _SKILLS,
        line("Describe how to obtain a pure dry sample of a soluble salt from an acid and an insoluble base.", 3),
        line("State one safety precaution and explain its purpose.", 2),
        line("Explain why gentle warming is used before filtration.", 1),
    ),
)

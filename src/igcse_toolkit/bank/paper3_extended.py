"""Extended Theory (Paper 3) structured bank."""

from __future__ import annotations

from typing import Tuple

from igcse_toolkit.core.models import Category, StructuredQuestion

from .helpers import graph, line, question, table

_B = Category.BIOLOGY
_C = Category.CHEMISTRY
_P = Category.PHYSICS

PAPER3_QUESTIONS: Tuple[StructuredQuestion, ...] = (
    question("1", _B,
        line("Define the term enzyme.", 2),
        graph("Graph of enzyme activity vs temperature", "enzyme_temperature"),
        line("State the optimum temperature for this enzyme.", 1),
        line("Explain why enzyme activity decreases above the optimum temperature.", 3),
        line("Describe an investigation of pH effect on enzyme activity.", 4),
    ),
    question("2", _B,
        line("Explain lock and key model.", 3),
        line("Describe effect of substrate concentration on rate.", 3),
        line("Calculate rate from data given.", 2),
    ),
    question("3", _B,
        line("Define allele.", 1),
        line("State genotype of heterozygous round seed pea.", 1),
        line("Predict phenotypic ratio of monohybrid cross.", 2),
        line("Explain why observed ratios may differ.", 3),
    ),
    question("4", _P,
        line("State equation linking acceleration, change in velocity and time.", 1),
        line("Calculate acceleration from velocity change.", 2),
        line("Explain difference between mass and weight.", 3),
    ),
    question("5", _C,
        line("Define rate of reaction.", 1),
        table("Time taken for a reaction at different temperatures", "reaction_temperature_table"),
        line("Explain collision theory for concentration increase.", 2),
        line("Calculate average rate from gas volume/time.", 2),
        line("Suggest advantage of catalyst.", 1),
        line("Explain why powdered solids react faster.", 3),
    ),
    question("6", _P,
        line("State principle of conservation of energy.", 1),
        line("Calculate energy from power and time.", 2),
        line("Suggest two ways to reduce energy loss in a house.", 2),
    ),
    question("7", _B,
        line("Define trophic level.", 1),
        line("Explain energy loss between trophic levels.", 2),
        line("State two reasons for conserving biodiversity.", 2),
    ),
    question("8", _P,
        line("Calculate density of a block.", 2),
        line("Calculate voltage from current and resistance.", 2),
        line("Calculate moles from mass and Mr.", 1),
        line("Explain one safety precaution when heating chemicals.", 1),
    ),
    question("9", _C,
        line("Explain why increasing temperature increases diffusion.", 3),
        line("Transformer turns and voltage calculation.", 2),
    ),
    question("10", _B,
        line("Describe natural selection.", 3),
        line("Explain role of mutation in variation.", 2),
        line("Define adaptation.", 2),
    ),
    question("11", _C,
        graph("Energy profile of an exothermic reaction", "energy_profile"),
        line("Explain greenhouse effect basics.", 3),
        line("State two greenhouse gases.", 2),
        line("Suggest one way to reduce carbon emissions.", 2),
    ),
    question("12", _P,
        line("State law of conservation of momentum.", 2),
        line("Calculate momentum of moving object.", 2),
        line("Explain impulse concept.", 2),
    ),
)

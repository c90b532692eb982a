"""Core Theory (Paper 2) structured bank. Aggregated marks exceed the 80 mark target."""

from __future__ import annotations

from typing import Tuple

from igcse_toolkit.core.models import Category, StructuredQuestion

from .helpers import diagram, line, question, table

_B = Category.BIOLOGY
_C = Category.CHEMISTRY
_P = Category.PHYSICS

PAPER2_QUESTIONS: Tuple[StructuredQuestion, ...] = (
    question("1", _B,
        line("State the function of the following parts of a plant cell:", 0),
        line("(i) cell wall", 1),
        line("(ii) chloroplast", 1),
        diagram("Diagram of plant cell", "plant_cell"),
        line("Label the parts A, B and C on the diagram.", 3),
        line("Name one part shown in the diagram not found in animal cells.", 1),
    ),
    question("2", _B,
        line("Complete the word equation for photosynthesis.", 2),
        line("State two conditions needed for photosynthesis to occur.", 2),
        line("Explain why photosynthesis is important for life on Earth.", 2),
    ),
    question("3", _C,
        table("Complete the table to show properties of states of matter", "states_of_matter"),
        line("Explain in particle terms what happens when a solid melts.", 2),
        line("Describe arrangement of particles in a gas.", 2),
    ),
    question("4", _P,
        diagram("Simple circuit diagram", "simple_circuit"),
        line("State the purpose of a switch.", 1),
        line("State what an ammeter measures.", 1),
        line("State Ohm's law.", 2),
        line("Calculate resistance given V and I.", 2),
    ),
    question("5", _B,
        line("Name the enzyme that breaks down starch.", 1),
        line("State where amylase is produced.", 1),
        line("Explain why enzymes are important in digestion.", 3),
    ),
    question("6", _C,
        line("State pH of pure water.", 1),
        line("Name an indicator for acids and bases.", 1),
        line("Complete: acid + base -> ___ + ___", 2),
    ),
    question("7", _P,
        line("State Newton's first law.", 2),
        line("A car travels 100 m in 20 s. Calculate average speed.", 2),
    ),
    question("8", _B,
        line("Define diffusion.", 2),
        line("Explain how temperature affects diffusion rate.", 2),
    ),
    question("9", _B,
        line("Explain one adaptation of red blood cells.", 2),
        line("Describe function of haemoglobin.", 2),
    ),
    question("10", _C,
        line("State one environmental problem caused by plastic waste.", 2),
        line("Suggest one method to reduce plastic pollution.", 2),
    ),
    question("11", _B,
        line("Describe the process of respiration (word equation).", 2),
        line("Explain difference between aerobic and anaerobic respiration.", 3),
        line("State one use of energy in cells.", 2),
    ),
    question("12", _B,
        line("Define ecosystem.", 2),
        line("State two abiotic factors affecting plant distribution.", 2),
        line("Explain why food chains rarely have more than five trophic levels.", 3),
    ),
    question("13", _C,
        line("State what is meant by neutralisation.", 2),
        line("Describe test for carbon dioxide gas.", 2),
        line("Explain why acids react with metals to form salts and hydrogen.", 3),
        line("Predict products of hydrochloric acid and sodium hydroxide.", 2),
    ),
    question("14", _P,
        line("Define potential difference.", 2),
        line("Explain why adding more bulbs in parallel changes current.", 3),
        line("Calculate current given charge and time.", 2),
        line("State unit of resistance.", 1),
        line("Explain energy transfer in a battery-powered lamp.", 3),
    ),
)

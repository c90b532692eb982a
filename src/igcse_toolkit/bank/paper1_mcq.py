"""
Module: bank.paper1_mcq

Purpose:
    Multiple choice bank for Combined Science Paper 1. All items are
    original rephrasings of generic syllabus facts. Each item is worth
    one mark.
"""

from __future__ import annotations

from typing import Optional, Tuple

from igcse_toolkit.core.models import Category, MCQItem

_B = Category.BIOLOGY
_C = Category.CHEMISTRY
_P = Category.PHYSICS


def _mcq(
    item_id: str,
    subject: Category,
    question: str,
    a: str,
    b: str,
    c: str,
    d: str,
    diagram: Optional[str] = None,
) -> MCQItem:
    return MCQItem(
        id=item_id,
        subject=subject,
        question=question,
        options=(f"A  {a}", f"B  {b}", f"C  {c}", f"D  {d}"),
        diagram=diagram,
    )


PAPER1_MCQ_BANK: Tuple[MCQItem, ...] = (
    _mcq("bio_cell_membrane", _B, "Which structure controls movement of substances into and out of a cell?",
         "cell wall", "cell membrane", "cytoplasm", "vacuole"),
    _mcq("bio_photosynthesis", _B, "The process by which green plants synthesise glucose is",
         "respiration", "photosynthesis", "fermentation", "transpiration"),
    _mcq("bio_blood_transport", _B, "Which blood vessel carries oxygenated blood from the heart to the body?",
         "vena cava", "pulmonary vein", "aorta", "pulmonary artery"),
    _mcq("chem_atomic_number", _C, "The atomic number of an element is the number of",
         "neutrons", "protons", "electrons + neutrons", "protons + neutrons"),
    _mcq("chem_compound", _C, "Which of these is a compound?",
         "oxygen", "nitrogen", "water", "hydrogen"),
    _mcq("chem_neutral_ph", _C, "The pH of a neutral aqueous solution at 25°C is",
         "0", "3", "7", "14"),
    _mcq("phys_current_unit", _P, "The SI unit of electric current is the",
         "volt", "ampere", "coulomb", "ohm"),
    _mcq("phys_wave_type", _P, "Sound in air is transmitted as",
         "transverse waves", "longitudinal waves", "electromagnetic waves", "standing waves"),
    _mcq("phys_friction", _P, "The force opposing relative motion between surfaces is",
         "friction", "tension", "weight", "lift"),
    _mcq("phys_em_radio", _P, "Which electromagnetic radiation has the longest wavelength?",
         "X-rays", "radio waves", "infrared", "ultraviolet"),
    _mcq("bio_enzyme_temp", _B, "Enzymes are best described as",
         "lipids", "biological catalysts", "hormones", "nucleic acids"),
    _mcq("bio_diffusion", _B, "Diffusion is the net movement of particles from",
         "low to high concentration", "high to low concentration",
         "low to high temperature", "high pressure to low pressure"),
    _mcq("bio_respiration", _B, "Aerobic respiration releases energy using",
         "oxygen", "nitrogen", "carbon monoxide", "chlorine"),
    _mcq("bio_transpiration", _B, "The apparatus shown is used to study water loss. "
         "Loss of water vapour from leaves mainly occurs through the",
         "cuticle", "stomata", "xylem", "phloem", diagram="transpiration_setup"),
    _mcq("bio_villi", _B, "Villi increase the efficiency of absorption by providing",
         "digestive enzymes", "greater surface area", "movement by cilia", "muscular contractions"),
    _mcq("bio_chlorophyll_role", _B, "Chlorophyll is needed in photosynthesis to",
         "absorb light energy", "fix nitrogen", "produce minerals", "control water loss"),
    _mcq("bio_protein_building", _B, "The basic units of proteins are",
         "fatty acids", "simple sugars", "amino acids", "nucleotides"),
    _mcq("bio_vaccination", _B, "Vaccination provides protection mainly by stimulating",
         "antibody production", "digestion", "transpiration", "mitosis in muscles"),
    _mcq("chem_state_change", _C, "Evaporation involves a change from",
         "gas to liquid", "solid to gas", "liquid to gas", "solid to liquid"),
    _mcq("chem_valency", _C, "A calcium atom (atomic number 20) forms an ion by",
         "gaining 1 electron", "gaining 2 electrons", "losing 1 electron", "losing 2 electrons"),
    _mcq("chem_mixture", _C, "Air is best described as a",
         "compound", "element", "mixture", "molecule"),
    _mcq("chem_period_group", _C, "Elements in the same group of the Periodic Table have similar",
         "densities", "atomic masses", "chemical properties", "melting points"),
    _mcq("chem_ph_indicator", _C, "An indicator changes colour because of differences in",
         "pressure", "temperature", "pH", "volume"),
    _mcq("chem_rate_surface", _C, "Increasing surface area of a solid reactant usually",
         "decreases rate", "increases rate", "stops the reaction", "changes products formed"),
    _mcq("chem_fractional", _C, "Fractional distillation separates liquids by differences in",
         "colour", "boiling point", "density", "pH"),
    _mcq("chem_acid_metal", _C, "An acid reacting with a metal produces a salt and",
         "oxygen", "hydrogen", "chlorine", "nitrogen"),
    _mcq("phys_speed_def", _P, "Speed is defined as",
         "distance × time", "distance ÷ time", "time ÷ distance", "acceleration × time"),
    _mcq("phys_density", _P, "The apparatus shown is used to find the density of a solid. "
         "Density is mass divided by",
         "area", "length", "volume", "time", diagram="density_apparatus"),
    _mcq("phys_energy_unit", _P, "The SI unit of energy is the",
         "joule", "watt", "newton", "pascal"),
    _mcq("phys_force_calc", _P, "Force can be calculated using",
         "mass × acceleration", "mass ÷ acceleration", "acceleration ÷ mass", "mass × speed"),
    _mcq("phys_gravity", _P, "Objects fall towards Earth mainly because of",
         "friction", "air resistance", "magnetism", "gravity"),
    _mcq("phys_reflection", _P, "The angle of incidence equals the angle of",
         "deviation", "diffraction", "refraction", "reflection"),
    _mcq("phys_series_current", _P, "In a simple series circuit the current is",
         "different everywhere", "zero in wires", "the same at all points", "only in the battery"),
    _mcq("phys_light_medium", _P, "Light slows down when it enters glass because",
         "glass is colder", "frequency decreases", "it is a denser medium", "wavelength increases"),
    _mcq("phys_moment", _P, "A moment is the product of force and",
         "distance from pivot", "time applied", "velocity", "energy"),
    _mcq("phys_insulator", _P, "A good electrical insulator has",
         "many free electrons", "high conductivity", "few free electrons", "zero resistance"),
    _mcq("bio_pathogen", _B, "A pathogen is an organism that",
         "decomposes waste", "causes disease", "fixes nitrogen", "absorbs sunlight"),
    _mcq("chem_exothermic", _C, "An exothermic reaction",
         "absorbs heat", "releases heat", "needs light only", "always forms gas"),
    _mcq("chem_electrolysis", _C, "Electrolysis involves decomposition using",
         "light", "pressure", "electricity", "catalysts"),
    _mcq("phys_pressure", _P, "Pressure on a surface is force divided by",
         "area", "length", "mass", "volume"),
    _mcq("phys_kinetic", _P, "Kinetic energy increases when",
         "speed decreases", "mass decreases", "speed increases", "object rests"),
    _mcq("bio_food_chain", _B, "In a food chain, energy is transferred between",
         "decomposers and water", "trophic levels", "soils only", "minerals only"),
    _mcq("chem_catalyst", _C, "A catalyst increases reaction rate by",
         "being consumed", "lowering activation energy",
         "raising temperature permanently", "changing products"),
    _mcq("phys_work", _P, "Work done equals force ×",
         "distance moved", "acceleration", "pressure", "momentum"),
)

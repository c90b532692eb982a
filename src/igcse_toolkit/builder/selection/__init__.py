"""
Module: builder.selection

Purpose:
    Question selection for building papers. Shuffles banks with a
    reproducible random source and selects questions and parts to meet
    an exact mark target while respecting blueprint category minimums.

Key Functions:
    - select_structured(): Two-pass selection for papers 2-6
    - select_mcq(): Item selection for paper 1

Key Classes:
    - SelectionConfig: Configuration for the selector
    - SeededRandom: Reproducible random source
"""

from .config import FILLER_TEXT, SelectionConfig
from .quota import allocate, init_quotas, is_unmet, unmet_categories
from .random_source import SeededRandom, fnv1a_32, shuffled
from .selector import (
    SelectionError,
    StructuredSelector,
    apply_parts,
    select_mcq,
    select_structured,
)

__all__ = [
    "FILLER_TEXT",
    "SelectionConfig",
    "SelectionError",
    "SeededRandom",
    "StructuredSelector",
    "allocate",
    "apply_parts",
    "fnv1a_32",
    "init_quotas",
    "is_unmet",
    "select_mcq",
    "select_structured",
    "shuffled",
    "unmet_categories",
]

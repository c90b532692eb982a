"""
Module: builder.selection.config

Purpose:
    Configuration dataclass for the mark-constrained selector.
    Immutable configuration with validation on construction.

Key Classes:
    - SelectionConfig: Target marks and auto-fill policy

Dependencies:
    - dataclasses (std)

Used By:
    - builder.selection.selector: Structured selection
    - builder.controller: Per-paper handlers
"""

from __future__ import annotations

from dataclasses import dataclass

FILLER_TEXT = "Auto-generated short recall/calculation item"


@dataclass(frozen=True)
class SelectionConfig:
    """
    Configuration for structured selection (immutable).

    Attributes:
        target_marks: Exact mark total to reach
        allow_auto_fill: Append synthetic filler items for a residual
            deficit (theory papers only)
        filler_max_marks: Largest mark value of one filler item

    Invariants:
        - target_marks > 0
        - filler_max_marks >= 1

    Example:
        >>> config = SelectionConfig(target_marks=60, allow_auto_fill=False)
        >>> config.filler_marks_for(5)
        2
    """

    target_marks: int
    allow_auto_fill: bool = True
    filler_max_marks: int = 2

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.target_marks <= 0:
            raise ValueError(f"target_marks must be positive: {self.target_marks}")
        if self.filler_max_marks < 1:
            raise ValueError(f"filler_max_marks must be at least 1: {self.filler_max_marks}")

    def filler_marks_for(self, deficit: int) -> int:
        """Marks for the next filler item given the remaining deficit."""
        return min(deficit, self.filler_max_marks)

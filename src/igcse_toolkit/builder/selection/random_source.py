"""
Module: builder.selection.random_source

Purpose:
    Reproducible pseudo-random source for shuffling question banks.
    A string seed is folded into a 32-bit state with FNV-1a and then
    stepped with xorshift32. Without a seed the source delegates to a
    fresh random.Random, so every run differs.

Key Functions:
    - fnv1a_32(): 32-bit FNV-1a hash of a string
    - shuffled(): Fisher-Yates shuffle returning a new list

Key Classes:
    - SeededRandom: random() in [0, 1)

Dependencies:
    - random (std)

Used By:
    - builder.selection.selector: Bank shuffling
    - builder.controller: One source per generation run
"""

from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
_MASK_32 = 0xFFFFFFFF
_STATE_SPAN = 2 ** 32


def fnv1a_32(text: str) -> int:
    """
    32-bit FNV-1a hash.

    Example:
        >>> fnv1a_32("")
        2166136261
    """
    h = FNV_OFFSET_BASIS
    for ch in text:
        h ^= ord(ch)
        h = (h * FNV_PRIME) & _MASK_32
    return h


class SeededRandom:
    """
    Random source for one generation run.

    Attributes:
        seed: Seed string, or None for non-reproducible output

    Example:
        >>> a, b = SeededRandom("reproducible"), SeededRandom("reproducible")
        >>> [a.random() for _ in range(3)] == [b.random() for _ in range(3)]
        True
    """

    def __init__(self, seed: Optional[str] = None) -> None:
        if seed is not None:
            seed = seed.strip() or None
        self.seed = seed
        self._fallback: Optional[random.Random] = None
        self._state = 0
        if seed is None:
            self._fallback = random.Random()
        else:
            # xorshift32 is stuck at zero, so a zero hash restarts from the basis
            self._state = fnv1a_32(seed) or FNV_OFFSET_BASIS

    @property
    def is_seeded(self) -> bool:
        return self._fallback is None

    def random(self) -> float:
        """Next value in [0, 1)."""
        if self._fallback is not None:
            return self._fallback.random()
        x = self._state
        x ^= (x << 13) & _MASK_32
        x ^= x >> 17
        x ^= (x << 5) & _MASK_32
        self._state = x
        return x / _STATE_SPAN

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"


def shuffled(items: Sequence[T], rng: SeededRandom) -> List[T]:
    """
    Fisher-Yates shuffle from the last index down.

    The input is never mutated; a new list is returned.

    Args:
        items: Items to shuffle
        rng: Random source (one draw per index above zero)

    Returns:
        Shuffled copy of items
    """
    pool = list(items)
    for i in range(len(pool) - 1, 0, -1):
        j = math.floor(rng.random() * (i + 1))
        pool[i], pool[j] = pool[j], pool[i]
    return pool

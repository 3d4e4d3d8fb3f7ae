"""RNG utilities for deterministic world generation and breeding.

This module provides:
- SeededRandom: a MINSTD linear-congruential stream that can be replayed
  from its original seed
- Helpers that fail loudly when a generator handle was not passed in,
  rather than silently creating an unseeded fallback.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

# MINSTD (Park-Miller, revised multiplier)
LCG_MULTIPLIER = 48271
LCG_MODULUS = 2147483647

DEFAULT_SEED = 12345
WORLD_SEED = 42069


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This error indicates a bug in the caller - every operation that consumes
    randomness must be handed an explicit generator.
    """

    pass


class SeededRandom:
    """Seeded pseudo-random stream.

    Same seed = same sequence of numbers, forever. Each stream owns its state;
    draws are read-modify-write on ``current`` so a stream must have a single
    logical owner. Give concurrent callers their own instance.

    Attributes:
        seed: The seed the stream was created (or last re-seeded) with
        current: The current LCG state
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = _check_seed(seed)
        self.current = self.seed

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed}, current={self.current})"

    def reset(self) -> None:
        """Rewind to the original seed to replay the exact same sequence."""
        self.current = self.seed

    def set_seed(self, seed: int) -> None:
        """Re-seed the stream and rewind it."""
        self.seed = _check_seed(seed)
        self.current = self.seed

    def next(self) -> float:
        """Advance the stream and return a float in [0, 1)."""
        self.current = (LCG_MULTIPLIER * self.current) % LCG_MODULUS
        return self.current / LCG_MODULUS

    def float(self, min_val: float = 0.0, max_val: float = 1.0) -> float:
        """Random float in [min_val, max_val)."""
        return min_val + self.next() * (max_val - min_val)

    def int(self, min_val: int, max_val: int) -> int:
        """Random integer in [min_val, max_val] (inclusive both ends)."""
        return math.floor(self.float(min_val, max_val + 1))

    def bool(self, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next() < probability

    def pick(self, items: Sequence[T]) -> T:
        """Pick one item uniformly."""
        if not items:
            raise IndexError("Cannot pick from an empty sequence")
        return items[self.int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates shuffle. Returns a new list; the input is untouched."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.int(0, i)
            result[i], result[j] = result[j], result[i]
        return result


def normalize_seed(seed: int) -> int:
    """Map seeds that would stall the stream (multiples of the modulus) to 1."""
    seed = int(seed)
    if seed % LCG_MODULUS == 0:
        return 1
    return seed


def _check_seed(seed: int) -> int:
    seed = int(seed)
    if seed % LCG_MODULUS == 0:
        # A zero state is a fixed point of the multiplicative recurrence.
        raise ValueError(f"Seed must not be a multiple of {LCG_MODULUS} (got {seed})")
    return seed


def require_rng_param(rng: Optional[SeededRandom], context: str) -> SeededRandom:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Use this in functions that require a generator to be passed in,
    instead of silently creating an unseeded fallback.

    Args:
        rng: The generator that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated generator

    Raises:
        MissingRNGError: If rng is None

    Example:
        def breed(parent1, parent2, species, rng=None):
            rng = require_rng_param(rng, "breed")
            clutch_size = rng.int(species.clutch_min, species.clutch_max)
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass a SeededRandom explicitly.")
    return rng

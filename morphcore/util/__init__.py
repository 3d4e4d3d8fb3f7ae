"""Core utilities for the morph engine."""

from morphcore.util.rng import (
    WORLD_SEED,
    MissingRNGError,
    SeededRandom,
    normalize_seed,
    require_rng_param,
)

__all__ = [
    "SeededRandom",
    "WORLD_SEED",
    "MissingRNGError",
    "normalize_seed",
    "require_rng_param",
]

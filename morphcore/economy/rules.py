"""Pricing rule table loaded from the catalog configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Tuple

from morphcore.config.pricing import (
    DEFAULT_HET_GENE_BONUS,
    DEFAULT_PROVEN_BREEDER_BONUS,
    DEFAULT_RARITY_THRESHOLDS,
)


class RarityTier(Enum):
    """Price-derived rarity tiers, in ascending order."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    VERY_RARE = "very-rare"
    LEGENDARY = "legendary"


@dataclass(frozen=True)
class PricingRules:
    """Multiplier tables for the valuation engine.

    Attributes:
        sex_multipliers: Multiplier by sex value ("male", "female")
        rarity_multipliers: Multiplier applied per expressed trait, by gene rarity tier
        het_gene_bonus: Rate per heterozygous carrier gene
        proven_breeder_bonus: Multiplier once a creature has produced a clutch
        species_multipliers: Multiplier by species id
        rarity_thresholds: Four strictly increasing price bounds separating the
            five rarity tiers
    """

    sex_multipliers: Mapping[str, float] = field(default_factory=dict)
    rarity_multipliers: Mapping[int, float] = field(default_factory=dict)
    het_gene_bonus: float = DEFAULT_HET_GENE_BONUS
    proven_breeder_bonus: float = DEFAULT_PROVEN_BREEDER_BONUS
    species_multipliers: Mapping[str, float] = field(default_factory=dict)
    rarity_thresholds: Tuple[float, ...] = DEFAULT_RARITY_THRESHOLDS

    def __post_init__(self) -> None:
        thresholds = tuple(self.rarity_thresholds)
        if len(thresholds) != len(RarityTier) - 1:
            raise ValueError(
                f"Expected {len(RarityTier) - 1} rarity thresholds, got {len(thresholds)}"
            )
        if any(lo >= hi for lo, hi in zip(thresholds, thresholds[1:])):
            raise ValueError(f"Rarity thresholds must be strictly increasing: {thresholds}")
        object.__setattr__(self, "rarity_thresholds", thresholds)

"""Valuation engine: price and rarity tier from a creature's phenotype.

The price is a pure function of species, sex, resolved phenotype, carrier
genes and breeding history. It is never persisted; saved creatures are
re-rated against the current catalog every time they are loaded.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from morphcore.config.pricing import DEFAULT_BASE_PRICE, DEFAULT_MULTIPLIER
from morphcore.economy.rules import PricingRules, RarityTier
from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.expression import get_het_genes

if TYPE_CHECKING:
    from morphcore.entities.creature import Creature

_TIERS_ASCENDING = tuple(RarityTier)


def calculate_price(creature: "Creature", catalog: GeneCatalog, rules: PricingRules) -> int:
    """Compute a creature's market price.

    Steps, in order (each multiplicative unless noted):
    1. Sex multiplier
    2. Rarity multiplier of every expressed trait
    3. First satisfied combo morph raises the price to its base price (floor)
    4. Heterozygous carrier bonus ``1 + hets * het_gene_bonus``
    5. Proven breeder bonus when at least one clutch was produced
    6. Species multiplier

    Unknown species fall back to a base price of 100; unknown traits are
    skipped.

    Returns:
        Price rounded to the nearest integer (halves round up)
    """
    species = catalog.get_species(creature.species)
    price = float(species.base_price if species is not None else DEFAULT_BASE_PRICE)

    price *= rules.sex_multipliers.get(creature.sex.value, DEFAULT_MULTIPLIER)

    phenotype = creature.phenotype
    for trait_id in phenotype:
        gene = catalog.gene(trait_id)
        if gene is not None:
            price *= rules.rarity_multipliers.get(gene.rarity, DEFAULT_MULTIPLIER)

    combo = catalog.first_matching_combo(phenotype)
    if combo is not None:
        price = max(price, float(combo.base_price or price))

    het_count = len(get_het_genes(creature.genotype, phenotype, catalog))
    price *= 1 + het_count * rules.het_gene_bonus

    if creature.stats.clutches_produced > 0:
        price *= rules.proven_breeder_bonus

    price *= rules.species_multipliers.get(creature.species, DEFAULT_MULTIPLIER)

    return _round_half_up(price)


def get_rarity_tier(price: float, rules: PricingRules) -> RarityTier:
    """Map a price onto the five rarity tiers using the configured thresholds."""
    for tier, upper in zip(_TIERS_ASCENDING, rules.rarity_thresholds):
        if price < upper:
            return tier
    return RarityTier.LEGENDARY


def _round_half_up(value: float) -> int:
    # Built-in round() uses banker's rounding
    return int(math.floor(value + 0.5))

"""Pricing fallbacks used when the catalog leaves a rule unspecified."""

DEFAULT_BASE_PRICE = 100
DEFAULT_MULTIPLIER = 1.0
DEFAULT_HET_GENE_BONUS = 0.1
DEFAULT_PROVEN_BREEDER_BONUS = 1.25

# Upper bounds (exclusive) for common, uncommon, rare and very-rare; anything
# at or above the last threshold is legendary.
DEFAULT_RARITY_THRESHOLDS = (200, 500, 1000, 3000)

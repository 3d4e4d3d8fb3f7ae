"""Valuation engine: pricing rules, price calculation and rarity tiers."""

from morphcore.economy.pricing import calculate_price, get_rarity_tier
from morphcore.economy.rules import PricingRules, RarityTier

__all__ = [
    "PricingRules",
    "RarityTier",
    "calculate_price",
    "get_rarity_tier",
]

"""Configuration package for the morph engine.

Constants are grouped by concern:
- world: encounter layout of the exploration map
- wild: rarity bias for wild-creature generation
- pricing: fallbacks used when the catalog omits a pricing rule
- settings: runtime settings read from the environment
"""

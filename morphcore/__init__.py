"""Genetics and valuation engine for a snake-breeding exploration game.

The engine is pure in-memory computation:

- util.rng: seeded MINSTD stream used for every reproducible draw
- genetics: gene catalog, phenotype resolution, breeding, wild encounters
- economy: price and rarity-tier valuation
- world: deterministic encounter layout
- collection / persistence: the player's owned creatures and their save file
"""

__version__ = "1.0.0"

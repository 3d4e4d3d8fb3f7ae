"""Wild-encounter generation tuning constants."""

# Base per-allele mutant chance by gene rarity tier (1=common .. 5=legendary)
RARITY_ALLELE_CHANCE = {
    1: 0.30,
    2: 0.20,
    3: 0.12,
    4: 0.06,
    5: 0.03,
}

# Effective chance = base * (FLOOR + rarity_target * SCALE), so a target of 0
# halves the base chance and a target of 1 doubles it.
RARITY_TARGET_FLOOR = 0.5
RARITY_TARGET_SCALE = 1.5

MAX_ALLELE_CHANCE = 0.95

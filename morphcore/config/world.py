"""World layout configuration constants."""

from morphcore.util.rng import WORLD_SEED

# Starter spots sit close to home and always hold common snakes
STARTER_POSITIONS = ((15.0, 10.0), (-12.0, 15.0), (5.0, 20.0))
STARTER_RARITY_MAX = 0.5

# Wild spots are scattered over the map; attempts inside the home area are dropped
NUM_WILD_SPOT_ATTEMPTS = 22
WILD_SPOT_EXTENT = 85.0
HOME_EXCLUSION_HALF_X = 20.0
HOME_EXCLUSION_HALF_Z = 25.0

# Encounter seeds are drawn in [0, ENCOUNTER_SEED_MAX]
ENCOUNTER_SEED_MAX = 1_000_000

# Weighted species table (western is three times as common as eastern)
ENCOUNTER_SPECIES_TABLE = ("western", "western", "western", "eastern")

__all__ = [
    "WORLD_SEED",
    "STARTER_POSITIONS",
    "STARTER_RARITY_MAX",
    "NUM_WILD_SPOT_ATTEMPTS",
    "WILD_SPOT_EXTENT",
    "HOME_EXCLUSION_HALF_X",
    "HOME_EXCLUSION_HALF_Z",
    "ENCOUNTER_SEED_MAX",
    "ENCOUNTER_SPECIES_TABLE",
]

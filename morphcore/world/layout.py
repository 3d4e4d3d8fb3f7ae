"""Deterministic encounter layout for the exploration map.

The world owns one SeededRandom stream. Generating the layout rewinds it
first, so the same root seed always reproduces the same spots and the same
per-spot encounter seeds without persisting a single draw.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from morphcore.config.world import (
    ENCOUNTER_SEED_MAX,
    ENCOUNTER_SPECIES_TABLE,
    HOME_EXCLUSION_HALF_X,
    HOME_EXCLUSION_HALF_Z,
    NUM_WILD_SPOT_ATTEMPTS,
    STARTER_POSITIONS,
    STARTER_RARITY_MAX,
    WILD_SPOT_EXTENT,
)
from morphcore.entities.creature import Creature
from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.wild import generate_wild_creature
from morphcore.util.rng import SeededRandom, require_rng_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncounterSpot:
    """A discoverable creature location.

    Attributes:
        id: Stable spot id ("starter_0", "wild_7", ...)
        x: World x coordinate
        z: World z coordinate
        seed: Seed of the encounter's private generator
        rarity: Rarity target in [0, 1]
        species: Species id
        is_starter: Starter spots sit near home and are always common
    """

    id: str
    x: float
    z: float
    seed: int
    rarity: float
    species: str
    is_starter: bool = False

    def generate_creature(self, catalog: GeneCatalog) -> Creature:
        """The creature living here. Identical on every call."""
        return generate_wild_creature(self.seed, self.species, self.rarity, catalog)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "z": self.z,
            "seed": self.seed,
            "rarity": self.rarity,
            "species": self.species,
            "is_starter": self.is_starter,
        }


def in_home_area(x: float, z: float) -> bool:
    return abs(x) < HOME_EXCLUSION_HALF_X and abs(z) < HOME_EXCLUSION_HALF_Z


def _make_spot(rng: SeededRandom, spot_id: str, x: float, z: float, is_starter: bool) -> EncounterSpot:
    # Draw order (seed, rarity, species) is part of the layout format
    seed = rng.int(0, ENCOUNTER_SEED_MAX)
    rarity = rng.float(0, STARTER_RARITY_MAX) if is_starter else rng.float(0, 1)
    species = rng.pick(ENCOUNTER_SPECIES_TABLE)
    return EncounterSpot(
        id=spot_id, x=x, z=z, seed=seed, rarity=rarity, species=species, is_starter=is_starter
    )


def generate_encounter_spots(rng: Optional[SeededRandom] = None) -> List[EncounterSpot]:
    """Lay out starter and wild encounter spots from the world stream.

    The stream is reset before generation. Wild attempts that land in the
    home area are skipped, so fewer than NUM_WILD_SPOT_ATTEMPTS wild spots
    may be produced.
    """
    rng = require_rng_param(rng, "generate_encounter_spots")
    rng.reset()

    spots: List[EncounterSpot] = []
    for i, (x, z) in enumerate(STARTER_POSITIONS):
        spots.append(_make_spot(rng, f"starter_{i}", x, z, is_starter=True))

    for i in range(NUM_WILD_SPOT_ATTEMPTS):
        x = rng.float(-WILD_SPOT_EXTENT, WILD_SPOT_EXTENT)
        z = rng.float(-WILD_SPOT_EXTENT, WILD_SPOT_EXTENT)
        if in_home_area(x, z):
            continue
        spots.append(_make_spot(rng, f"wild_{i}", x, z, is_starter=False))

    logger.debug("World seed %d: %d encounter spots", rng.seed, len(spots))
    return spots

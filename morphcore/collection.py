"""The player's collection: owned snakes, money and discovery progress.

This is the aggregate that owns creatures. Genetics and valuation stay pure;
the collection applies their results (capture, sale, retained offspring,
clutch counters) and serializes itself for the save layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set

from morphcore.economy.pricing import calculate_price
from morphcore.economy.rules import PricingRules
from morphcore.entities.creature import Creature
from morphcore.entities.creature_codec import creature_from_dict, creature_to_dict
from morphcore.errors import CollectionError, SpeciesMismatchError
from morphcore.genetics.breeding import breed
from morphcore.genetics.catalog import GeneCatalog
from morphcore.util.rng import SeededRandom
from morphcore.world.layout import EncounterSpot

logger = logging.getLogger(__name__)

STARTING_MONEY = 500


@dataclass
class PlayerState:
    """Everything a player owns or has discovered.

    Attributes:
        catalog: Catalog creatures are resolved against
        money: Spendable balance
        creatures: Owned creatures by id, in acquisition order
        discovered_morphs: Display names of every visual trait ever captured
        collected_spots: Encounter spot ids already captured
    """

    catalog: GeneCatalog = field(repr=False)
    money: int = STARTING_MONEY
    creatures: Dict[str, Creature] = field(default_factory=dict)
    discovered_morphs: Set[str] = field(default_factory=set)
    collected_spots: Set[str] = field(default_factory=set)

    def __iter__(self) -> Iterator[Creature]:
        return iter(self.creatures.values())

    def __len__(self) -> int:
        return len(self.creatures)

    def get(self, creature_id: str) -> Creature:
        creature = self.creatures.get(creature_id)
        if creature is None:
            raise CollectionError(f"No creature with id {creature_id!r} in collection")
        return creature

    def add(self, creature: Creature) -> None:
        self.creatures[creature.id] = creature
        self.discovered_morphs.update(creature.visual_genes)

    # =========================================================================
    # Game actions
    # =========================================================================

    def capture(self, spot: EncounterSpot, creature: Optional[Creature] = None) -> Creature:
        """Take the creature at an encounter spot into the collection.

        Raises:
            CollectionError: The spot was already collected
        """
        if spot.id in self.collected_spots:
            raise CollectionError(f"Encounter {spot.id!r} was already collected")
        if creature is None:
            creature = spot.generate_creature(self.catalog)
        self.add(creature)
        self.collected_spots.add(spot.id)
        logger.info("Captured %s (%s) at %s", creature.display_name, creature.id, spot.id)
        return creature

    def sell(self, creature_id: str, rules: PricingRules) -> int:
        """Sell a creature at its current price. Returns the amount credited."""
        creature = self.get(creature_id)
        price = calculate_price(creature, self.catalog, rules)
        del self.creatures[creature_id]
        self.money += price
        logger.info("Sold %s for %d", creature_id, price)
        return price

    def breed_pair(
        self,
        parent1_id: str,
        parent2_id: str,
        rng: SeededRandom,
        *,
        keep: Optional[int] = None,
    ) -> List[Creature]:
        """Breed two owned creatures and retain offspring.

        Both parents' clutch counters are incremented. The first ``keep``
        offspring (all when None) join the collection.

        Returns:
            The retained offspring

        Raises:
            CollectionError: A parent is not owned, or the same id is used twice
            SpeciesMismatchError: Parents differ in species
        """
        if parent1_id == parent2_id:
            raise CollectionError("A creature cannot be bred with itself")
        parent1 = self.get(parent1_id)
        parent2 = self.get(parent2_id)
        if parent1.species != parent2.species:
            raise SpeciesMismatchError(parent1.species, parent2.species)
        species = self.catalog.require_species(parent1.species)

        clutch = breed(parent1, parent2, species, rng)
        parent1.stats.clutches_produced += 1
        parent2.stats.clutches_produced += 1

        retained = clutch if keep is None else clutch[: max(0, keep)]
        for offspring in retained:
            self.add(offspring)
        return retained

    def is_species_unlocked(self, species_id: str) -> bool:
        """Check a species' unlock precondition against this player's progress."""
        species = self.catalog.get_species(species_id)
        if species is None:
            return False
        for key, required in species.unlock.items():
            if key == "discoveredMorphs":
                if len(self.discovered_morphs) < int(required):
                    return False
            elif key == "money":
                if self.money < int(required):
                    return False
            else:
                logger.debug("Unknown unlock condition %r for %s", key, species_id)
                return False
        return True

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "money": self.money,
            "collection": [creature_to_dict(c) for c in self.creatures.values()],
            "discoveredMorphs": sorted(self.discovered_morphs),
            "collectedSpots": sorted(self.collected_spots),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: GeneCatalog) -> "PlayerState":
        """Rebuild state from `to_dict` output.

        Unreadable creature records are dropped and unreadable fields fall back
        to a new player's values, so a damaged save never blocks startup.
        """
        state = cls(catalog=catalog, money=_read_money(data.get("money", STARTING_MONEY)))
        for record in _read_list(data, "collection"):
            if not isinstance(record, dict):
                logger.warning("Dropping creature record of type %s", type(record).__name__)
                continue
            try:
                creature = creature_from_dict(record, catalog)
            except (TypeError, ValueError) as exc:
                logger.warning("Dropping unreadable creature record: %s", exc)
                continue
            state.creatures[creature.id] = creature
        state.discovered_morphs.update(str(m) for m in _read_list(data, "discoveredMorphs"))
        state.collected_spots.update(str(s) for s in _read_list(data, "collectedSpots"))
        return state


def _read_money(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Unreadable money value %r; using %d", value, STARTING_MONEY)
        return STARTING_MONEY


def _read_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Ignoring %s: expected a list, got %s", key, type(value).__name__)
        return []
    return value

"""Creature records and their persistence codec."""

from morphcore.entities.creature import Creature, CreatureStats, Origin, Sex
from morphcore.entities.creature_codec import creature_from_dict, creature_to_dict

__all__ = [
    "Creature",
    "CreatureStats",
    "Origin",
    "Sex",
    "creature_to_dict",
    "creature_from_dict",
]

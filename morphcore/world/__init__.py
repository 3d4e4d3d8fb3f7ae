"""World layout: deterministic encounter spots derived from the world seed."""

from morphcore.world.layout import EncounterSpot, generate_encounter_spots, in_home_area

__all__ = ["EncounterSpot", "generate_encounter_spots", "in_home_area"]

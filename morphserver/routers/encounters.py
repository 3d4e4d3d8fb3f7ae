"""World encounter endpoints: list spots, inspect and capture creatures."""

import logging
from typing import TYPE_CHECKING, List

from fastapi import APIRouter, HTTPException

from morphcore.errors import CollectionError
from morphcore.world.layout import EncounterSpot
from morphserver.models import CreatureView, EncounterSpotView

if TYPE_CHECKING:
    from morphserver.app_factory import AppContext

logger = logging.getLogger(__name__)


def setup_encounters_router(context: "AppContext") -> APIRouter:
    """Create the encounters router.

    Args:
        context: Application context holding the world layout and player

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/encounters", tags=["encounters"])

    def _get_spot(spot_id: str) -> EncounterSpot:
        spot = context.spots.get(spot_id)
        if spot is None:
            raise HTTPException(status_code=404, detail=f"Encounter {spot_id} not found")
        return spot

    @router.get("", response_model=List[EncounterSpotView])
    async def list_encounters():
        """All encounter spots of the world, in layout order."""
        collected = context.player.collected_spots
        return [
            EncounterSpotView.from_spot(spot, collected=spot.id in collected)
            for spot in context.spots.values()
        ]

    @router.get("/{spot_id}", response_model=CreatureView)
    async def inspect_encounter(spot_id: str):
        """The creature at a spot. Identical on every request for the same world seed."""
        spot = _get_spot(spot_id)
        creature = spot.generate_creature(context.catalog)
        return CreatureView.from_creature(creature, context.pricing_rules)

    @router.post("/{spot_id}/capture", response_model=CreatureView)
    async def capture_encounter(spot_id: str):
        spot = _get_spot(spot_id)
        try:
            creature = context.player.capture(spot)
        except CollectionError as e:
            logger.info("Capture refused for %s: %s", spot_id, e)
            raise HTTPException(status_code=409, detail=str(e))
        context.persist()
        return CreatureView.from_creature(creature, context.pricing_rules)

    return router

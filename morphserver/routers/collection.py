"""Player collection endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException

from morphcore.errors import CollectionError
from morphserver.models import CreatureView, PlayerView, SellResponse

if TYPE_CHECKING:
    from morphserver.app_factory import AppContext


def setup_collection_router(context: "AppContext") -> APIRouter:
    """Create the collection router.

    Args:
        context: Application context holding the player state

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/collection", tags=["collection"])

    @router.get("", response_model=PlayerView)
    async def get_collection():
        player = context.player
        return PlayerView(
            money=player.money,
            discovered_morphs=sorted(player.discovered_morphs),
            creatures=[CreatureView.from_creature(c, context.pricing_rules) for c in player],
        )

    @router.get("/{creature_id}", response_model=CreatureView)
    async def get_creature(creature_id: str):
        try:
            creature = context.player.get(creature_id)
        except CollectionError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return CreatureView.from_creature(creature, context.pricing_rules)

    @router.post("/{creature_id}/sell", response_model=SellResponse)
    async def sell_creature(creature_id: str):
        try:
            price = context.player.sell(creature_id, context.pricing_rules)
        except CollectionError as e:
            raise HTTPException(status_code=404, detail=str(e))
        context.persist()
        return SellResponse(creature_id=creature_id, price=price, money=context.player.money)

    return router

"""Breeding endpoints: offspring odds and clutch production."""

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException

from morphcore.errors import BreedingError, CollectionError, UnknownSpeciesError
from morphcore.genetics.breeding import predict_offspring, summarize_offspring_odds
from morphserver.models import BreedRequest, BreedResponse, CreatureView, PairRequest, PredictResponse

if TYPE_CHECKING:
    from morphserver.app_factory import AppContext

logger = logging.getLogger(__name__)


def setup_breeding_router(context: "AppContext") -> APIRouter:
    """Create the breeding router.

    Args:
        context: Application context holding the player and breeding stream

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api/breeding", tags=["breeding"])

    @router.post("/predict", response_model=PredictResponse)
    async def predict(request: PairRequest):
        """Punnett odds for a pairing. Side-effect free."""
        try:
            parent1 = context.player.get(request.parent1_id)
            parent2 = context.player.get(request.parent2_id)
        except CollectionError as e:
            raise HTTPException(status_code=404, detail=str(e))
        if parent1.species != parent2.species:
            raise HTTPException(
                status_code=400,
                detail=f"Cannot breed across species: {parent1.species} x {parent2.species}",
            )

        prediction = predict_offspring(parent1.genotype, parent2.genotype, context.catalog)
        return PredictResponse(
            genes=prediction,
            labels=summarize_offspring_odds(prediction, context.catalog),
        )

    @router.post("/breed", response_model=BreedResponse)
    async def breed(request: BreedRequest):
        """Breed two owned creatures and keep the requested offspring."""
        try:
            offspring = context.player.breed_pair(
                request.parent1_id,
                request.parent2_id,
                context.breeding_rng,
                keep=request.keep,
            )
        except CollectionError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except (BreedingError, UnknownSpeciesError) as e:
            logger.warning("Breeding request rejected: %s", e)
            raise HTTPException(status_code=400, detail=str(e))

        context.persist()
        return BreedResponse(
            offspring=[CreatureView.from_creature(c, context.pricing_rules) for c in offspring]
        )

    return router

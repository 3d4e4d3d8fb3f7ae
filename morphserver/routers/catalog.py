"""Catalog browsing and stateless creature evaluation endpoints."""

import logging
from typing import TYPE_CHECKING, List

from fastapi import APIRouter, HTTPException

from morphcore.entities.creature_codec import creature_from_dict
from morphcore.genetics.validation import validate_genotype
from morphserver.models import (
    ComboView,
    CreatureView,
    EvaluateRequest,
    EvaluateResponse,
    GeneView,
    SpeciesView,
)

if TYPE_CHECKING:
    from morphserver.app_factory import AppContext

logger = logging.getLogger(__name__)


def setup_catalog_router(context: "AppContext") -> APIRouter:
    """Create the catalog router.

    Args:
        context: Application context holding the loaded catalog

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api", tags=["catalog"])

    @router.get("/catalog/genes", response_model=List[GeneView])
    async def list_genes():
        """All genes and super forms in catalog order."""
        return [GeneView.from_gene(g) for g in context.catalog.genes.values()]

    @router.get("/catalog/combos", response_model=List[ComboView])
    async def list_combos():
        return [ComboView.from_combo(c) for c in context.catalog.combos.values()]

    @router.get("/catalog/species", response_model=List[SpeciesView])
    async def list_species():
        """All species, with whether the current player has unlocked each."""
        return [
            SpeciesView.from_species(s, unlocked=context.player.is_species_unlocked(s.id))
            for s in context.catalog.species.values()
        ]

    @router.post("/creatures/evaluate", response_model=EvaluateResponse)
    async def evaluate_creature(request: EvaluateRequest):
        """Resolve phenotype, names and price for a serialized creature.

        Nothing is stored; this lets presentation code re-rate saved records
        against the current catalog.
        """
        try:
            creature = creature_from_dict(request.creature, context.catalog)
        except (ValueError, OverflowError) as e:
            logger.debug("Rejected creature record: %s", e)
            raise HTTPException(status_code=400, detail=str(e))

        issues = validate_genotype(creature.genotype, context.catalog, species=creature.species)
        return EvaluateResponse(
            creature=CreatureView.from_creature(creature, context.pricing_rules),
            issues=issues,
        )

    return router

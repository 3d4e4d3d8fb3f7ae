"""Application factory and context for the morph engine API.

All runtime state lives on an AppContext instead of module-level globals, so
each test builds a fresh context and nothing happens at import time.

Usage:
------
    # For production (settings from the environment)
    app = create_app()

    # For testing (explicit settings, no save file side effects)
    app = create_app(GameSettings(save_path=tmp_path / "save.json"))
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from fastapi import FastAPI

from morphcore.collection import PlayerState
from morphcore.config.settings import GameSettings
from morphcore.economy.rules import PricingRules
from morphcore.genetics.catalog import GeneCatalog
from morphcore.genetics.catalog_loader import MorphData, load_morph_data
from morphcore.persistence.save_manager import SaveManager
from morphcore.util.rng import LCG_MODULUS, SeededRandom
from morphcore.world.layout import EncounterSpot, generate_encounter_spots
from morphserver.logging_config import configure_logging
from morphserver.routers.breeding import setup_breeding_router
from morphserver.routers.catalog import setup_catalog_router
from morphserver.routers.collection import setup_collection_router
from morphserver.routers.encounters import setup_encounters_router

logger = logging.getLogger(__name__)


def _session_seed() -> int:
    return time.time_ns() % (LCG_MODULUS - 1) + 1


@dataclass
class AppContext:
    """Runtime context holding all application state.

    Attributes:
        settings: Resolved game settings
        morph_data: Loaded catalog and pricing rules
        player: The player's collection
        save_manager: Persistence for ``player``
        spots: Encounter spots by id, generated from the world seed
        breeding_rng: Stream clutches are drawn from
        autosave: Persist the player after every mutating request
    """

    settings: GameSettings
    morph_data: MorphData
    player: PlayerState
    save_manager: SaveManager
    spots: Dict[str, EncounterSpot] = field(default_factory=dict)
    breeding_rng: SeededRandom = field(default_factory=lambda: SeededRandom(_session_seed()))
    autosave: bool = True

    @property
    def catalog(self) -> GeneCatalog:
        return self.morph_data.catalog

    @property
    def pricing_rules(self) -> PricingRules:
        return self.morph_data.pricing_rules

    @classmethod
    def from_settings(
        cls, settings: GameSettings, *, breeding_seed: Optional[int] = None
    ) -> "AppContext":
        """Load the catalog, lay out the world and restore the saved player."""
        morph_data = load_morph_data(settings.catalog_path)
        world_rng = SeededRandom(settings.world_seed)
        spots = {spot.id: spot for spot in generate_encounter_spots(world_rng)}

        save_manager = SaveManager(settings.save_path)
        saved = save_manager.load()
        if saved is not None:
            player = PlayerState.from_dict(saved, morph_data.catalog)
        else:
            player = PlayerState(catalog=morph_data.catalog)

        context = cls(
            settings=settings,
            morph_data=morph_data,
            player=player,
            save_manager=save_manager,
            spots=spots,
        )
        if breeding_seed is not None:
            context.breeding_rng = SeededRandom(breeding_seed)
        return context

    def persist(self) -> None:
        if self.autosave:
            self.save_manager.save(self.player.to_dict())


def create_app(
    settings: Optional[GameSettings] = None,
    *,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Game settings (read from the environment when omitted)
        context: Prebuilt context; takes precedence over ``settings``

    Returns:
        Configured FastAPI app with ``app.state.context`` set
    """
    if context is None:
        settings = settings or GameSettings()
        configure_logging(level=settings.log_level)
        context = AppContext.from_settings(settings)

    app = FastAPI(title="Hognose Morph Engine API", version="1.0.0")
    app.state.context = context

    app.include_router(setup_catalog_router(context))
    app.include_router(setup_encounters_router(context))
    app.include_router(setup_collection_router(context))
    app.include_router(setup_breeding_router(context))

    logger.info(
        "Morph API ready: %d encounter spots, %d owned creatures",
        len(context.spots),
        len(context.player),
    )
    return app

"""Main entry point for the hognose morph engine.

This module provides command-line options:
- Web mode (default): FastAPI backend serving catalog, encounters and breeding
- Encounter listing: print the world's encounter spots for a seed and exit
"""

import argparse
import logging
import sys
from pathlib import Path

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 60


def run_web_server(catalog_path=None):
    """Run the API server."""
    from morphcore.config.settings import GameSettings

    try:
        import uvicorn

        from morphserver.app_factory import create_app
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)

    settings = GameSettings()
    if catalog_path:
        settings.catalog_path = Path(catalog_path)
    app = create_app(settings)

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("HOGNOSE MORPH ENGINE - WEB SERVER")
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("World seed: %d", settings.world_seed)
    logger.info("Save file: %s", settings.save_path)
    logger.info("API docs available at http://localhost:%d/docs", settings.api_port)
    logger.info("Press Ctrl+C to stop the server")
    logger.info("=" * SEPARATOR_WIDTH)

    uvicorn.run(app, host="0.0.0.0", port=settings.api_port)


def list_encounters(seed=None, catalog_path=None):
    """Log every encounter spot of a world with the creature living there.

    Args:
        seed: World seed (settings default when omitted)
        catalog_path: Optional catalog JSON override
    """
    from morphcore.config.settings import GameSettings
    from morphcore.genetics.catalog_loader import load_morph_data
    from morphcore.util.rng import SeededRandom
    from morphcore.world.layout import generate_encounter_spots

    settings = GameSettings() if seed is None else GameSettings(world_seed=seed)
    world_seed = settings.world_seed
    morph_data = load_morph_data(catalog_path or settings.catalog_path)
    spots = generate_encounter_spots(SeededRandom(world_seed))

    logger.info("World seed %d: %d encounter spots", world_seed, len(spots))
    for spot in spots:
        creature = spot.generate_creature(morph_data.catalog)
        price = creature.calculate_price(morph_data.pricing_rules)
        logger.info(
            "%-10s (%7.1f, %7.1f) %-8s %-40s %6d  %s",
            spot.id,
            spot.x,
            spot.z,
            creature.sex.value,
            f"{creature.display_name} {creature.species_name}",
            price,
            creature.rarity_tier(morph_data.pricing_rules),
        )


def main():
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Hognose Morph Genetics and Valuation Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run web server (default)
  python main.py

  # Show the encounters of the default world
  python main.py --list-encounters

  # Show the encounters of another world
  python main.py --list-encounters --seed 7
        """,
    )

    parser.add_argument(
        "--list-encounters",
        action="store_true",
        help="Print the world's encounter spots and exit",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="World seed for --list-encounters (optional)"
    )

    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Morph catalog JSON to use instead of the bundled one",
    )

    args = parser.parse_args()

    if args.list_encounters:
        list_encounters(seed=args.seed, catalog_path=args.catalog)
    else:
        run_web_server(catalog_path=args.catalog)


if __name__ == "__main__":
    main()

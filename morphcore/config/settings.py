"""Runtime settings resolved from the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from morphcore.config.world import WORLD_SEED
from morphcore.util.rng import normalize_seed

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "morphs.json"
DEFAULT_SAVE_PATH = Path("data") / "save.json"
DEFAULT_API_PORT = 8000


@dataclass
class GameSettings:
    """Settings for a game session.

    Every field falls back to a ``MORPH_*`` environment variable and then to
    a built-in default, so tests can construct settings explicitly while
    deployments configure through the environment.

    Attributes:
        catalog_path: JSON catalog of genes, combos, species and pricing rules.
        world_seed: Root seed of the world PRNG stream.
        save_path: File the player's progress is saved to.
        log_level: Logging level name.
        api_port: Port the HTTP server binds to.
    """

    catalog_path: Path = field(
        default_factory=lambda: Path(os.getenv("MORPH_CATALOG_PATH", str(DEFAULT_CATALOG_PATH)))
    )
    world_seed: int = field(default_factory=lambda: int(os.getenv("MORPH_WORLD_SEED", str(WORLD_SEED))))
    save_path: Path = field(
        default_factory=lambda: Path(os.getenv("MORPH_SAVE_PATH", str(DEFAULT_SAVE_PATH)))
    )
    log_level: str = field(default_factory=lambda: os.getenv("MORPH_LOG_LEVEL", "INFO").upper())
    api_port: int = field(
        default_factory=lambda: int(os.getenv("MORPH_API_PORT", str(DEFAULT_API_PORT)))
    )

    def __post_init__(self) -> None:
        self.world_seed = normalize_seed(self.world_seed)

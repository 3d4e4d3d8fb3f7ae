"""Game state persistence.

Saves are a versioned envelope ``{version, timestamp, state}`` written as
JSON to a single file. The state itself is whatever the caller hands in
(normally ``PlayerState.to_dict()``); creatures inside it carry genotype only.

Schema Versioning:
    - Version 1.0.0: Original envelope
"""

import logging
import shutil
import time
from pathlib import Path
from typing import Any, Dict, Optional, Union

import orjson

from morphcore.errors import SaveError

logger = logging.getLogger(__name__)

SAVE_VERSION = "1.0.0"


class SaveManager:
    """Reads and writes the save file at ``path``."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def save(self, state: Dict[str, Any]) -> bool:
        """Write state to disk. Returns False (and logs) on failure."""
        envelope = {
            "version": SAVE_VERSION,
            "timestamp": int(time.time() * 1000),
            "state": state,
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_bytes(orjson.dumps(envelope, option=orjson.OPT_INDENT_2))
            tmp_path.replace(self.path)
        except (OSError, TypeError) as e:
            logger.error("Failed to save game to %s: %s", self.path, e, exc_info=True)
            return False
        logger.info("Game saved to %s", self.path)
        return True

    def load(self) -> Optional[Dict[str, Any]]:
        """Load the saved state, migrating older versions.

        Returns:
            The state dict, or None when there is no readable save
        """
        if not self.path.exists():
            return None
        try:
            envelope = orjson.loads(self.path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            logger.error("Failed to load game from %s: %s", self.path, e)
            return None
        if not isinstance(envelope, dict) or not isinstance(envelope.get("state"), dict):
            logger.error("Save file %s has no state block", self.path)
            return None

        if envelope.get("version") != SAVE_VERSION:
            logger.warning(
                "Save version mismatch (%s != %s), migrating", envelope.get("version"), SAVE_VERSION
            )
            return self.migrate(envelope)

        logger.info("Game loaded from save written at %s", envelope.get("timestamp"))
        return envelope["state"]

    def migrate(self, envelope: Dict[str, Any]) -> Dict[str, Any]:
        """Bring an older envelope up to SAVE_VERSION and re-save it.

        Only one envelope version exists so far, so the state passes through
        unchanged; version-specific steps go here when the format changes.
        """
        logger.info("Migrating save from version %s to %s", envelope.get("version"), SAVE_VERSION)
        state = envelope["state"]
        self.save(state)
        return state

    def delete_save(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error("Failed to delete save %s: %s", self.path, e)
            return False
        logger.info("Save deleted")
        return True

    def has_save(self) -> bool:
        return self.path.exists()

    def export_save(self, destination: Union[str, Path]) -> Optional[Path]:
        """Copy the save file to ``destination``. Returns None if there is no save."""
        if not self.has_save():
            logger.warning("No save to export")
            return None
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(self.path, destination)
        return destination

    def import_save(self, source: Union[str, Path]) -> Dict[str, Any]:
        """Replace the current save with the envelope stored at ``source``.

        Raises:
            SaveError: The file cannot be read or holds no state block
        """
        try:
            envelope = orjson.loads(Path(source).read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            raise SaveError(f"Cannot import save from {source}: {e}") from e
        if not isinstance(envelope, dict) or not isinstance(envelope.get("state"), dict):
            raise SaveError(f"Save file {source} has no state block")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(orjson.dumps(envelope, option=orjson.OPT_INDENT_2))
        logger.info("Save imported from %s", source)
        return envelope["state"]

"""Save-file persistence for player state."""

from morphcore.persistence.save_manager import SAVE_VERSION, SaveManager

__all__ = ["SaveManager", "SAVE_VERSION"]

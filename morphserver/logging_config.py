"""Logging setup shared by the API server and the command-line entry point."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers whose level follows the configured one
PROJECT_LOGGERS = ("morphcore", "morphserver", "uvicorn", "uvicorn.error")


def resolve_level(level: str | None = None) -> str:
    """Explicit level, else ``MORPH_LOG_LEVEL``, else INFO."""
    raw = level if level is not None else os.getenv("MORPH_LOG_LEVEL")
    resolved = (raw or "INFO").upper()
    if not isinstance(logging.getLevelName(resolved), int):
        logging.getLogger(__name__).warning("Unknown log level %r, using INFO", raw)
        resolved = "INFO"
    return resolved


def configure_logging(level: str | None = None, *, access_log: bool | None = None) -> logging.Logger:
    """Configure root logging and align the project's loggers.

    Args:
        level: Log level name; see ``resolve_level``.
        access_log: Keep per-request uvicorn access lines. Defaults to on only
            at DEBUG level, since every encounter inspection is a request.

    Returns:
        The ``morphserver`` logger.
    """
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    for name in PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(resolved)

    if access_log is None:
        access_log = resolved == "DEBUG"
    logging.getLogger("uvicorn.access").setLevel(resolved if access_log else "WARNING")

    server_logger = logging.getLogger("morphserver")
    server_logger.debug("Logging configured at %s", resolved)
    return server_logger

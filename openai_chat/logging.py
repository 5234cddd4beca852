"""Logging setup for applications embedding openai_chat.

The library itself only creates module loggers; nothing is configured on import.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

PACKAGE_LOGGER = "openai_chat"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    raise ValueError(f"Unsupported log level: {level}")


def configure_logging(
    level: str | int = "WARNING",
    *,
    log_file: str | Path | None = None,
    rich_console: bool = True,
) -> logging.Logger:
    """Attach a rich console handler (and optionally a plain file handler) to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    if rich_console:
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(file_handler)

    return logger

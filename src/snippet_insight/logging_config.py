"""
Logging setup for Snippet Insight.

Library modules only ever call ``get_logger(__name__)``. Handlers are
installed once by the CLI through ``setup_logging``; an application that
embeds the engine can configure the ``snippet_insight`` logger itself.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "snippet_insight"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route log records to stderr through rich, and optionally to a file.

    Args:
        verbosity: "quiet" (errors only), "normal" (degraded stages and
            other warnings) or "verbose" (per-stage debug output)
        log_file: Optional path; records are appended with timestamps

    Returns:
        The ``snippet_insight`` package logger
    """
    level = LEVELS.get(verbosity, logging.WARNING)
    debug = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            show_time=debug,
            show_path=debug,
        )
    ]

    if log_file:
        to_file = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        to_file.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        handlers.append(to_file)

    # force=True so a second call (after config files are read) replaces handlers
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``snippet_insight`` namespace (the root one if name is None)."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)

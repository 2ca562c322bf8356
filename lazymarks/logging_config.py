"""Central logging configuration for lazymarks.

Call :func:`setup_logging` once from the CLI entrypoint. Library modules only
create module loggers and never configure handlers themselves.
"""

from __future__ import annotations

import logging.config
import os

__all__ = ["setup_logging", "resolve_log_level"]

LOG_LEVEL_ENV = "LAZYMARKS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(verbose: bool = False) -> str:
    """Return the level name from ``--verbose`` or the environment."""
    if verbose:
        return "DEBUG"
    candidate = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if candidate in LOG_LEVELS:
        return candidate
    return DEFAULT_LOG_LEVEL


def setup_logging(verbose: bool = False) -> None:
    """Configure a single stderr handler for the ``lazymarks`` logger tree."""
    level = resolve_log_level(verbose)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "simple": {
                    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "simple",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "lazymarks": {
                    "handlers": ["console"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )

"""
Runtime configuration for Lodestar.

Settings are read from the environment:

    LODESTAR_LOG_LEVEL   logging level name (default: WARNING)
    LODESTAR_LOG_FORMAT  logging format string
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SearchSettings:
    """
    Configuration for logging around search runs.

    Attributes:
        log_level: Level name applied to the ``lodestar`` logger
        log_format: Format used by the handler ``configure_logging`` installs
    """

    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{self.log_level}'. Must be one of: {', '.join(LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchSettings":
        """Build settings from ``LODESTAR_*`` environment variables."""
        if environ is None:
            environ = os.environ
        return cls(
            log_level=environ.get("LODESTAR_LOG_LEVEL", "WARNING"),
            log_format=environ.get("LODESTAR_LOG_FORMAT", DEFAULT_LOG_FORMAT),
        )


class LodestarHandler(logging.StreamHandler):
    """Stream handler installed by :func:`configure_logging`."""


def configure_logging(settings: SearchSettings) -> logging.Logger:
    """
    Apply settings to the ``lodestar`` logger hierarchy.

    Installs a single stream handler; calling this again replaces the
    handler rather than adding a second one.
    """
    logger = logging.getLogger("lodestar")
    logger.setLevel(settings.log_level)
    for handler in list(logger.handlers):
        if isinstance(handler, LodestarHandler):
            logger.removeHandler(handler)

    handler = LodestarHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    return logger

"""Logging setup for applications embedding the engine."""

import logging

from .settings import SetupConfig


def setup_logging(config: SetupConfig | None = None) -> None:
    """Configure root logging at the configured level."""
    level = config.log_level if config else "INFO"
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

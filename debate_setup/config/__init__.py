"""Engine configuration."""

from .logging_config import setup_logging
from .settings import (
    DurationConfig,
    PersonalityConfig,
    SelectionConfig,
    SetupConfig,
    TopicConfig,
    get_default_config,
)

__all__ = [
    "DurationConfig",
    "PersonalityConfig",
    "SelectionConfig",
    "SetupConfig",
    "TopicConfig",
    "get_default_config",
    "setup_logging",
]

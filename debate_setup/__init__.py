"""Debate setup engine: turns a topic, AI debaters and personalities into a ready debate."""

from .config import SetupConfig, get_default_config, setup_logging
from .debaters import DebaterSelector, convert_to_debater
from .exceptions import (
    CatalogIntegrityError,
    DebateNotReadyError,
    InvalidConfigurationError,
    SetupError,
)
from .formats import format_registry
from .models import (
    AIConfig,
    AIDebater,
    DebateConfig,
    DebateSession,
    DebateSettings,
    DebateStartRequest,
    Personality,
    PersonalityCombination,
    Topic,
    TopicCategory,
    ValidationResult,
)
from .orchestrator import DebateSetup
from .personalities import PersonalityAssigner
from .steps import StepController
from .topics import TopicService, normalize_motion
from .types import Complexity, DebateStep, Position, SessionStatus, TopicMode
from .validation import DebateAssembler, SetupValidation

__version__ = "0.1.0"

__all__ = [
    "AIConfig",
    "AIDebater",
    "CatalogIntegrityError",
    "Complexity",
    "DebateAssembler",
    "DebateConfig",
    "DebateNotReadyError",
    "DebateSession",
    "DebateSettings",
    "DebateSetup",
    "DebateStartRequest",
    "DebateStep",
    "DebaterSelector",
    "InvalidConfigurationError",
    "Personality",
    "PersonalityAssigner",
    "PersonalityCombination",
    "Position",
    "SessionStatus",
    "SetupConfig",
    "SetupError",
    "SetupValidation",
    "StepController",
    "Topic",
    "TopicCategory",
    "TopicMode",
    "TopicService",
    "ValidationResult",
    "convert_to_debater",
    "format_registry",
    "get_default_config",
    "normalize_motion",
    "setup_logging",
]

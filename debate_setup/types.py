"""Shared types and enums for the debate setup engine."""

from enum import Enum


class DebateStep(Enum):
    """Ordered stages of debate setup."""

    TOPIC = "topic"
    AI = "ai"
    PERSONALITY = "personality"
    REVIEW = "review"


STEP_ORDER: tuple[DebateStep, ...] = (
    DebateStep.TOPIC,
    DebateStep.AI,
    DebateStep.PERSONALITY,
    DebateStep.REVIEW,
)


class TopicMode(Enum):
    """Where the motion came from."""

    PRESET = "preset"
    CUSTOM = "custom"
    SURPRISE = "surprise"


class Difficulty(Enum):
    """Catalog motion difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ModerationLevel(Enum):
    """How strictly the moderator enforces the rules."""

    NONE = "none"
    LIGHT = "light"
    STRICT = "strict"


class SessionStatus(Enum):
    """Lifecycle status of a debate session."""

    SETUP = "setup"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Position(Enum):
    """Debate positions."""

    PRO = "pro"
    CON = "con"
    NEUTRAL = "neutral"


class ArgumentStyle(Enum):
    """Argument style a personality leans on."""

    LOGICAL = "logical"
    EMOTIONAL = "emotional"
    BALANCED = "balanced"


class Complexity(Enum):
    """Coarse complexity bucket of a configuration."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"

"""Data models for the debate setup engine."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import (
    ArgumentStyle,
    Complexity,
    Difficulty,
    ModerationLevel,
    Position,
    SessionStatus,
    TopicMode,
)


class TopicCategory(BaseModel):
    """A group of catalog motions."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str
    color: str
    description: str


class Topic(BaseModel):
    """Immutable catalog motion."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str = Field(..., description="Declarative motion, not a question")
    category_id: str
    difficulty: Difficulty = Difficulty.MEDIUM
    tags: frozenset[str] = Field(default_factory=frozenset)
    popularity: int = Field(default=3, ge=1, le=5)


class AIConfig(BaseModel):
    """Generic AI participant as listed in the provider directory."""

    model_config = ConfigDict(frozen=True)

    id: str
    provider: str
    name: str
    model: str = ""


class DebatingStyle(BaseModel):
    """How a debater tends to argue, each axis in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    aggression: float = Field(default=0.5, ge=0.0, le=1.0)
    formality: float = Field(default=0.6, ge=0.0, le=1.0)
    evidence_based: float = Field(default=0.7, ge=0.0, le=1.0)
    emotional: float = Field(default=0.4, ge=0.0, le=1.0)


class AIDebater(AIConfig):
    """AI participant carrying debate-specific metadata."""

    debating_style: DebatingStyle = Field(default_factory=DebatingStyle)
    strength_areas: tuple[str, ...] = ()
    weakness_areas: tuple[str, ...] = ()


class PersonalityTraits(BaseModel):
    """Tone of a personality, each axis in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    formality: float = Field(default=0.6, ge=0.0, le=1.0)
    humor: float = Field(default=0.3, ge=0.0, le=1.0)
    technicality: float = Field(default=0.5, ge=0.0, le=1.0)
    empathy: float = Field(default=0.6, ge=0.0, le=1.0)


class DebateModifiers(BaseModel):
    """Debate-only behaviour of a personality."""

    model_config = ConfigDict(frozen=True)

    argument_style: ArgumentStyle = ArgumentStyle.BALANCED
    interruption: float = Field(default=0.3, ge=0.0, le=1.0)
    concession: float = Field(default=0.5, ge=0.0, le=1.0)
    aggression: float = Field(default=0.4, ge=0.0, le=1.0)


class Personality(BaseModel):
    """Named behavioural overlay applicable to any debater."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    system_prompt: str
    traits: PersonalityTraits = Field(default_factory=PersonalityTraits)
    is_premium: bool = False
    debate_modifiers: DebateModifiers | None = None
    debate_prompt: str | None = None


class PersonalityCombination(BaseModel):
    """Curated set of personality ids meant to be applied positionally."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    personalities: list[str]


class DebateSettings(BaseModel):
    """Run-time settings of a debate.

    Ranges are checked by ``validate_settings`` so that bad values surface as
    validation errors rather than exceptions.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_rounds: int = Field(default=3, description="Rounds, 1-10")
    turn_duration: int = Field(default=120, description="Seconds per turn, 30-300")
    allow_interruptions: bool = False
    moderation_level: ModerationLevel = ModerationLevel.LIGHT
    is_premium: bool = False
    format: str = Field(default="oxford", description="Debate format name")


class ValidationResult(BaseModel):
    """Outcome of a validation pass. Errors block, warnings never do."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    message: str | None = None
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_messages(
        cls,
        errors: list[str],
        warnings: list[str],
        valid_message: str | None = None,
    ) -> "ValidationResult":
        """Build a result whose message is the first error, if any."""
        return cls(
            is_valid=not errors,
            message=errors[0] if errors else valid_message,
            errors=list(errors),
            warnings=list(warnings),
        )


class TopicValidationResult(ValidationResult):
    """Topic validation with non-blocking rewrite and similarity suggestions."""

    suggestions: list[str] = Field(default_factory=list)


class SelectionSummary(BaseModel):
    """Digest of the current debater selection."""

    count: int
    providers: list[str]
    is_valid: bool
    can_proceed: bool


class PersonalitySummary(BaseModel):
    """Digest of the current personality assignments."""

    total_assigned: int
    expected_total: int
    unique_count: int
    has_custom: bool
    compatibility_score: int
    is_complete: bool
    is_valid: bool


class ValidationSummary(BaseModel):
    """Per-field and overall validation with the readiness verdict."""

    topic: ValidationResult
    ai_selection: ValidationResult
    personalities: ValidationResult
    overall: ValidationResult
    can_proceed: bool
    next_action: str | None = None


class DebateStartRequest(BaseModel):
    """Payload handed to the session-start call."""

    model_config = ConfigDict(populate_by_name=True)

    selected_ais: list[AIDebater] = Field(..., alias="selectedAIs")
    topic: str
    personalities: dict[str, Personality]


class DebateConfig(BaseModel):
    """Validated, ready-to-run debate configuration.

    Debaters and personality assignments are stored as tuples so a finished
    configuration cannot be changed in place. ``personalities`` accepts a
    ``{debater_id: Personality}`` mapping and keeps its items.
    """

    model_config = ConfigDict(frozen=True)

    topic: str
    topic_mode: TopicMode = TopicMode.PRESET
    debaters: tuple[AIDebater, ...] = ()
    personalities: tuple[tuple[str, Personality], ...] = ()
    settings: DebateSettings = Field(default_factory=DebateSettings)
    created_at: datetime = Field(default_factory=datetime.now)
    estimated_duration: int = Field(default=0, description="Minutes")

    @field_validator("personalities", mode="before")
    @classmethod
    def freeze_personality_map(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    @property
    def personality_map(self) -> dict[str, Personality]:
        """Fresh ``{debater_id: Personality}`` copy of the assignments."""
        return dict(self.personalities)

    def get_personality(self, debater_id: str) -> Personality | None:
        return self.personality_map.get(debater_id)

    def to_start_request(self) -> DebateStartRequest:
        """Serialize into the outbound session-start payload."""
        return DebateStartRequest(
            selected_ais=list(self.debaters),
            topic=self.topic,
            personalities=self.personality_map,
        )


class ParticipantStats(BaseModel):
    """Running statistics of a participant, updated during the debate."""

    messages_count: int = 0
    total_words: int = 0
    average_response_time: float = 0.0
    score: float = 0.0


class DebateParticipant(BaseModel):
    """A debater bound to a personality and a side."""

    id: str
    ai: AIDebater
    personality: Personality
    position: Position
    stats: ParticipantStats = Field(default_factory=ParticipantStats)


class DebateMessage(BaseModel):
    """A single message in a running debate."""

    id: str
    sender_id: str
    sender_name: str
    content: str
    round: int
    message_type: str = "response"
    timestamp: datetime = Field(default_factory=datetime.now)
    metadata: dict[str, Any] = Field(default_factory=dict)


class DebateScore(BaseModel):
    """Per-round scores keyed by participant id."""

    round: int
    scores: dict[str, float] = Field(default_factory=dict)
    winner: str | None = None
    total_votes: int = 0


class DebateSession(BaseModel):
    """Session handed to the execution subsystem."""

    id: str
    config: DebateConfig
    status: SessionStatus = SessionStatus.SETUP
    current_round: int = 0
    messages: list[DebateMessage] = Field(default_factory=list)
    scores: list[DebateScore] = Field(default_factory=list)
    participants: list[DebateParticipant] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    started_at: datetime | None = None
    completed_at: datetime | None = None


class ConfigurationPreview(BaseModel):
    """What is still missing before a partial configuration can start."""

    can_start: bool
    missing_elements: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ConfigurationSummary(BaseModel):
    """Human-facing digest of a finished configuration."""

    topic: str
    debater_count: int
    debater_names: list[str]
    has_custom_personalities: bool
    estimated_duration: int
    complexity: Complexity

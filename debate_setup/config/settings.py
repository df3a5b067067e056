"""Configuration settings for the debate setup engine."""

import json
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from debate_setup.models import DebateSettings
from debate_setup.types import TopicMode


class SelectionConfig(BaseModel):
    """Limits on how many debaters can be picked."""

    min_debaters: int = Field(default=2, description="Fewest debaters a debate can have")
    max_debaters: int = Field(default=6, description="Most debaters a debate can have")
    required_debaters: int = Field(
        default=2, description="Exact debater count the standard two-sided mode needs"
    )
    max_recommended_pairs: int = Field(
        default=5, description="Cap on recommended debater pairs"
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "SelectionConfig":
        if not 1 <= self.min_debaters <= self.required_debaters <= self.max_debaters:
            raise ValueError(
                "Debater limits must satisfy 1 <= min_debaters <= required_debaters <= max_debaters"
            )
        return self


class TopicConfig(BaseModel):
    """Topic validation and suggestion tunables."""

    min_length: int = Field(default=10, description="Shortest acceptable motion")
    max_length: int = Field(default=200, description="Longest acceptable motion")
    long_warning_length: int = Field(
        default=150, description="Motions longer than this draw a warning"
    )
    short_warning_length: int = Field(
        default=20, description="Motions shorter than this draw a warning"
    )
    suggested_count: int = Field(default=6, description="Default number of suggested topics")
    related_count: int = Field(default=3, description="Default number of related topics")
    history_limit: int = Field(default=10, description="Finalized topics kept in history")
    max_similar_suggestions: int = Field(
        default=2, description="Similar catalog motions surfaced for a custom topic"
    )
    blocked_terms: list[str] = Field(
        default=["hate", "kill", "murder", "violent"],
        description="Terms that make a custom topic unacceptable",
    )

    @model_validator(mode="after")
    def validate_lengths(self) -> "TopicConfig":
        if self.min_length >= self.max_length:
            raise ValueError("min_length must be smaller than max_length")
        return self

    @field_validator("blocked_terms")
    @classmethod
    def normalize_blocked_terms(cls, v: list[str]) -> list[str]:
        return [term.strip().lower() for term in v if term.strip()]


class DurationConfig(BaseModel):
    """Estimated debate durations in minutes."""

    short: int = Field(default=8, description="Short or light-hearted motions")
    medium: int = Field(default=12, description="Medium-length motions")
    long: int = Field(default=18, description="Long motions")
    complex: int = Field(default=25, description="Philosophy and science motions")


class PersonalityConfig(BaseModel):
    """Personality tier and warning tunables."""

    default_id: str = Field(default="default", description="Personality assigned automatically")
    free_ids: list[str] = Field(
        default=["default", "prof_sage"],
        description="Personalities available without premium",
    )
    aggression_threshold: float = Field(
        default=0.6, description="Aggression above which a personality counts as intense"
    )

    @model_validator(mode="after")
    def validate_free_ids(self) -> "PersonalityConfig":
        if self.default_id not in self.free_ids:
            raise ValueError("The default personality must be available on the free tier")
        return self


class SetupConfig(BaseModel):
    """Complete debate setup configuration."""

    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    topic: TopicConfig = Field(default_factory=TopicConfig)
    durations: DurationConfig = Field(default_factory=DurationConfig)
    personalities: PersonalityConfig = Field(default_factory=PersonalityConfig)
    defaults: DebateSettings = Field(
        default_factory=DebateSettings, description="Settings used for new debates"
    )
    default_topic_mode: TopicMode = Field(default=TopicMode.PRESET)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @classmethod
    def load_from_file(cls, config_path: Path) -> "SetupConfig":
        """Load configuration from a JSON or YAML file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json", exclude_unset=True),
                f,
                default_flow_style=False,
                indent=2,
            )


def get_default_config() -> SetupConfig:
    """Configuration with every tunable at its default."""
    return SetupConfig()

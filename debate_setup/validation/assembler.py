"""Compile a validated setup into a debate configuration and session."""

import logging
import math
import random
import string
import time
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from debate_setup.config.settings import SetupConfig
from debate_setup.debaters.selector import PROVIDER_DIVERSITY, DebaterSelector
from debate_setup.exceptions import InvalidConfigurationError
from debate_setup.formats.registry import FormatRegistry, format_registry
from debate_setup.models import (
    AIDebater,
    ConfigurationPreview,
    ConfigurationSummary,
    DebateConfig,
    DebateParticipant,
    DebateSession,
    DebateSettings,
    Personality,
    ValidationResult,
)
from debate_setup.personalities.assigner import PersonalityAssigner
from debate_setup.topics.service import COMPLEX_CATEGORY_IDS, TopicService
from debate_setup.types import Complexity, Position, SessionStatus, TopicMode

from .aggregator import SetupValidation

logger = logging.getLogger(__name__)

MIN_ROUNDS, MAX_ROUNDS = 1, 10
MIN_TURN_SECONDS, MAX_TURN_SECONDS = 30, 300

# Personalities that do not lengthen a debate.
PLAIN_PERSONALITY_IDS = frozenset({"default", "debater"})
PERSONALITY_DURATION_FACTOR = 1.2

SIMPLE_MAX_SCORE = 2
MODERATE_MAX_SCORE = 4

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


class DebateAssembler:
    """Validates complete configurations and builds sessions from them."""

    def __init__(
        self,
        config: SetupConfig | None = None,
        *,
        topics: TopicService | None = None,
        selector: DebaterSelector | None = None,
        assigner: PersonalityAssigner | None = None,
        formats: FormatRegistry | None = None,
    ):
        self.config = config or SetupConfig()
        self.topics = topics or TopicService(self.config)
        self.selector = selector or DebaterSelector(self.config)
        self.assigner = assigner or PersonalityAssigner(self.config)
        self.formats = formats or format_registry

    def validate(
        self,
        topic: str,
        debaters: Sequence[AIDebater],
        personalities: Mapping[str, Personality],
    ) -> SetupValidation:
        return SetupValidation(
            topic,
            debaters,
            personalities,
            topics=self.topics,
            selector=self.selector,
            assigner=self.assigner,
        )

    def validate_settings(self, settings: DebateSettings) -> ValidationResult:
        errors = []
        if not MIN_ROUNDS <= settings.max_rounds <= MAX_ROUNDS:
            errors.append(f"Max rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}")
        if not MIN_TURN_SECONDS <= settings.turn_duration <= MAX_TURN_SECONDS:
            errors.append(
                f"Turn duration must be between {MIN_TURN_SECONDS} and {MAX_TURN_SECONDS} seconds"
            )
        if not self.formats.has_format(settings.format):
            errors.append(f"Unknown debate format: {settings.format}")
        return ValidationResult.from_messages(errors, [])

    def validate_debate_configuration(self, config: DebateConfig) -> ValidationResult:
        """Full validation of a configuration, settings included."""
        overall = self.validate(config.topic, config.debaters, config.personality_map).overall
        settings = self.validate_settings(config.settings)
        return ValidationResult.from_messages(
            [*overall.errors, *settings.errors],
            list(overall.warnings),
        )

    def assemble_config(
        self,
        topic: str,
        debaters: Sequence[AIDebater],
        personalities: Mapping[str, Personality],
        *,
        topic_mode: TopicMode = TopicMode.PRESET,
        settings: DebateSettings | None = None,
        created_at: datetime | None = None,
    ) -> DebateConfig:
        """Build a ready-to-run configuration.

        Raises:
            InvalidConfigurationError: if the inputs do not pass full validation.
        """
        candidate = DebateConfig(
            topic=topic.strip(),
            topic_mode=topic_mode,
            debaters=tuple(debaters),
            personalities={d.id: personalities[d.id] for d in debaters if d.id in personalities},
            settings=settings or self.config.defaults,
            created_at=created_at or datetime.now(),
            estimated_duration=self.calculate_estimated_duration(topic, debaters, personalities),
        )

        validation = self.validate_debate_configuration(candidate)
        if not validation.is_valid:
            raise InvalidConfigurationError(validation)

        logger.info(
            f"Assembled debate config: {len(candidate.debaters)} debaters, "
            f"~{candidate.estimated_duration} min"
        )
        return candidate

    def create_session(
        self,
        config: DebateConfig,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> DebateSession:
        """Turn a configuration into a session in ``setup`` status.

        The configuration is validated again here.
        """
        validation = self.validate_debate_configuration(config)
        if not validation.is_valid:
            raise InvalidConfigurationError(validation)

        now = clock()
        session = DebateSession(
            id=self.generate_session_id(rng, now),
            config=config,
            status=SessionStatus.SETUP,
            participants=self._create_participants(config),
            created_at=datetime.fromtimestamp(now),
        )
        logger.info(f"Created debate session {session.id}")
        return session

    @staticmethod
    def generate_session_id(rng: random.Random | None = None, now: float | None = None) -> str:
        rng = rng or random
        timestamp = int((time.time() if now is None else now) * 1000)
        suffix = "".join(rng.choice(_BASE36) for _ in range(9))
        return f"debate_{_to_base36(timestamp)}_{suffix}"

    def _create_participants(self, config: DebateConfig) -> list[DebateParticipant]:
        participants = []
        for index, debater in enumerate(config.debaters):
            personality = config.get_personality(debater.id)
            if personality is None:
                personality = self.assigner.get_default_personality()
            # Two-sided positions: everyone after the first argues against.
            position = Position.PRO if index == 0 else Position.CON
            participants.append(
                DebateParticipant(
                    id=debater.id,
                    ai=debater,
                    personality=personality,
                    position=position,
                )
            )
        return participants

    def calculate_estimated_duration(
        self,
        topic: str,
        debaters: Sequence[AIDebater],
        personalities: Mapping[str, Personality] | None = None,
    ) -> int:
        """Estimated minutes, rounded to the nearest five."""
        duration = float(self.topics.get_estimated_duration(topic))
        duration *= max(1.0, len(debaters) / 2)

        assigned = personalities or {}
        if any(
            assigned[d.id].id not in PLAIN_PERSONALITY_IDS
            for d in debaters
            if d.id in assigned
        ):
            duration *= PERSONALITY_DURATION_FACTOR

        return int(math.floor(duration / 5 + 0.5) * 5)

    def calculate_complexity(self, config: DebateConfig) -> Complexity:
        score = 0

        if len(config.topic) > 100:
            score += 1
        category = self.topics.get_topic_category(config.topic)
        if category is not None and category.id in COMPLEX_CATEGORY_IDS:
            score += 2

        if len(config.debaters) > 2:
            score += 1

        assigned = list(config.personality_map.values())
        if len({p.id for p in assigned}) > 1:
            score += 1
        if any(p.is_premium for p in assigned):
            score += 1

        if config.settings.max_rounds > 3:
            score += 1
        if config.settings.allow_interruptions:
            score += 1

        if score <= SIMPLE_MAX_SCORE:
            return Complexity.SIMPLE
        if score <= MODERATE_MAX_SCORE:
            return Complexity.MODERATE
        return Complexity.COMPLEX

    def preview_debate(
        self,
        topic: str | None = None,
        debaters: Sequence[AIDebater] | None = None,
        personalities: Mapping[str, Personality] | None = None,
    ) -> ConfigurationPreview:
        """What a partial setup still lacks, with soft recommendations."""
        missing = []
        recommendations = []
        warnings = []
        required = self.config.selection.required_debaters

        if not topic or not topic.strip():
            missing.append("Topic selection")
        if not debaters or len(debaters) < required:
            missing.append("AI debater selection")

        if debaters and len(debaters) == required and len({d.provider for d in debaters}) == 1:
            recommendations.append(PROVIDER_DIVERSITY)
        if personalities and len({p.id for p in personalities.values()}) == 1:
            recommendations.append("Try different personalities for more varied debate styles")

        if topic and len(topic) > self.config.topic.long_warning_length:
            warnings.append("Long topics may be challenging to debate effectively")

        return ConfigurationPreview(
            can_start=not missing,
            missing_elements=missing,
            recommendations=recommendations,
            warnings=warnings,
        )

    def get_configuration_summary(self, config: DebateConfig) -> ConfigurationSummary:
        default_id = self.config.personalities.default_id
        return ConfigurationSummary(
            topic=config.topic,
            debater_count=len(config.debaters),
            debater_names=[d.name for d in config.debaters],
            has_custom_personalities=any(
                p.id != default_id for p in config.personality_map.values()
            ),
            estimated_duration=config.estimated_duration,
            complexity=self.calculate_complexity(config),
        )

    def get_default_configuration(self) -> dict[str, Any]:
        """Starting values for a fresh setup."""
        return {
            "topic": "",
            "topic_mode": self.config.default_topic_mode,
            "debaters": [],
            "personalities": {},
            "settings": self.config.defaults,
            "estimated_duration": self.config.durations.medium,
        }

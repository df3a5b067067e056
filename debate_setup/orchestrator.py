"""Debate setup orchestrator.

Holds the mutable selection state (topic, debaters, personality map) and
exposes the actions a presentation layer calls. Each action that changes the
debater selection is followed by an explicit personality reconciliation.
"""

import logging
import random
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from .config.settings import SetupConfig
from .debaters.profiles import convert_to_debater
from .debaters.selector import DebaterSelector
from .exceptions import DebateNotReadyError
from .models import (
    AIConfig,
    AIDebater,
    ConfigurationPreview,
    DebateConfig,
    DebateSession,
    DebateSettings,
    DebateStartRequest,
    Personality,
    PersonalityCombination,
    PersonalitySummary,
    SelectionSummary,
    Topic,
    TopicCategory,
    ValidationResult,
    ValidationSummary,
)
from .personalities.assigner import PersonalityAssigner
from .steps import StepController
from .topics.service import TopicService
from .types import DebateStep, TopicMode
from .validation.aggregator import SetupValidation
from .validation.assembler import DebateAssembler

logger = logging.getLogger(__name__)


def _as_debater(ai: AIConfig) -> AIDebater:
    return ai if isinstance(ai, AIDebater) else convert_to_debater(ai)


class DebateSetup:
    """Interactive debate setup session.

    Args:
        config: engine tunables; defaults to ``SetupConfig()``.
        is_premium: whether the user may pick premium personalities.
        initial_topic: last-used topic to seed the topic step with.
        initial_topic_mode: mode the initial topic was chosen in.
        rng: random source for surprise topics, scoring jitter, personality
            randomization and session ids.
    """

    def __init__(
        self,
        config: SetupConfig | None = None,
        *,
        is_premium: bool = False,
        initial_topic: str = "",
        initial_topic_mode: TopicMode | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or SetupConfig()
        self.is_premium = is_premium
        self.rng = rng or random.Random()

        self.topics = TopicService(self.config)
        self.selector = DebaterSelector(self.config)
        self.assigner = PersonalityAssigner(self.config)
        self.assembler = DebateAssembler(
            self.config,
            topics=self.topics,
            selector=self.selector,
            assigner=self.assigner,
        )
        self.steps = StepController()

        mode = initial_topic_mode or self.config.default_topic_mode
        self.topic_mode = mode
        self.selected_topic = initial_topic if mode is not TopicMode.CUSTOM else ""
        self.custom_topic = initial_topic if mode is TopicMode.CUSTOM else ""
        self.topic_history: list[str] = []

        self.selected_debaters: list[AIDebater] = []
        self.personalities: dict[str, Personality] = {}
        self.settings: DebateSettings = self.config.defaults

    # Topic

    @property
    def current_topic(self) -> str:
        if self.topic_mode is TopicMode.CUSTOM:
            return self.custom_topic
        return self.selected_topic

    def set_topic_mode(self, mode: TopicMode) -> None:
        """Switch mode, clearing the text held by the other mode."""
        self.topic_mode = mode
        if mode is not TopicMode.CUSTOM:
            self.custom_topic = ""
        else:
            self.selected_topic = ""

    def set_custom_topic(self, text: str) -> None:
        if self.topic_mode is not TopicMode.CUSTOM:
            self.set_topic_mode(TopicMode.CUSTOM)
        self.custom_topic = text

    def select_suggested_topic(self, text: str) -> None:
        if self.topic_mode is not TopicMode.PRESET:
            self.set_topic_mode(TopicMode.PRESET)
        self.selected_topic = text

    def generate_surprise_topic(self) -> Topic:
        topic = self.topics.generate_random_topic(self.rng)
        self.set_topic_mode(TopicMode.SURPRISE)
        self.selected_topic = topic.text
        logger.debug(f"Surprise topic: {topic.id}")
        return topic

    def update_topic(self, text: str, mode: TopicMode) -> None:
        if mode is TopicMode.CUSTOM:
            self.set_custom_topic(text)
        else:
            self.set_topic_mode(mode)
            self.selected_topic = text

    def get_suggested_topics(self, limit: int | None = None) -> list[Topic]:
        return self.topics.get_suggested_topics(limit)

    def get_related_topics(self, limit: int | None = None) -> list[Topic]:
        if not self.current_topic:
            return []
        return self.topics.get_related_topics(self.current_topic, limit)

    def search_topics(self, query: str) -> list[Topic]:
        return self.topics.search_topics(query)

    def get_topic_category(self) -> TopicCategory | None:
        if not self.current_topic:
            return None
        return self.topics.get_topic_category(self.current_topic)

    def finalize_topic(self) -> str | None:
        """Record the current topic in history if it is valid."""
        topic = self.current_topic
        if not topic or not self.validation.topic_validation.is_valid:
            return None
        history = [topic, *(t for t in self.topic_history if t != topic)]
        self.topic_history = history[: self.config.topic.history_limit]
        return topic

    def reset_topic(self) -> None:
        self.set_topic_mode(TopicMode.PRESET)
        self.selected_topic = ""
        self.custom_topic = ""

    # Debaters

    def _reconcile(self) -> None:
        self.personalities = self.assigner.reconcile_assignments(
            self.selected_debaters, self.personalities
        )

    @property
    def max_reached(self) -> bool:
        return len(self.selected_debaters) >= self.selector.required

    def is_selected(self, debater_id: str) -> bool:
        return self.selector.is_selected(self.selected_debaters, debater_id)

    def toggle_debater(self, ai: AIConfig) -> None:
        self.selected_debaters = self.selector.toggle_selection(
            self.selected_debaters, _as_debater(ai), self.selector.required
        )
        self._reconcile()

    def add_debater(self, ai: AIConfig) -> bool:
        self.selected_debaters, added = self.selector.add_debater(
            self.selected_debaters, _as_debater(ai)
        )
        self._reconcile()
        return added

    def remove_debater(self, debater_id: str) -> bool:
        self.selected_debaters, removed = self.selector.remove_debater(
            self.selected_debaters, debater_id
        )
        self._reconcile()
        return removed

    def clear_selection(self) -> None:
        self.selected_debaters = []
        self._reconcile()

    def get_recommended_pairs(
        self, available: Sequence[AIConfig]
    ) -> list[tuple[AIDebater, AIDebater]]:
        return self.selector.get_recommended_pairs([_as_debater(ai) for ai in available])

    def select_recommended_pair(self, pair: Sequence[AIConfig]) -> bool:
        if len(pair) != 2:
            logger.warning(f"Recommended pair must have 2 debaters, got {len(pair)}")
            return False
        self.selected_debaters = [_as_debater(ai) for ai in pair]
        self._reconcile()
        return True

    def optimize_for_topic(self, available: Sequence[AIConfig]) -> list[AIDebater]:
        """Replace the selection with the best debaters for the current topic."""
        optimal = self.selector.get_optimal_debaters(
            self.current_topic, [_as_debater(ai) for ai in available], self.rng
        )
        if optimal:
            self.selected_debaters = optimal
            self._reconcile()
        return optimal

    @property
    def selection_summary(self) -> SelectionSummary:
        return self.selector.get_selection_summary(self.selected_debaters)

    # Personalities

    @property
    def available_personalities(self) -> list[Personality]:
        return self.assigner.get_available_personalities(self.is_premium)

    def get_personality_for(self, debater_id: str) -> Personality | None:
        return self.personalities.get(debater_id)

    def set_personality(self, debater_id: str, personality: Personality) -> bool:
        if not self.is_selected(debater_id):
            logger.warning(f"Ignoring personality for unselected debater {debater_id}")
            return False
        self.personalities = {**self.personalities, debater_id: personality}
        return True

    def reset_personalities(self) -> None:
        self.personalities = self.assigner.reset_personalities(self.selected_debaters)

    def apply_recommended_combination(self, combination: PersonalityCombination) -> bool:
        assignments = self.assigner.apply_recommended_combination(
            combination, self.selected_debaters
        )
        if assignments is None:
            return False
        self.personalities = assignments
        return True

    def randomize_personalities(self) -> None:
        self.personalities = self.assigner.randomize_personalities(
            self.selected_debaters, self.is_premium, self.rng
        )

    @property
    def has_custom_personalities(self) -> bool:
        default_id = self.config.personalities.default_id
        return any(p.id != default_id for p in self.personalities.values())

    @property
    def compatibility_score(self) -> int:
        return self.assigner.get_compatibility_score_for_selection(self.personalities)

    @property
    def personality_summary(self) -> PersonalitySummary:
        return self.assigner.get_summary(self.selected_debaters, self.personalities)

    # Settings

    def update_settings(self, **changes: Any) -> ValidationResult:
        """Replace settings fields and report whether the result is usable.

        Changes are validated together. Unknown fields or values of the wrong
        type leave the current settings untouched. Switching format without
        choosing a round count picks up the format's default rounds.
        """
        if (
            "format" in changes
            and "max_rounds" not in changes
            and isinstance(changes["format"], str)
            and self.assembler.formats.has_format(changes["format"])
        ):
            changes["max_rounds"] = self.assembler.formats.get_format(
                changes["format"]
            ).default_rounds

        try:
            settings = DebateSettings.model_validate({**self.settings.model_dump(), **changes})
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            logger.warning(f"Rejected settings update: {errors}")
            return ValidationResult.from_messages(errors, [])

        self.settings = settings
        return self.assembler.validate_settings(settings)

    # Validation

    @property
    def validation(self) -> SetupValidation:
        return self.assembler.validate(
            self.current_topic, self.selected_debaters, self.personalities
        )

    @property
    def can_start_debate(self) -> bool:
        return self.validation.can_start_debate

    def get_next_action(self) -> str | None:
        return self.validation.get_next_action()

    def is_step_valid(self, step: DebateStep) -> bool:
        return self.validation.is_step_valid(step)

    def get_validation_summary(self) -> ValidationSummary:
        return self.validation.get_validation_summary()

    # Steps

    @property
    def current_step(self) -> DebateStep:
        return self.steps.current_step

    def go_to_step(self, step: DebateStep) -> None:
        self.steps.go_to_step(step)

    def next_step(self) -> bool:
        """Advance only when the current step validates."""
        step = self.steps.current_step
        if not self.is_step_valid(step):
            logger.warning(f"Cannot leave step {step.value}: {self.get_next_action()}")
            return False
        return self.steps.next_step()

    def previous_step(self) -> bool:
        return self.steps.previous_step()

    # Assembly

    @property
    def estimated_duration(self) -> int:
        if not self.current_topic:
            return 0
        return self.assembler.calculate_estimated_duration(
            self.current_topic, self.selected_debaters, self.personalities
        )

    def get_configuration_preview(self) -> ConfigurationPreview:
        return self.assembler.preview_debate(
            self.current_topic, self.selected_debaters, self.personalities
        )

    def build_config(self) -> DebateConfig:
        return self.assembler.assemble_config(
            self.current_topic,
            self.selected_debaters,
            self.personalities,
            topic_mode=self.topic_mode,
            settings=self.settings,
        )

    def start_debate(self) -> DebateStartRequest:
        """Payload for the session-start call.

        Raises:
            DebateNotReadyError: if the setup is not ready to start.
        """
        validation = self.validation
        if not validation.can_start_debate:
            raise DebateNotReadyError(validation.get_next_action())
        request = self.build_config().to_start_request()
        logger.info(f"Starting debate on '{request.topic}'")
        return request

    def create_session(self) -> DebateSession:
        validation = self.validation
        if not validation.can_start_debate:
            raise DebateNotReadyError(validation.get_next_action())
        return self.assembler.create_session(self.build_config(), rng=self.rng)

    def reset_setup(self) -> None:
        self.reset_topic()
        self.selected_debaters = []
        self.personalities = {}
        self.settings = self.config.defaults
        self.steps.reset_steps()
        logger.debug("Debate setup reset")

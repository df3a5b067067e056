"""Cross-field validation of the whole debate setup."""

import logging
from collections.abc import Mapping, Sequence

from debate_setup.debaters.selector import PROVIDER_DIVERSITY, DebaterSelector
from debate_setup.models import AIDebater, Personality, ValidationResult, ValidationSummary
from debate_setup.personalities.assigner import PersonalityAssigner
from debate_setup.topics.service import COMPLEX_CATEGORY_IDS, TopicService
from debate_setup.types import DebateStep

logger = logging.getLogger(__name__)

TOPIC_REQUIRED_MESSAGE = "Topic is required"
TOPIC_REQUIRED_ERROR = "Please select or enter a debate topic"
CONFIGURATION_VALID = "Debate configuration is valid"
PERSONALITY_GAP = "Not all selected AIs have personality assignments"
ANALYTICAL_AI_HINT = "Consider including an analytical AI for complex topics"
ANALYTICAL_STRENGTHS = ("analysis", "reasoning")

ACTION_SELECT_TOPIC = "Select or enter a valid debate motion"
ACTION_FIX_DEBATERS = "Fix AI selection issues"
ACTION_ASSIGN_PERSONALITIES = "Assign personalities to all selected AIs"
ACTION_FIX_PERSONALITIES = "Fix personality selection issues"
ACTION_COMPLETE_SETUP = "Complete the debate setup"


class SetupValidation:
    """Validation snapshot of one (topic, debaters, personalities) state.

    Every result is computed up front from the inputs; build a new snapshot
    after any change rather than mutating this one.
    """

    def __init__(
        self,
        topic: str,
        debaters: Sequence[AIDebater],
        personalities: Mapping[str, Personality],
        *,
        topics: TopicService,
        selector: DebaterSelector,
        assigner: PersonalityAssigner,
    ):
        self.topic = topic or ""
        self.debaters = list(debaters)
        self.personalities = dict(personalities)
        self._topics = topics
        self._selector = selector

        self.topic_validation = self._validate_topic()
        self.ai_validation = selector.validate_selection(self.debaters)

        # Selected debaters without an assignment count as null entries.
        assignments: dict[str, Personality | None] = dict(self.personalities)
        for debater in self.debaters:
            assignments.setdefault(debater.id, None)
        self.personality_validation = assigner.validate_personality_selection(assignments)

        self.overall = self._validate_overall()

    def _validate_topic(self) -> ValidationResult:
        if not self.topic.strip():
            return ValidationResult(
                is_valid=False,
                message=TOPIC_REQUIRED_MESSAGE,
                errors=[TOPIC_REQUIRED_ERROR],
            )
        return self._topics.validate_custom_topic(self.topic)

    def _cross_field_warnings(self) -> list[str]:
        warnings = []
        if len(self.personalities) != len(self.debaters):
            warnings.append(PERSONALITY_GAP)

        if len(self.debaters) > 1 and len({d.provider for d in self.debaters}) == 1:
            warnings.append(PROVIDER_DIVERSITY)

        if self.topic.strip() and self.debaters:
            category = self._topics.get_topic_category(self.topic)
            if category is not None and category.id in COMPLEX_CATEGORY_IDS:
                has_analytical = any(
                    area in ANALYTICAL_STRENGTHS
                    for debater in self.debaters
                    for area in debater.strength_areas
                )
                if not has_analytical:
                    warnings.append(ANALYTICAL_AI_HINT)
        return warnings

    def _validate_overall(self) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []
        for result in (self.topic_validation, self.ai_validation, self.personality_validation):
            errors.extend(result.errors)
            warnings.extend(result.warnings)
        warnings.extend(self._cross_field_warnings())

        return ValidationResult.from_messages(
            errors,
            list(dict.fromkeys(warnings)),
            valid_message=CONFIGURATION_VALID,
        )

    @property
    def can_start_debate(self) -> bool:
        return (
            self.overall.is_valid
            and len(self.debaters) >= 2
            and bool(self.topic.strip())
        )

    @property
    def validation_errors(self) -> list[str]:
        return list(self.overall.errors)

    def get_next_action(self) -> str | None:
        """The single most pressing thing the user must fix, or None when ready."""
        if not self.topic_validation.is_valid:
            return ACTION_SELECT_TOPIC
        if not self.ai_validation.is_valid:
            minimum = self._selector.config.selection.min_debaters
            if len(self.debaters) < minimum:
                return f"Select at least {minimum} AI debaters"
            return ACTION_FIX_DEBATERS
        if len(self.debaters) != len(self.personalities):
            return ACTION_ASSIGN_PERSONALITIES
        if not self.personality_validation.is_valid:
            return ACTION_FIX_PERSONALITIES
        if not self.can_start_debate:
            return ACTION_COMPLETE_SETUP
        return None

    def is_step_valid(self, step: DebateStep) -> bool:
        if step is DebateStep.TOPIC:
            return self.topic_validation.is_valid
        if step is DebateStep.AI:
            return self.ai_validation.is_valid
        if step is DebateStep.PERSONALITY:
            return self.personality_validation.is_valid
        if step is DebateStep.REVIEW:
            return self.overall.is_valid
        return False

    def get_validation_summary(self) -> ValidationSummary:
        return ValidationSummary(
            topic=self.topic_validation,
            ai_selection=self.ai_validation,
            personalities=self.personality_validation,
            overall=self.overall,
            can_proceed=self.can_start_debate,
            next_action=self.get_next_action(),
        )

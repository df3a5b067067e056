"""Personality assignment, compatibility scoring and validation."""

import logging
import math
import random
from collections.abc import Mapping, Sequence
from itertools import combinations

from debate_setup.config.settings import SetupConfig
from debate_setup.exceptions import CatalogIntegrityError
from debate_setup.models import (
    AIDebater,
    DebatingStyle,
    Personality,
    PersonalityCombination,
    PersonalitySummary,
    ValidationResult,
)

from .catalog import (
    CALM_IDS,
    FALLBACK_DEBATE_PROMPT,
    HIGH_ENERGY_IDS,
    INTERESTING_PAIRS,
    LEGACY_IDS,
    PERSONALITIES,
    RECOMMENDED_COMBINATIONS,
)

logger = logging.getLogger(__name__)

PERSONALITY_DIVERSITY = "Consider using different personalities for more diverse debate perspectives"
INTENSE_COMBINATION = "Some personality combinations might create very intense debates"

BASE_COMPATIBILITY = 50
SAME_PERSONALITY_PENALTY = 30
INTERESTING_PAIR_BONUS = 25
HIGH_ENERGY_BONUS = 15
CALM_ENERGY_CONTRAST_BONUS = 20


class PersonalityAssigner:
    """Rules for mapping selected debaters to personalities.

    Assignment maps are plain ``dict[debater_id, Personality]``; operations
    return new maps and never mutate their input.
    """

    def __init__(
        self,
        config: SetupConfig | None = None,
        personalities: Sequence[Personality] = PERSONALITIES,
    ):
        self.config = config or SetupConfig()
        self.personalities = tuple(personalities)
        self._by_id = {p.id: p for p in self.personalities}

    # Catalog lookups

    def get_default_personality(self) -> Personality:
        default_id = self.config.personalities.default_id
        personality = self._by_id.get(default_id)
        if personality is None:
            raise CatalogIntegrityError(f"Default personality not found: {default_id}")
        return personality

    def get_available_personalities(self, is_premium: bool) -> list[Personality]:
        if is_premium:
            return list(self.personalities)
        free_ids = set(self.config.personalities.free_ids)
        return [p for p in self.personalities if p.id in free_ids]

    def get_personality_by_id(self, personality_id: str) -> Personality | None:
        """Resolve an id, accepting ids from older app versions."""
        personality = self._by_id.get(personality_id)
        if personality is None and personality_id in LEGACY_IDS:
            personality = self._by_id.get(LEGACY_IDS[personality_id])
        return personality

    def get_debate_prompt(self, personality_id: str) -> str:
        personality = self.get_personality_by_id(personality_id)
        if personality is None:
            return FALLBACK_DEBATE_PROMPT
        return personality.debate_prompt or personality.system_prompt

    @staticmethod
    def get_recommended_combinations() -> list[PersonalityCombination]:
        return list(RECOMMENDED_COMBINATIONS)

    # Compatibility

    @staticmethod
    def get_compatibility_score(first: Personality, second: Personality) -> int:
        """Score how interesting two personalities are together, 0-100."""
        score = BASE_COMPATIBILITY
        if first.id == second.id:
            score -= SAME_PERSONALITY_PENALTY
        if frozenset((first.id, second.id)) in INTERESTING_PAIRS:
            score += INTERESTING_PAIR_BONUS
        if first.id in HIGH_ENERGY_IDS and second.id in HIGH_ENERGY_IDS:
            score += HIGH_ENERGY_BONUS
        if (first.id in CALM_IDS and second.id in HIGH_ENERGY_IDS) or (
            second.id in CALM_IDS and first.id in HIGH_ENERGY_IDS
        ):
            score += CALM_ENERGY_CONTRAST_BONUS
        return max(0, min(100, score))

    def get_compatibility_score_for_selection(
        self, assignments: Mapping[str, Personality | None]
    ) -> int:
        """Mean pairwise compatibility of all assigned personalities."""
        assigned = [p for p in assignments.values() if p is not None]
        if len(assigned) < 2:
            return BASE_COMPATIBILITY
        scores = [self.get_compatibility_score(a, b) for a, b in combinations(assigned, 2)]
        # Half-up, matching the duration estimate.
        return math.floor(sum(scores) / len(scores) + 0.5)

    # Assignment

    def reconcile_assignments(
        self,
        selected: Sequence[AIDebater],
        assignments: Mapping[str, Personality],
    ) -> dict[str, Personality]:
        """Key the map by exactly the selected debaters.

        New debaters get the default personality and deselected ones are
        dropped. Running it twice changes nothing.
        """
        default = None
        reconciled: dict[str, Personality] = {}
        for debater in selected:
            personality = assignments.get(debater.id)
            if personality is None:
                if default is None:
                    default = self.get_default_personality()
                personality = default
            reconciled[debater.id] = personality

        dropped = set(assignments) - set(reconciled)
        if dropped:
            logger.debug(f"Dropped personalities of deselected debaters: {sorted(dropped)}")
        return reconciled

    def reset_personalities(self, selected: Sequence[AIDebater]) -> dict[str, Personality]:
        default = self.get_default_personality()
        return {debater.id: default for debater in selected}

    def apply_recommended_combination(
        self,
        combination: PersonalityCombination,
        selected: Sequence[AIDebater],
    ) -> dict[str, Personality] | None:
        """Assign the combination's personalities positionally.

        Returns None when the lengths differ or an id cannot be resolved.
        """
        if len(combination.personalities) != len(selected):
            logger.warning(
                f"Combination has {len(combination.personalities)} personalities "
                f"for {len(selected)} debaters"
            )
            return None

        assignments: dict[str, Personality] = {}
        for debater, personality_id in zip(selected, combination.personalities):
            personality = self.get_personality_by_id(personality_id)
            if personality is None:
                logger.warning(f"Unknown personality in combination: {personality_id}")
                return None
            assignments[debater.id] = personality
        return assignments

    def randomize_personalities(
        self,
        selected: Sequence[AIDebater],
        is_premium: bool,
        rng: random.Random | None = None,
    ) -> dict[str, Personality]:
        """Independent uniform pick per debater; repeats are allowed."""
        available = self.get_available_personalities(is_premium)
        if not available:
            raise CatalogIntegrityError("No personalities available for this tier")
        rng = rng or random
        return {debater.id: rng.choice(available) for debater in selected}

    def apply_personality_to_debater(
        self, debater: AIDebater, personality: Personality
    ) -> AIDebater:
        """Debater whose debating style follows the personality."""
        modifiers = personality.debate_modifiers
        if modifiers is None:
            style = DebatingStyle()
        else:
            style = DebatingStyle(
                aggression=modifiers.aggression,
                formality=personality.traits.formality,
                evidence_based=personality.traits.technicality,
                emotional=1 - personality.traits.technicality,
            )
        return debater.model_copy(update={"debating_style": style})

    # Validation

    def validate_personality_selection(
        self, assignments: Mapping[str, Personality | None]
    ) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        for debater_id, personality in assignments.items():
            if personality is None or not personality.id:
                errors.append(f"Invalid personality selection for AI: {debater_id}")
            elif personality.id not in self._by_id:
                errors.append(f'Unknown personality "{personality.id}" for AI: {debater_id}')

        assigned = [p for p in assignments.values() if p is not None and p.id]
        if len(assigned) > 1 and len({p.id for p in assigned}) == 1:
            warnings.append(PERSONALITY_DIVERSITY)

        threshold = self.config.personalities.aggression_threshold
        aggressive = [
            p
            for p in assigned
            if p.debate_modifiers is not None and p.debate_modifiers.aggression > threshold
        ]
        if len(aggressive) > 1:
            warnings.append(INTENSE_COMBINATION)

        return ValidationResult.from_messages(errors, warnings)

    def get_summary(
        self,
        selected: Sequence[AIDebater],
        assignments: Mapping[str, Personality],
    ) -> PersonalitySummary:
        default_id = self.config.personalities.default_id
        assigned = [assignments[d.id] for d in selected if assignments.get(d.id) is not None]
        return PersonalitySummary(
            total_assigned=len(assigned),
            expected_total=len(selected),
            unique_count=len({p.id for p in assigned}),
            has_custom=any(p.id != default_id for p in assigned),
            compatibility_score=self.get_compatibility_score_for_selection(assignments),
            is_complete=bool(selected) and len(assigned) == len(selected),
            is_valid=self.validate_personality_selection(assignments).is_valid,
        )

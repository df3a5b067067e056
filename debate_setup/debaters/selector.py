"""Debater selection rules, topic scoring and pair recommendation."""

import logging
import random
from collections.abc import Sequence
from itertools import combinations

from debate_setup.config.settings import SetupConfig
from debate_setup.models import AIDebater, SelectionSummary, ValidationResult

from .profiles import (
    ANALYTICAL_KEYWORDS,
    ANALYTICAL_PROVIDERS,
    GENERAL_PROVIDERS,
    TECHNICAL_KEYWORDS,
    TECHNICAL_PROVIDERS,
)

logger = logging.getLogger(__name__)

DUPLICATE_SELECTION = "Duplicate AI selections are not allowed"
INVALID_SELECTION = "Some selected AIs are invalid or unavailable"
PROVIDER_DIVERSITY = "Consider selecting AIs from different providers for more diverse perspectives"

BASE_SCORE = 50.0
ANALYTICAL_BONUS = 20.0
TECHNICAL_BONUS = 15.0
GENERAL_BONUS = 10.0
STRENGTH_BONUS = 15.0
MAX_JITTER = 10.0


class DebaterSelector:
    """Stateless rules over a list of debaters.

    Selections are plain lists; every mutating helper returns a new list.
    """

    def __init__(self, config: SetupConfig | None = None):
        self.config = config or SetupConfig()

    @property
    def required(self) -> int:
        """Exact debater count a debate needs."""
        return self.config.selection.required_debaters

    def validate_selection(self, debaters: Sequence[AIDebater]) -> ValidationResult:
        """Check count limits, duplicates and identity of a selection.

        The 2..6 range and the exact-count rule are checked independently, so
        a three-way selection fails on the exact count alone.
        """
        limits = self.config.selection
        count = len(debaters)
        errors: list[str] = []
        warnings: list[str] = []

        if count < limits.min_debaters:
            errors.append(f"Select at least {limits.min_debaters} AI debaters")
        if count > limits.max_debaters:
            errors.append(f"Select no more than {limits.max_debaters} AI debaters")
        if count != limits.required_debaters:
            errors.append(f"Exactly {limits.required_debaters} AI debaters are required")

        if len({d.id for d in debaters}) != count:
            errors.append(DUPLICATE_SELECTION)

        if len({d.provider for d in debaters}) == 1 and count > 1:
            warnings.append(PROVIDER_DIVERSITY)

        if any(not d.id or not d.provider for d in debaters):
            errors.append(INVALID_SELECTION)

        return ValidationResult.from_messages(errors, warnings)

    # Selection list helpers

    @staticmethod
    def is_selected(selection: Sequence[AIDebater], debater_id: str) -> bool:
        """Whether ``debater_id`` is part of ``selection``."""
        return any(d.id == debater_id for d in selection)

    def toggle_selection(
        self,
        current: Sequence[AIDebater],
        candidate: AIDebater,
        max_allowed: int | None = None,
    ) -> list[AIDebater]:
        """Remove ``candidate`` if selected, else append it while under the limit."""
        if max_allowed is None:
            max_allowed = self.config.selection.max_debaters

        if self.is_selected(current, candidate.id):
            return [d for d in current if d.id != candidate.id]
        if len(current) >= max_allowed:
            logger.warning(
                f"Selection limit of {max_allowed} reached, ignoring {candidate.id}"
            )
            return list(current)
        return [*current, candidate]

    def add_debater(
        self, current: Sequence[AIDebater], candidate: AIDebater
    ) -> tuple[list[AIDebater], bool]:
        """Append ``candidate``; the flag is False for duplicates or a full selection."""
        if self.is_selected(current, candidate.id):
            return list(current), False
        if len(current) >= self.config.selection.max_debaters:
            return list(current), False
        return [*current, candidate], True

    def remove_debater(
        self, current: Sequence[AIDebater], debater_id: str
    ) -> tuple[list[AIDebater], bool]:
        """Drop ``debater_id``; the flag is False when it was not selected."""
        if not self.is_selected(current, debater_id):
            return list(current), False
        return [d for d in current if d.id != debater_id], True

    @staticmethod
    def enforce_selection_limits(
        debaters: Sequence[AIDebater], min_count: int, max_count: int
    ) -> list[AIDebater]:
        """Trim to the most recent ``max_count`` picks; short lists pass through."""
        if len(debaters) > max_count:
            return list(debaters[-max_count:]) if max_count > 0 else []
        return list(debaters)

    # Scoring and recommendation

    def score_debater(
        self, debater: AIDebater, topic: str, rng: random.Random | None = None
    ) -> float:
        """Topic relevance of a debater, with a little random jitter."""
        topic_lower = topic.lower()
        provider = debater.provider.lower()
        score = BASE_SCORE

        if provider in ANALYTICAL_PROVIDERS:
            if any(k in topic_lower for k in ANALYTICAL_KEYWORDS):
                score += ANALYTICAL_BONUS
        elif provider in TECHNICAL_PROVIDERS:
            if any(k in topic_lower for k in TECHNICAL_KEYWORDS):
                score += TECHNICAL_BONUS
        elif provider in GENERAL_PROVIDERS:
            score += GENERAL_BONUS

        for area in debater.strength_areas:
            if area and area.lower() in topic_lower:
                score += STRENGTH_BONUS

        score += (rng or random).random() * MAX_JITTER
        return score

    def get_optimal_debaters(
        self,
        topic: str,
        available: Sequence[AIDebater],
        rng: random.Random | None = None,
    ) -> list[AIDebater]:
        """Best-scoring debaters for ``topic``, at most the required count.

        Equal scores go to a provider not yet picked.
        """
        unique: dict[str, AIDebater] = {}
        for debater in available:
            unique.setdefault(debater.id, debater)
        if not unique:
            return []

        scored = [(self.score_debater(d, topic, rng), d) for d in unique.values()]
        picks: list[AIDebater] = []
        while scored and len(picks) < self.required:
            chosen_providers = {d.provider for d in picks}
            best = max(
                scored,
                key=lambda item: (item[0], item[1].provider not in chosen_providers),
            )
            scored.remove(best)
            picks.append(best[1])

        logger.debug(f"Optimal debaters for topic: {[d.id for d in picks]}")
        return picks

    @staticmethod
    def check_compatibility(debaters: Sequence[AIDebater]) -> bool:
        """At least two debaters, each with a complete identity."""
        if len(debaters) < 2:
            return False
        return all(d.id and d.provider and d.name for d in debaters)

    def get_recommended_pairs(
        self, available: Sequence[AIDebater]
    ) -> list[tuple[AIDebater, AIDebater]]:
        """Compatible pairs, cross-provider pairs first."""
        pairs = [
            (a, b)
            for a, b in combinations(available, 2)
            if a.id != b.id and self.check_compatibility((a, b))
        ]
        pairs.sort(key=lambda pair: pair[0].provider == pair[1].provider)
        return pairs[: self.config.selection.max_recommended_pairs]

    def get_selection_summary(self, debaters: Sequence[AIDebater]) -> SelectionSummary:
        """Count, providers and readiness of a selection."""
        providers = list(dict.fromkeys(d.provider for d in debaters))
        return SelectionSummary(
            count=len(debaters),
            providers=providers,
            is_valid=self.validate_selection(debaters).is_valid,
            can_proceed=len(debaters) == self.required,
        )

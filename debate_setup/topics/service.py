"""Topic catalog queries and custom topic validation."""

import logging
import random
import re

from debate_setup.config.settings import SetupConfig
from debate_setup.models import Topic, TopicCategory, TopicValidationResult

from .catalog import CATEGORIES_BY_ID, TOPIC_CATEGORIES, TOPICS
from .normalizer import is_question, normalize_motion

logger = logging.getLogger(__name__)

TOPIC_REQUIRED = "Topic cannot be empty"
TOPIC_INAPPROPRIATE = "Topic contains inappropriate content"
TOPIC_LONG_WARNING = "Long topics may be harder to debate effectively"
TOPIC_SHORT_WARNING = "Short topics might benefit from more context"
PHRASE_AS_STATEMENT = "Consider phrasing the topic as a statement rather than a question"

# Categories whose motions take the longest or shortest to argue.
COMPLEX_CATEGORY_IDS = frozenset({"philosophy", "science"})
LIGHT_CATEGORY_IDS = frozenset({"fun"})

_WORD_RE = re.compile(r"[a-z0-9']+")


def _significant_words(text: str) -> set[str]:
    return {word for word in _WORD_RE.findall(text.lower()) if len(word) > 3}


class TopicService:
    """Read-only view over the motion catalog plus free-text validation."""

    def __init__(
        self,
        config: SetupConfig | None = None,
        topics: tuple[Topic, ...] = TOPICS,
        categories: tuple[TopicCategory, ...] = TOPIC_CATEGORIES,
    ):
        self.config = config or SetupConfig()
        self.topics = topics
        self.categories = categories
        self._categories_by_id = (
            CATEGORIES_BY_ID if categories is TOPIC_CATEGORIES else {c.id: c for c in categories}
        )
        self._blocked_re = (
            re.compile(
                r"\b(?:" + "|".join(re.escape(t) for t in self.config.topic.blocked_terms) + r")",
                re.IGNORECASE,
            )
            if self.config.topic.blocked_terms
            else None
        )

    # Catalog queries

    def get_suggested_topics(self, limit: int | None = None) -> list[Topic]:
        """Most popular motions first; ties keep catalog order."""
        if limit is None:
            limit = self.config.topic.suggested_count
        if limit <= 0:
            return []
        return sorted(self.topics, key=lambda t: -t.popularity)[:limit]

    def generate_random_topic(self, rng: random.Random | None = None) -> Topic:
        """Uniform pick from the catalog; repeats are allowed."""
        return (rng or random).choice(self.topics)

    def get_topic_by_id(self, topic_id: str) -> Topic | None:
        """Catalog motion with this id, if any."""
        return next((t for t in self.topics if t.id == topic_id), None)

    def get_categories(self) -> list[TopicCategory]:
        """All categories in catalog order."""
        return list(self.categories)

    def get_topics_by_category(self, category_id: str) -> list[Topic]:
        """Catalog motions filed under ``category_id``."""
        return [t for t in self.topics if t.category_id == category_id]

    def find_catalog_topic(self, text: str) -> Topic | None:
        """Catalog motion whose text matches exactly, ignoring case."""
        key = text.strip().casefold()
        if not key:
            return None
        return next((t for t in self.topics if t.text.casefold() == key), None)

    def get_topic_category(self, text: str) -> TopicCategory | None:
        """Category of a catalog motion; free text has none."""
        topic = self.find_catalog_topic(text)
        if topic is None:
            return None
        return self._categories_by_id.get(topic.category_id)

    def search_topics(self, query: str) -> list[Topic]:
        """Motions whose text, tags or category name contain the query."""
        needle = (query or "").strip().lower()
        if len(needle) < 2:
            return []

        results = []
        for topic in self.topics:
            category = self._categories_by_id.get(topic.category_id)
            if (
                needle in topic.text.lower()
                or any(needle in tag.lower() for tag in topic.tags)
                or (category is not None and needle in category.name.lower())
            ):
                results.append(topic)
        return results

    def get_related_topics(self, text: str, limit: int | None = None) -> list[Topic]:
        """Motions in the same category as ``text``, or sharing a tag with it.

        Free text that is not a catalog motion falls back to the popular list.
        """
        if limit is None:
            limit = self.config.topic.related_count
        current = self.find_catalog_topic(text)
        if current is None:
            return self.get_suggested_topics(limit)

        related = [
            t
            for t in self.topics
            if t.id != current.id
            and (t.category_id == current.category_id or t.tags & current.tags)
        ]
        # Same-category motions first.
        related.sort(key=lambda t: t.category_id != current.category_id)
        return related[:limit]

    def get_estimated_duration(self, text: str) -> int:
        """Minutes a motion is expected to take."""
        durations = self.config.durations
        category = self.get_topic_category(text)
        if category is not None:
            if category.id in COMPLEX_CATEGORY_IDS:
                return durations.complex
            if category.id in LIGHT_CATEGORY_IDS:
                return durations.short

        length = len(text.strip())
        if length < 30:
            return durations.short
        if length < 60:
            return durations.medium
        return durations.long

    # Free-text validation

    def contains_blocked_term(self, text: str) -> bool:
        """Whether a blocked term starts any word of ``text``."""
        return bool(self._blocked_re and self._blocked_re.search(text))

    def find_similar_topics(self, text: str) -> list[Topic]:
        """Catalog motions sharing a word longer than three characters."""
        words = _significant_words(text)
        if not words:
            return []
        key = text.strip().casefold()
        return [
            t
            for t in self.topics
            if t.text.casefold() != key and words & _significant_words(t.text)
        ]

    def validate_custom_topic(self, text: str | None) -> TopicValidationResult:
        """Validate user-entered motion text. Never raises."""
        settings = self.config.topic
        trimmed = (text or "").strip()
        errors: list[str] = []
        warnings: list[str] = []
        suggestions: list[str] = []

        if not trimmed:
            errors.append(TOPIC_REQUIRED)
        elif len(trimmed) < settings.min_length:
            errors.append(f"Topic must be at least {settings.min_length} characters")
        elif len(trimmed) > settings.max_length:
            errors.append(f"Topic must be {settings.max_length} characters or fewer")

        if trimmed and self.contains_blocked_term(trimmed):
            errors.append(TOPIC_INAPPROPRIATE)

        if trimmed and is_question(trimmed):
            motion = normalize_motion(trimmed)
            if motion != trimmed:
                suggestions.append(f'Consider phrasing it as a motion: "{motion}"')
            else:
                suggestions.append(PHRASE_AS_STATEMENT)

        if len(trimmed) > settings.long_warning_length:
            warnings.append(TOPIC_LONG_WARNING)
        elif trimmed and len(trimmed) < settings.short_warning_length:
            warnings.append(TOPIC_SHORT_WARNING)

        similar = self.find_similar_topics(trimmed)[: settings.max_similar_suggestions]
        if similar:
            quoted = ", ".join(f'"{t.text}"' for t in similar)
            suggestions.append(f"Similar topics exist: {quoted}")

        if errors:
            logger.debug(f"Custom topic rejected: {errors}")

        return TopicValidationResult(
            is_valid=not errors,
            message=errors[0] if errors else None,
            errors=errors,
            warnings=warnings,
            suggestions=suggestions,
        )

    def is_topic_debatable(self, text: str) -> bool:
        """Shorthand for a passing ``validate_custom_topic``."""
        return self.validate_custom_topic(text).is_valid

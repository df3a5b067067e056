"""Motion catalog, normalization and validation."""

from .catalog import TOPIC_CATEGORIES, TOPICS
from .normalizer import normalize_motion
from .service import TopicService

__all__ = ["TOPIC_CATEGORIES", "TOPICS", "TopicService", "normalize_motion"]

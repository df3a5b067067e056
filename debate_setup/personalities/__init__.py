"""Personality catalog and assignment."""

from .assigner import PersonalityAssigner
from .catalog import PERSONALITIES, RECOMMENDED_COMBINATIONS

__all__ = ["PERSONALITIES", "RECOMMENDED_COMBINATIONS", "PersonalityAssigner"]

"""AI debater selection."""

from .profiles import convert_to_debater, get_provider_strengths, get_provider_weaknesses
from .selector import DebaterSelector

__all__ = [
    "DebaterSelector",
    "convert_to_debater",
    "get_provider_strengths",
    "get_provider_weaknesses",
]

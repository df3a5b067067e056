"""Debate format catalog."""

from .base import DebateFormat
from .lincoln_douglas import LincolnDouglasFormat
from .oxford import OxfordFormat
from .policy import PolicyFormat
from .registry import BUILT_IN_FORMATS, FormatRegistry, format_registry
from .socratic import SocraticFormat

__all__ = [
    "BUILT_IN_FORMATS",
    "DebateFormat",
    "FormatRegistry",
    "LincolnDouglasFormat",
    "OxfordFormat",
    "PolicyFormat",
    "SocraticFormat",
    "format_registry",
]

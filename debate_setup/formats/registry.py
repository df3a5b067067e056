"""Lookup of the debate formats a setup may name."""

import logging
from collections.abc import Iterable

from .base import DebateFormat
from .lincoln_douglas import LincolnDouglasFormat
from .oxford import OxfordFormat
from .policy import PolicyFormat
from .socratic import SocraticFormat

logger = logging.getLogger(__name__)

BUILT_IN_FORMATS: tuple[type[DebateFormat], ...] = (
    OxfordFormat,
    LincolnDouglasFormat,
    PolicyFormat,
    SocraticFormat,
)


class FormatRegistry:
    """Format instances keyed by name, in registration order."""

    def __init__(self, format_classes: Iterable[type[DebateFormat]] = BUILT_IN_FORMATS):
        self._formats: dict[str, DebateFormat] = {}
        for format_class in format_classes:
            self.register(format_class())

    def register(self, debate_format: DebateFormat) -> None:
        """Add a format; names must be unique."""
        if debate_format.name in self._formats:
            raise ValueError(f"Format already registered: {debate_format.name}")
        self._formats[debate_format.name] = debate_format
        logger.debug(f"Registered debate format {debate_format.name}")

    def get_format(self, name: str) -> DebateFormat:
        try:
            return self._formats[name]
        except KeyError:
            raise ValueError(
                f"Unknown format: {name}. Available: {self.list_formats()}"
            ) from None

    def has_format(self, name: str) -> bool:
        """Whether ``name`` may be used as ``DebateSettings.format``."""
        return name in self._formats

    def list_formats(self) -> list[str]:
        return list(self._formats)

    def get_format_descriptions(self) -> dict[str, dict[str, str]]:
        """Display name and description per format, for format pickers."""
        return {
            name: {
                "display_name": debate_format.display_name,
                "description": debate_format.description,
            }
            for name, debate_format in self._formats.items()
        }


format_registry = FormatRegistry()

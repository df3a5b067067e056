"""Socratic dialogue format."""

from .base import DebateFormat


class SocraticFormat(DebateFormat):
    """Inquiry-driven exchange of questions and compact answers."""

    @property
    def name(self) -> str:
        return "socratic"

    @property
    def display_name(self) -> str:
        return "Socratic"

    @property
    def description(self) -> str:
        return "Inquiry-based dialogue that explores ideas through thoughtful questions"

    @property
    def default_rounds(self) -> int:
        return 4

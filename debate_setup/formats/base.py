"""Base class for the debate formats a setup can choose from."""

from abc import ABC, abstractmethod


class DebateFormat(ABC):
    """Catalog entry for a debate format.

    Formats only describe themselves here; running the turns of a debate is
    left to the execution side.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier stored in ``DebateSettings.format``."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable format name for display in UI."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    def default_rounds(self) -> int:
        """Rounds used when the user switches to this format."""
        return 3

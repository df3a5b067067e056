"""Lincoln-Douglas debate format."""

from .base import DebateFormat


class LincolnDouglasFormat(DebateFormat):
    """Value debate centred on ethics and moral principles."""

    @property
    def name(self) -> str:
        return "lincoln_douglas"

    @property
    def display_name(self) -> str:
        return "Lincoln-Douglas"

    @property
    def description(self) -> str:
        return "Philosophical debate focusing on ethics, values, and moral principles"

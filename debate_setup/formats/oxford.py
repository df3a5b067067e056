"""Oxford-style debate format."""

from .base import DebateFormat


class OxfordFormat(DebateFormat):
    """Formal motion debate between a proposition and an opposition."""

    @property
    def name(self) -> str:
        return "oxford"

    @property
    def display_name(self) -> str:
        return "Oxford"

    @property
    def description(self) -> str:
        return "Classic formal debate with structured arguments and clear positions"

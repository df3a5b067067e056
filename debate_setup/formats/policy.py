"""Policy debate format."""

from .base import DebateFormat


class PolicyFormat(DebateFormat):
    """Evidence-heavy debate over a concrete plan."""

    @property
    def name(self) -> str:
        return "policy"

    @property
    def display_name(self) -> str:
        return "Policy"

    @property
    def description(self) -> str:
        return "Data-driven debate with evidence, research, and practical solutions"

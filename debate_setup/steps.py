"""Progression through the ordered setup steps."""

import logging

from .types import STEP_ORDER, DebateStep

logger = logging.getLogger(__name__)

STEP_LABELS: dict[DebateStep, str] = {
    DebateStep.TOPIC: "Choose Topic",
    DebateStep.AI: "Select AIs",
    DebateStep.PERSONALITY: "Assign Personalities",
    DebateStep.REVIEW: "Review & Start",
}


class StepController:
    """Finite-state progression over topic, ai, personality and review.

    Transitions never validate anything; readiness gating is the caller's job.
    """

    def __init__(self, steps: tuple[DebateStep, ...] = STEP_ORDER):
        self.steps = steps
        self.current_step = steps[0]
        self.completed_steps: set[DebateStep] = set()

    @property
    def total_steps(self) -> int:
        """Number of steps in the flow."""
        return len(self.steps)

    @property
    def current_index(self) -> int:
        """Zero-based position of the current step."""
        return self.steps.index(self.current_step)

    @property
    def is_first_step(self) -> bool:
        return self.current_index == 0

    @property
    def is_last_step(self) -> bool:
        return self.current_index == len(self.steps) - 1

    @property
    def step_progress(self) -> int:
        """Percentage through the flow, counting the current step."""
        return int((self.current_index + 1) / len(self.steps) * 100)

    def go_to_step(self, step: DebateStep) -> None:
        """Jump to ``step`` without any checks."""
        logger.debug(f"Jumping to step {step.value}")
        self.current_step = step

    def next_step(self) -> bool:
        """Advance one step, completing the one being left."""
        if self.is_last_step:
            return False
        self.completed_steps.add(self.current_step)
        self.current_step = self.steps[self.current_index + 1]
        logger.debug(f"Advanced to step {self.current_step.value}")
        return True

    def previous_step(self) -> bool:
        """Go back one step; False on the first step."""
        if self.is_first_step:
            return False
        self.current_step = self.steps[self.current_index - 1]
        logger.debug(f"Went back to step {self.current_step.value}")
        return True

    def can_proceed_to_step(self, step: DebateStep) -> bool:
        """Earlier steps are always reachable; later ones need all prior steps done."""
        target = self.steps.index(step)
        if target <= self.current_index:
            return True
        return all(s in self.completed_steps for s in self.steps[:target])

    def mark_step_completed(self, step: DebateStep) -> None:
        """Record ``step`` as completed without moving."""
        self.completed_steps.add(step)

    def reset_steps(self) -> None:
        """Back to the first step with no completed steps."""
        self.current_step = self.steps[0]
        self.completed_steps.clear()

    @staticmethod
    def get_step_label(step: DebateStep) -> str:
        """Display label of ``step``."""
        return STEP_LABELS[step]

    @property
    def is_complete(self) -> bool:
        """At the last step with every earlier step completed."""
        return self.is_last_step and all(
            s in self.completed_steps for s in self.steps[:-1]
        )

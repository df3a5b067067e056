"""Tests for the cross-field validation aggregator."""

import pytest

from debate_setup.debaters.selector import PROVIDER_DIVERSITY
from debate_setup.models import AIDebater, Personality
from debate_setup.personalities.assigner import PersonalityAssigner
from debate_setup.types import DebateStep
from debate_setup.validation.aggregator import (
    ACTION_ASSIGN_PERSONALITIES,
    ACTION_FIX_DEBATERS,
    ACTION_FIX_PERSONALITIES,
    ACTION_SELECT_TOPIC,
    ANALYTICAL_AI_HINT,
    CONFIGURATION_VALID,
    PERSONALITY_GAP,
    TOPIC_REQUIRED_ERROR,
    TOPIC_REQUIRED_MESSAGE,
    SetupValidation,
)
from debate_setup.validation.assembler import DebateAssembler


def validate(
    assembler: DebateAssembler,
    topic: str,
    debaters: list[AIDebater],
    personalities: dict[str, Personality],
) -> SetupValidation:
    return assembler.validate(topic, debaters, personalities)


def test_scenario_nothing_selected(assembler: DebateAssembler) -> None:
    validation = validate(assembler, "", [], {})
    assert validation.get_next_action() == ACTION_SELECT_TOPIC
    assert validation.topic_validation.message == TOPIC_REQUIRED_MESSAGE
    assert validation.topic_validation.errors == [TOPIC_REQUIRED_ERROR]
    assert validation.can_start_debate is False


def test_scenario_missing_personality(
    assembler: DebateAssembler, anthropic_pair: list[AIDebater], sage: Personality
) -> None:
    first, _ = anthropic_pair
    validation = validate(assembler, "Should AI govern?", anthropic_pair, {first.id: sage})

    assert validation.personality_validation.is_valid is False
    assert PROVIDER_DIVERSITY in validation.overall.warnings
    assert PERSONALITY_GAP in validation.overall.warnings
    assert validation.get_next_action() == ACTION_ASSIGN_PERSONALITIES
    assert validation.can_start_debate is False


def test_scenario_ready_to_start(
    assembler: DebateAssembler,
    assigner: PersonalityAssigner,
    anthropic_pair: list[AIDebater],
    sage: Personality,
) -> None:
    first, second = anthropic_pair
    calm = assigner.get_personality_by_id("calm")
    assert calm is not None
    validation = validate(
        assembler, "Should AI govern?", anthropic_pair, {first.id: sage, second.id: calm}
    )

    assert validation.can_start_debate is True
    assert validation.get_next_action() is None
    assert validation.overall.is_valid is True
    assert validation.overall.message == CONFIGURATION_VALID


def test_duplicate_warnings_are_reported_once(
    assembler: DebateAssembler, anthropic_pair: list[AIDebater], sage: Personality
) -> None:
    first, second = anthropic_pair
    validation = validate(
        assembler, "Should AI govern?", anthropic_pair, {first.id: sage, second.id: sage}
    )
    assert validation.overall.warnings.count(PROVIDER_DIVERSITY) == 1


def test_per_field_validations_do_not_short_circuit(
    assembler: DebateAssembler, claude_ai: AIDebater
) -> None:
    validation = validate(assembler, "", [claude_ai], {})
    errors = validation.overall.errors
    assert errors[0] == TOPIC_REQUIRED_ERROR
    assert "Select at least 2 AI debaters" in errors
    assert f"Invalid personality selection for AI: {claude_ai.id}" in errors
    assert validation.overall.message == TOPIC_REQUIRED_ERROR


def test_next_action_for_too_few_debaters(
    assembler: DebateAssembler, claude_ai: AIDebater, default_personality: Personality
) -> None:
    validation = validate(
        assembler, "Remote work beats the office.", [claude_ai], {claude_ai.id: default_personality}
    )
    assert validation.get_next_action() == "Select at least 2 AI debaters"


def test_next_action_for_other_debater_problems(
    assembler: DebateAssembler, available_ais: list[AIDebater]
) -> None:
    validation = validate(assembler, "Remote work beats the office.", available_ais, {})
    assert validation.get_next_action() == ACTION_FIX_DEBATERS


def test_next_action_for_invalid_personality(
    assembler: DebateAssembler, claude_ai: AIDebater, gpt_ai: AIDebater
) -> None:
    ghost = Personality(id="ghost", name="Ghost", description="", system_prompt="")
    validation = validate(
        assembler,
        "Remote work beats the office.",
        [claude_ai, gpt_ai],
        {claude_ai.id: ghost, gpt_ai.id: ghost},
    )
    assert validation.get_next_action() == ACTION_FIX_PERSONALITIES


def test_analytical_hint_for_complex_topics(
    assembler: DebateAssembler,
    claude_ai: AIDebater,
    gpt_ai: AIDebater,
    gemini_ai: AIDebater,
    default_personality: Personality,
) -> None:
    topic = "Free will is an illusion."
    without = validate(
        assembler,
        topic,
        [gpt_ai, gemini_ai],
        {gpt_ai.id: default_personality, gemini_ai.id: default_personality},
    )
    assert ANALYTICAL_AI_HINT in without.overall.warnings
    assert without.overall.is_valid is True

    with_claude = validate(
        assembler,
        topic,
        [claude_ai, gpt_ai],
        {claude_ai.id: default_personality, gpt_ai.id: default_personality},
    )
    assert ANALYTICAL_AI_HINT not in with_claude.overall.warnings


@pytest.mark.parametrize(
    ("topic", "pick", "assign"),
    [
        ("", 0, 0),
        ("Should AI govern?", 2, 1),
        ("Should AI govern?", 2, 2),
        ("Cats", 2, 2),
        ("Remote work beats the office.", 3, 3),
    ],
)
def test_review_step_tracks_overall_validity(
    assembler: DebateAssembler,
    available_ais: list[AIDebater],
    default_personality: Personality,
    topic: str,
    pick: int,
    assign: int,
) -> None:
    debaters = available_ais[:pick]
    personalities = {d.id: default_personality for d in debaters[:assign]}
    validation = validate(assembler, topic, debaters, personalities)
    assert validation.is_step_valid(DebateStep.REVIEW) == validation.overall.is_valid
    assert validation.is_step_valid(DebateStep.TOPIC) == validation.topic_validation.is_valid
    assert validation.is_step_valid(DebateStep.AI) == validation.ai_validation.is_valid


def test_validation_summary(
    assembler: DebateAssembler, claude_ai: AIDebater, gpt_ai: AIDebater, sage: Personality
) -> None:
    summary = validate(
        assembler, "Should AI govern?", [claude_ai, gpt_ai], {claude_ai.id: sage, gpt_ai.id: sage}
    ).get_validation_summary()
    assert summary.can_proceed is True
    assert summary.next_action is None
    assert summary.overall.is_valid is True

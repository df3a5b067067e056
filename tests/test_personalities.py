"""Tests for personality assignment, compatibility and validation."""

import random
from itertools import product

import pytest

from debate_setup.exceptions import CatalogIntegrityError
from debate_setup.models import AIDebater, Personality, PersonalityCombination
from debate_setup.personalities.assigner import (
    INTENSE_COMBINATION,
    PERSONALITY_DIVERSITY,
    PersonalityAssigner,
)
from debate_setup.personalities.catalog import FALLBACK_DEBATE_PROMPT, PERSONALITIES


def lookup(assigner: PersonalityAssigner, personality_id: str) -> Personality:
    personality = assigner.get_personality_by_id(personality_id)
    assert personality is not None
    return personality


# =============================================================================
# Catalog lookups
# =============================================================================


def test_default_personality(assigner: PersonalityAssigner) -> None:
    assert assigner.get_default_personality().id == "default"


def test_missing_default_is_a_catalog_fault(sage: Personality) -> None:
    assigner = PersonalityAssigner(personalities=[sage])
    with pytest.raises(CatalogIntegrityError):
        assigner.get_default_personality()


def test_available_personalities_by_tier(assigner: PersonalityAssigner) -> None:
    free = assigner.get_available_personalities(is_premium=False)
    assert [p.id for p in free] == ["default", "prof_sage"]
    assert len(assigner.get_available_personalities(is_premium=True)) == len(PERSONALITIES)


def test_catalog_marks_premium_entries() -> None:
    premium = {p.id for p in PERSONALITIES if p.is_premium}
    assert "default" not in premium
    assert "prof_sage" not in premium
    assert {"brody", "calm", "enforcer"} <= premium


@pytest.mark.parametrize(
    ("legacy_id", "current_id"),
    [("analytical", "prof_sage"), ("debater", "devlin"), ("zen", "calm"), ("comedian", "george")],
)
def test_legacy_ids_resolve(
    assigner: PersonalityAssigner, legacy_id: str, current_id: str
) -> None:
    assert lookup(assigner, legacy_id).id == current_id


def test_unknown_id_does_not_resolve(assigner: PersonalityAssigner) -> None:
    assert assigner.get_personality_by_id("nobody") is None


def test_debate_prompt(assigner: PersonalityAssigner) -> None:
    assert assigner.get_debate_prompt("devlin").startswith("Debate by presenting")
    assert assigner.get_debate_prompt("nobody") == FALLBACK_DEBATE_PROMPT


# =============================================================================
# Compatibility
# =============================================================================


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("default", "default", 20),
        ("default", "scout", 50),
        ("prof_sage", "george", 95),
        ("calm", "brody", 95),
        ("brody", "devlin", 65),
        ("brody", "brody", 35),
        ("bestie", "enforcer", 70),
    ],
)
def test_compatibility_score(
    assigner: PersonalityAssigner, first: str, second: str, expected: int
) -> None:
    score = assigner.get_compatibility_score(lookup(assigner, first), lookup(assigner, second))
    assert score == expected


def test_compatibility_is_symmetric_and_bounded(assigner: PersonalityAssigner) -> None:
    for first, second in product(PERSONALITIES, repeat=2):
        score = assigner.get_compatibility_score(first, second)
        assert 0 <= score <= 100
        assert score == assigner.get_compatibility_score(second, first)


def test_selection_compatibility(assigner: PersonalityAssigner, default_personality: Personality) -> None:
    assert assigner.get_compatibility_score_for_selection({}) == 50
    assert assigner.get_compatibility_score_for_selection({"a": default_personality}) == 50
    assert (
        assigner.get_compatibility_score_for_selection(
            {"a": default_personality, "b": default_personality}
        )
        == 20
    )
    brody = lookup(assigner, "brody")
    # (20 + 50 + 50) / 3
    assert (
        assigner.get_compatibility_score_for_selection(
            {"a": default_personality, "b": default_personality, "c": brody}
        )
        == 40
    )


def test_selection_compatibility_rounds_half_up(
    assigner: PersonalityAssigner, default_personality: Personality
) -> None:
    # Pairs: brody/calm 95, four default pairings 50, default/default 20 -> 315 / 6
    assignments = {
        "a": lookup(assigner, "brody"),
        "b": lookup(assigner, "calm"),
        "c": default_personality,
        "d": default_personality,
    }
    assert assigner.get_compatibility_score_for_selection(assignments) == 53


# =============================================================================
# Assignment
# =============================================================================


def test_reconcile_adds_defaults_and_drops_deselected(
    assigner: PersonalityAssigner,
    claude_ai: AIDebater,
    gpt_ai: AIDebater,
    gemini_ai: AIDebater,
    sage: Personality,
) -> None:
    assignments = {claude_ai.id: sage, gemini_ai.id: sage}
    reconciled = assigner.reconcile_assignments([claude_ai, gpt_ai], assignments)
    assert set(reconciled) == {claude_ai.id, gpt_ai.id}
    assert reconciled[claude_ai.id] == sage
    assert reconciled[gpt_ai.id].id == "default"
    assert assignments == {claude_ai.id: sage, gemini_ai.id: sage}
    assert assigner.reconcile_assignments([claude_ai, gpt_ai], reconciled) == reconciled


def test_reset_personalities(
    assigner: PersonalityAssigner, claude_ai: AIDebater, gpt_ai: AIDebater
) -> None:
    reset = assigner.reset_personalities([claude_ai, gpt_ai])
    assert {p.id for p in reset.values()} == {"default"}


def test_apply_recommended_combination(
    assigner: PersonalityAssigner, anthropic_pair: list[AIDebater]
) -> None:
    first, second = anthropic_pair
    combination = PersonalityCombination(personalities=["default", "calm"])
    assignments = assigner.apply_recommended_combination(combination, anthropic_pair)
    assert assignments is not None
    assert assignments[first.id].id == "default"
    assert assignments[second.id].id == "calm"


def test_apply_combination_rejects_length_mismatch(
    assigner: PersonalityAssigner, anthropic_pair: list[AIDebater]
) -> None:
    combination = PersonalityCombination(personalities=["default", "calm", "brody"])
    assert assigner.apply_recommended_combination(combination, anthropic_pair) is None


def test_apply_combination_rejects_unknown_id(
    assigner: PersonalityAssigner, anthropic_pair: list[AIDebater]
) -> None:
    combination = PersonalityCombination(personalities=["default", "nobody"])
    assert assigner.apply_recommended_combination(combination, anthropic_pair) is None


def test_recommended_combinations_resolve(assigner: PersonalityAssigner) -> None:
    combinations = assigner.get_recommended_combinations()
    assert combinations
    for combination in combinations:
        assert all(assigner.get_personality_by_id(pid) for pid in combination.personalities)


def test_randomize_personalities_is_seedable(
    assigner: PersonalityAssigner, available_ais: list[AIDebater]
) -> None:
    first = assigner.randomize_personalities(available_ais, True, random.Random(5))
    second = assigner.randomize_personalities(available_ais, True, random.Random(5))
    assert first == second
    assert set(first) == {ai.id for ai in available_ais}


def test_randomize_personalities_respects_tier(
    assigner: PersonalityAssigner, available_ais: list[AIDebater]
) -> None:
    for seed in range(10):
        assignments = assigner.randomize_personalities(available_ais, False, random.Random(seed))
        assert {p.id for p in assignments.values()} <= {"default", "prof_sage"}


def test_apply_personality_to_debater(assigner: PersonalityAssigner, claude_ai: AIDebater) -> None:
    styled = assigner.apply_personality_to_debater(claude_ai, lookup(assigner, "brody"))
    assert styled.id == claude_ai.id
    assert styled.debating_style.aggression == pytest.approx(0.8)
    assert styled.debating_style.formality == pytest.approx(0.2)
    assert styled.debating_style.evidence_based == pytest.approx(0.3)
    assert styled.debating_style.emotional == pytest.approx(0.7)
    assert claude_ai.debating_style.aggression == pytest.approx(0.5)


# =============================================================================
# Validation
# =============================================================================


def test_null_entry_is_an_error(assigner: PersonalityAssigner, sage: Personality) -> None:
    result = assigner.validate_personality_selection({"A": sage, "B": None})
    assert result.is_valid is False
    assert result.errors == ["Invalid personality selection for AI: B"]


def test_unknown_personality_is_an_error(assigner: PersonalityAssigner) -> None:
    ghost = Personality(id="ghost", name="Ghost", description="", system_prompt="")
    result = assigner.validate_personality_selection({"A": ghost})
    assert result.errors == ['Unknown personality "ghost" for AI: A']


def test_identical_personalities_warn(
    assigner: PersonalityAssigner, default_personality: Personality
) -> None:
    result = assigner.validate_personality_selection(
        {"A": default_personality, "B": default_personality}
    )
    assert result.is_valid is True
    assert result.warnings == [PERSONALITY_DIVERSITY]


def test_multiple_aggressive_personalities_warn(assigner: PersonalityAssigner) -> None:
    result = assigner.validate_personality_selection(
        {"A": lookup(assigner, "brody"), "B": lookup(assigner, "enforcer")}
    )
    assert result.warnings == [INTENSE_COMBINATION]

    result = assigner.validate_personality_selection(
        {"A": lookup(assigner, "brody"), "B": lookup(assigner, "george")}
    )
    assert result.warnings == []


def test_summary(
    assigner: PersonalityAssigner,
    claude_ai: AIDebater,
    gpt_ai: AIDebater,
    default_personality: Personality,
    sage: Personality,
) -> None:
    summary = assigner.get_summary(
        [claude_ai, gpt_ai], {claude_ai.id: default_personality, gpt_ai.id: sage}
    )
    assert summary.total_assigned == 2
    assert summary.expected_total == 2
    assert summary.unique_count == 2
    assert summary.has_custom is True
    assert summary.is_complete is True
    assert summary.is_valid is True

    partial = assigner.get_summary([claude_ai, gpt_ai], {claude_ai.id: default_personality})
    assert partial.is_complete is False

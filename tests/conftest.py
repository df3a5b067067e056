"""Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides:
- Shared debaters, personalities and services
- A seeded random source for the randomized operations
- Custom markers

Learning notes:
- Fixtures defined here are available to all tests without importing
- Randomized engine operations take an injected ``random.Random`` so a fixed
  seed pins their output
"""

import random

import pytest

from debate_setup.config.settings import SetupConfig
from debate_setup.debaters.profiles import convert_to_debater
from debate_setup.debaters.selector import DebaterSelector
from debate_setup.models import AIConfig, AIDebater, Personality
from debate_setup.personalities.assigner import PersonalityAssigner
from debate_setup.topics.service import TopicService
from debate_setup.validation.assembler import DebateAssembler


# =============================================================================
# SHARED FIXTURES - Available to all test modules
# =============================================================================


@pytest.fixture
def setup_config() -> SetupConfig:
    """Provide an all-defaults engine configuration."""
    return SetupConfig()


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random source.

    Learning notes:
    - Same seed, same sequence: randomized results become repeatable
    """
    return random.Random(1234)


@pytest.fixture
def claude_ai() -> AIDebater:
    return convert_to_debater(AIConfig(id="claude-1", provider="claude", name="Claude"))


@pytest.fixture
def gpt_ai() -> AIDebater:
    return convert_to_debater(AIConfig(id="gpt-1", provider="openai", name="GPT"))


@pytest.fixture
def gemini_ai() -> AIDebater:
    return convert_to_debater(AIConfig(id="gemini-1", provider="gemini", name="Gemini"))


@pytest.fixture
def anthropic_pair() -> list[AIDebater]:
    """Provide two debaters from the same provider."""
    return [
        convert_to_debater(AIConfig(id="A", provider="anthropic", name="Claude Opus")),
        convert_to_debater(AIConfig(id="B", provider="anthropic", name="Claude Sonnet")),
    ]


@pytest.fixture
def available_ais(claude_ai: AIDebater, gpt_ai: AIDebater, gemini_ai: AIDebater) -> list[AIDebater]:
    """Provide a small directory of debaters from three providers."""
    return [claude_ai, gpt_ai, gemini_ai]


@pytest.fixture
def topic_service(setup_config: SetupConfig) -> TopicService:
    return TopicService(setup_config)


@pytest.fixture
def selector(setup_config: SetupConfig) -> DebaterSelector:
    return DebaterSelector(setup_config)


@pytest.fixture
def assigner(setup_config: SetupConfig) -> PersonalityAssigner:
    return PersonalityAssigner(setup_config)


@pytest.fixture
def assembler(setup_config: SetupConfig) -> DebateAssembler:
    return DebateAssembler(setup_config)


@pytest.fixture
def default_personality(assigner: PersonalityAssigner) -> Personality:
    return assigner.get_default_personality()


@pytest.fixture
def sage(assigner: PersonalityAssigner) -> Personality:
    personality = assigner.get_personality_by_id("prof_sage")
    assert personality is not None
    return personality


# =============================================================================
# PYTEST CONFIGURATION HOOKS
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )

"""Provider profiles used when turning a directory AI into a debater."""

from debate_setup.models import AIConfig, AIDebater, DebatingStyle

PROVIDER_STRENGTHS: dict[str, list[str]] = {
    "claude": ["philosophy", "ethics", "analysis", "reasoning"],
    "anthropic": ["philosophy", "ethics", "analysis", "reasoning"],
    "openai": ["creativity", "general knowledge", "conversation"],
    "chatgpt": ["creativity", "general knowledge", "conversation"],
    "gemini": ["technology", "science", "research", "factual"],
    "google": ["technology", "science", "research", "factual"],
    "nomi": ["personality", "emotional intelligence"],
    "replika": ["emotional support", "personal connection"],
    "character": ["roleplay", "character consistency"],
}

PROVIDER_WEAKNESSES: dict[str, list[str]] = {
    "claude": ["casual conversation", "humor"],
    "anthropic": ["casual conversation", "humor"],
    "openai": ["very recent events", "real-time data"],
    "chatgpt": ["very recent events", "real-time data"],
    "gemini": ["creative writing", "personal connection"],
    "google": ["creative writing", "personal connection"],
    "nomi": ["technical analysis", "factual debates"],
    "replika": ["formal debate", "aggressive arguments"],
    "character": ["factual accuracy", "formal analysis"],
}

DEFAULT_STRENGTHS = ["general discussion"]

# Provider families for topic relevance scoring.
ANALYTICAL_PROVIDERS = frozenset({"claude", "anthropic"})
TECHNICAL_PROVIDERS = frozenset({"gemini", "google"})
GENERAL_PROVIDERS = frozenset({"openai", "chatgpt"})

ANALYTICAL_KEYWORDS = ("philosophy", "ethics", "analysis")
TECHNICAL_KEYWORDS = ("technology", "science")


def get_provider_strengths(provider: str) -> tuple[str, ...]:
    return tuple(PROVIDER_STRENGTHS.get(provider.lower(), DEFAULT_STRENGTHS))


def get_provider_weaknesses(provider: str) -> tuple[str, ...]:
    return tuple(PROVIDER_WEAKNESSES.get(provider.lower(), ()))


def convert_to_debater(ai_config: AIConfig) -> AIDebater:
    """Attach the default debating style and provider strengths to an AI."""
    return AIDebater(
        id=ai_config.id,
        provider=ai_config.provider,
        name=ai_config.name,
        model=ai_config.model,
        debating_style=DebatingStyle(),
        strength_areas=get_provider_strengths(ai_config.provider),
        weakness_areas=get_provider_weaknesses(ai_config.provider),
    )

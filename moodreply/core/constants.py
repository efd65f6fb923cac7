"""
Application-wide constants for suggestion generation.

Grouped into static classes for namespace management and discoverability.
"""
from moodreply.models.suggestion import ProviderTarget


class GenerationConfig:
    """Fixed generation parameters sent with every Gemini request."""
    TEMPERATURE = 0.7
    TOP_K = 40
    TOP_P = 0.95
    MAX_OUTPUT_TOKENS = 1024

    @classmethod
    def as_payload(cls) -> dict:
        return {
            "temperature": cls.TEMPERATURE,
            "topK": cls.TOP_K,
            "topP": cls.TOP_P,
            "maxOutputTokens": cls.MAX_OUTPUT_TOKENS,
        }


GEMINI_API_VERSIONS = ("v1beta", "v1")
GEMINI_MODEL_NAMES = (
    "gemini-1.5-flash",
    "gemini-1.5-pro",
    "gemini-pro",
    "gemini-1.0-pro",
)


class ProviderConfig:
    """Fallback search order for the Gemini API."""
    PROVIDER_FAMILY = "gemini"
    API_VERSIONS = GEMINI_API_VERSIONS
    MODEL_NAMES = GEMINI_MODEL_NAMES

    # Version is the outer loop, model the inner one
    TARGETS = tuple(
        ProviderTarget(api_version=version, model_name=model)
        for version in GEMINI_API_VERSIONS
        for model in GEMINI_MODEL_NAMES
    )


class SuggestionConfig:
    """Limits and local fallback content for reply suggestions."""
    MAX_SUGGESTIONS = 4

    FALLBACK_REPLIES = (
        "I understand what you're saying. Let me think about this.",
        "That's an interesting point. Could you tell me more?",
        "Thanks for sharing that with me. I appreciate your perspective.",
        "I see where you're coming from. Let's discuss this further.",
    )

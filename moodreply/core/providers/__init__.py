"""
Provider layer: Gemini transport and the sequential fallback client.
"""
from moodreply.core.providers.transport import (
    AttemptOutcome,
    TargetCaller,
)
from moodreply.core.providers.gemini_transport import (
    GeminiTransport,
    describe_rejection,
    extract_candidate_text,
)
from moodreply.core.providers.fallback import (
    FallbackLoop,
    ProviderFallbackClient,
)

__all__ = [
    # Capability
    "AttemptOutcome",
    "TargetCaller",
    # Gemini
    "GeminiTransport",
    "describe_rejection",
    "extract_candidate_text",
    # Fallback
    "FallbackLoop",
    "ProviderFallbackClient",
]

"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection.
"""
from functools import lru_cache
from fastapi import Depends

from moodreply.core.config import settings
from moodreply.core.providers.fallback import ProviderFallbackClient
from moodreply.core.providers.gemini_transport import GeminiTransport
from moodreply.services.credentials import CredentialStore
from moodreply.services.suggestions import SuggestionService


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_gemini_transport() -> GeminiTransport:
    """Get the shared Gemini HTTP transport."""
    return GeminiTransport(
        base_url=settings.GEMINI_BASE_URL,
        timeout=settings.REQUEST_TIMEOUT_SECONDS,
    )


@lru_cache
def get_provider_client() -> ProviderFallbackClient:
    """Get the fallback client over the default Gemini targets."""
    return ProviderFallbackClient(caller=get_gemini_transport())


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

@lru_cache
def get_credential_store() -> CredentialStore:
    """
    Get the process-wide credential store.

    Credentials live only as long as the process.
    """
    return CredentialStore()


def get_suggestion_service(
    credential_store: CredentialStore = Depends(get_credential_store),
    provider_client: ProviderFallbackClient = Depends(get_provider_client),
) -> SuggestionService:
    """Get suggestion service wired to the shared store and provider client."""
    return SuggestionService(
        credential_store=credential_store,
        provider_client=provider_client,
    )

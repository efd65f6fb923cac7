"""
Shared pytest fixtures and configuration.
"""
import pytest
from unittest.mock import AsyncMock

from moodreply.main import app
from moodreply.api.dependencies import get_credential_store, get_suggestion_service
from moodreply.core.providers.fallback import ProviderFallbackClient
from moodreply.core.providers.transport import AttemptOutcome
from moodreply.models.suggestion import ProviderTarget
from moodreply.services.credentials import CredentialStore
from moodreply.services.suggestions import SuggestionService


class ScriptedCaller:
    """Deterministic TargetCaller returning queued outcomes in order."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    async def __call__(self, target, prompt, credential):
        self.calls.append((target, prompt, credential))
        return self.outcomes.pop(0)


@pytest.fixture
def scripted_caller():
    """Factory for ScriptedCaller instances."""
    return ScriptedCaller


@pytest.fixture
def targets():
    """Three targets across two API versions."""
    return [
        ProviderTarget(api_version="v1beta", model_name="model-a"),
        ProviderTarget(api_version="v1beta", model_name="model-b"),
        ProviderTarget(api_version="v1", model_name="model-a"),
    ]


@pytest.fixture
def credential_store():
    """An empty credential store."""
    return CredentialStore()


@pytest.fixture
def gemini_credential(credential_store):
    """A Gemini credential registered in the store."""
    return credential_store.add("Gemini", "abcd1234xyz9", "Gemini")


@pytest.fixture
def mock_provider_client():
    """Create a mock ProviderFallbackClient."""
    return AsyncMock(spec=ProviderFallbackClient)


@pytest.fixture
def suggestion_service(credential_store, mock_provider_client):
    return SuggestionService(
        credential_store=credential_store,
        provider_client=mock_provider_client,
    )


@pytest.fixture
def success_outcome():
    return AttemptOutcome.success("1. Sure thing\n2. Sounds good\n3. Count me in\n4. Let's do it")


@pytest.fixture
def override_dependencies(credential_store, suggestion_service):
    """Override FastAPI dependencies for testing."""
    app.dependency_overrides[get_credential_store] = lambda: credential_store
    app.dependency_overrides[get_suggestion_service] = lambda: suggestion_service

    yield

    # Clean up
    app.dependency_overrides.clear()

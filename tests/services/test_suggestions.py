import pytest

from moodreply.core.constants import SuggestionConfig
from moodreply.core.exceptions import (
    MissingCredentialError,
    ModelsExhaustedError,
    ProviderRejectedError,
)
from moodreply.core.prompts import MoodPrompts
from moodreply.models.enums import Mood
from moodreply.models.suggestion import Suggestion


@pytest.mark.asyncio
async def test_request_suggestions_without_credential(suggestion_service, mock_provider_client):
    with pytest.raises(MissingCredentialError):
        await suggestion_service.request_suggestions("hello", Mood.GOOD)
    mock_provider_client.generate.assert_not_called()


@pytest.mark.asyncio
async def test_request_suggestions_numbers_results(suggestion_service, mock_provider_client, gemini_credential):
    mock_provider_client.generate.return_value = ["Hi", "Yo", "Sup"]

    result = await suggestion_service.request_suggestions("hello", Mood.COOL)

    assert result == [
        Suggestion(id=1, text="Hi"),
        Suggestion(id=2, text="Yo"),
        Suggestion(id=3, text="Sup"),
    ]
    args, _ = mock_provider_client.generate.call_args
    prompt, credential = args
    assert '"hello"' in prompt
    assert prompt.endswith(MoodPrompts.NUMBERED_LINES_INSTRUCTION)
    assert credential == gemini_credential


@pytest.mark.asyncio
async def test_request_suggestions_propagates_rejection(suggestion_service, mock_provider_client, gemini_credential):
    mock_provider_client.generate.side_effect = ProviderRejectedError(429, "Rate limit exceeded.")

    with pytest.raises(ProviderRejectedError):
        await suggestion_service.request_suggestions("hello", Mood.GOOD)


@pytest.mark.asyncio
async def test_compose_reply_success(suggestion_service, mock_provider_client, gemini_credential):
    mock_provider_client.generate.return_value = ["A", "B", "C", "D"]

    batch = await suggestion_service.compose_reply("hello", Mood.FORMAL)

    assert [s.text for s in batch.suggestions] == ["A", "B", "C", "D"]
    assert batch.error is None
    assert batch.is_fallback is False


@pytest.mark.asyncio
async def test_compose_reply_missing_credential_uses_fallback(suggestion_service):
    batch = await suggestion_service.compose_reply("hello", Mood.GOOD)

    assert batch.is_fallback is True
    assert batch.credential_required is True
    assert batch.error == "Please add a Gemini API key first"
    assert [s.text for s in batch.suggestions] == list(SuggestionConfig.FALLBACK_REPLIES)


@pytest.mark.asyncio
async def test_compose_reply_provider_error_uses_fallback(suggestion_service, mock_provider_client, gemini_credential):
    mock_provider_client.generate.side_effect = ModelsExhaustedError()

    batch = await suggestion_service.compose_reply("hello", Mood.GOOD)

    assert batch.is_fallback is True
    assert batch.credential_required is False
    assert "No available Gemini models" in batch.error
    assert len(batch.suggestions) == 4


@pytest.mark.asyncio
async def test_compose_reply_empty_result_uses_fallback(suggestion_service, mock_provider_client, gemini_credential):
    mock_provider_client.generate.return_value = []

    batch = await suggestion_service.compose_reply("hello", Mood.GOOD)

    assert batch.is_fallback is True
    assert batch.error == "No suggestions received from API"
    assert [s.id for s in batch.suggestions] == [1, 2, 3, 4]

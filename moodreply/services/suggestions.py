"""
Suggestion service: composes credential lookup, prompt building and the
provider fallback client into the single entry point used by the UI.
"""
from typing import List

from loguru import logger

from moodreply.core.constants import ProviderConfig, SuggestionConfig
from moodreply.core.exceptions import AppException, EmptySuggestionsError, MissingCredentialError
from moodreply.core.prompts import build_prompt
from moodreply.core.providers.fallback import ProviderFallbackClient
from moodreply.models.api import SuggestionBatch
from moodreply.models.enums import Mood
from moodreply.models.suggestion import Suggestion
from moodreply.services.credentials import CredentialStore


def fallback_suggestions() -> List[Suggestion]:
    """The fixed local replies shown whenever generation fails."""
    return [
        Suggestion(id=index, text=text)
        for index, text in enumerate(SuggestionConfig.FALLBACK_REPLIES, start=1)
    ]


class SuggestionService:
    """
    Service for turning a message and a mood into reply suggestions.

    This service orchestrates:
    1. Locating the Gemini credential in the credential store
    2. Building the mood-specific prompt
    3. Running the provider fallback loop
    4. Numbering the parsed suggestions
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        provider_client: ProviderFallbackClient,
    ):
        """
        Initialize the SuggestionService.

        Args:
            credential_store: In-memory store holding the user's API keys.
            provider_client: Client running the Gemini fallback loop.
        """
        self.credential_store = credential_store
        self.provider_client = provider_client

    async def request_suggestions(self, message: str, mood: Mood) -> List[Suggestion]:
        """
        Generate suggestions for a message.

        Args:
            message: The message to reply to.
            mood: Tone of the replies.

        Returns:
            Between zero and four suggestions, numbered from 1.

        Raises:
            MissingCredentialError: No Gemini credential has been added.
            ProviderRejectedError, ModelsExhaustedError, MalformedResponseError:
                Propagated from the provider client.
        """
        credential = self.credential_store.find_by_provider_family(ProviderConfig.PROVIDER_FAMILY)
        if credential is None:
            raise MissingCredentialError()

        mood = Mood(mood)
        prompt = build_prompt(mood, message)
        logger.info(f"Requesting '{mood.value}' suggestions for a {len(message)}-character message")
        texts = await self.provider_client.generate(prompt, credential)
        return [Suggestion(id=index, text=text) for index, text in enumerate(texts, start=1)]

    async def compose_reply(self, message: str, mood: Mood) -> SuggestionBatch:
        """
        Generate suggestions, substituting the local fallback set on failure.

        Errors are reported in the batch next to the fallback replies rather
        than raised, so the user always has something to pick from.
        """
        try:
            suggestions = await self.request_suggestions(message, mood)
            if not suggestions:
                raise EmptySuggestionsError()
        except AppException as e:
            logger.error(f"Error generating suggestions: {e.detail}")
            return SuggestionBatch(
                suggestions=fallback_suggestions(),
                error=e.detail,
                is_fallback=True,
                credential_required=isinstance(e, MissingCredentialError),
            )

        logger.info(f"Generated {len(suggestions)} suggestion(s)")
        return SuggestionBatch(suggestions=suggestions)

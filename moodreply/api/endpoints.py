"""
API endpoints for reply suggestions, moods and credential management.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from loguru import logger
import time

from moodreply.models.api import (
    CredentialCreate,
    CredentialResponse,
    MoodOption,
    SuggestionBatch,
    SuggestionRequest,
)
from moodreply.models.enums import Mood
from moodreply.core.exceptions import CredentialNotFoundError
from moodreply.core.prompts import MoodPrompts
from moodreply.services.credentials import CredentialStore
from moodreply.services.suggestions import SuggestionService
from moodreply.api.dependencies import get_credential_store, get_suggestion_service


router = APIRouter()


@router.post("/suggestions", response_model=SuggestionBatch)
async def create_suggestions(
    payload: SuggestionRequest,
    suggestion_service: SuggestionService = Depends(get_suggestion_service),
):
    """
    Generates up to four reply suggestions for a message in the selected mood.

    Failures never produce an error status: the response then carries the
    local fallback replies, the error text, and `credential_required` when
    no Gemini key has been added yet.

    Args:
        payload: The message and the mood.
        suggestion_service: The service handling the business logic.

    Returns:
        SuggestionBatch: The suggestions and, on failure, the error message.
    """
    start_time = time.perf_counter()
    result = await suggestion_service.compose_reply(payload.message, payload.mood)
    duration = time.perf_counter() - start_time
    logger.info(f"Suggestion request completed in {duration:.2f}s (fallback={result.is_fallback})")
    return result


@router.get("/moods", response_model=List[MoodOption])
async def list_moods():
    """Lists the available moods with their display label and icon."""
    return [
        MoodOption(value=mood, label=MoodPrompts.LABELS[mood][0], icon=MoodPrompts.LABELS[mood][1])
        for mood in Mood
    ]


@router.get("/credentials", response_model=List[CredentialResponse])
def list_credentials(
    store: CredentialStore = Depends(get_credential_store),
):
    """Lists stored credentials with masked secrets."""
    return [CredentialResponse.from_credential(c) for c in store.list_credentials()]


@router.get("/credentials/{credential_id}", response_model=CredentialResponse)
def get_credential(
    credential_id: int,
    store: CredentialStore = Depends(get_credential_store),
):
    """
    Returns one stored credential with its secret masked.

    Raises:
        CredentialNotFoundError: Unknown id (rendered as problem+json).
    """
    credential = store.get(credential_id)
    if credential is None:
        raise CredentialNotFoundError(credential_id)
    return CredentialResponse.from_credential(credential)


@router.post(
    "/credentials",
    response_model=CredentialResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_credential(
    payload: CredentialCreate,
    store: CredentialStore = Depends(get_credential_store),
):
    """
    Adds an API key. The display name defaults to the provider family.

    Returns:
        CredentialResponse: The stored credential, secret masked.
    """
    credential = store.add(
        display_name=payload.display_name or payload.provider_family,
        secret=payload.secret,
        provider_family=payload.provider_family,
    )
    return CredentialResponse.from_credential(credential)


@router.delete("/credentials/{credential_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_credential(
    credential_id: int,
    store: CredentialStore = Depends(get_credential_store),
):
    """Removes an API key. Unknown ids are ignored."""
    store.remove(credential_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

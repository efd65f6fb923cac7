"""
Pydantic models for API request/response schemas.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moodreply.models.credential import Credential
from moodreply.models.enums import Mood
from moodreply.models.suggestion import Suggestion


class SuggestionRequest(BaseModel):
    """Request model for reply suggestions."""

    message: str
    mood: Mood = Mood.GOOD

    model_config = ConfigDict(extra="forbid")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        """Reject blank messages; the text itself is kept verbatim."""
        if not v.strip():
            raise ValueError("Message must not be empty")
        return v


class SuggestionBatch(BaseModel):
    """Suggestions shown to the user, possibly the local fallback set."""

    suggestions: List[Suggestion]
    error: Optional[str] = None
    is_fallback: bool = False
    credential_required: bool = False

    model_config = ConfigDict(frozen=True)


class MoodOption(BaseModel):
    """Mood entry for the mood picker."""

    value: Mood
    label: str
    icon: str

    model_config = ConfigDict(frozen=True)


class CredentialCreate(BaseModel):
    """Request model for adding an API key."""

    secret: str = Field(min_length=1)
    provider_family: str = Field(default="Gemini", min_length=1)
    display_name: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("secret", "provider_family")
    @classmethod
    def strip_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Value must not be blank")
        return v


class CredentialResponse(BaseModel):
    """Masked view of a stored credential."""

    id: int
    display_name: str
    provider_family: str
    masked_secret: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_credential(cls, credential: Credential) -> "CredentialResponse":
        return cls(
            id=credential.id,
            display_name=credential.display_name,
            provider_family=credential.provider_family,
            masked_secret=credential.masked_secret,
        )

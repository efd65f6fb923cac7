"""
Pydantic models for generated suggestions and provider targets.
"""
from pydantic import BaseModel, ConfigDict


class Suggestion(BaseModel):
    """One reply suggestion; `id` is the 1-based position within its batch."""

    id: int
    text: str

    model_config = ConfigDict(frozen=True)


class ProviderTarget(BaseModel):
    """An (API version, model name) pair tried during fallback."""

    api_version: str
    model_name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.api_version}/{self.model_name}"

"""
Capability interface for calling one provider target.

The fallback loop only sees classified outcomes, never HTTP responses, so it
can be exercised with plain async fakes in tests.
"""
from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict

from moodreply.models.credential import Credential
from moodreply.models.enums import AttemptKind
from moodreply.models.suggestion import ProviderTarget


class AttemptOutcome(BaseModel):
    """Classified result of a single request against one provider target."""

    kind: AttemptKind
    text: Optional[str] = None
    status_code: Optional[int] = None
    reason: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def success(cls, text: str, status_code: int = 200) -> "AttemptOutcome":
        return cls(kind=AttemptKind.SUCCESS, text=text, status_code=status_code)

    @classmethod
    def not_found(cls) -> "AttemptOutcome":
        return cls(kind=AttemptKind.NOT_FOUND, status_code=404)

    @classmethod
    def rejected(cls, status_code: int, reason: str) -> "AttemptOutcome":
        return cls(kind=AttemptKind.REJECTED, status_code=status_code, reason=reason)

    @classmethod
    def transport_error(cls, reason: str) -> "AttemptOutcome":
        return cls(kind=AttemptKind.TRANSPORT_ERROR, reason=reason)

    @classmethod
    def malformed(cls, status_code: int = 200) -> "AttemptOutcome":
        return cls(kind=AttemptKind.MALFORMED, status_code=status_code)


class TargetCaller(Protocol):
    """Issues one generation request and classifies the result."""

    async def __call__(
        self,
        target: ProviderTarget,
        prompt: str,
        credential: Credential,
    ) -> AttemptOutcome:
        ...

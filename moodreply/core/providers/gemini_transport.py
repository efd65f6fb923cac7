"""
Google Gemini REST implementation of TargetCaller.

Talks to the Generative Language API directly with httpx so that the API
version is part of the request path and each HTTP status can be classified.
"""
from typing import Any, Optional

import httpx
from loguru import logger

from moodreply.core.constants import GenerationConfig
from moodreply.core.providers.transport import AttemptOutcome
from moodreply.models.credential import Credential
from moodreply.models.suggestion import ProviderTarget

GENERATE_PATH = "/{api_version}/models/{model_name}:generateContent"

REJECTION_MESSAGES = {
    400: "Invalid API key or request format. Please check your Gemini API key.",
    403: "API key access denied. Please verify your Gemini API key permissions.",
    429: "Rate limit exceeded. Please wait a moment and try again.",
}


def describe_rejection(status_code: int, reason_phrase: str, body: Any = None) -> str:
    """
    Build a human-readable message for a non-404 error status.

    Args:
        status_code: HTTP status returned by the API.
        reason_phrase: HTTP reason phrase, used for unknown statuses.
        body: Decoded error body, if any. Google's `error.message` is appended.
    """
    message = REJECTION_MESSAGES.get(
        status_code, f"API Error: {status_code} {reason_phrase}".rstrip()
    )
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            message += f" Details: {error['message']}"
    return message


def extract_candidate_text(payload: Any) -> Optional[str]:
    """Return `candidates[0].content.parts[0].text`, or None if the path is missing."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GeminiTransport:
    """
    Sends one generateContent request per provider target.

    Example:
        transport = GeminiTransport(base_url="https://generativelanguage.googleapis.com")
        outcome = await transport(target, prompt, credential)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: Root URL of the Generative Language API.
            timeout: Per-request timeout in seconds.
            client: Optional preconfigured client (tests inject a MockTransport).
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def build_url(self, target: ProviderTarget) -> str:
        return self.base_url + GENERATE_PATH.format(
            api_version=target.api_version,
            model_name=target.model_name,
        )

    @staticmethod
    def build_payload(prompt: str) -> dict:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": GenerationConfig.as_payload(),
        }

    async def __call__(
        self,
        target: ProviderTarget,
        prompt: str,
        credential: Credential,
    ) -> AttemptOutcome:
        try:
            response = await self._client.post(
                self.build_url(target),
                params={"key": credential.secret.get_secret_value()},
                json=self.build_payload(prompt),
            )
        except httpx.RequestError as e:
            # Type name only: the request URL carries the key
            logger.warning(f"Transport error for {target}: {type(e).__name__}")
            return AttemptOutcome.transport_error(type(e).__name__)

        if response.status_code == 404:
            return AttemptOutcome.not_found()

        if response.is_success:
            try:
                payload = response.json()
            except ValueError:
                logger.warning(f"Undecodable response body from {target}")
                return AttemptOutcome.transport_error("invalid JSON body")
            text = extract_candidate_text(payload)
            if text is None:
                return AttemptOutcome.malformed(response.status_code)
            return AttemptOutcome.success(text, response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = None
        reason = describe_rejection(response.status_code, response.reason_phrase, body)
        return AttemptOutcome.rejected(response.status_code, reason)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

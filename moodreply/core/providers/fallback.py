"""
Sequential fallback across Gemini API versions and models.

The policy lives in `FallbackLoop`, a small state machine fed with one
classified outcome per attempt. `ProviderFallbackClient` drives it with a
`TargetCaller`, awaiting each attempt before deciding on the next one.
"""
from typing import Callable, List, Optional, Sequence

from loguru import logger

from moodreply.core.constants import ProviderConfig
from moodreply.core.exceptions import (
    MalformedResponseError,
    ModelsExhaustedError,
    ProviderRejectedError,
)
from moodreply.core.providers.transport import AttemptOutcome, TargetCaller
from moodreply.models.credential import Credential
from moodreply.models.enums import AttemptKind, FallbackState
from moodreply.models.suggestion import ProviderTarget
from moodreply.services.parser import parse_suggestions


class FallbackLoop:
    """
    State machine for one generation request.

    Starts in RUNNING and moves to one of three terminal states:

    - SUCCEEDED: a well-formed answer, parsed into zero to four suggestions.
    - FAILED: the provider definitively rejected the request (bad key,
      permission, quota). Remaining targets are not tried.
    - EXHAUSTED: every target was tried without success.

    Not-found, transport errors and malformed successes keep the loop RUNNING.
    """

    def __init__(
        self,
        targets: Sequence[ProviderTarget],
        parser: Callable[[str], List[str]] = parse_suggestions,
    ):
        if not targets:
            raise ValueError("At least one provider target is required")
        self.targets = tuple(targets)
        self.parser = parser
        self.state = FallbackState.RUNNING
        self.attempts = 0
        self.suggestions: List[str] = []
        self.rejection: Optional[AttemptOutcome] = None
        self.saw_malformed = False

    @property
    def is_terminal(self) -> bool:
        return self.state != FallbackState.RUNNING

    def next_target(self) -> Optional[ProviderTarget]:
        """The target to try next, or None once the loop has terminated."""
        if self.is_terminal:
            return None
        return self.targets[self.attempts]

    def record(self, outcome: AttemptOutcome) -> FallbackState:
        """
        Apply the outcome of the attempt on `next_target()`.

        Returns:
            The state after the transition.
        """
        if self.is_terminal:
            raise RuntimeError(f"Fallback loop already finished ({self.state.value})")

        self.attempts += 1

        if outcome.kind == AttemptKind.SUCCESS:
            self.suggestions = self.parser(outcome.text or "")
            self.state = FallbackState.SUCCEEDED
            return self.state
        if outcome.kind == AttemptKind.MALFORMED:
            self.saw_malformed = True
        elif outcome.kind == AttemptKind.REJECTED:
            self.rejection = outcome
            self.state = FallbackState.FAILED
            return self.state

        if self.attempts >= len(self.targets):
            self.state = FallbackState.EXHAUSTED
        return self.state

    def result(self) -> List[str]:
        """
        Final suggestions, or the error matching the terminal state.

        A well-formed answer without any numbered line succeeds with an
        empty list; the caller decides what that means.
        """
        if self.state == FallbackState.SUCCEEDED:
            return self.suggestions
        if self.state == FallbackState.FAILED:
            if self.rejection is None:
                raise RuntimeError("Fallback loop failed without a recorded rejection")
            raise ProviderRejectedError(
                provider_status=self.rejection.status_code or 0,
                detail=self.rejection.reason or "Request rejected by the Gemini API.",
            )
        if self.state == FallbackState.EXHAUSTED:
            if self.saw_malformed:
                raise MalformedResponseError()
            raise ModelsExhaustedError()
        raise RuntimeError("Fallback loop has not finished yet")


class ProviderFallbackClient:
    """
    Generates suggestions by trying provider targets in priority order.

    Example:
        client = ProviderFallbackClient(caller=GeminiTransport(base_url=...))
        suggestions = await client.generate(prompt, credential)
    """

    def __init__(
        self,
        caller: TargetCaller,
        targets: Sequence[ProviderTarget] = ProviderConfig.TARGETS,
    ):
        """
        Initialize the client.

        Args:
            caller: Issues one request and classifies its outcome.
            targets: Search order; API version outer, model inner.
        """
        self.caller = caller
        self.targets = tuple(targets)

    async def generate(self, prompt: str, credential: Credential) -> List[str]:
        """
        Run the fallback loop for one prompt.

        Returns:
            Up to four suggestions; empty if the model answered without any
            numbered line.

        Raises:
            ProviderRejectedError: The first definitive rejection, immediately.
            MalformedResponseError: Only malformed answers were received.
            ModelsExhaustedError: No target responded.
        """
        loop = FallbackLoop(self.targets)
        while (target := loop.next_target()) is not None:
            logger.debug(f"Trying Gemini target {target}")
            outcome = await self.caller(target, prompt, credential)
            state = loop.record(outcome)
            logger.info(
                f"Gemini target {target}: {outcome.kind.value}"
                + (f" (HTTP {outcome.status_code})" if outcome.status_code else "")
            )
            if state == FallbackState.FAILED:
                logger.warning(f"Aborting fallback after {loop.attempts} attempt(s): {outcome.reason}")

        if loop.state == FallbackState.EXHAUSTED:
            logger.warning(f"All {loop.attempts} Gemini targets tried without suggestions")
        return loop.result()

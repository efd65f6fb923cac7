"""
Custom exception classes and RFC 7807 error handling.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict
from fastapi import Request
from fastapi.responses import JSONResponse


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details response model."""
    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        title: str,
        detail: str,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.title = title
        self.detail = detail
        super().__init__(detail)


class MissingCredentialError(AppException):
    """No stored credential matches the requested provider family."""

    def __init__(self, provider_family: str = "Gemini"):
        super().__init__(
            status_code=428,
            error_type="https://problems.example.com/missing-credential",
            title="Credential Required",
            detail=f"Please add a {provider_family} API key first",
        )


class CredentialNotFoundError(AppException):
    """No stored credential has the requested id."""

    def __init__(self, credential_id: int):
        super().__init__(
            status_code=404,
            error_type="https://problems.example.com/not-found",
            title="Resource Not Found",
            detail=f"Credential with id '{credential_id}' was not found.",
        )


class ProviderRejectedError(AppException):
    """The provider definitively rejected the request (bad key, permission, quota)."""

    def __init__(self, provider_status: int, detail: str):
        self.provider_status = provider_status
        super().__init__(
            status_code=502,
            error_type="https://problems.example.com/provider-rejected",
            title="Provider Rejected Request",
            detail=detail,
        )


class ModelsExhaustedError(AppException):
    """Every provider target was tried and none responded."""

    def __init__(
        self,
        detail: str = (
            "No available Gemini models found. Please check your API key and ensure "
            "the Generative Language API is enabled in your Google Cloud Console."
        ),
    ):
        super().__init__(
            status_code=503,
            error_type="https://problems.example.com/models-exhausted",
            title="No Model Available",
            detail=detail,
        )


class MalformedResponseError(AppException):
    """The provider answered successfully but without any candidate text."""

    def __init__(self, detail: str = "The Gemini API returned a response without any content."):
        super().__init__(
            status_code=502,
            error_type="https://problems.example.com/malformed-response",
            title="Malformed Provider Response",
            detail=detail,
        )


class EmptySuggestionsError(AppException):
    """The provider answered but no numbered suggestion could be extracted."""

    def __init__(self, detail: str = "No suggestions received from API"):
        super().__init__(
            status_code=502,
            error_type="https://problems.example.com/empty-suggestions",
            title="No Suggestions",
            detail=detail,
        )


def create_error_response(
    request: Request,
    status_code: int,
    error_type: str,
    title: str,
    detail: str,
) -> JSONResponse:
    """Create a RFC 7807 compliant JSON error response."""
    error = ErrorResponse(
        type=error_type,
        title=title,
        status=status_code,
        detail=detail,
        instance=str(request.url.path),
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(),
        media_type="application/problem+json",
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return RFC 7807 response."""
    return create_error_response(
        request=request,
        status_code=exc.status_code,
        error_type=exc.error_type,
        title=exc.title,
        detail=exc.detail,
    )

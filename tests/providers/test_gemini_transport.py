import json

import httpx
import pytest

from moodreply.core.providers.gemini_transport import (
    GeminiTransport,
    describe_rejection,
    extract_candidate_text,
)
from moodreply.models.enums import AttemptKind
from moodreply.models.suggestion import ProviderTarget

BASE_URL = "https://generativelanguage.test"
TARGET = ProviderTarget(api_version="v1beta", model_name="gemini-1.5-flash")


def candidate_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def make_transport(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiTransport(base_url=BASE_URL + "/", client=client)


@pytest.mark.asyncio
async def test_request_shape(gemini_credential):
    seen = {}

    def handler(request):
        seen["request"] = request
        return httpx.Response(200, json=candidate_body("1. Hi"))

    transport = make_transport(handler)
    outcome = await transport(TARGET, "the prompt", gemini_credential)

    request = seen["request"]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-1.5-flash:generateContent"
    assert request.url.params["key"] == "abcd1234xyz9"
    body = json.loads(request.content)
    assert body["contents"][0]["parts"][0]["text"] == "the prompt"
    assert body["generationConfig"] == {
        "temperature": 0.7,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 1024,
    }
    assert outcome.kind == AttemptKind.SUCCESS
    assert outcome.text == "1. Hi"


@pytest.mark.asyncio
async def test_not_found(gemini_credential):
    transport = make_transport(lambda request: httpx.Response(404, json={"error": {"message": "not found"}}))
    outcome = await transport(TARGET, "p", gemini_credential)
    assert outcome.kind == AttemptKind.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, expected",
    [
        (400, "Invalid API key"),
        (403, "access denied"),
        (429, "Rate limit exceeded"),
        (500, "API Error: 500 Internal Server Error"),
    ],
)
async def test_rejected_statuses(gemini_credential, status_code, expected):
    transport = make_transport(
        lambda request: httpx.Response(status_code, json={"error": {"message": "API key not valid"}})
    )
    outcome = await transport(TARGET, "p", gemini_credential)

    assert outcome.kind == AttemptKind.REJECTED
    assert outcome.status_code == status_code
    assert expected in outcome.reason
    assert outcome.reason.endswith("Details: API key not valid")


@pytest.mark.asyncio
async def test_rejected_without_json_body(gemini_credential):
    transport = make_transport(lambda request: httpx.Response(403, text="<html>nope</html>"))
    outcome = await transport(TARGET, "p", gemini_credential)

    assert outcome.kind == AttemptKind.REJECTED
    assert "Details" not in outcome.reason


@pytest.mark.asyncio
async def test_success_without_candidates_is_malformed(gemini_credential):
    transport = make_transport(lambda request: httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}}))
    outcome = await transport(TARGET, "p", gemini_credential)
    assert outcome.kind == AttemptKind.MALFORMED


@pytest.mark.asyncio
async def test_undecodable_success_body_is_transport_error(gemini_credential):
    transport = make_transport(lambda request: httpx.Response(200, text="not json"))
    outcome = await transport(TARGET, "p", gemini_credential)
    assert outcome.kind == AttemptKind.TRANSPORT_ERROR


@pytest.mark.asyncio
async def test_connection_error_is_transport_error(gemini_credential):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = make_transport(handler)
    outcome = await transport(TARGET, "p", gemini_credential)

    assert outcome.kind == AttemptKind.TRANSPORT_ERROR
    assert outcome.reason == "ConnectError"


@pytest.mark.asyncio
async def test_timeout_is_transport_error(gemini_credential):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    transport = make_transport(handler)
    outcome = await transport(TARGET, "p", gemini_credential)
    assert outcome.kind == AttemptKind.TRANSPORT_ERROR


def test_extract_candidate_text():
    assert extract_candidate_text(candidate_body("hello")) == "hello"
    assert extract_candidate_text({"candidates": []}) is None
    assert extract_candidate_text({"candidates": [{"content": {"parts": []}}]}) is None
    assert extract_candidate_text([]) is None
    assert extract_candidate_text(None) is None


def test_describe_rejection_unknown_status():
    assert describe_rejection(418, "I'm a teapot") == "API Error: 418 I'm a teapot"
    assert describe_rejection(401, "Unauthorized", {"error": "flat string"}) == "API Error: 401 Unauthorized"

"""Tests for the Gemini capability client."""

import json

import httpx
import pytest

from smartsegment.config import Settings
from smartsegment.errors import CapabilityError
from smartsegment.models import ImagePayload
from smartsegment.services.gemini import GeminiCapability

TEST_SETTINGS = Settings(
    gemini_api_key="unused",
    gemini_model="gemini-test",
    gemini_api_url="https://gemini.test/v1beta",
    request_timeout=5.0,
)
IMAGE = ImagePayload(mime_type="image/jpeg", data="aW1hZ2U=")

SUCCESS_BODY = {
    "candidates": [
        {
            "content": {
                "role": "model",
                "parts": [
                    {"text": "Extracted subject."},
                    {"inlineData": {"mimeType": "image/png", "data": "cmVzdWx0"}},
                ],
            },
            "finishReason": "STOP",
        }
    ]
}


def make_capability(handler) -> GeminiCapability:
    """Create a capability backed by a mock transport."""
    return GeminiCapability(TEST_SETTINGS, transport=httpx.MockTransport(handler))


class TestGeminiRequest:
    """Tests for the outgoing request."""

    def test_posts_prompt_and_inline_image(self) -> None:
        """Test URL, API key header and camelCase body."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=SUCCESS_BODY)

        make_capability(handler).generate("segment this", IMAGE, "secret-key")

        assert len(captured) == 1
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "https://gemini.test/v1beta/models/gemini-test:generateContent"
        assert request.headers["x-goog-api-key"] == "secret-key"

        body = json.loads(request.content)
        parts = body["contents"][0]["parts"]
        assert parts[0] == {"text": "segment this"}
        assert parts[1] == {"inlineData": {"mimeType": "image/jpeg", "data": "aW1hZ2U="}}

    def test_parses_response_parts(self) -> None:
        """Test that text and image parts are both parsed."""
        result = make_capability(lambda request: httpx.Response(200, json=SUCCESS_BODY)).generate(
            "segment this", IMAGE, "secret-key"
        )

        parts = result.candidates[0].content.parts
        assert parts[0].text == "Extracted subject."
        assert parts[1].inline_data.mime_type == "image/png"
        assert parts[1].inline_data.data == "cmVzdWx0"
        assert result.candidates[0].finish_reason == "STOP"


class TestGeminiErrors:
    """Tests for failure signaling."""

    def test_error_body_is_parsed(self) -> None:
        """Test that code, status and message come from the error body."""
        body = {"error": {"code": 403, "message": "The caller does not have permission", "status": "PERMISSION_DENIED"}}
        capability = make_capability(lambda request: httpx.Response(403, json=body))

        with pytest.raises(CapabilityError) as exc_info:
            capability.generate("segment this", IMAGE, "secret-key")

        assert exc_info.value.status_code == 403
        assert exc_info.value.status == "PERMISSION_DENIED"
        assert exc_info.value.message == "The caller does not have permission"

    def test_non_json_error_body(self) -> None:
        """Test that a plain-text error keeps the HTTP status code."""
        capability = make_capability(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(CapabilityError) as exc_info:
            capability.generate("segment this", IMAGE, "secret-key")

        assert exc_info.value.status_code == 502
        assert exc_info.value.status is None
        assert "Bad Gateway" in exc_info.value.message

    def test_timeout_is_reported_as_deadline(self) -> None:
        """Test that a client timeout maps to DEADLINE_EXCEEDED."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(CapabilityError) as exc_info:
            make_capability(handler).generate("segment this", IMAGE, "secret-key")

        assert exc_info.value.status == "DEADLINE_EXCEEDED"
        assert "5 seconds" in exc_info.value.message

    def test_transport_error(self) -> None:
        """Test that connection failures raise CapabilityError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CapabilityError, match="connection refused"):
            make_capability(handler).generate("segment this", IMAGE, "secret-key")

    def test_malformed_success_body(self) -> None:
        """Test that a non-JSON success body raises CapabilityError."""
        capability = make_capability(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(CapabilityError, match="malformed"):
            capability.generate("segment this", IMAGE, "secret-key")

"""Gemini generateContent client used as the segmentation capability."""

import logging

import httpx
from pydantic import ValidationError

from smartsegment.config import Settings, settings
from smartsegment.errors import CapabilityError
from smartsegment.models import ImagePayload
from smartsegment.schemas import (
    ApiErrorResponse,
    Blob,
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
)

logger = logging.getLogger(__name__)

TIMEOUT_STATUS = "DEADLINE_EXCEEDED"


def _error_from_response(response: httpx.Response) -> CapabilityError:
    """Build a CapabilityError from an error response body.

    Falls back to the raw body text when it is not the documented JSON shape.
    """
    try:
        detail = ApiErrorResponse.model_validate(response.json()).error
    except (ValueError, ValidationError):
        message = response.text or response.reason_phrase
        return CapabilityError(f"{response.status_code}: {message}", status_code=response.status_code)

    return CapabilityError(
        detail.message or response.reason_phrase,
        status_code=detail.code or response.status_code,
        status=detail.status,
    )


class GeminiCapability:
    """Calls a Gemini image model with one instruction and one inline image."""

    def __init__(self, config: Settings = settings, transport: httpx.BaseTransport | None = None) -> None:
        """Initialize the client.

        Args:
            config: Settings providing model name, API URL and timeout.
            transport: Optional httpx transport, used by tests.
        """
        self._config = config
        self._transport = transport

    @property
    def model(self) -> str:
        """Name of the model being called."""
        return self._config.gemini_model

    def build_request(self, prompt: str, image: ImagePayload) -> GenerateContentRequest:
        """Build the request body: the instruction text followed by the image."""
        return GenerateContentRequest(
            contents=[
                Content(
                    parts=[
                        Part(text=prompt),
                        Part(inline_data=Blob(mime_type=image.mime_type, data=image.data)),
                    ]
                )
            ]
        )

    def generate(self, prompt: str, image: ImagePayload, api_key: str) -> GenerateContentResponse:
        """Send the instruction and image to the model.

        Args:
            prompt: Natural-language instruction.
            image: Source image payload.
            api_key: Gemini API key.

        Returns:
            The parsed response.

        Raises:
            CapabilityError: If the call fails, times out, or returns a malformed body.
        """
        body = self.build_request(prompt, image).model_dump(by_alias=True, exclude_none=True)
        url = f"/models/{self.model}:generateContent"

        try:
            with httpx.Client(
                base_url=self._config.gemini_api_url,
                timeout=self._config.request_timeout,
                transport=self._transport,
            ) as client:
                response = client.post(url, json=body, headers={"x-goog-api-key": api_key})
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise CapabilityError(
                f"Gemini API did not respond within {self._config.request_timeout:g} seconds",
                status=TIMEOUT_STATUS,
            ) from e
        except httpx.HTTPStatusError as e:
            raise _error_from_response(e.response) from e
        except httpx.HTTPError as e:
            raise CapabilityError(f"Request to Gemini API failed: {e}") from e

        try:
            result = GenerateContentResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CapabilityError("Gemini API returned a malformed response") from e

        logger.info(f"Model {self.model} returned {len(result.candidates)} candidate(s)")
        return result

"""Turns an image and its point prompts into a segmentation result."""

import logging
from typing import Protocol

from smartsegment.constants import DEFAULT_MIME_TYPE
from smartsegment.errors import (
    CapabilityError,
    InvalidArgumentError,
    MissingCredentialError,
    NoResultError,
    PermissionDeniedError,
    SegmentationError,
    SegmentationTimeoutError,
    UnknownSegmentationError,
)
from smartsegment.models import ImagePayload, SegmentationRequest
from smartsegment.points import PointStore
from smartsegment.schemas import GenerateContentResponse
from smartsegment.services.prompts import build_prompt

logger = logging.getLogger(__name__)

PERMISSION_STATUSES = {"PERMISSION_DENIED", "UNAUTHENTICATED"}
PERMISSION_CODES = {401, 403}
INVALID_ARGUMENT_STATUSES = {"INVALID_ARGUMENT", "FAILED_PRECONDITION"}
TIMEOUT_STATUSES = {"DEADLINE_EXCEEDED"}


class SegmentationCapability(Protocol):
    """Remote model that answers an instruction plus image with content parts."""

    def generate(self, prompt: str, image: ImagePayload, api_key: str) -> GenerateContentResponse: ...


def classify_failure(error: CapabilityError) -> SegmentationError:
    """Map a capability failure to the error taxonomy.

    Args:
        error: Failure raised by the capability.

    Returns:
        The matching SegmentationError, carrying a user-facing message.
    """
    status = (error.status or "").upper()

    if status in PERMISSION_STATUSES or error.status_code in PERMISSION_CODES:
        return PermissionDeniedError()
    if status in INVALID_ARGUMENT_STATUSES or error.status_code == 400:
        detail = f": {error.message}" if error.message else ""
        return InvalidArgumentError(
            f"The request was rejected as invalid{detail}. Try a smaller image or a different format."
        )
    if status in TIMEOUT_STATUSES or error.status_code == 504:
        return SegmentationTimeoutError(f"{error.message}. Please try again." if error.message else None)
    # Unstructured failures only carry the HTTP code in their message
    if not status and error.status_code is None and "403" in error.message:
        return PermissionDeniedError()
    return UnknownSegmentationError(error.message or None)


def find_image_part(response: GenerateContentResponse) -> ImagePayload | None:
    """Return the first inline image in the first candidate, if any.

    Text parts alongside the image are ignored.
    """
    if not response.candidates:
        return None

    content = response.candidates[0].content
    if content is None:
        return None

    for part in content.parts:
        if part.inline_data is not None and part.inline_data.data:
            return ImagePayload(
                mime_type=part.inline_data.mime_type or DEFAULT_MIME_TYPE,
                data=part.inline_data.data,
            )
    return None


class SegmentationOrchestrator:
    """Builds the request, calls the capability once, and interprets the answer.

    The orchestrator holds no state between calls and never retries.
    """

    def __init__(self, capability: SegmentationCapability) -> None:
        self._capability = capability

    @staticmethod
    def build_request(image: ImagePayload, points: PointStore, attempt: int = 0) -> SegmentationRequest:
        """Snapshot the image and points, partitioned by polarity."""
        return SegmentationRequest.build(image, points, attempt=attempt)

    def run(self, request: SegmentationRequest, api_key: str | None) -> ImagePayload:
        """Run one segmentation attempt.

        Args:
            request: Image and point prompts to send.
            api_key: Credential for the capability.

        Returns:
            The result image payload.

        Raises:
            SegmentationError: Classified failure; see smartsegment.errors.
        """
        if not api_key:
            raise MissingCredentialError()

        prompt = build_prompt(request.positive, request.negative)
        logger.info(
            f"Requesting segmentation with {len(request.positive)} positive and "
            f"{len(request.negative)} negative point(s)"
        )

        try:
            response = self._capability.generate(prompt, request.image, api_key)
        except CapabilityError as e:
            classified = classify_failure(e)
            logger.warning(
                f"Segmentation failed ({classified.kind}): status={e.status} code={e.status_code} {e.message}"
            )
            raise classified from e
        except Exception as e:
            logger.exception(f"Unexpected segmentation failure: {e}")
            raise UnknownSegmentationError(str(e) or None) from e

        result = find_image_part(response)
        if result is None:
            logger.warning("Model response contained no image part")
            raise NoResultError()

        return result

    def segment(self, image: ImagePayload, points: PointStore, api_key: str | None) -> ImagePayload:
        """Build a request from the current image and points, then run it."""
        return self.run(self.build_request(image, points), api_key)

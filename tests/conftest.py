"""Test fixtures for SmartSegment tests."""

import io
import os
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from PIL import Image

# Set test environment variables before importing app modules
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["GEMINI_API_URL"] = "https://gemini.test/v1beta"

from smartsegment.models import ImagePayload
from smartsegment.schemas import Blob, Candidate, Content, GenerateContentResponse, Part
from smartsegment.services.orchestrator import SegmentationOrchestrator
from smartsegment.session import Session

RESULT_DATA = "cmVzdWx0LWltYWdl"  # base64 of b"result-image"


def create_test_image(width: int = 100, height: int = 100, color: str = "red") -> bytes:
    """Create a simple PNG test image."""
    img = Image.new("RGB", (width, height), color=color)
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def _build_response(*parts: Part) -> GenerateContentResponse:
    """Build a single-candidate response from parts."""
    return GenerateContentResponse(candidates=[Candidate(content=Content(role="model", parts=list(parts)))])


@pytest.fixture
def make_response() -> Callable[..., GenerateContentResponse]:
    """Factory for single-candidate model responses."""
    return _build_response


@pytest.fixture
def image_payload() -> ImagePayload:
    """A small PNG source image."""
    return ImagePayload.from_bytes(create_test_image(), "image/png")


@pytest.fixture
def mock_capability() -> MagicMock:
    """Create a mock capability that answers with text plus one image."""
    capability = MagicMock()
    capability.generate.return_value = _build_response(
        Part(text="Here is the subject."),
        Part(inline_data=Blob(mime_type="image/png", data=RESULT_DATA)),
    )
    return capability


@pytest.fixture
def orchestrator(mock_capability: MagicMock) -> SegmentationOrchestrator:
    """Orchestrator wired to the mock capability."""
    return SegmentationOrchestrator(mock_capability)


@pytest.fixture
def session(image_payload: ImagePayload) -> Session:
    """Session with an API key and a loaded source image."""
    session = Session(api_key="test-key")
    session.load_image(image_payload)
    return session

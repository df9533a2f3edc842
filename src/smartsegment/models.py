"""Shared data models and enums."""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from smartsegment.constants import DEFAULT_MIME_TYPE

if TYPE_CHECKING:
    from smartsegment.points import PointStore

DATA_URI_PREFIX = re.compile(r"^data:(image/(?:png|jpeg|jpg|webp));base64,")


class PointType(StrEnum):
    """Polarity of a point prompt."""

    POSITIVE = "POSITIVE"  # keep / add
    NEGATIVE = "NEGATIVE"  # remove / subtract


class SessionState(StrEnum):
    """Workflow state of a segmentation session."""

    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Point:
    """A point prompt in normalized image coordinates (origin top-left)."""

    id: str
    x: float
    y: float
    type: PointType

    @property
    def is_positive(self) -> bool:
        """Return whether the point marks a region to keep."""
        return self.type == PointType.POSITIVE


@dataclass(frozen=True)
class ImagePayload:
    """An encoded image as base64 text plus its MIME type."""

    mime_type: str
    data: str

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str | None = None) -> ImagePayload:
        """Wrap raw image bytes."""
        return cls(mime_type=mime_type or DEFAULT_MIME_TYPE, data=base64.b64encode(content).decode("ascii"))

    @classmethod
    def from_data_uri(cls, uri: str) -> ImagePayload:
        """Parse a data URI, stripping its prefix.

        A bare base64 string without prefix is accepted and assumed to be PNG.
        """
        match = DATA_URI_PREFIX.match(uri)
        if match is None:
            return cls(mime_type=DEFAULT_MIME_TYPE, data=uri)
        mime_type = match.group(1)
        if mime_type == "image/jpg":
            mime_type = "image/jpeg"
        return cls(mime_type=mime_type, data=uri[match.end() :])

    @property
    def data_uri(self) -> str:
        """Return the payload as a data URI."""
        return f"data:{self.mime_type};base64,{self.data}"

    @property
    def file_extension(self) -> str:
        """Return a file extension matching the MIME type."""
        subtype = self.mime_type.split("/")[-1].lower()
        return "jpg" if subtype == "jpeg" else subtype

    def to_bytes(self) -> bytes:
        """Decode the payload to raw bytes."""
        return base64.b64decode(self.data)


@dataclass(frozen=True)
class SegmentationRequest:
    """Snapshot of an image and its point prompts at trigger time."""

    image: ImagePayload
    positive: tuple[Point, ...]
    negative: tuple[Point, ...]
    attempt: int = 0

    @classmethod
    def build(cls, image: ImagePayload, points: PointStore, attempt: int = 0) -> SegmentationRequest:
        """Build a request by partitioning the store's points by polarity."""
        positive, negative = points.partition_by_polarity()
        return cls(image=image, positive=positive, negative=negative, attempt=attempt)

    @property
    def point_count(self) -> int:
        """Return the total number of points in the request."""
        return len(self.positive) + len(self.negative)

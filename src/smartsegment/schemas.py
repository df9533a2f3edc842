"""Pydantic schemas for the Gemini generateContent wire format."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model using the API's camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Blob(WireModel):
    """Inline binary data, base64 encoded."""

    mime_type: str | None = None
    data: str = ""


class Part(WireModel):
    """One segment of a content message: text or inline data."""

    text: str | None = None
    inline_data: Blob | None = None


class Content(WireModel):
    """A message made of heterogeneous parts."""

    role: str | None = None
    parts: list[Part] = []


class GenerateContentRequest(WireModel):
    """Schema for the generateContent request body."""

    contents: list[Content]


class Candidate(WireModel):
    """One generated answer."""

    content: Content | None = None
    finish_reason: str | None = None


class GenerateContentResponse(WireModel):
    """Schema for the generateContent response body."""

    candidates: list[Candidate] = []


class ApiErrorDetail(WireModel):
    """Error payload reported by the API."""

    code: int | None = None
    message: str = ""
    status: str | None = None


class ApiErrorResponse(WireModel):
    """Schema for an error response body."""

    error: ApiErrorDetail

"""Error taxonomy for segmentation failures."""

from enum import StrEnum


class SegmentationErrorKind(StrEnum):
    """Category of a segmentation failure."""

    MISSING_CREDENTIAL = "missing_credential"
    PERMISSION_DENIED = "permission_denied"
    INVALID_ARGUMENT = "invalid_argument"
    NO_RESULT = "no_result"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


class CapabilityError(Exception):
    """Raised by the segmentation capability when the remote call fails.

    Carries whatever the remote side reported: an HTTP-like status code
    and/or a status token such as ``PERMISSION_DENIED``.
    """

    def __init__(self, message: str, status_code: int | None = None, status: str | None = None) -> None:
        self.message = message
        self.status_code = status_code
        self.status = status
        super().__init__(message)


class SegmentationError(Exception):
    """Base class for failures surfaced to the session."""

    kind = SegmentationErrorKind.UNKNOWN
    requires_credential = False
    default_message = "Failed to segment image."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredentialError(SegmentationError):
    """No API key is configured; the capability was not called."""

    kind = SegmentationErrorKind.MISSING_CREDENTIAL
    requires_credential = True
    default_message = "API key is missing. Please enter a Gemini API key."


class PermissionDeniedError(SegmentationError):
    """The API key lacks access to the model."""

    kind = SegmentationErrorKind.PERMISSION_DENIED
    requires_credential = True
    default_message = (
        "Permission denied. Please ensure you have entered a valid API key with access to the Gemini API."
    )


class InvalidArgumentError(SegmentationError):
    """The request was rejected as malformed."""

    kind = SegmentationErrorKind.INVALID_ARGUMENT
    default_message = "The request was rejected as invalid. Try a smaller image or a different format."


class NoResultError(SegmentationError):
    """The model answered without an image."""

    kind = SegmentationErrorKind.NO_RESULT
    default_message = "No image was returned by the model. Please try adjusting your points."


class SegmentationTimeoutError(SegmentationError):
    """The model did not answer in time."""

    kind = SegmentationErrorKind.TIMEOUT
    default_message = "The segmentation request timed out. Please try again."


class UnknownSegmentationError(SegmentationError):
    """Any other failure; the message is passed through."""

"""Session state machine for one interactive segmentation workflow."""

import logging

from smartsegment.canvas import AnnotationCanvas
from smartsegment.errors import SegmentationError, SegmentationErrorKind, UnknownSegmentationError
from smartsegment.models import ImagePayload, PointType, SegmentationRequest, SessionState
from smartsegment.points import PointStore
from smartsegment.services.orchestrator import SegmentationOrchestrator

logger = logging.getLogger(__name__)


class Session:
    """Owns the source image, point prompts, result and workflow state.

    States move IDLE -> PROCESSING -> SUCCESS | ERROR. Processing may be
    re-triggered from IDLE, SUCCESS or ERROR, never while already
    PROCESSING. Loading an image or resetting returns to IDLE.
    """

    def __init__(self, api_key: str | None = None, mode: PointType = PointType.POSITIVE) -> None:
        self.canvas = AnnotationCanvas(mode=mode)
        self.state = SessionState.IDLE
        self.source_image: ImagePayload | None = None
        self.result_image: ImagePayload | None = None
        self.error_message: str | None = None
        self.error_kind: SegmentationErrorKind | None = None
        self.api_key = api_key or None
        self._attempt = 0

    @property
    def points(self) -> PointStore:
        """Point prompts for the current image."""
        return self.canvas.store

    @property
    def mode(self) -> PointType:
        """Polarity assigned to new points."""
        return self.canvas.mode

    @mode.setter
    def mode(self, value: PointType) -> None:
        self.canvas.mode = value

    @property
    def is_processing(self) -> bool:
        """Return whether a segmentation attempt is outstanding."""
        return self.state == SessionState.PROCESSING

    @property
    def can_process(self) -> bool:
        """Return whether processing may be triggered now."""
        return self.source_image is not None and len(self.points) > 0 and not self.is_processing

    @property
    def has_credential(self) -> bool:
        """Return whether an API key is set."""
        return bool(self.api_key)

    @property
    def needs_credential(self) -> bool:
        """Return whether the user must supply a (new) API key."""
        return not self.has_credential

    def _clear_error(self) -> None:
        self.error_message = None
        self.error_kind = None

    def load_image(self, image: ImagePayload) -> None:
        """Replace the source image and reset points, result and error."""
        self.source_image = image
        self.result_image = None
        self.points.clear()
        self._clear_error()
        self._attempt += 1
        self.state = SessionState.IDLE
        logger.info(f"Loaded source image ({image.mime_type})")

    def reset(self) -> None:
        """Clear image, points, result and error."""
        self.source_image = None
        self.result_image = None
        self.points.clear()
        self._clear_error()
        self._attempt += 1
        self.state = SessionState.IDLE
        logger.info("Session reset")

    def clear_points(self) -> None:
        """Remove all point prompts."""
        self.points.clear()

    def set_api_key(self, api_key: str | None) -> None:
        """Set the credential used for segmentation."""
        self.api_key = (api_key or "").strip() or None

    def invalidate_credential(self) -> None:
        """Forget the current credential so the user is asked for a new one."""
        self.api_key = None

    def begin_processing(self) -> SegmentationRequest | None:
        """Enter PROCESSING and snapshot the request.

        Returns:
            The request to send, or None if processing cannot start (no image,
            no points, or an attempt already outstanding).
        """
        if not self.can_process or self.source_image is None:
            return None

        self._attempt += 1
        self.state = SessionState.PROCESSING
        self._clear_error()
        request = SegmentationOrchestrator.build_request(self.source_image, self.points, attempt=self._attempt)
        logger.info(f"Processing attempt {request.attempt} with {request.point_count} point(s)")
        return request

    def _is_current(self, request: SegmentationRequest) -> bool:
        if self.state != SessionState.PROCESSING or request.attempt != self._attempt:
            logger.warning(f"Discarding outcome of stale attempt {request.attempt}")
            return False
        return True

    def complete(self, request: SegmentationRequest, result: ImagePayload) -> bool:
        """Record a successful result.

        Returns:
            True if applied, False if the attempt is no longer current.
        """
        if not self._is_current(request):
            return False

        self.result_image = result
        self._clear_error()
        self.state = SessionState.SUCCESS
        logger.info(f"Attempt {request.attempt} succeeded ({result.mime_type})")
        return True

    def fail(self, request: SegmentationRequest, error: SegmentationError) -> bool:
        """Record a failure; the previous result image is kept.

        Returns:
            True if applied, False if the attempt is no longer current.
        """
        if not self._is_current(request):
            return False

        self.error_message = error.message
        self.error_kind = error.kind
        if error.kind == SegmentationErrorKind.PERMISSION_DENIED:
            self.invalidate_credential()
        self.state = SessionState.ERROR
        logger.info(f"Attempt {request.attempt} failed: {error.kind}")
        return True

    def process(self, orchestrator: SegmentationOrchestrator) -> bool:
        """Run one segmentation attempt end to end.

        Returns:
            True if an attempt was made, False if the trigger was a no-op.
        """
        request = self.begin_processing()
        if request is None:
            return False

        try:
            result = orchestrator.run(request, self.api_key)
        except SegmentationError as e:
            self.fail(request, e)
        except Exception as e:
            logger.exception(f"Attempt {request.attempt} raised an unexpected error")
            self.fail(request, UnknownSegmentationError(str(e) or None))
        else:
            self.complete(request, result)
        return True

"""Annotation canvas: routes clicks on the rendered image to the point store."""

import logging
from dataclasses import dataclass
from enum import StrEnum

from PIL import Image

from smartsegment.constants import POINT_HIT_THRESHOLD
from smartsegment.coordinates import ImageBox, to_display, to_normalized
from smartsegment.models import Point, PointType
from smartsegment.points import PointStore
from smartsegment.utils import draw_points_on_image

logger = logging.getLogger(__name__)


class CanvasAction(StrEnum):
    """Outcome of an interaction with the canvas."""

    ADDED = "added"
    REMOVED = "removed"
    IGNORED = "ignored"


@dataclass(frozen=True)
class CanvasEvent:
    """Result of routing one interaction."""

    action: CanvasAction
    point: Point | None = None


class AnnotationCanvas:
    """Bridges pointer interactions to a point store.

    A click on an existing marker removes that point and is consumed: it
    never also adds a point. Any other click inside the image adds a point
    with the current mode's polarity; clicks in the padding are ignored.
    """

    def __init__(
        self,
        store: PointStore | None = None,
        mode: PointType = PointType.POSITIVE,
        hit_radius: float = POINT_HIT_THRESHOLD,
    ) -> None:
        self.store = store if store is not None else PointStore()
        self.mode = mode
        self.hit_radius = hit_radius

    @property
    def mode(self) -> PointType:
        """Polarity assigned to new points."""
        return self._mode

    @mode.setter
    def mode(self, value: PointType) -> None:
        self._mode = PointType(value)

    def marker_at(self, px: float, py: float, box: ImageBox) -> Point | None:
        """Find the nearest marker within the hit radius of a position.

        Args:
            px: Horizontal on-screen position.
            py: Vertical on-screen position.
            box: On-screen box of the rendered image.

        Returns:
            The nearest point if within the hit radius, None otherwise.
        """
        nearest_point = None
        min_distance = float("inf")

        for point in self.store:
            mx, my = to_display(point.x, point.y, box)
            distance = ((px - mx) ** 2 + (py - my) ** 2) ** 0.5

            if distance < min_distance and distance <= self.hit_radius:
                min_distance = distance
                nearest_point = point

        return nearest_point

    def click(self, px: float, py: float, box: ImageBox) -> CanvasEvent:
        """Route a click: remove the marker under it, else add a point."""
        hit = self.marker_at(px, py, box)
        if hit is not None:
            return self.remove_point(hit.id)

        normalized = to_normalized(px, py, box)
        if normalized is None:
            return CanvasEvent(CanvasAction.IGNORED)

        point = self.store.add(normalized[0], normalized[1], self.mode)
        logger.debug(f"Added {point.type} point {point.id} at ({point.x:.3f}, {point.y:.3f})")
        return CanvasEvent(CanvasAction.ADDED, point)

    def remove_point(self, point_id: str) -> CanvasEvent:
        """Remove a point through direct interaction with its marker."""
        removed = self.store.remove(point_id)
        if removed is None:
            return CanvasEvent(CanvasAction.IGNORED)

        logger.debug(f"Removed {removed.type} point {removed.id}")
        return CanvasEvent(CanvasAction.REMOVED, removed)

    def clear(self) -> None:
        """Remove all points."""
        self.store.clear()

    def render(self, image: Image.Image) -> Image.Image:
        """Return a copy of the display image with the current markers drawn."""
        return draw_points_on_image(image, list(self.store))

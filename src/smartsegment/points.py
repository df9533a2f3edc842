"""Ordered store of point prompts keyed by id."""

import uuid
from collections.abc import Iterator

from smartsegment.models import Point, PointType


class PointStore:
    """Point prompts in insertion order with unique ids.

    The store places no limit on the number of points.
    """

    def __init__(self) -> None:
        self._points: dict[str, Point] = {}

    def add(self, x: float, y: float, polarity: PointType) -> Point:
        """Create a point with a fresh id and append it.

        Args:
            x: Normalized horizontal coordinate in [0, 1].
            y: Normalized vertical coordinate in [0, 1].
            polarity: Whether the point keeps or removes a region.

        Returns:
            The created point.

        Raises:
            ValueError: If a coordinate lies outside [0, 1].
        """
        if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
            raise ValueError(f"Point coordinates must be normalized to [0, 1], got ({x}, {y})")

        point = Point(id=str(uuid.uuid4()), x=x, y=y, type=PointType(polarity))
        self._points[point.id] = point
        return point

    def remove(self, point_id: str) -> Point | None:
        """Remove the point with the given id; absent ids are ignored."""
        return self._points.pop(point_id, None)

    def clear(self) -> None:
        """Remove all points."""
        self._points.clear()

    def get(self, point_id: str) -> Point | None:
        """Return the point with the given id, if present."""
        return self._points.get(point_id)

    def partition_by_polarity(self) -> tuple[tuple[Point, ...], tuple[Point, ...]]:
        """Split points into positive and negative, each in insertion order."""
        positive = tuple(p for p in self._points.values() if p.type == PointType.POSITIVE)
        negative = tuple(p for p in self._points.values() if p.type == PointType.NEGATIVE)
        return positive, negative

    def count(self, polarity: PointType) -> int:
        """Return the number of points with the given polarity."""
        return sum(1 for p in self._points.values() if p.type == polarity)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points.values()))

    def __contains__(self, point_id: object) -> bool:
        return point_id in self._points

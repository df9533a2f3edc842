"""Mapping between on-screen positions and normalized image coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageBox:
    """On-screen bounding box of the rendered image content."""

    left: float
    top: float
    width: float
    height: float

    @classmethod
    def contain(
        cls,
        container_width: float,
        container_height: float,
        image_width: float,
        image_height: float,
        left: float = 0.0,
        top: float = 0.0,
    ) -> ImageBox:
        """Compute the box of an image scaled to fit inside a container.

        The image keeps its aspect ratio and is centered, leaving padding on
        two sides when the aspect ratios differ.

        Args:
            container_width: Width of the container.
            container_height: Height of the container.
            image_width: Intrinsic width of the image.
            image_height: Intrinsic height of the image.
            left: Left edge of the container.
            top: Top edge of the container.

        Returns:
            The letterboxed image box.
        """
        if image_width <= 0 or image_height <= 0:
            return cls(left=left, top=top, width=0.0, height=0.0)

        scale = min(container_width / image_width, container_height / image_height)
        width = image_width * scale
        height = image_height * scale
        return cls(
            left=left + (container_width - width) / 2,
            top=top + (container_height - height) / 2,
            width=width,
            height=height,
        )


def to_normalized(px: float, py: float, box: ImageBox) -> tuple[float, float] | None:
    """Convert an on-screen position to normalized image coordinates.

    Positions on the box edge are accepted. Positions outside the box, or
    any position when the box is empty, return None.
    """
    if box.width <= 0 or box.height <= 0:
        return None

    rel_x = px - box.left
    rel_y = py - box.top
    if rel_x < 0 or rel_x > box.width or rel_y < 0 or rel_y > box.height:
        return None

    return rel_x / box.width, rel_y / box.height


def to_display(x: float, y: float, box: ImageBox) -> tuple[float, float]:
    """Convert normalized image coordinates to an on-screen position."""
    return box.left + x * box.width, box.top + y * box.height

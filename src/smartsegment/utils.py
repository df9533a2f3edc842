"""Shared utility functions for image display."""

from io import BytesIO

from PIL import Image, ImageDraw

from smartsegment.constants import (
    COLOR_NEGATIVE,
    COLOR_POSITIVE,
    DISPLAY_MAX_SIZE,
    POINT_OUTLINE_WIDTH,
    POINT_RADIUS,
)
from smartsegment.models import ImagePayload, Point, PointType


def get_point_color(point_type: PointType) -> str:
    """Get marker color for a point type.

    Args:
        point_type: Polarity of the point.

    Returns:
        Hex color string.
    """
    return COLOR_POSITIVE if point_type == PointType.POSITIVE else COLOR_NEGATIVE


def open_payload(payload: ImagePayload) -> Image.Image:
    """Decode an image payload into a PIL Image."""
    return Image.open(BytesIO(payload.to_bytes()))


def fit_for_display(image: Image.Image, max_size: int = DISPLAY_MAX_SIZE) -> Image.Image:
    """Return an RGB copy of the image no larger than max_size on either edge."""
    display = image.convert("RGB")
    display.thumbnail((max_size, max_size))
    return display


def draw_points_on_image(
    image: Image.Image,
    points: list[Point],
    radius: int = POINT_RADIUS,
) -> Image.Image:
    """Draw point markers on a copy of an image.

    Args:
        image: PIL Image to draw on.
        points: Points in normalized coordinates.
        radius: Marker radius in pixels.

    Returns:
        Image with points drawn as colored circles with a white outline.
    """
    img_copy = image.copy().convert("RGBA")
    draw = ImageDraw.Draw(img_copy)

    for point in points:
        x = point.x * img_copy.width
        y = point.y * img_copy.height
        draw.ellipse(
            [x - radius, y - radius, x + radius, y + radius],
            fill=get_point_color(point.type),
            outline="white",
            width=POINT_OUTLINE_WIDTH,
        )

    return img_copy.convert("RGB")

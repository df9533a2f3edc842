"""Point annotator component using streamlit-image-coordinates."""

import streamlit as st
from PIL import Image
from streamlit_image_coordinates import streamlit_image_coordinates

from smartsegment.canvas import AnnotationCanvas, CanvasEvent
from smartsegment.coordinates import ImageBox
from smartsegment.models import PointType


def _read_click(value: dict | None, key: str) -> dict[str, float] | None:
    """Return a new click from the component value, skipping repeats.

    The component keeps returning its last click on every rerun, so the
    click timestamp is remembered per key.
    """
    state_key = f"_last_click_time_{key}"
    if state_key not in st.session_state:
        st.session_state[state_key] = None

    if not value or "x" not in value or "y" not in value:
        return None

    current_time = value.get("unix_time")
    if current_time is not None and current_time == st.session_state[state_key]:
        return None
    st.session_state[state_key] = current_time

    return value


def point_annotator(
    canvas: AnnotationCanvas,
    image: Image.Image,
    key: str = "point_annotator",
    disabled: bool = False,
) -> CanvasEvent | None:
    """Interactive point annotator component.

    Displays the image with the canvas's markers and routes a new click
    to the canvas: clicking a marker removes it, clicking elsewhere on the
    image adds a point in the current mode.

    Args:
        canvas: Canvas holding the points and current mode.
        image: Display copy of the source image.
        key: Unique key for the Streamlit component.
        disabled: If True, clicks are read but not applied.

    Returns:
        The resulting canvas event, or None if there was no new click.
    """
    value = streamlit_image_coordinates(
        canvas.render(image),
        key=key,
        click_and_drag=False,
    )

    click = _read_click(value, key)
    if click is None or disabled:
        return None

    box = ImageBox.contain(
        click.get("width") or image.width,
        click.get("height") or image.height,
        image.width,
        image.height,
    )
    return canvas.click(click["x"], click["y"], box)


def render_mode_caption(mode: PointType) -> None:
    """Show which polarity new clicks will produce."""
    label = "ADD (+)" if mode == PointType.POSITIVE else "SUBTRACT (-)"
    st.caption(f"Current Mode: {label}")

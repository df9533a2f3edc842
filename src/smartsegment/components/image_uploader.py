"""Image uploader component."""

import streamlit as st

from smartsegment.constants import UPLOAD_TYPES
from smartsegment.models import ImagePayload


def image_uploader(key: str = "image_uploader") -> ImagePayload | None:
    """Render a single-image uploader.

    Args:
        key: Unique key for the uploader widget. Changing it clears the widget.

    Returns:
        The uploaded image as a payload, or None if nothing was uploaded.
    """
    uploaded_file = st.file_uploader(
        "Drag and drop an image or click to browse",
        type=UPLOAD_TYPES,
        accept_multiple_files=False,
        key=key,
    )

    if uploaded_file is None:
        return None

    return ImagePayload.from_bytes(uploaded_file.getvalue(), uploaded_file.type)

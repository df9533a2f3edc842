"""Segmentation page: upload, annotate with points, extract."""

import streamlit as st
from PIL import Image

from smartsegment.canvas import CanvasAction
from smartsegment.components.image_uploader import image_uploader
from smartsegment.components.point_annotator import point_annotator, render_mode_caption
from smartsegment.components.result_view import render_error, render_result_view
from smartsegment.components.sidebar import render_credential_input, render_point_list
from smartsegment.components.toolbar import render_toolbar
from smartsegment.models import ImagePayload
from smartsegment.session import Session
from smartsegment.utils import fit_for_display, open_payload


@st.cache_data(max_entries=4)
def _display_image(mime_type: str, data: str) -> Image.Image:
    """Decode and downscale the source image for display.

    Cached so the image is decoded once, not on every rerun.
    """
    return fit_for_display(open_payload(ImagePayload(mime_type=mime_type, data=data)))


def _render_upload(session: Session) -> None:
    """Render the upload prompt shown before an image is loaded."""
    st.header("Semantic Object Extraction")
    st.caption(
        "Like background removal, but smarter. Add (+) the objects you want and Subtract (-) specific parts."
    )

    image = image_uploader(key=f"image_uploader_{st.session_state.uploader_generation}")
    if image is not None:
        session.load_image(image)
        st.rerun()


def _render_instructions() -> None:
    """Render the instructions panel."""
    st.markdown("---")
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Add (Positive)**")
        st.caption("Click on the main object you want to extract. For example, click on a table to select it.")
    with col2:
        st.markdown("**Subtract (Negative)**")
        st.caption(
            "Click on parts you want to remove. For example, if the selection included a chair you "
            "don't want, click the chair to subtract it. Click an existing point to delete it."
        )


def _start_over(session: Session) -> None:
    session.reset()
    st.session_state.uploader_generation += 1


def render() -> None:
    """Render the segmentation page."""
    session: Session = st.session_state.session

    with st.sidebar:
        render_credential_input(session)
        if session.source_image is not None:
            st.divider()
            render_point_list(session)

    if session.source_image is None:
        _render_upload(session)
        return

    if st.button("Start Over", key="start_over"):
        _start_over(session)
        st.rerun()

    render_toolbar(session)

    source_col, result_col = st.columns(2)

    with source_col:
        st.subheader("Source Image")
        event = point_annotator(
            session.canvas,
            _display_image(session.source_image.mime_type, session.source_image.data),
            key="source_annotator",
            disabled=session.is_processing,
        )
        if event is not None and event.action != CanvasAction.IGNORED:
            st.rerun()
        render_mode_caption(session.mode)

    with result_col:
        st.subheader("Extracted Result")
        render_result_view(session)

    render_error(session)
    _render_instructions()

"""Result panel for displaying the extracted image."""

import streamlit as st

from smartsegment.constants import RESULT_FILENAME_STEM
from smartsegment.session import Session


def render_result_view(session: Session) -> None:
    """Render the extracted result with a download button.

    Shows a placeholder while processing and nothing before the first result.
    """
    if session.result_image is None:
        if session.is_processing:
            st.info("Running Semantic Segmentation...")
        return

    result = session.result_image
    content = result.to_bytes()

    st.image(content, use_container_width=True)
    st.download_button(
        "Download",
        data=content,
        file_name=f"{RESULT_FILENAME_STEM}.{result.file_extension}",
        mime=result.mime_type,
    )


def render_error(session: Session) -> None:
    """Render the last failure, if any."""
    if not session.error_message:
        return

    st.error(f"**Segmentation Failed**\n\n{session.error_message}")
    if session.needs_credential:
        st.warning("Enter a valid Gemini API key in the sidebar to try again.")

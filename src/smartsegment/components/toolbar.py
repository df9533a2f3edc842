"""Toolbar with mode toggle and processing controls."""

import streamlit as st

from smartsegment.components.mode_toggle import render_mode_toggle
from smartsegment.dependencies import get_orchestrator
from smartsegment.session import Session


def render_toolbar(session: Session) -> None:
    """Render mode toggle, Reset Points and Run Segment buttons."""
    col1, col2, col3 = st.columns([2, 1, 1])

    with col1:
        render_mode_toggle(session)

    with col2:
        if st.button(
            "Reset Points",
            disabled=session.is_processing or len(session.points) == 0,
            use_container_width=True,
        ):
            session.clear_points()
            st.rerun()

    with col3:
        if st.button(
            "Run Segment",
            disabled=not session.can_process,
            type="primary",
            use_container_width=True,
        ):
            with st.spinner("Running Semantic Segmentation..."):
                session.process(get_orchestrator())
            st.rerun()

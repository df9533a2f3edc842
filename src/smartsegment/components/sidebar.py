"""Sidebar with credential input and point list."""

import streamlit as st

from smartsegment.constants import COLOR_NEGATIVE, COLOR_POSITIVE
from smartsegment.models import PointType
from smartsegment.session import Session
from smartsegment.utils import get_point_color


def render_credential_input(session: Session) -> None:
    """Ask for an API key when none is set or the last one was rejected."""
    st.subheader("API Key")

    if not session.needs_credential:
        st.caption("Gemini API key configured.")
        if st.button("Change Key", key="change_api_key"):
            session.invalidate_credential()
            st.rerun()
        return

    api_key = st.text_input(
        "Gemini API key",
        type="password",
        key="api_key_input",
        label_visibility="collapsed",
        placeholder="Paste a Gemini API key",
    )
    if st.button("Save Key", key="save_api_key", disabled=not api_key):
        session.set_api_key(api_key)
        st.rerun()


def _legend(color: str, text: str) -> str:
    return (
        f"<div style='display: flex; align-items: center; gap: 6px;'>"
        f"<div style='width: 10px; height: 10px; background: {color}; "
        f"border-radius: 50%;'></div>"
        f"<span>{text}</span></div>"
    )


def render_point_list(session: Session) -> None:
    """Render point counts and a remove button per point."""
    st.subheader("Points")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(
            _legend(COLOR_POSITIVE, f"{session.points.count(PointType.POSITIVE)} positive"),
            unsafe_allow_html=True,
        )
    with col2:
        st.markdown(
            _legend(COLOR_NEGATIVE, f"{session.points.count(PointType.NEGATIVE)} negative"),
            unsafe_allow_html=True,
        )

    for index, point in enumerate(session.points, start=1):
        label_col, button_col = st.columns([4, 1])
        with label_col:
            st.markdown(
                _legend(get_point_color(point.type), f"#{index} ({point.x * 100:.1f}%, {point.y * 100:.1f}%)"),
                unsafe_allow_html=True,
            )
        with button_col:
            if st.button("✕", key=f"remove_point_{point.id}", disabled=session.is_processing):
                session.canvas.remove_point(point.id)
                st.rerun()

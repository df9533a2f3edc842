"""Streamlit application entry point."""

import logging

import streamlit as st

from smartsegment.config import settings
from smartsegment.views import segment
from smartsegment.session import Session

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def _init_session_state() -> None:
    """Initialize all session state variables with defaults."""
    if "session" not in st.session_state:
        st.session_state.session = Session(api_key=settings.gemini_api_key)
    if "uploader_generation" not in st.session_state:
        st.session_state.uploader_generation = 0


st.set_page_config(
    page_title="SmartSegment",
    page_icon="🎯",
    layout="wide",
)

st.title("SmartSegment (SAM3)")

_init_session_state()

segment.render()

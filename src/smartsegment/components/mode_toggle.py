"""Point mode toggle component."""

import streamlit as st

from smartsegment.models import PointType
from smartsegment.session import Session

MODE_OPTIONS = {
    PointType.POSITIVE: "Add (+)",
    PointType.NEGATIVE: "Subtract (-)",
}


def render_mode_toggle(session: Session, key: str = "mode_radio") -> PointType:
    """Render the point mode toggle and return the selected mode.

    Args:
        session: Session whose mode is shown and updated.
        key: Unique key for the radio button widget.

    Returns:
        The currently selected PointType.
    """
    mode_list = list(MODE_OPTIONS.keys())

    selected_label = st.radio(
        "Point Mode",
        options=list(MODE_OPTIONS.values()),
        index=mode_list.index(session.mode),
        horizontal=True,
        key=key,
        disabled=session.is_processing,
        label_visibility="collapsed",
    )

    label_to_mode = {v: k for k, v in MODE_OPTIONS.items()}
    mode = label_to_mode[selected_label]

    if mode != session.mode:
        session.mode = mode

    return mode

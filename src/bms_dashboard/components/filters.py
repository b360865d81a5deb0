# This file renders the time-frame selector shown under the dashboard header.
# Returning a typed filter object keeps downstream query logic predictable.

from __future__ import annotations

import streamlit as st

from src.bms_dashboard.dashboard_config import (
    DashboardConfig,
    DashboardFilters,
    TimeFrame,
    parse_time_frame,
)

TIME_FRAME_STATE_KEY = "bms_time_frame"


def render_time_frame_selector(*, config: DashboardConfig) -> DashboardFilters:
    options = list(TimeFrame)
    if TIME_FRAME_STATE_KEY not in st.session_state:
        st.session_state[TIME_FRAME_STATE_KEY] = config.default_time_frame

    selected = st.radio(
        "Time frame",
        options=options,
        key=TIME_FRAME_STATE_KEY,
        format_func=lambda frame: frame.label,
        horizontal=True,
        label_visibility="collapsed",
    )
    return DashboardFilters(time_frame=parse_time_frame(selected))

# This file is the Streamlit entrypoint for the BMS dashboard.
# It wires the time-frame selector, REST-first data retrieval, and the trend and metric sections into one page.
# The body re-runs on a fixed cadence so the cards follow the datastore without a manual reload.
# Datastore outages degrade to zero-valued cards with a warning instead of a traceback.

from __future__ import annotations

from datetime import timedelta

import streamlit as st

from src.bms_dashboard.components.filters import render_time_frame_selector
from src.bms_dashboard.dashboard_config import (
    DashboardConfig,
    DashboardFilters,
    load_dashboard_config,
)
from src.bms_dashboard.data_access import DashboardDataAccess
from src.bms_dashboard.formatting import format_timestamp, now_in_timezone, utc_offset_label
from src.bms_dashboard.metrics import compute_conversion_rates
from src.bms_dashboard.page_views import metric_grid, trend_analysis
from src.bms_dashboard.tooltips import TOOLTIPS
from src.bms_dashboard.ui_text import (
    APP_SUBTITLE,
    APP_TITLE,
    EMPTY_METRICS,
    FOOTER_LIVE,
    LOADING_METRICS,
    LOADING_TREND,
)
from src.common.logging import configure_logging


@st.cache_resource
def get_data_access() -> DashboardDataAccess:
    config = load_dashboard_config()
    return DashboardDataAccess(config=config)


def _timezone_caption(config: DashboardConfig) -> str:
    city = config.display_timezone.split("/")[-1].replace("_", " ")
    offset = utc_offset_label(
        now_in_timezone(config.display_timezone), timezone_name=config.display_timezone
    )
    return f"{city} Time ({offset})"


def render_header(config: DashboardConfig) -> None:
    title_col, clock_col = st.columns([3, 1])
    with title_col:
        st.title(APP_TITLE)
        st.caption(APP_SUBTITLE)
    with clock_col:
        now = now_in_timezone(config.display_timezone)
        st.caption(_timezone_caption(config))
        st.markdown(f"**{format_timestamp(now, timezone_name=config.display_timezone)}**")


def render_body(
    *,
    config: DashboardConfig,
    data_access: DashboardDataAccess,
    filters: DashboardFilters,
) -> None:
    now = now_in_timezone(config.display_timezone)

    with st.spinner(LOADING_TREND):
        trend_df, trend_source = data_access.get_trend(filters, now=now)
    with st.spinner(LOADING_METRICS):
        metrics, metrics_source = data_access.get_metrics(filters)

    if metrics_source == "empty":
        st.warning(EMPTY_METRICS)

    trend_analysis.render(
        trend_df=trend_df,
        trend_source=trend_source,
        currency_symbol=config.currency_symbol,
        tooltips=TOOLTIPS,
    )

    metric_grid.render(
        metrics=metrics,
        rates=compute_conversion_rates(metrics),
        time_frame=filters.time_frame,
        currency_symbol=config.currency_symbol,
        tooltips=TOOLTIPS,
    )

    st.caption(
        f"Metrics source: {metrics_source} | Trend source: {trend_source} | "
        f"Updated {format_timestamp(now, timezone_name=config.display_timezone)}"
    )


def render_footer(config: DashboardConfig) -> None:
    refresh_minutes = max(1, config.refresh_interval_seconds // 60)
    st.markdown("---")
    live_col, zone_col, refresh_col = st.columns(3)
    live_col.caption(f":green[●] {FOOTER_LIVE}")
    zone_col.caption(f":blue[●] {_timezone_caption(config)}")
    refresh_col.caption(f":gray[●] Auto-refresh every {refresh_minutes} minutes")


def main() -> None:
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="wide")

    config = load_dashboard_config()
    data_access = get_data_access()

    render_header(config)
    filters = render_time_frame_selector(config=config)

    @st.fragment(run_every=timedelta(seconds=config.refresh_interval_seconds))
    def live_body() -> None:
        render_body(config=config, data_access=data_access, filters=filters)

    live_body()
    render_footer(config)


if __name__ == "__main__":
    main()

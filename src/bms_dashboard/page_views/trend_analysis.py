# This file renders the trend section: volume lines plus conversion against buy value.

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.bms_dashboard.components.charts import render_conversion_chart, render_performance_chart
from src.bms_dashboard.ui_text import (
    CONVERSION_CHART_TITLE,
    PERFORMANCE_CHART_TITLE,
    TREND_SAMPLE_NOTE,
    TREND_SECTION_TITLE,
)


def render(
    *,
    trend_df: pd.DataFrame,
    trend_source: str,
    currency_symbol: str,
    tooltips: dict[str, str],
) -> None:
    with st.container(border=True):
        st.header(TREND_SECTION_TITLE)
        if trend_source == "sample":
            st.caption(TREND_SAMPLE_NOTE)

        render_performance_chart(
            trend_df,
            title=PERFORMANCE_CHART_TITLE,
            help_text=tooltips["performance_overview_chart"],
        )
        render_conversion_chart(
            trend_df,
            title=CONVERSION_CHART_TITLE,
            help_text=tooltips["conversion_chart"],
            currency_symbol=currency_symbol,
        )

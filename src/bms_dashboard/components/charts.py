# This file contains the trend chart renderers for the dashboard.
# It exists so chart logic is shared and consistently handles empty datasets.
# The charts use Altair because it integrates cleanly with Streamlit and supports layered, dual-axis visuals.

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from src.bms_dashboard.ui_text import EMPTY_TREND

SERIES_COLORS: dict[str, str] = {
    "Total Chat": "#3b82f6",
    "Total Lead": "#10b981",
    "Total Buy": "#f59e0b",
}
CONVERSION_COLOR = "#10b981"
BUY_VALUE_COLOR = "#8b5cf6"


def _period_axis(dataframe: pd.DataFrame) -> alt.X:
    return alt.X("period:N", sort=dataframe["period"].tolist(), title=None)


def render_performance_chart(dataframe: pd.DataFrame, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info(EMPTY_TREND)
        return

    long_df = dataframe.rename(
        columns={
            "total_chat": "Total Chat",
            "total_lead": "Total Lead",
            "total_buy": "Total Buy",
        }
    ).melt(
        id_vars=["period", "period_order"],
        value_vars=list(SERIES_COLORS),
        var_name="series",
        value_name="count",
    )

    chart = (
        alt.Chart(long_df)
        .mark_line(point=True, strokeWidth=2)
        .encode(
            x=_period_axis(dataframe),
            y=alt.Y("count:Q", title="Count"),
            color=alt.Color(
                "series:N",
                scale=alt.Scale(domain=list(SERIES_COLORS), range=list(SERIES_COLORS.values())),
                legend=alt.Legend(title=None, orient="bottom"),
            ),
            tooltip=["period:N", "series:N", alt.Tooltip("count:Q", format=",")],
        )
        .properties(height=380)
    )
    st.altair_chart(chart, use_container_width=True)


def render_conversion_chart(
    dataframe: pd.DataFrame,
    *,
    title: str,
    help_text: str,
    currency_symbol: str,
) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info(EMPTY_TREND)
        return

    base = alt.Chart(dataframe).encode(x=_period_axis(dataframe))
    conversion = base.mark_line(point=True, color=CONVERSION_COLOR, strokeWidth=2).encode(
        y=alt.Y(
            "conversion_rate:Q",
            title="Conversion Rate (%)",
            axis=alt.Axis(titleColor=CONVERSION_COLOR),
        ),
        tooltip=[
            "period:N",
            alt.Tooltip("conversion_rate:Q", title="Conversion Rate (%)", format=".2f"),
        ],
    )
    buy_value = base.mark_line(point=True, color=BUY_VALUE_COLOR, strokeWidth=2).encode(
        y=alt.Y(
            "total_buy_value:Q",
            title=f"Total Buy Value ({currency_symbol})",
            axis=alt.Axis(orient="right", titleColor=BUY_VALUE_COLOR, format=","),
        ),
        tooltip=[
            "period:N",
            alt.Tooltip("total_buy_value:Q", title="Total Buy Value", format=",.2f"),
        ],
    )

    chart = alt.layer(conversion, buy_value).resolve_scale(y="independent").properties(height=260)
    st.altair_chart(chart, use_container_width=True)

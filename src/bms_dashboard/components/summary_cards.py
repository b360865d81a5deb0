# This file renders rows of KPI cards used by the metric grid.
# It exists so every card shares one visual and tooltip pattern.
# The function expects display-ready strings and does not perform any computation.

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: str
    tooltip_key: str


def render_metric_row(
    cards: list[MetricCard],
    *,
    tooltips: dict[str, str],
    caption: str | None = None,
) -> None:
    columns = st.columns(len(cards))
    for column, card in zip(columns, cards):
        with column.container(border=True):
            st.metric(card.title, card.value, help=tooltips.get(card.tooltip_key))
            if caption:
                st.caption(caption)

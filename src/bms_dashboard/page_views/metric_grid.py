# This file renders the four rows of metric cards under the trend section.
# Row order follows the funnel: volume, conversion, good customers, bad customers.
# All arithmetic happens in metrics.py; this module only picks titles and formats values.

from __future__ import annotations

from src.bms_dashboard.components.summary_cards import MetricCard, render_metric_row
from src.bms_dashboard.dashboard_config import TimeFrame
from src.bms_dashboard.formatting import format_currency, format_number, format_percent
from src.bms_dashboard.metrics import ConversionRates, MetricData


def build_card_rows(
    *,
    metrics: MetricData,
    rates: ConversionRates,
    currency_symbol: str,
) -> list[list[MetricCard]]:
    return [
        [
            MetricCard("Total Chat", format_number(metrics.total_chat), "total_chat_card"),
            MetricCard("Total Lead", format_number(metrics.total_lead), "total_lead_card"),
            MetricCard("Total Buy", format_number(metrics.total_buy), "total_buy_card"),
            MetricCard(
                "Total Buy Value",
                format_currency(metrics.total_buy_value, symbol=currency_symbol),
                "total_buy_value_card",
            ),
        ],
        [
            MetricCard("Chat to Lead %", format_percent(rates.chat_to_lead), "chat_to_lead_card"),
            MetricCard("Lead to Buy %", format_percent(rates.lead_to_buy), "lead_to_buy_card"),
            MetricCard("Chat to Buy %", format_percent(rates.chat_to_buy), "chat_to_buy_card"),
        ],
        [
            MetricCard(
                "Total Good Customer",
                format_number(metrics.total_good_customer),
                "total_good_customer_card",
            ),
            MetricCard(
                "Total ViewContent",
                format_number(metrics.total_view_content),
                "total_view_content_card",
            ),
            MetricCard(
                "Total AddToCart",
                format_number(metrics.total_add_to_cart),
                "total_add_to_cart_card",
            ),
            MetricCard(
                "Total Initiate Checkout",
                format_number(metrics.total_initiate_checkout),
                "total_initiate_checkout_card",
            ),
        ],
        [
            MetricCard(
                "Total Bad Customer",
                format_number(metrics.total_bad_customer),
                "total_bad_customer_card",
            ),
            MetricCard("Total Spam", format_number(metrics.total_spam), "total_spam_card"),
            MetricCard(
                "Total Blocking", format_number(metrics.total_blocking), "total_blocking_card"
            ),
            MetricCard("Total Ban", format_number(metrics.total_ban), "total_ban_card"),
        ],
    ]


def render(
    *,
    metrics: MetricData,
    rates: ConversionRates,
    time_frame: TimeFrame,
    currency_symbol: str,
    tooltips: dict[str, str],
) -> None:
    caption = f"{time_frame.label} data"
    for row in build_card_rows(metrics=metrics, rates=rates, currency_symbol=currency_symbol):
        render_metric_row(row, tooltips=tooltips, caption=caption)

# This file turns raw statistics rows into the metric summary shown on the dashboard cards.
# It exists so the intent classification and conversion arithmetic live in one testable place.
# Every function here is pure: rows in, numbers out, no datastore or Streamlit access.

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Intent(str, Enum):
    LEAD = "Lead"
    PURCHASE = "Purchase"
    VIEW_CONTENT = "ViewContent"
    ADD_TO_CART = "AddToCart"
    INITIATE_CHECKOUT = "InitiateCheckout"
    SPAM = "Spam"
    BLOCKING = "Blocking"
    BAN = "Ban"


# Stored labels use the short tracking codes; canonical names are accepted too.
INTENT_ALIASES: dict[str, Intent] = {
    "Lead": Intent.LEAD,
    "Purchase": Intent.PURCHASE,
    "VC": Intent.VIEW_CONTENT,
    "ViewContent": Intent.VIEW_CONTENT,
    "ATC": Intent.ADD_TO_CART,
    "AddToCart": Intent.ADD_TO_CART,
    "IC": Intent.INITIATE_CHECKOUT,
    "InitiateCheckout": Intent.INITIATE_CHECKOUT,
    "Move to Spam": Intent.SPAM,
    "Spam": Intent.SPAM,
    "Blocking": Intent.BLOCKING,
    "Ban": Intent.BAN,
}

GOOD_CUSTOMER_INTENTS: tuple[Intent, ...] = (
    Intent.ADD_TO_CART,
    Intent.INITIATE_CHECKOUT,
    Intent.LEAD,
    Intent.PURCHASE,
    Intent.VIEW_CONTENT,
)
BAD_CUSTOMER_INTENTS: tuple[Intent, ...] = (Intent.BAN, Intent.BLOCKING, Intent.SPAM)


@dataclass(frozen=True)
class MetricData:
    total_chat: int
    total_lead: int
    total_buy: int
    total_buy_value: float
    total_good_customer: int
    total_view_content: int
    total_add_to_cart: int
    total_initiate_checkout: int
    total_bad_customer: int
    total_spam: int
    total_blocking: int
    total_ban: int

    @classmethod
    def zero(cls) -> MetricData:
        return cls(
            total_chat=0,
            total_lead=0,
            total_buy=0,
            total_buy_value=0.0,
            total_good_customer=0,
            total_view_content=0,
            total_add_to_cart=0,
            total_initiate_checkout=0,
            total_bad_customer=0,
            total_spam=0,
            total_blocking=0,
            total_ban=0,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConversionRates:
    chat_to_lead: int
    lead_to_buy: int
    chat_to_buy: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like the browser's Math.round, so 2.5 -> 3 rather than Python's 2."""

    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def calculate_percentage(numerator: float, denominator: float) -> int:
    if denominator <= 0:
        return 0
    return int(round_half_up(numerator * 100 / denominator))


def compute_conversion_rates(metrics: MetricData) -> ConversionRates:
    return ConversionRates(
        chat_to_lead=calculate_percentage(metrics.total_lead, metrics.total_chat),
        lead_to_buy=calculate_percentage(metrics.total_buy, metrics.total_lead),
        chat_to_buy=calculate_percentage(metrics.total_buy, metrics.total_chat),
    )


def normalize_intent(label: Any) -> Intent | None:
    if label is None:
        return None
    return INTENT_ALIASES.get(str(label).strip())


def _as_count(raw_value: Any) -> int:
    if raw_value is None:
        return 0
    try:
        value = float(raw_value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(value):
        return 0
    return int(value)


def sum_intent_counts(
    rows: Iterable[Mapping[str, Any]], count_column: str
) -> dict[Intent, int]:
    totals = {intent: 0 for intent in Intent}
    for row in rows:
        intent = normalize_intent(row.get("intent_type"))
        if intent is None:
            continue
        totals[intent] += _as_count(row.get(count_column))
    return totals


def sum_purchase_value(rows: Iterable[Mapping[str, Any]]) -> float:
    total = 0.0
    for row in rows:
        raw_value = row.get("value")
        if raw_value is None:
            continue
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            continue
        if not math.isnan(value):
            total += value
    return total


def build_metric_data(
    *,
    total_chat: Any,
    intent_rows: Iterable[Mapping[str, Any]],
    purchase_rows: Iterable[Mapping[str, Any]],
    count_column: str,
) -> MetricData:
    intents = sum_intent_counts(intent_rows, count_column)

    return MetricData(
        total_chat=_as_count(total_chat),
        total_lead=intents[Intent.LEAD],
        total_buy=intents[Intent.PURCHASE],
        total_buy_value=sum_purchase_value(purchase_rows),
        total_good_customer=sum(intents[intent] for intent in GOOD_CUSTOMER_INTENTS),
        total_view_content=intents[Intent.VIEW_CONTENT],
        total_add_to_cart=intents[Intent.ADD_TO_CART],
        total_initiate_checkout=intents[Intent.INITIATE_CHECKOUT],
        total_bad_customer=sum(intents[intent] for intent in BAD_CUSTOMER_INTENTS),
        total_spam=intents[Intent.SPAM],
        total_blocking=intents[Intent.BLOCKING],
        total_ban=intents[Intent.BAN],
    )

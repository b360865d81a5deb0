# This test file validates the intent classification and conversion arithmetic behind the cards.
# It exists so the good/bad customer totals and percentage rounding cannot drift silently.

from __future__ import annotations

import pytest

from src.bms_dashboard.metrics import (
    Intent,
    MetricData,
    build_metric_data,
    calculate_percentage,
    compute_conversion_rates,
    normalize_intent,
    round_half_up,
    sum_intent_counts,
    sum_purchase_value,
)


def _intent_rows() -> list[dict[str, object]]:
    return [
        {"intent_type": "Lead", "weekly_count": 10},
        {"intent_type": "Lead", "weekly_count": 2},
        {"intent_type": "Purchase", "weekly_count": 3},
        {"intent_type": "VC", "weekly_count": 20},
        {"intent_type": "ATC", "weekly_count": 5},
        {"intent_type": "IC", "weekly_count": 4},
        {"intent_type": "Move to Spam", "weekly_count": 2},
        {"intent_type": "Blocking", "weekly_count": 1},
        {"intent_type": "Ban", "weekly_count": 1},
        {"intent_type": "Ban", "weekly_count": None},
        {"intent_type": "Unknown", "weekly_count": 99},
    ]


def test_build_metric_data_splits_good_and_bad_customers() -> None:
    metrics = build_metric_data(
        total_chat=200,
        intent_rows=_intent_rows(),
        purchase_rows=[{"value": 150.0}, {"value": 349.5}],
        count_column="weekly_count",
    )

    assert metrics.total_chat == 200
    assert metrics.total_lead == 12
    assert metrics.total_buy == 3
    assert metrics.total_view_content == 20
    assert metrics.total_add_to_cart == 5
    assert metrics.total_initiate_checkout == 4
    assert metrics.total_good_customer == 12 + 3 + 20 + 5 + 4
    assert metrics.total_spam == 2
    assert metrics.total_blocking == 1
    assert metrics.total_ban == 1
    assert metrics.total_bad_customer == 4
    assert metrics.total_buy_value == pytest.approx(499.5)


def test_build_metric_data_reads_only_requested_column() -> None:
    rows = [{"intent_type": "Lead", "today_count": 7, "monthly_count": 70}]

    metrics = build_metric_data(
        total_chat=None, intent_rows=rows, purchase_rows=[], count_column="monthly_count"
    )

    assert metrics.total_lead == 70
    assert metrics.total_chat == 0


def test_canonical_intent_names_are_accepted() -> None:
    rows = [
        {"intent_type": "ViewContent", "today_count": 1},
        {"intent_type": "AddToCart", "today_count": 2},
        {"intent_type": "InitiateCheckout", "today_count": 3},
        {"intent_type": "Spam", "today_count": 4},
    ]

    totals = sum_intent_counts(rows, "today_count")

    assert totals[Intent.VIEW_CONTENT] == 1
    assert totals[Intent.ADD_TO_CART] == 2
    assert totals[Intent.INITIATE_CHECKOUT] == 3
    assert totals[Intent.SPAM] == 4


def test_normalize_intent_strips_whitespace_and_ignores_unknown() -> None:
    assert normalize_intent(" VC ") is Intent.VIEW_CONTENT
    assert normalize_intent("Move to Spam") is Intent.SPAM
    assert normalize_intent("Refund") is None
    assert normalize_intent(None) is None


def test_sum_purchase_value_treats_missing_values_as_zero() -> None:
    rows = [{"value": 100.5}, {"value": None}, {"value": "200"}, {}, {"value": "n/a"}]

    assert sum_purchase_value(rows) == pytest.approx(300.5)


@pytest.mark.parametrize(
    ("numerator", "denominator", "expected"),
    [
        (1, 0, 0),
        (0, 10, 0),
        (1, 3, 33),
        (1, 8, 13),
        (5, 2, 250),
        (50, 200, 25),
    ],
)
def test_calculate_percentage(numerator: int, denominator: int, expected: int) -> None:
    assert calculate_percentage(numerator, denominator) == expected


def test_round_half_up_rounds_halves_away_from_zero() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.125, 2) == pytest.approx(0.13)


def test_compute_conversion_rates() -> None:
    metrics = build_metric_data(
        total_chat=200,
        intent_rows=[
            {"intent_type": "Lead", "today_count": 50},
            {"intent_type": "Purchase", "today_count": 5},
        ],
        purchase_rows=[],
        count_column="today_count",
    )

    rates = compute_conversion_rates(metrics)

    assert rates.chat_to_lead == 25
    assert rates.lead_to_buy == 10
    assert rates.chat_to_buy == 3


def test_zero_metrics_give_zero_rates() -> None:
    metrics = MetricData.zero()

    assert all(value == 0 for value in metrics.to_dict().values())
    assert compute_conversion_rates(metrics).to_dict() == {
        "chat_to_lead": 0,
        "lead_to_buy": 0,
        "chat_to_buy": 0,
    }

# This test file pins the number, currency, and clock formats shown on the cards and header.

from __future__ import annotations

from datetime import UTC, datetime

from src.bms_dashboard.formatting import (
    format_currency,
    format_number,
    format_percent,
    format_timestamp,
    utc_offset_label,
)


def test_format_number_groups_thousands() -> None:
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234.5) == "1,234.5"
    assert format_number(None) == "0"
    assert format_number(float("nan")) == "0"


def test_format_currency_uses_baht_with_two_decimals() -> None:
    assert format_currency(1234.5) == "฿1,234.50"
    assert format_currency(0) == "฿0.00"
    assert format_currency(None, symbol="THB ") == "THB 0.00"


def test_format_percent() -> None:
    assert format_percent(42) == "42%"
    assert format_percent(None) == "0%"


def test_format_timestamp_uses_bangkok_time_and_buddhist_era() -> None:
    moment = datetime(2026, 10, 19, 1, 2, 3, tzinfo=UTC)

    assert format_timestamp(moment) == "19/10/2569 08:02:03"
    assert utc_offset_label(moment) == "GMT+7"

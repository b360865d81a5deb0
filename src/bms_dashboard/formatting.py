# This file collects small formatting helpers used by the metric cards and chart tooltips.
# It exists so counts, baht amounts, and percentages render the same way everywhere on the page.
# The functions return plain strings that Streamlit can display directly.

from __future__ import annotations

import math
from datetime import datetime
from zoneinfo import ZoneInfo

BUDDHIST_ERA_OFFSET = 543


def format_number(value: int | float | None) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "0"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{float(value):,.3f}".rstrip("0").rstrip(".")


def format_currency(value: int | float | None, *, symbol: str = "฿") -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        value = 0.0
    return f"{symbol}{float(value):,.2f}"


def format_percent(value: int | float | None) -> str:
    if value is None:
        return "0%"
    return f"{value}%"


def now_in_timezone(timezone_name: str) -> datetime:
    return datetime.now(tz=ZoneInfo(timezone_name))


def format_timestamp(moment: datetime, *, timezone_name: str = "Asia/Bangkok") -> str:
    """Render like a th-TH locale clock: D/M/YYYY (Buddhist era) HH:MM:SS."""

    local = moment.astimezone(ZoneInfo(timezone_name))
    year = local.year + BUDDHIST_ERA_OFFSET
    return f"{local.day}/{local.month}/{year} {local:%H:%M:%S}"


def utc_offset_label(moment: datetime, *, timezone_name: str = "Asia/Bangkok") -> str:
    offset = moment.astimezone(ZoneInfo(timezone_name)).utcoffset()
    hours = int(offset.total_seconds() // 3600) if offset is not None else 0
    return f"GMT{hours:+d}"

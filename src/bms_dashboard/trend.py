# This file builds the period axis and series used by the trend charts.
# The statistics tables only hold running totals per time frame, so there is no stored history to plot.
# The series generated here keeps the chat -> lead -> buy funnel shape so the charts stay readable,
# and the page labels it as illustrative.

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta

import numpy as np
import pandas as pd

from src.bms_dashboard.dashboard_config import TimeFrame
from src.bms_dashboard.metrics import round_half_up

THAI_WEEKDAYS_SHORT: tuple[str, ...] = ("จ.", "อ.", "พ.", "พฤ.", "ศ.", "ส.", "อา.")
THAI_MONTHS_SHORT: tuple[str, ...] = (
    "ม.ค.",
    "ก.พ.",
    "มี.ค.",
    "เม.ย.",
    "พ.ค.",
    "มิ.ย.",
    "ก.ค.",
    "ส.ค.",
    "ก.ย.",
    "ต.ค.",
    "พ.ย.",
    "ธ.ค.",
)

PERIOD_COUNTS: dict[TimeFrame, int] = {
    TimeFrame.TODAY: 24,
    TimeFrame.WEEKLY: 7,
    TimeFrame.MONTHLY: 30,
}

TREND_COLUMNS: list[str] = [
    "period",
    "total_chat",
    "total_lead",
    "total_buy",
    "total_buy_value",
    "conversion_rate",
]


@dataclass(frozen=True)
class TrendPoint:
    period: str
    total_chat: int
    total_lead: int
    total_buy: int
    total_buy_value: int
    conversion_rate: float


def thai_weekday_label(day: date) -> str:
    return THAI_WEEKDAYS_SHORT[day.weekday()]


def thai_day_month_label(day: date) -> str:
    return f"{day.day} {THAI_MONTHS_SHORT[day.month - 1]}"


def _trailing_days(today: date, count: int) -> list[date]:
    return [today - timedelta(days=count - 1 - offset) for offset in range(count)]


def build_period_labels(time_frame: TimeFrame, now: datetime) -> list[str]:
    """Return chart x-axis labels, oldest first, ending at `now`'s date."""

    count = PERIOD_COUNTS[time_frame]
    if time_frame is TimeFrame.TODAY:
        return [f"{hour}:00" for hour in range(count)]

    days = _trailing_days(now.date(), count)
    if time_frame is TimeFrame.WEEKLY:
        return [thai_weekday_label(day) for day in days]
    return [thai_day_month_label(day) for day in days]


def _simulate_point(period: str, rng: np.random.Generator) -> TrendPoint:
    total_chat = int(rng.integers(500, 1500))
    total_lead = math.floor(total_chat * (0.15 + rng.random() * 0.1))
    total_buy = math.floor(total_lead * (0.1 + rng.random() * 0.05))
    total_buy_value = math.floor(total_buy * (500 + rng.random() * 1000))
    conversion_rate = (
        round_half_up(total_buy / total_lead * 100, 2) if total_lead > 0 else 0.0
    )
    return TrendPoint(
        period=period,
        total_chat=total_chat,
        total_lead=total_lead,
        total_buy=total_buy,
        total_buy_value=total_buy_value,
        conversion_rate=conversion_rate,
    )


def build_trend_series(
    time_frame: TimeFrame,
    now: datetime,
    rng: np.random.Generator | None = None,
) -> list[TrendPoint]:
    generator = rng if rng is not None else np.random.default_rng()
    return [_simulate_point(period, generator) for period in build_period_labels(time_frame, now)]


def trend_to_dataframe(points: list[TrendPoint]) -> pd.DataFrame:
    if not points:
        return pd.DataFrame(columns=[*TREND_COLUMNS, "period_order"])
    dataframe = pd.DataFrame([asdict(point) for point in points], columns=TREND_COLUMNS)
    dataframe["period_order"] = range(len(dataframe))
    return dataframe

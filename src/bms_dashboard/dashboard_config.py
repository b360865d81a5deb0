# This file defines runtime configuration and filter state for the BMS dashboard.
# It exists so datastore credentials, cache policies, and refresh cadence can be tuned through environment variables.
# The time-frame enum also owns the mapping to the pre-aggregated counter columns.

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv


class TimeFrame(str, Enum):
    TODAY = "today"
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @property
    def count_column(self) -> str:
        return f"{self.value}_count"

    @property
    def label(self) -> str:
        return self.value.capitalize()


COUNT_COLUMNS: frozenset[str] = frozenset(frame.count_column for frame in TimeFrame)


def parse_time_frame(value: str | TimeFrame) -> TimeFrame:
    if isinstance(value, TimeFrame):
        return value
    try:
        return TimeFrame(str(value).strip().lower())
    except ValueError as exc:
        options = ", ".join(frame.value for frame in TimeFrame)
        raise ValueError(f"Unknown time frame {value!r}; expected one of: {options}") from exc


@dataclass(frozen=True)
class DashboardConfig:
    supabase_url: str | None
    supabase_key: str | None
    database_url: str | None
    request_timeout_seconds: int
    query_cache_ttl_seconds: int
    refresh_interval_seconds: int
    display_timezone: str
    currency_symbol: str
    default_time_frame: TimeFrame
    trend_seed: int | None = None


@dataclass(frozen=True)
class DashboardFilters:
    time_frame: TimeFrame


def _optional_int(raw_value: str | None) -> int | None:
    if raw_value is None or not raw_value.strip():
        return None
    return int(raw_value)


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    supabase_url = os.getenv("DASHBOARD_SUPABASE_URL") or os.getenv("SUPABASE_URL") or None
    supabase_key = os.getenv("DASHBOARD_SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY") or None
    database_url = os.getenv("DASHBOARD_DATABASE_URL") or os.getenv("DATABASE_URL") or None

    return DashboardConfig(
        supabase_url=supabase_url.rstrip("/") if supabase_url else None,
        supabase_key=supabase_key,
        database_url=database_url,
        request_timeout_seconds=int(os.getenv("DASHBOARD_REQUEST_TIMEOUT_SECONDS", "8")),
        query_cache_ttl_seconds=int(os.getenv("DASHBOARD_QUERY_CACHE_TTL_SECONDS", "60")),
        refresh_interval_seconds=int(os.getenv("DASHBOARD_REFRESH_INTERVAL_SECONDS", "300")),
        display_timezone=os.getenv("DASHBOARD_DISPLAY_TIMEZONE", "Asia/Bangkok"),
        currency_symbol=os.getenv("DASHBOARD_CURRENCY_SYMBOL", "฿"),
        default_time_frame=parse_time_frame(os.getenv("DASHBOARD_DEFAULT_TIME_FRAME", "today")),
        trend_seed=_optional_int(os.getenv("DASHBOARD_TREND_SEED")),
    )

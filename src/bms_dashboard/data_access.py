# This file is the single data interface for the BMS dashboard.
# It exists so pages can request a ready metric summary without caring whether rows came from REST or Postgres.
# The module enforces REST-first reads, DB fallback, zero-valued fallback, and TTL caching for repeated queries.

from __future__ import annotations

import logging
import time
from dataclasses import asdict
from datetime import datetime
from typing import Any, cast

import numpy as np
import pandas as pd
from sqlalchemy.exc import SQLAlchemyError

from src.bms_dashboard.dashboard_config import DashboardConfig, DashboardFilters
from src.bms_dashboard.db_client import DashboardDbClient, DatabaseUnavailableError
from src.bms_dashboard.metrics import MetricData, build_metric_data
from src.bms_dashboard.rest_client import ApiUnavailableError, SupabaseRestClient
from src.bms_dashboard.trend import build_trend_series, trend_to_dataframe

LOGGER = logging.getLogger("bms_dashboard")


class _TTLCache:
    def __init__(self) -> None:
        self._store: dict[tuple[Any, ...], tuple[float, Any]] = {}

    def get(self, key: tuple[Any, ...]) -> Any | None:
        cached = self._store.get(key)
        if not cached:
            return None
        expires_at, value = cached
        if time.time() > expires_at:
            self._store.pop(key, None)
            return None
        return value

    def set(self, key: tuple[Any, ...], *, value: Any, ttl_seconds: int) -> None:
        self._store[key] = (time.time() + ttl_seconds, value)

    def clear(self) -> None:
        self._store.clear()


class DashboardDataAccess:
    def __init__(
        self,
        *,
        config: DashboardConfig,
        rest_client: SupabaseRestClient | None = None,
        db_client: DashboardDbClient | None = None,
    ) -> None:
        self.config = config
        if rest_client is None and config.supabase_url and config.supabase_key:
            rest_client = SupabaseRestClient(
                base_url=config.supabase_url,
                api_key=config.supabase_key,
                timeout_seconds=config.request_timeout_seconds,
            )
        self.rest_client = rest_client
        self.db_client = db_client or DashboardDbClient(database_url=config.database_url)
        self.cache = _TTLCache()

    def get_metrics(self, filters: DashboardFilters) -> tuple[MetricData, str]:
        cache_key = ("metrics", tuple(asdict(filters).items()))
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[MetricData, str], cached)

        count_column = filters.time_frame.count_column
        value = self._load_metrics_from_rest(count_column)
        if value is None:
            value = self._load_metrics_from_db(count_column)
        if value is None:
            LOGGER.warning(
                "no datastore reachable, showing zero metrics time_frame=%s",
                filters.time_frame.value,
            )
            value = (MetricData.zero(), "empty")

        self.cache.set(cache_key, value=value, ttl_seconds=self.config.query_cache_ttl_seconds)
        return value

    def get_trend(self, filters: DashboardFilters, *, now: datetime) -> tuple[pd.DataFrame, str]:
        cache_key = ("trend", tuple(asdict(filters).items()))
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cast(tuple[pd.DataFrame, str], cached)

        try:
            rng = np.random.default_rng(self.config.trend_seed)
            points = build_trend_series(filters.time_frame, now, rng)
            value = (trend_to_dataframe(points), "sample")
        except Exception:
            LOGGER.exception("trend series failed time_frame=%s", filters.time_frame.value)
            return trend_to_dataframe([]), "empty"

        self.cache.set(cache_key, value=value, ttl_seconds=self.config.query_cache_ttl_seconds)
        return value

    def invalidate(self) -> None:
        self.cache.clear()

    def _load_metrics_from_rest(self, count_column: str) -> tuple[MetricData, str] | None:
        if self.rest_client is None:
            LOGGER.debug("REST client not configured, skipping to DB fallback")
            return None

        try:
            total_chat = self.rest_client.get_psid_inputs(count_column)
            intent_rows = self.rest_client.get_intent_rows(count_column)
            purchase_rows = self.rest_client.get_purchase_values()
        except (ApiUnavailableError, ValueError) as exc:
            LOGGER.warning("REST metrics fetch failed, trying DB fallback: %s", exc)
            return None

        metrics = build_metric_data(
            total_chat=total_chat,
            intent_rows=intent_rows,
            purchase_rows=purchase_rows,
            count_column=count_column,
        )
        return metrics, "api"

    def _load_metrics_from_db(self, count_column: str) -> tuple[MetricData, str] | None:
        try:
            total_chat = self.db_client.get_psid_inputs(count_column)
            intent_rows = self.db_client.get_intent_rows(count_column)
            purchase_rows = self.db_client.get_purchase_values()
        except DatabaseUnavailableError as exc:
            LOGGER.warning("DB fallback unavailable: %s", exc)
            return None
        except SQLAlchemyError:
            LOGGER.exception("DB fallback query failed")
            return None

        metrics = build_metric_data(
            total_chat=total_chat,
            intent_rows=intent_rows,
            purchase_rows=purchase_rows,
            count_column=count_column,
        )
        return metrics, "db"

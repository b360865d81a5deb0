# This file implements the REST client the dashboard uses to read the hosted statistics tables.
# It exists so pages never embed PostgREST query syntax or auth headers directly.
# The client converts transport failures into one clear exception type so data_access.py can fall back cleanly.

from __future__ import annotations

from typing import Any

import requests

from src.bms_dashboard.dashboard_config import COUNT_COLUMNS

PSID_METRIC_TYPE = "PSID Inputs"


class ApiUnavailableError(RuntimeError):
    """Raised when the REST endpoint cannot be reached or responds with server errors."""


def _checked_count_column(count_column: str) -> str:
    if count_column not in COUNT_COLUMNS:
        raise ValueError(f"Unsupported count column: {count_column!r}")
    return count_column


class SupabaseRestClient:
    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }

    def get_psid_inputs(self, count_column: str) -> int | None:
        column = _checked_count_column(count_column)
        rows = self._request_rows(
            "psid_inputs_statistics",
            params={
                "select": column,
                "metric_type": f"eq.{PSID_METRIC_TYPE}",
                "limit": 1,
            },
        )
        if not rows:
            return None
        return rows[0].get(column)

    def get_intent_rows(self, count_column: str) -> list[dict[str, Any]]:
        column = _checked_count_column(count_column)
        return self._request_rows(
            "intent_statistics",
            params={"select": f"intent_type,{column}"},
        )

    def get_purchase_values(self) -> list[dict[str, Any]]:
        return self._request_rows("purchase", params={"select": "value"})

    def _request_rows(self, table: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        url = f"{self.base_url}/rest/v1/{table}"
        try:
            response = self.session.get(
                url, params=params, headers=self._headers, timeout=self.timeout_seconds
            )
        except requests.RequestException as exc:
            raise ApiUnavailableError(f"REST request failed for {url}: {exc}") from exc

        if response.status_code >= 500:
            raise ApiUnavailableError(
                f"REST request failed with status {response.status_code} for {url}"
            )
        if response.status_code >= 400:
            raise ValueError(
                f"REST request was rejected with status {response.status_code} for {url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiUnavailableError(f"REST endpoint did not return valid JSON for {url}") from exc

        if not isinstance(payload, list):
            raise ApiUnavailableError(f"Unexpected payload shape from {url}")
        return [dict(row) for row in payload if isinstance(row, dict)]

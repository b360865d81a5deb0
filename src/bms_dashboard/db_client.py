# This file provides direct Postgres queries used when the REST endpoint is unreachable.
# The hosted datastore is a Postgres database, so the same three statistics tables can be read with SQL.
# The client keeps SQL in one place and returns plain rows that metrics.py can reduce.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from src.bms_dashboard.dashboard_config import COUNT_COLUMNS
from src.bms_dashboard.rest_client import PSID_METRIC_TYPE
from src.common.db import DatabaseClient, validate_identifier

LOGGER = logging.getLogger("bms_dashboard")


class DatabaseUnavailableError(RuntimeError):
    """Raised when DB fallback is requested without a configured connection."""


class DashboardDbClient:
    def __init__(self, *, database_url: str | None) -> None:
        self._database_url = database_url
        self._db: DatabaseClient | None = None

    def can_connect(self) -> bool:
        try:
            return self._get_db().can_connect()
        except DatabaseUnavailableError:
            return False

    def get_psid_inputs(self, count_column: str) -> int | None:
        column = self._count_column(count_column)
        query = f"""
        SELECT s.{column} AS total_chat
        FROM psid_inputs_statistics s
        WHERE s.metric_type = :metric_type
        LIMIT 1
        """
        row = self._get_db().fetch_one(query, {"metric_type": PSID_METRIC_TYPE})
        return row.get("total_chat") if row else None

    def get_intent_rows(self, count_column: str) -> list[dict[str, Any]]:
        column = self._count_column(count_column)
        query = f"""
        SELECT
            i.intent_type,
            i.{column}
        FROM intent_statistics i
        """
        return self._get_db().fetch_all(query)

    def get_purchase_values(self) -> list[dict[str, Any]]:
        query = """
        SELECT p.value
        FROM purchase p
        """
        return self._get_db().fetch_all(query)

    def _get_db(self) -> DatabaseClient:
        if self._db is not None:
            return self._db
        if not self._database_url:
            raise DatabaseUnavailableError(
                "DASHBOARD_DATABASE_URL or DATABASE_URL is required for DB fallback reads."
            )
        try:
            self._db = DatabaseClient(database_url=self._database_url)
        except SQLAlchemyError as exc:
            LOGGER.warning("DB fallback URL rejected: %s", exc)
            raise DatabaseUnavailableError(
                f"DB fallback URL could not be used: {type(exc).__name__}"
            ) from exc
        return self._db

    @staticmethod
    def _count_column(count_column: str) -> str:
        if count_column not in COUNT_COLUMNS:
            raise ValueError(f"Unsupported count column: {count_column!r}")
        return validate_identifier(count_column)

# This test file runs the DB fallback SQL end to end against a throwaway SQLite database.
# It exists so the statistics queries, row mapping, and identifier guard are exercised without Postgres.

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine, text

from src.bms_dashboard.dashboard_config import DashboardConfig, DashboardFilters, TimeFrame
from src.bms_dashboard.data_access import DashboardDataAccess
from src.bms_dashboard.db_client import DashboardDbClient, DatabaseUnavailableError
from src.common.db import DatabaseClient, validate_identifier


@pytest.fixture
def statistics_db_url(tmp_path: Path) -> str:
    database_url = f"sqlite:///{tmp_path / 'statistics.db'}"
    engine = create_engine(database_url, future=True)
    with engine.begin() as connection:
        connection.execute(
            text(
                "CREATE TABLE psid_inputs_statistics ("
                "metric_type TEXT, today_count INTEGER, weekly_count INTEGER, monthly_count INTEGER)"
            )
        )
        connection.execute(
            text(
                "CREATE TABLE intent_statistics ("
                "intent_type TEXT, today_count INTEGER, weekly_count INTEGER, monthly_count INTEGER)"
            )
        )
        connection.execute(text("CREATE TABLE purchase (value REAL)"))
        connection.execute(
            text(
                "INSERT INTO psid_inputs_statistics VALUES "
                "('Other Metric', 1, 1, 1), ('PSID Inputs', 120, 840, 3600)"
            )
        )
        connection.execute(
            text(
                "INSERT INTO intent_statistics VALUES "
                "('Lead', 30, 200, 900), ('Purchase', 6, 40, 150), "
                "('VC', 50, 300, 1200), ('Move to Spam', 2, 9, 30), ('Ban', NULL, 1, 4)"
            )
        )
        connection.execute(text("INSERT INTO purchase VALUES (1500.0), (NULL), (2500.5)"))
    engine.dispose()
    return database_url


def test_get_psid_inputs_reads_requested_column(statistics_db_url: str) -> None:
    client = DashboardDbClient(database_url=statistics_db_url)

    assert client.get_psid_inputs("today_count") == 120
    assert client.get_psid_inputs("monthly_count") == 3600


def test_get_intent_rows_returns_label_and_count(statistics_db_url: str) -> None:
    client = DashboardDbClient(database_url=statistics_db_url)

    rows = client.get_intent_rows("weekly_count")

    assert {"intent_type": "Lead", "weekly_count": 200} in rows
    assert {"intent_type": "Ban", "weekly_count": 1} in rows
    assert len(rows) == 5


def test_get_purchase_values_returns_value_rows(statistics_db_url: str) -> None:
    client = DashboardDbClient(database_url=statistics_db_url)

    values = [row["value"] for row in client.get_purchase_values()]

    assert sorted(value for value in values if value is not None) == [1500.0, 2500.5]
    assert None in values


def test_can_connect_reports_database_state(statistics_db_url: str) -> None:
    assert DashboardDbClient(database_url=statistics_db_url).can_connect() is True
    assert DashboardDbClient(database_url=None).can_connect() is False


def test_reads_without_url_raise_unavailable() -> None:
    with pytest.raises(DatabaseUnavailableError):
        DashboardDbClient(database_url=None).get_purchase_values()


def test_unsupported_count_column_is_rejected(statistics_db_url: str) -> None:
    with pytest.raises(ValueError):
        DashboardDbClient(database_url=statistics_db_url).get_intent_rows("x; drop")


def test_validate_identifier_rejects_sql_fragments() -> None:
    assert validate_identifier("weekly_count") == "weekly_count"
    with pytest.raises(ValueError, match="Unsafe SQL identifier"):
        validate_identifier("x; drop")


def test_fetch_one_returns_none_for_missing_row(statistics_db_url: str) -> None:
    db = DatabaseClient(database_url=statistics_db_url)

    row = db.fetch_one(
        "SELECT today_count FROM psid_inputs_statistics WHERE metric_type = :metric_type",
        {"metric_type": "missing"},
    )

    assert row is None


def test_data_access_reduces_db_rows(statistics_db_url: str) -> None:
    config = DashboardConfig(
        supabase_url=None,
        supabase_key=None,
        database_url=statistics_db_url,
        request_timeout_seconds=5,
        query_cache_ttl_seconds=60,
        refresh_interval_seconds=300,
        display_timezone="Asia/Bangkok",
        currency_symbol="฿",
        default_time_frame=TimeFrame.TODAY,
    )
    access = DashboardDataAccess(config=config)

    metrics, source = access.get_metrics(DashboardFilters(time_frame=TimeFrame.TODAY))

    assert source == "db"
    assert metrics.total_chat == 120
    assert metrics.total_lead == 30
    assert metrics.total_buy == 6
    assert metrics.total_good_customer == 30 + 6 + 50
    assert metrics.total_bad_customer == 2
    assert metrics.total_buy_value == pytest.approx(4000.5)

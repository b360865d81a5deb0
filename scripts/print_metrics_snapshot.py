#!/usr/bin/env python3
"""
Print the dashboard metric summary for one time frame as JSON.
It reads through the same REST-first, DB-fallback path as the Streamlit page, so operators can check
the numbers and the data source from a shell.
Exits non-zero when neither the REST endpoint nor the database could be read.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.bms_dashboard.dashboard_config import (
    DashboardFilters,
    TimeFrame,
    load_dashboard_config,
    parse_time_frame,
)
from src.bms_dashboard.data_access import DashboardDataAccess
from src.bms_dashboard.metrics import compute_conversion_rates
from src.common.logging import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print BMS dashboard metrics for a time frame")
    parser.add_argument(
        "--time-frame",
        choices=[frame.value for frame in TimeFrame],
        default=TimeFrame.TODAY.value,
    )
    parser.add_argument(
        "--check-db",
        action="store_true",
        help="Also report whether the Postgres fallback accepts connections.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    config = load_dashboard_config()
    data_access = DashboardDataAccess(config=config)
    filters = DashboardFilters(time_frame=parse_time_frame(args.time_frame))

    metrics, source = data_access.get_metrics(filters)
    payload = {
        "time_frame": filters.time_frame.value,
        "source": source,
        "metrics": metrics.to_dict(),
        "conversion_rates": compute_conversion_rates(metrics).to_dict(),
    }
    if args.check_db:
        payload["db_fallback_reachable"] = data_access.db_client.can_connect()
    print(json.dumps(payload, indent=2, ensure_ascii=False))

    if source == "empty":
        print("No datastore could be read; metrics above are zero fallbacks.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

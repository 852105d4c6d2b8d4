# SPDX-License-Identifier: MIT

import csv
import io
import logging
from pathlib import Path

import pendulum

from watercheck.model.daily_data import DailyData
from watercheck.model.hydration_state import HydrationState
from watercheck.service.statistics import get_today_daily_data
from watercheck.time import date_to_str

logger = logging.getLogger(__name__)

CSV_HEADER = ["Date", "Total Intake (ml)", "Entries", "Goal Met"]


def get_export_rows(state: HydrationState, today: pendulum.Date) -> list[DailyData]:
    """Today's live record (when anything was logged) followed by the history."""
    rows = []
    if state["current_intake"] > 0:
        rows.append(get_today_daily_data(state, today))
    rows.extend(state["historical_data"])
    return rows


def export_csv(state: HydrationState, today: pendulum.Date) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for daily_data in get_export_rows(state, today):
        writer.writerow(
            [
                date_to_str(daily_data["date"]),
                int(daily_data["total_intake"]),
                daily_data["entry_count"],
                "true" if daily_data["goal_met"] else "false",
            ]
        )
    return buffer.getvalue()


def write_csv(state: HydrationState, today: pendulum.Date, path: Path) -> int:
    """Write the export to path and return the number of data rows."""
    path.write_text(export_csv(state, today), encoding="utf-8")
    row_count = len(get_export_rows(state, today))
    logger.info("Exported %s rows to %s", row_count, path)
    return row_count

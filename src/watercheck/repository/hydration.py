# SPDX-License-Identifier: MIT

import logging
import math
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from watercheck import time
from watercheck.model.daily_data import DailyData
from watercheck.model.entity_id import entity_id_from_value
from watercheck.model.hydration_state import HydrationState
from watercheck.model.water_entry import WaterEntry
from watercheck.template.hydration_state import (
    DEFAULT_DAILY_GOAL,
    get_hydration_state_template,
)

logger = logging.getLogger(__name__)

CURRENT_DATE_KEY = "current_date"
INTAKE_KEY = "current_intake"
GOAL_KEY = "daily_goal"
ENTRIES_KEY = "today_entries"
HISTORICAL_KEY = "historical_data"


class HydrationPersistenceError(Exception):
    """Raised when hydration state cannot be written."""

    pass


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class HydrationRepository:
    """
    YAML-backed storage for the hydration state.

    Reads never fail: every field falls back to its default independently when
    it is missing or malformed. Writes raise HydrationPersistenceError.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load_state(self) -> HydrationState:
        state = get_hydration_state_template()

        raw = self.__read_raw()
        if raw is None:
            return state

        state["daily_goal"] = self.__convert_goal_for_deserialization(raw.get(GOAL_KEY))
        state["today_entries"] = self.__convert_list_for_deserialization(
            raw.get(ENTRIES_KEY), ENTRIES_KEY, self.__convert_entry_for_deserialization
        )
        state["historical_data"] = self.__convert_list_for_deserialization(
            raw.get(HISTORICAL_KEY),
            HISTORICAL_KEY,
            self.__convert_daily_data_for_deserialization,
        )

        # The entry list is authoritative for the running total
        entries_total = float(sum(entry["amount"] for entry in state["today_entries"]))
        raw_intake = raw.get(INTAKE_KEY)
        if not _is_number(raw_intake) or not math.isclose(
            float(raw_intake), entries_total, abs_tol=1e-6
        ):
            if raw_intake is not None:
                logger.warning(
                    "Stored intake %r does not match today's entries (%s ml), using the entries",
                    raw_intake,
                    entries_total,
                )
        state["current_intake"] = entries_total

        last_active_date = self.__convert_date_for_deserialization(
            raw.get(CURRENT_DATE_KEY)
        )
        if last_active_date is None and len(state["today_entries"]) > 0:
            newest = max(entry["timestamp"] for entry in state["today_entries"])
            last_active_date = time.local_date(newest)
            logger.warning(
                "Missing %s, recovered %s from today's entries",
                CURRENT_DATE_KEY,
                time.date_to_str(last_active_date),
            )
        if last_active_date is not None:
            state["last_active_date"] = last_active_date

        return state

    def save_state(self, state: HydrationState) -> None:
        serializable_state = self.__convert_state_for_serialization(deepcopy(state))
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump(serializable_state, Dumper=Dumper, sort_keys=False))
        except (OSError, YAMLError) as e:
            logger.error("Could not write hydration data to %s: %s", self.path, e)
            raise HydrationPersistenceError(
                f"could not write hydration data to {self.path}: {e}"
            ) from e

    def __read_raw(self) -> Optional[dict[str, Any]]:
        if not self.path.is_file():
            return None
        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            logger.warning("Could not read %s, using defaults: %s", self.path, e)
            return None
        if raw is None:
            return None
        if not isinstance(raw, dict):
            logger.warning("Unexpected content in %s, using defaults", self.path)
            return None
        return cast(dict[str, Any], raw)

    def __convert_state_for_serialization(
        self, state: HydrationState
    ) -> dict[str, Any]:
        return {
            CURRENT_DATE_KEY: time.date_to_str(state["last_active_date"]),
            INTAKE_KEY: float(state["current_intake"]),
            GOAL_KEY: float(state["daily_goal"]),
            ENTRIES_KEY: [
                {
                    "id": entry["id"],
                    "amount": float(entry["amount"]),
                    "timestamp": time.datetime_to_iso_str(entry["timestamp"]),
                }
                for entry in state["today_entries"]
            ],
            HISTORICAL_KEY: [
                {
                    "id": daily_data["id"],
                    "date": time.date_to_str(daily_data["date"]),
                    "total_intake": float(daily_data["total_intake"]),
                    "entry_count": int(daily_data["entry_count"]),
                    "goal_met": bool(daily_data["goal_met"]),
                }
                for daily_data in state["historical_data"]
            ],
        }

    def __convert_goal_for_deserialization(self, raw_goal: Any) -> float:
        if _is_number(raw_goal) and raw_goal > 0:
            return float(raw_goal)
        if raw_goal is not None:
            logger.warning(
                "Invalid daily goal %r, using default %s", raw_goal, DEFAULT_DAILY_GOAL
            )
        return DEFAULT_DAILY_GOAL

    def __convert_date_for_deserialization(
        self, raw_date: Any
    ) -> Optional[pendulum.Date]:
        if raw_date is None:
            return None
        try:
            return time.date_from_str(raw_date)
        except (TypeError, ValueError):
            logger.warning("Invalid %s %r, ignoring it", CURRENT_DATE_KEY, raw_date)
            return None

    def __convert_list_for_deserialization(
        self, raw_items: Any, key: str, convert: Any
    ) -> list[Any]:
        if raw_items is None:
            return []
        if not isinstance(raw_items, list):
            logger.warning("Expected a list for %s, using an empty list", key)
            return []

        items = []
        for raw_item in raw_items:
            try:
                items.append(convert(raw_item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed item in %s: %r (%s)", key, raw_item, e)
        return items

    def __convert_entry_for_deserialization(self, raw_entry: Any) -> WaterEntry:
        amount = raw_entry["amount"]
        if not _is_number(amount) or amount <= 0:
            raise ValueError(f"amount must be a positive number, got {amount!r}")
        return {
            "id": entity_id_from_value(raw_entry["id"]),
            "amount": float(amount),
            "timestamp": time.datetime_from_value(raw_entry["timestamp"]),
        }

    def __convert_daily_data_for_deserialization(self, raw_daily_data: Any) -> DailyData:
        total_intake = raw_daily_data["total_intake"]
        if not _is_number(total_intake) or total_intake < 0:
            raise ValueError(
                f"total_intake must be a non-negative number, got {total_intake!r}"
            )
        entry_count = raw_daily_data["entry_count"]
        if not isinstance(entry_count, int) or isinstance(entry_count, bool):
            raise TypeError(f"entry_count must be an integer, got {entry_count!r}")
        return {
            "id": entity_id_from_value(raw_daily_data["id"]),
            "date": time.date_from_str(raw_daily_data["date"]),
            "total_intake": float(total_intake),
            "entry_count": entry_count,
            "goal_met": bool(raw_daily_data["goal_met"]),
        }

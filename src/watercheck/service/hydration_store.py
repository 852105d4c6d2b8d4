# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from types import TracebackType
from typing import Callable, Optional

import pendulum

from watercheck.model.achievement import Achievements
from watercheck.model.daily_data import DailyData
from watercheck.model.entity_id import EntityId, generate_entity_id
from watercheck.model.hydration_state import HydrationState
from watercheck.model.progress import ProgressBand
from watercheck.model.snapshot import HydrationSnapshot
from watercheck.model.statistics import Statistics
from watercheck.model.timeframe import TIMEFRAME_DAYS, Timeframe
from watercheck.model.water_entry import WaterEntry
from watercheck.repository.hydration import HydrationRepository
from watercheck.service import export, statistics
from watercheck.service.achievement import compute_achievements
from watercheck.service.progress import get_progress_band, get_progress_ratio
from watercheck.service.water_entry import (
    HydrationValidationError,
    create_water_entry,
    validate_positive_quantity,
    validate_retention_days,
)
from watercheck.time import date_to_str, local_date, now_utc

logger = logging.getLogger(__name__)

Observer = Callable[[HydrationSnapshot], None]


class StoreClosedError(Exception):
    """Raised when a closed store is mutated."""

    pass


class Subscription:
    """Handle returned by HydrationStore.subscribe."""

    def __init__(self, store: "HydrationStore", callback: Observer) -> None:
        self._store: Optional[HydrationStore] = store
        self.callback = callback

    @property
    def active(self) -> bool:
        return self._store is not None

    def unsubscribe(self) -> None:
        if self._store is not None:
            self._store._remove_subscription(self)
            self._store = None


class HydrationStore:
    """
    Sole owner of the hydration state.

    Every mutation is applied to a copy of the state, persisted, and only then
    committed and published to subscribers. If persisting fails the in-memory
    state is left untouched and the repository's error propagates.

    The calendar day is taken from the injected clock in the local timezone.
    A new day archives the previous day's totals (when anything was logged)
    and resets the live counters. Only the last active day is archived, days
    on which the store was never used leave no record.
    """

    def __init__(
        self,
        repository: HydrationRepository,
        clock: Callable[[], pendulum.DateTime] = now_utc,
        history_retention_days: Optional[int] = None,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._history_retention_days = (
            None
            if history_retention_days is None
            else validate_retention_days(history_retention_days)
        )
        self._subscriptions: list[Subscription] = []
        self._closed = False

        self._state: HydrationState = repository.load_state()
        self._achievements: Achievements = self.__compute_achievements(self._state)

        self.check_day_rollover()

    def __enter__(self) -> "HydrationStore":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    # ─────────────────────────────────────────────────────────────
    # Lifecycle and observation
    # ─────────────────────────────────────────────────────────────

    def close(self) -> None:
        for subscription in list(self._subscriptions):
            subscription.unsubscribe()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: Observer) -> Subscription:
        self.__ensure_open()
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def _remove_subscription(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    # ─────────────────────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────────────────────

    def today(self) -> pendulum.Date:
        return local_date(self._clock())

    def now(self) -> pendulum.DateTime:
        return self._clock()

    @property
    def current_intake(self) -> float:
        return self._state["current_intake"]

    @property
    def daily_goal(self) -> float:
        return self._state["daily_goal"]

    @property
    def last_active_date(self) -> pendulum.Date:
        return self._state["last_active_date"]

    @property
    def today_entries(self) -> list[WaterEntry]:
        return deepcopy(self._state["today_entries"])

    @property
    def historical_data(self) -> list[DailyData]:
        return deepcopy(self._state["historical_data"])

    @property
    def achievements(self) -> Achievements:
        return deepcopy(self._achievements)

    def snapshot(self) -> HydrationSnapshot:
        return {
            "state": deepcopy(self._state),
            "achievements": deepcopy(self._achievements),
        }

    def get_entry(self, id: EntityId) -> Optional[WaterEntry]:
        for entry in self._state["today_entries"]:
            if entry["id"] == id:
                return deepcopy(entry)
        return None

    def progress_ratio(self) -> float:
        return get_progress_ratio(self.current_intake, self.daily_goal)

    def progress_band(self) -> ProgressBand:
        return get_progress_band(self.current_intake, self.daily_goal)

    def get_data_for_timeframe(self, timeframe: Timeframe) -> list[DailyData]:
        if timeframe not in TIMEFRAME_DAYS:
            raise HydrationValidationError(
                f"timeframe must be one of {', '.join(TIMEFRAME_DAYS)}. Got: {timeframe}"
            )
        return statistics.get_data_for_timeframe(
            deepcopy(self._state), timeframe, self.today()
        )

    def get_statistics(self, timeframe: Timeframe) -> Statistics:
        return statistics.get_statistics(self.get_data_for_timeframe(timeframe))

    def export_csv(self) -> str:
        return export.export_csv(deepcopy(self._state), self.today())

    def write_csv(self, path: Path) -> int:
        return export.write_csv(deepcopy(self._state), self.today(), path)

    # ─────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────

    def add_entry(self, amount: float) -> WaterEntry:
        self.__ensure_open()
        amount = validate_positive_quantity("amount", amount)
        self.check_day_rollover()

        state = deepcopy(self._state)
        entry = create_water_entry(amount, self._clock().in_tz("UTC"))
        state["today_entries"].insert(0, entry)
        state["current_intake"] += amount
        self.__commit(state)

        logger.debug("Added entry %s: %s ml", entry["id"], amount)
        return deepcopy(entry)

    def remove_entry(self, id: EntityId) -> Optional[WaterEntry]:
        """Remove an entry from today. Unknown ids are ignored and return None."""
        self.__ensure_open()
        self.check_day_rollover()

        state = deepcopy(self._state)
        for index, entry in enumerate(state["today_entries"]):
            if entry["id"] == id:
                removed = state["today_entries"].pop(index)
                break
        else:
            logger.debug("No entry %s to remove", id)
            return None

        # Bounded at zero against float drift
        state["current_intake"] = max(state["current_intake"] - removed["amount"], 0.0)
        if len(state["today_entries"]) == 0:
            state["current_intake"] = 0.0
        self.__commit(state)

        logger.debug("Removed entry %s: %s ml", removed["id"], removed["amount"])
        return removed

    def update_goal(self, new_goal: float) -> None:
        self.__ensure_open()
        new_goal = validate_positive_quantity("goal", new_goal)
        # Archive with the goal that was in effect for the finished day
        self.check_day_rollover()

        state = deepcopy(self._state)
        state["daily_goal"] = new_goal
        self.__commit(state)

        logger.debug("Daily goal set to %s ml", new_goal)

    def reset_all_data(self) -> None:
        """Clear today's entries and the whole history. The goal is kept."""
        self.__ensure_open()

        state = deepcopy(self._state)
        state["current_intake"] = 0.0
        state["today_entries"] = []
        state["historical_data"] = []
        state["last_active_date"] = self.today()
        self.__commit(state)

        logger.info("All hydration data was reset")

    def check_day_rollover(self) -> bool:
        """
        Archive the last active day if the calendar day changed.

        Returns True when the state was rolled over.
        """
        self.__ensure_open()
        today = self.today()
        if self._state["last_active_date"] == today:
            return False

        state = deepcopy(self._state)
        if state["current_intake"] > 0:
            archived: DailyData = {
                "id": generate_entity_id(),
                "date": state["last_active_date"],
                "total_intake": state["current_intake"],
                "entry_count": len(state["today_entries"]),
                "goal_met": state["current_intake"] >= state["daily_goal"],
            }
            state["historical_data"].insert(0, archived)
            logger.info(
                "Archived %s: %s ml in %s entries",
                date_to_str(archived["date"]),
                archived["total_intake"],
                archived["entry_count"],
            )

        state["current_intake"] = 0.0
        state["today_entries"] = []
        state["last_active_date"] = today

        if self._history_retention_days is not None:
            cutoff = today.subtract(days=self._history_retention_days)
            kept = [d for d in state["historical_data"] if d["date"] >= cutoff]
            if len(kept) != len(state["historical_data"]):
                logger.info(
                    "Pruned %s records older than %s",
                    len(state["historical_data"]) - len(kept),
                    date_to_str(cutoff),
                )
            state["historical_data"] = kept

        self.__commit(state)
        return True

    # ─────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────

    def __ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError("the hydration store is closed")

    def __compute_achievements(self, state: HydrationState) -> Achievements:
        return compute_achievements(
            state["historical_data"],
            state["current_intake"],
            state["daily_goal"],
            self.today(),
        )

    def __commit(self, state: HydrationState) -> None:
        self._repository.save_state(state)
        self._state = state
        self._achievements = self.__compute_achievements(state)
        self.__notify()

    def __notify(self) -> None:
        for subscription in list(self._subscriptions):
            try:
                subscription.callback(self.snapshot())
            except Exception:
                logger.exception("Hydration observer %r failed", subscription.callback)

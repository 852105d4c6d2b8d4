# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

import pendulum
import pytest

from watercheck.model.daily_data import DailyData
from watercheck.model.entity_id import generate_entity_id
from watercheck.repository.hydration import (
    HydrationPersistenceError,
    HydrationRepository,
)
from watercheck.model.hydration_state import HydrationState
from watercheck.service.hydration_store import HydrationStore


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def __call__(self) -> pendulum.DateTime:
        return self.now

    def advance(self, **kwargs: Any) -> None:
        self.now = self.now.add(**kwargs)


class FlakyRepository(HydrationRepository):
    """Repository whose writes can be switched off."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.fail_writes = False
        self.save_count = 0

    def save_state(self, state: HydrationState) -> None:
        if self.fail_writes:
            raise HydrationPersistenceError("disk full")
        self.save_count += 1
        super().save_state(state)


def make_daily_data(
    date: pendulum.Date,
    total_intake: float,
    goal_met: bool,
    entry_count: int = 1,
) -> DailyData:
    return {
        "id": generate_entity_id(),
        "date": date,
        "total_intake": total_intake,
        "entry_count": entry_count,
        "goal_met": goal_met,
    }


@pytest.fixture
def clock() -> FixedClock:
    # Midday keeps a few hours of slack on either side of the local day
    return FixedClock(pendulum.datetime(2025, 1, 10, 12, 0, 0, tz="local"))


@pytest.fixture
def today() -> pendulum.Date:
    return pendulum.Date(2025, 1, 10)


@pytest.fixture
def hydration_path(tmp_path: Path) -> Path:
    return tmp_path / "hydration.yaml"


@pytest.fixture
def repository(hydration_path: Path) -> FlakyRepository:
    return FlakyRepository(hydration_path)


@pytest.fixture
def store(repository: FlakyRepository, clock: FixedClock) -> HydrationStore:
    return HydrationStore(repository, clock=clock)


def seed_state(
    repository: HydrationRepository,
    last_active_date: pendulum.Date,
    entries: Optional[list[tuple[float, pendulum.DateTime]]] = None,
    historical_data: Optional[list[DailyData]] = None,
    daily_goal: float = 2500.0,
) -> None:
    """Write a state file directly, bypassing the store."""
    entries = entries or []
    historical_data = historical_data or []
    repository.save_state(
        {
            "last_active_date": last_active_date,
            "current_intake": float(sum(amount for amount, _ in entries)),
            "daily_goal": daily_goal,
            "today_entries": [
                {"id": generate_entity_id(), "amount": amount, "timestamp": timestamp}
                for amount, timestamp in entries
            ],
            "historical_data": list(historical_data),
        }
    )

# SPDX-License-Identifier: MIT

from watercheck.model.hydration_state import HydrationState
from watercheck.time import DISTANT_PAST

DEFAULT_DAILY_GOAL = 2500.0


def get_hydration_state_template() -> HydrationState:
    return {
        "last_active_date": DISTANT_PAST,
        "current_intake": 0.0,
        "daily_goal": DEFAULT_DAILY_GOAL,
        "today_entries": [],
        "historical_data": [],
    }

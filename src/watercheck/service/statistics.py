# SPDX-License-Identifier: MIT

import pendulum

from watercheck.model.daily_data import DailyData
from watercheck.model.entity_id import generate_entity_id
from watercheck.model.hydration_state import HydrationState
from watercheck.model.statistics import Statistics
from watercheck.model.timeframe import TIMEFRAME_DAYS, Timeframe


def get_today_daily_data(state: HydrationState, today: pendulum.Date) -> DailyData:
    """Build a transient record for the live day. It is never persisted."""
    return {
        "id": generate_entity_id(),
        "date": today,
        "total_intake": state["current_intake"],
        "entry_count": len(state["today_entries"]),
        "goal_met": state["current_intake"] >= state["daily_goal"],
    }


def get_data_for_timeframe(
    state: HydrationState,
    timeframe: Timeframe,
    today: pendulum.Date,
) -> list[DailyData]:
    cutoff = today.subtract(days=TIMEFRAME_DAYS[timeframe])

    result = [
        daily_data
        for daily_data in state["historical_data"]
        if daily_data["date"] >= cutoff
    ]

    if state["current_intake"] > 0:
        result.insert(0, get_today_daily_data(state, today))

    return result


def get_statistics(data: list[DailyData]) -> Statistics:
    if len(data) == 0:
        return {
            "average_intake": 0.0,
            "best_day_intake": 0.0,
            "goal_met_days": 0,
            "total_days": 0,
            "goal_met_percentage": 0.0,
        }

    total_intake = sum(daily_data["total_intake"] for daily_data in data)
    goal_met_days = len([daily_data for daily_data in data if daily_data["goal_met"]])
    return {
        "average_intake": total_intake / len(data),
        "best_day_intake": max(daily_data["total_intake"] for daily_data in data),
        "goal_met_days": goal_met_days,
        "total_days": len(data),
        "goal_met_percentage": goal_met_days / len(data) * 100,
    }

# SPDX-License-Identifier: MIT

import pendulum

from watercheck.model.achievement import AchievementKind, Achievements
from watercheck.model.daily_data import DailyData

STREAK_ACHIEVEMENT_THRESHOLD = 3


def get_streak(historical_data: list[DailyData]) -> int:
    """
    Count consecutive goal-met days ending at the most recent record.

    Stops at the first record that missed its goal, or at the first gap
    between two records (a missing calendar day breaks the streak even when
    both neighbours met their goal).
    """
    streak = 0
    previous_date: pendulum.Date | None = None

    for daily_data in sorted(historical_data, key=lambda d: d["date"], reverse=True):
        if not daily_data["goal_met"]:
            break
        if (
            previous_date is not None
            and previous_date.subtract(days=1) != daily_data["date"]
        ):
            break
        streak += 1
        previous_date = daily_data["date"]

    return streak


def get_best_day(historical_data: list[DailyData]) -> float:
    return max(
        (daily_data["total_intake"] for daily_data in historical_data), default=0.0
    )


def get_intake_for_date(historical_data: list[DailyData], date: pendulum.Date) -> float:
    for daily_data in historical_data:
        if daily_data["date"] == date:
            return daily_data["total_intake"]
    return 0.0


def get_achievement_kind(
    current_intake: float,
    daily_goal: float,
    yesterday_intake: float,
    streak: int,
) -> AchievementKind:
    if current_intake > yesterday_intake and current_intake > 0:
        return "beat_yesterday"
    if streak >= STREAK_ACHIEVEMENT_THRESHOLD:
        return "streak"
    if current_intake >= daily_goal:
        return "goal_achieved"
    return "none"


def compute_achievements(
    historical_data: list[DailyData],
    current_intake: float,
    daily_goal: float,
    today: pendulum.Date,
) -> Achievements:
    streak = get_streak(historical_data)
    yesterday_intake = get_intake_for_date(historical_data, today.subtract(days=1))
    return {
        "streak": streak,
        "best_day": get_best_day(historical_data),
        "yesterday_intake": yesterday_intake,
        "kind": get_achievement_kind(
            current_intake, daily_goal, yesterday_intake, streak
        ),
    }

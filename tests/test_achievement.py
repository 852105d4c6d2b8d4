# SPDX-License-Identifier: MIT

import pendulum

from conftest import make_daily_data
from watercheck.service.achievement import (
    compute_achievements,
    get_achievement_kind,
    get_best_day,
    get_streak,
)

JAN_10 = pendulum.Date(2025, 1, 10)
JAN_9 = pendulum.Date(2025, 1, 9)
JAN_8 = pendulum.Date(2025, 1, 8)
JAN_7 = pendulum.Date(2025, 1, 7)


def test_streak_stops_at_missed_goal() -> None:
    history = [
        make_daily_data(JAN_10, 2200, True),
        make_daily_data(JAN_9, 2100, True),
        make_daily_data(JAN_8, 1500, False),
    ]

    assert get_streak(history) == 2


def test_streak_stops_at_a_gap() -> None:
    history = [
        make_daily_data(JAN_10, 2200, True),
        make_daily_data(JAN_8, 2100, True),
    ]

    assert get_streak(history) == 1


def test_streak_is_zero_when_latest_day_missed() -> None:
    history = [
        make_daily_data(JAN_10, 1000, False),
        make_daily_data(JAN_9, 2100, True),
    ]

    assert get_streak(history) == 0
    assert get_streak([]) == 0


def test_streak_sorts_by_date() -> None:
    history = [
        make_daily_data(JAN_8, 2100, True),
        make_daily_data(JAN_10, 2200, True),
        make_daily_data(JAN_7, 2300, True),
        make_daily_data(JAN_9, 2000, True),
    ]

    assert get_streak(history) == 4


def test_best_day() -> None:
    history = [
        make_daily_data(JAN_10, 2200, True),
        make_daily_data(JAN_9, 3100, True),
    ]

    assert get_best_day(history) == 3100
    assert get_best_day([]) == 0


def test_achievement_priority() -> None:
    assert get_achievement_kind(1600, 2500, 1500, 5) == "beat_yesterday"
    assert get_achievement_kind(0, 2500, 0, 5) == "streak"
    assert get_achievement_kind(2600, 2500, 3000, 2) == "goal_achieved"
    assert get_achievement_kind(1000, 2500, 3000, 2) == "none"
    assert get_achievement_kind(0, 2500, 0, 0) == "none"


def test_compute_achievements_reads_yesterday_from_history() -> None:
    history = [
        make_daily_data(JAN_9, 1800, False),
        make_daily_data(JAN_8, 2600, True),
    ]

    achievements = compute_achievements(history, 1200, 2500, JAN_10)

    assert achievements == {
        "streak": 0,
        "best_day": 2600,
        "yesterday_intake": 1800,
        "kind": "none",
    }


def test_compute_achievements_without_a_record_for_yesterday() -> None:
    history = [make_daily_data(JAN_8, 2600, True)]

    achievements = compute_achievements(history, 100, 2500, JAN_10)

    assert achievements["yesterday_intake"] == 0
    assert achievements["kind"] == "beat_yesterday"

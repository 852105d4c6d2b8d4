# SPDX-License-Identifier: MIT

from typing import TypedDict


class Statistics(TypedDict):
    average_intake: float
    best_day_intake: float
    goal_met_days: int
    total_days: int
    goal_met_percentage: float

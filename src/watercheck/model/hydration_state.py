# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from watercheck.model.daily_data import DailyData
from watercheck.model.water_entry import WaterEntry


class HydrationState(TypedDict):
    last_active_date: pendulum.Date
    current_intake: float
    daily_goal: float
    today_entries: list[WaterEntry]  # most recent first
    historical_data: list[DailyData]  # most recent first

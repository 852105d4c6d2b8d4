# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from watercheck.model.entity_id import EntityId


class DailyData(TypedDict):
    id: EntityId
    date: pendulum.Date  # local calendar day
    total_intake: float  # milliliters
    entry_count: int
    goal_met: bool  # frozen with the goal in effect when archived

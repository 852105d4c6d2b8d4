# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

AchievementKind = Literal["beat_yesterday", "streak", "goal_achieved", "none"]


class Achievements(TypedDict):
    streak: int
    best_day: float
    yesterday_intake: float
    kind: AchievementKind

# SPDX-License-Identifier: MIT

from watercheck.model.progress import ProgressBand


def get_progress_ratio(current_intake: float, daily_goal: float) -> float:
    if daily_goal <= 0:
        return 0.0
    return min(current_intake / daily_goal, 1.0)


def get_progress_band(current_intake: float, daily_goal: float) -> ProgressBand:
    if current_intake >= daily_goal:
        return "complete"
    elif current_intake >= daily_goal * 0.8:
        return "almost"
    elif current_intake >= daily_goal * 0.5:
        return "halfway"
    return "starting"

# SPDX-License-Identifier: MIT

GOAL_PRESETS: dict[float, str] = {
    1500.0: "Light Activity",
    2000.0: "Moderate Activity",
    2500.0: "Active Lifestyle",
    3000.0: "Very Active",
    3500.0: "Athlete",
    4000.0: "High Performance",
}


def get_goal_description(goal: float) -> str:
    return GOAL_PRESETS.get(goal, "Custom Goal")

# SPDX-License-Identifier: MIT

from watercheck.model.achievement import Achievements
from watercheck.model.progress import ProgressBand

PROGRESS_MESSAGES: dict[ProgressBand, str] = {
    "complete": "Excellent! You've reached your goal! 🎉",
    "almost": "Almost there! Keep going! 💪",
    "halfway": "Great progress! You're halfway there! 🌊",
    "starting": "Stay hydrated! Every drop counts! 💧",
}


def progress_message(band: ProgressBand) -> str:
    return PROGRESS_MESSAGES[band]


def achievement_message(achievements: Achievements) -> str:
    kind = achievements["kind"]
    if kind == "beat_yesterday":
        return "🔥 You drank more than yesterday!"
    elif kind == "streak":
        return f"🏅 Streak: {achievements['streak']} days!"
    elif kind == "goal_achieved":
        return "🎉 Goal achieved!"
    return ""

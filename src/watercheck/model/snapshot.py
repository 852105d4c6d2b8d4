# SPDX-License-Identifier: MIT

from typing import TypedDict

from watercheck.model.achievement import Achievements
from watercheck.model.hydration_state import HydrationState


class HydrationSnapshot(TypedDict):
    state: HydrationState
    achievements: Achievements

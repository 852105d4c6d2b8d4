# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from watercheck.model.entity_id import EntityId


class WaterEntry(TypedDict):
    id: EntityId
    amount: float  # milliliters
    timestamp: pendulum.DateTime  # UTC

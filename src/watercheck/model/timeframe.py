# SPDX-License-Identifier: MIT

from typing import Literal

Timeframe = Literal["week", "month", "year"]

TIMEFRAME_DAYS: dict[Timeframe, int] = {
    "week": 7,
    "month": 30,
    "year": 365,
}

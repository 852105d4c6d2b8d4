# SPDX-License-Identifier: MIT

from typing import Literal

ProgressBand = Literal["complete", "almost", "halfway", "starting"]

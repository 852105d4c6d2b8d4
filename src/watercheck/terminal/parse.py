# SPDX-License-Identifier: MIT

import re
from typing import get_args

import typer

from watercheck.model.timeframe import Timeframe

ID_RANGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$")


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse the ids shown in a table: "3", "1,2,5", "2-4" or a mix like "1,3-5".

    Returns the ids sorted, without duplicates.
    """
    ids: set[int] = set()
    for part in (part.strip() for part in id_param.split(",")):
        if part == "":
            continue
        if part.isdecimal():
            ids.add(int(part))
            continue

        match = ID_RANGE_PATTERN.match(part)
        if match is None:
            raise typer.BadParameter(f"'{part}' is neither an id nor a range like 2-4")
        start, end = int(match[1]), int(match[2])
        if start > end:
            raise typer.BadParameter(f"range '{part}' starts after it ends")
        ids.update(range(start, end + 1))

    if len(ids) == 0:
        raise typer.BadParameter("no ids given")
    return sorted(ids)


def parse_timeframe(timeframe: str) -> Timeframe:
    """Accept week, month, year or their first letter."""
    normalized = timeframe.strip().lower()
    for valid_timeframe in get_args(Timeframe):
        if normalized in (valid_timeframe, valid_timeframe[0]):
            return valid_timeframe
    raise typer.BadParameter(
        f"Invalid timeframe: {timeframe}. Valid options: week, month, year"
    )

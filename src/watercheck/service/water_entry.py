# SPDX-License-Identifier: MIT

import math
from typing import Any

import pendulum

from watercheck.model.entity_id import generate_entity_id
from watercheck.model.water_entry import WaterEntry
from watercheck.time import datetime_to_display_local_time_str, time_ago_str


class HydrationValidationError(ValueError):
    """Raised when an amount or goal is rejected."""

    pass


def validate_positive_quantity(name: str, value: Any) -> float:
    """
    Accept finite numbers greater than zero.

    Booleans are numbers to Python but never a meaningful quantity.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise HydrationValidationError(
            f"{name} must be a number. Got: {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise HydrationValidationError(f"{name} must be finite. Got: {value}")
    if value <= 0:
        raise HydrationValidationError(f"{name} must be greater than zero. Got: {value}")
    return float(value)


def create_water_entry(amount: float, timestamp: pendulum.DateTime) -> WaterEntry:
    return {
        "id": generate_entity_id(),
        "amount": amount,
        "timestamp": timestamp,
    }


def get_entry_time_str(entry: WaterEntry) -> str:
    return datetime_to_display_local_time_str(entry["timestamp"])


def get_entry_time_ago_str(entry: WaterEntry, now: pendulum.DateTime) -> str:
    return time_ago_str(entry["timestamp"], now)


def validate_retention_days(value: Any) -> int:
    """History is kept for at least the day that was just archived."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise HydrationValidationError(
            f"history retention must be a whole number of days. Got: {value!r}"
        )
    if value < 1:
        raise HydrationValidationError(
            f"history retention must be at least one day. Got: {value}"
        )
    return value

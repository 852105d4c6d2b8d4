# SPDX-License-Identifier: MIT

import uuid
from typing import Any

# uuid4 string identifying an entry or a daily record
type EntityId = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def entity_id_from_value(value: Any) -> EntityId:
    if not isinstance(value, str) or value.strip() == "":
        raise ValueError(f"id must be a non-empty string, got {value!r}")
    return value

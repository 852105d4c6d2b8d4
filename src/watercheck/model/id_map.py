# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from watercheck.model.entity_id import EntityId

# Tables that show short ids
EntityType = Literal["entries", "history"]


class IdMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]


class IdMap(TypedDict):
    """
    Short integer ids for the rows of the last view, per table.

    The integers are what users type on the command line, the uuids are what
    the store understands:

    id_map["entries"]["synthetic_to_real"][2] -> "6f1c...-..."
    """

    entries: IdMapping
    history: IdMapping

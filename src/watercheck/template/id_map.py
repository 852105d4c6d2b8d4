# SPDX-License-Identifier: MIT

from watercheck.model.id_map import IdMap, IdMapping


def get_id_mapping_template() -> IdMapping:
    return {"synthetic_to_real": {}, "real_to_synthetic": {}}


def get_id_map_template() -> IdMap:
    return {
        "entries": get_id_mapping_template(),
        "history": get_id_mapping_template(),
    }

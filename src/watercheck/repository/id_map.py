# SPDX-License-Identifier: MIT

import logging
from typing import Optional, get_args

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from watercheck import configuration
from watercheck.model.entity_id import EntityId
from watercheck.model.id_map import EntityType, IdMap, IdMapping
from watercheck.template.id_map import get_id_map_template

logger = logging.getLogger(__name__)

ENTITY_TYPES: tuple[EntityType, ...] = get_args(EntityType)


class IdMapRepository:
    """Short ids of the rows shown by the last view, kept between commands."""

    def __init__(self) -> None:
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self._id_map = self.__load_data()
        return self._id_map

    def __load_data(self) -> IdMap:
        path = configuration.DATA_ID_MAP_PATH
        if not path.is_file():
            return get_id_map_template()
        try:
            id_map = load(path.read_text(), Loader=Loader)
        except YAMLError as e:
            logger.warning("Could not read %s, starting with no ids: %s", path, e)
            return get_id_map_template()
        if not isinstance(id_map, dict):
            return get_id_map_template()
        return id_map  # type: ignore[return-value]

    def flush(self) -> None:
        if self._id_map is not None and self.is_dirty:
            configuration.DATA_ID_MAP_PATH.write_text(dump(self._id_map, Dumper=Dumper))
            self.is_dirty = False

    def clear_ids(self) -> None:
        self.is_dirty = True
        self._id_map = get_id_map_template()

    def associate_id(self, entity_type: EntityType, entity_id: EntityId) -> int:
        """Short id for entity_id, handing out the next integer the first time."""
        mapping = self.__mapping(entity_type)
        if entity_id in mapping["real_to_synthetic"]:
            return mapping["real_to_synthetic"][entity_id]

        self.is_dirty = True
        synthetic_id = len(mapping["real_to_synthetic"]) + 1
        mapping["real_to_synthetic"][entity_id] = synthetic_id
        mapping["synthetic_to_real"][synthetic_id] = entity_id
        return synthetic_id

    def get_real_id(
        self, entity_type: EntityType, synthetic_id: int
    ) -> Optional[EntityId]:
        """None when no view showed synthetic_id."""
        return self.__mapping(entity_type)["synthetic_to_real"].get(synthetic_id)

    def __mapping(self, entity_type: EntityType) -> IdMapping:
        if entity_type not in ENTITY_TYPES:
            raise TypeError(f"entity type must be one of {ENTITY_TYPES}, got {entity_type!r}")
        return self.id_map[entity_type]


ID_MAP_REPO = IdMapRepository()

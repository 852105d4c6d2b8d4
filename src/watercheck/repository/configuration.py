# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Callable, Optional, TypedDict

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from watercheck import configuration
from watercheck.logger import validate_log_level
from watercheck.service.water_entry import (
    validate_positive_quantity,
    validate_retention_days,
)

logger = logging.getLogger(__name__)


class ConfigurationUpdate(TypedDict, total=False):
    data_path: Optional[str]
    show_header: bool
    clear_ids_on_view: bool
    default_amount: float
    quick_add_amounts: list[float]
    history_retention_days: Optional[int]
    log_level: str


def _convert_optional_str(name: str, value: Any) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{name} must be a path. Got: {value!r}")
    return value


def _convert_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false. Got: {value!r}")
    return value


def _convert_amounts(name: str, value: Any) -> list[float]:
    if not isinstance(value, list) or len(value) == 0:
        raise ValueError(f"{name} must be a non-empty list. Got: {value!r}")
    return [validate_positive_quantity(name, amount) for amount in value]


def _convert_optional_retention(name: str, value: Any) -> Optional[int]:
    return None if value is None else validate_retention_days(value)


# A stored value failing its check is replaced by the default
SETTING_CONVERTERS: dict[str, Callable[[str, Any], Any]] = {
    "data_path": _convert_optional_str,
    "show_header": _convert_bool,
    "clear_ids_on_view": _convert_bool,
    "default_amount": validate_positive_quantity,
    "quick_add_amounts": _convert_amounts,
    "history_retention_days": _convert_optional_retention,
    "log_level": lambda name, value: validate_log_level(value),
}


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self._config = self.__load_data()
        return self._config

    def __load_data(self) -> configuration.Configuration:
        # Settings missing from an older config.yaml get their defaults
        config = configuration.get_default_configuration()
        stored = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if not isinstance(stored, dict):
            return config

        for key, convert in SETTING_CONVERTERS.items():
            if key not in stored:
                continue
            try:
                config[key] = convert(key, stored[key])  # type: ignore[literal-required]
            except ValueError as e:
                logger.warning(
                    "Ignoring %s in %s, using %r: %s",
                    key,
                    configuration.APP_CONFIG_PATH,
                    config[key],  # type: ignore[literal-required]
                    e,
                )
        return config

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            configuration.APP_CONFIG_PATH.write_text(
                dump(self._config, Dumper=Dumper, sort_keys=False)
            )
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(self, changes: ConfigurationUpdate) -> None:
        """Apply changes and mark the file for writing at exit."""
        if len(changes) == 0:
            return
        self.config.update(changes)
        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()

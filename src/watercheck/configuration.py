# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "watercheck"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

HYDRATION_FILE_NAME = "hydration.yaml"
ID_MAP_FILE_NAME = "id_map.yaml"

# Moved by load_data_path_configuration() when config.yaml sets data_path
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_HYDRATION_PATH: Path = DATA_PATH / HYDRATION_FILE_NAME
DATA_ID_MAP_PATH: Path = DATA_PATH / ID_MAP_FILE_NAME


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    clear_ids_on_view: bool
    default_amount: float
    quick_add_amounts: list[float]
    history_retention_days: Optional[int]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "clear_ids_on_view": True,
        "default_amount": 250.0,
        "quick_add_amounts": [100.0, 150.0, 200.0, 250.0, 300.0, 350.0, 400.0, 500.0],
        "history_retention_days": None,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_HYDRATION_PATH, DATA_ID_MAP_PATH

    DATA_PATH = data_path
    DATA_HYDRATION_PATH = data_path / HYDRATION_FILE_NAME
    DATA_ID_MAP_PATH = data_path / ID_MAP_FILE_NAME


def load_data_path_configuration() -> None:
    """Point the data paths at the configured data_path, when one is set."""
    if not APP_CONFIG_PATH.is_file():
        return

    stored = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if isinstance(stored, dict) and isinstance(stored.get("data_path"), str):
        set_data_path(Path(stored["data_path"]).expanduser())

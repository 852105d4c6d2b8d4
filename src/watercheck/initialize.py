# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from watercheck import configuration
from watercheck.id_map import set_clear_ids_on_view
from watercheck.logger import configure_logging
from watercheck.repository.configuration import CONFIGURATION_REPO
from watercheck.view.state import set_show_header


def initialize() -> None:
    """Create the config and data directories, then apply the configuration."""
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.write_text(
            dump(
                configuration.get_default_configuration(),
                Dumper=Dumper,
                sort_keys=False,
            )
        )

    # hydration.yaml and id_map.yaml are written on first use
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    set_show_header(config["show_header"])
    set_clear_ids_on_view(config["clear_ids_on_view"])

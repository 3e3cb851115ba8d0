# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from daybook import configuration
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_dirs()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    view_state.set_show_calendar_chips(config["show_calendar_chips"])


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_dirs() -> None:
    # One YAML file per entity
    configuration.DATA_PLANNER_EVENTS_DIR.mkdir(parents=True, exist_ok=True)
    configuration.DATA_CHECKLIST_ITEMS_DIR.mkdir(parents=True, exist_ok=True)

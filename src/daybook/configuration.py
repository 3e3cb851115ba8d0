# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "daybook"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_PLANNER_EVENTS_DIR: Path = DATA_PATH / "planner_events"
DATA_CHECKLIST_ITEMS_DIR: Path = DATA_PATH / "checklist_items"


class Configuration(TypedDict):
    show_header: bool
    show_calendar_chips: bool
    ical_sync_weeks: int
    ics_paths: Optional[list[str]]
    data_path: Optional[str]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "show_calendar_chips": True,
        "ical_sync_weeks": 4,
        "ics_paths": None,
        "data_path": None,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_PLANNER_EVENTS_DIR, DATA_CHECKLIST_ITEMS_DIR

    DATA_PATH = data_path
    DATA_PLANNER_EVENTS_DIR = DATA_PATH / "planner_events"
    DATA_CHECKLIST_ITEMS_DIR = DATA_PATH / "checklist_items"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))

# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daybook import configuration


class ConfigurationRepository:
    """
    The user's config.yaml.

    The file is hand-editable, so reading it fills in settings it lacks and
    accepts a single ics_paths string in place of a list.
    """

    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self._config = self.__read_config()
        return self._config

    def __read_config(self) -> configuration.Configuration:
        config = configuration.get_default_configuration()
        if not configuration.APP_CONFIG_PATH.is_file():
            return config

        stored: Optional[dict[str, Any]] = load(
            configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
        )
        if stored is None:
            return config
        if not isinstance(stored, dict):
            raise ValueError(
                f"{configuration.APP_CONFIG_PATH} must hold a mapping of settings"
            )

        merged = cast(configuration.Configuration, {**config, **stored})
        if isinstance(merged["ics_paths"], str):
            merged["ics_paths"] = [merged["ics_paths"]]
        if not isinstance(merged["ical_sync_weeks"], int) or merged["ical_sync_weeks"] < 1:
            raise ValueError(
                f"ical_sync_weeks in {configuration.APP_CONFIG_PATH} must be a positive"
                f" number, got {merged['ical_sync_weeks']!r}"
            )
        return merged

    def flush(self) -> None:
        if self._config is None or not self.is_dirty:
            return

        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(self._config), Dumper=Dumper)
        )
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        show_calendar_chips: Optional[bool] = None,
        ical_sync_weeks: Optional[int] = None,
        ics_paths: Optional[list[str]] = None,
        remove_ics_paths: bool = False,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        """
        Change the given settings; None leaves a setting as it is.

        The remove_* flags reset a setting to None and win over a new value
        passed in the same call.
        """
        changes: dict[str, Any] = {
            "show_header": show_header,
            "show_calendar_chips": show_calendar_chips,
            "ical_sync_weeks": ical_sync_weeks,
            "ics_paths": ics_paths,
            "data_path": data_path,
        }
        for key, value in changes.items():
            if value is not None:
                self.config[key] = value  # type: ignore[literal-required]

        if remove_ics_paths:
            self.config["ics_paths"] = None
        if remove_data_path:
            self.config["data_path"] = None

        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()

# SPDX-License-Identifier: MIT

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from daybook import configuration
from daybook.repository.checklist_item import ChecklistItemRepository
from daybook.repository.configuration import ConfigurationRepository
from daybook.repository.planner_event import PlannerEventRepository

PLANNER_EVENT_REPO_TARGETS = [
    "daybook.repository.planner_event.PLANNER_EVENT_REPO",
    "daybook.service.planner.PLANNER_EVENT_REPO",
    "daybook.service.calendar.PLANNER_EVENT_REPO",
]
CHECKLIST_ITEM_REPO_TARGETS = [
    "daybook.repository.checklist_item.CHECKLIST_ITEM_REPO",
    "daybook.service.checklist.CHECKLIST_ITEM_REPO",
]
CONFIGURATION_REPO_TARGETS = [
    "daybook.repository.configuration.CONFIGURATION_REPO",
    "daybook.terminal.planner.CONFIGURATION_REPO",
    "daybook.terminal.calendar.CONFIGURATION_REPO",
    "daybook.terminal.configuration.CONFIGURATION_REPO",
]


class IsolatedDataTestCase(unittest.TestCase):
    """Points config and data files at a temporary directory with fresh repositories."""

    def setUp(self) -> None:
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        self.data_path = Path(temp_dir.name)

        self.__patch_attribute(configuration, "DATA_PATH", self.data_path)
        self.__patch_attribute(
            configuration,
            "DATA_PLANNER_EVENTS_DIR",
            self.data_path / "planner_events",
        )
        self.__patch_attribute(
            configuration,
            "DATA_CHECKLIST_ITEMS_DIR",
            self.data_path / "checklist_items",
        )
        self.__patch_attribute(
            configuration, "APP_CONFIG_PATH", self.data_path / "config.yaml"
        )

        self.planner_event_repo = PlannerEventRepository()
        self.checklist_item_repo = ChecklistItemRepository()
        self.configuration_repo = ConfigurationRepository()
        for target in PLANNER_EVENT_REPO_TARGETS:
            self.__patch(target, self.planner_event_repo)
        for target in CHECKLIST_ITEM_REPO_TARGETS:
            self.__patch(target, self.checklist_item_repo)
        for target in CONFIGURATION_REPO_TARGETS:
            self.__patch(target, self.configuration_repo)

    def __patch(self, target: str, value: object) -> None:
        patcher = mock.patch(target, value)
        patcher.start()
        self.addCleanup(patcher.stop)

    def __patch_attribute(self, owner: object, name: str, value: object) -> None:
        patcher = mock.patch.object(owner, name, value)
        patcher.start()
        self.addCleanup(patcher.stop)

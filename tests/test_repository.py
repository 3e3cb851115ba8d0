# SPDX-License-Identifier: MIT

import unittest

from support import IsolatedDataTestCase

from daybook import configuration
from daybook.repository.checklist_item import ChecklistItemRepository
from daybook.repository.configuration import ConfigurationRepository
from daybook.repository.planner_event import PlannerEventRepository
from daybook.template.checklist_item import get_checklist_item_template
from daybook.template.planner_event import get_planner_event_template


class TestPlannerEventRepository(IsolatedDataTestCase):
    def test_flush_writes_one_file_per_event_and_reloads(self) -> None:
        event = get_planner_event_template("2025-12-03", 8.0)
        event["title"] = "Dinner"
        event["time_config"] = {
            "start_iso": "2025-12-03T20:00:00Z",
            "calendar_config": None,
        }
        id = self.planner_event_repo.save_new_event(event)
        self.assertTrue(self.planner_event_repo.flush())

        self.assertTrue((configuration.DATA_PLANNER_EVENTS_DIR / f"{id}.yaml").is_file())

        reloaded = PlannerEventRepository().get_event(id)
        self.assertEqual(reloaded["title"], "Dinner")
        self.assertEqual(reloaded["datestamp"], "2025-12-03")
        self.assertEqual(reloaded["sort_index"], 8.0)
        self.assertEqual(reloaded["time_config"]["start_iso"], "2025-12-03T20:00:00Z")
        self.assertEqual(reloaded["created"], event["created"])

    def test_flush_without_changes_is_a_no_op(self) -> None:
        self.assertFalse(self.planner_event_repo.flush())

    def test_events_for_datestamp_are_sorted_and_filtered(self) -> None:
        for title, sort_index, datestamp in (
            ("late", 24.0, "2025-12-03"),
            ("early", 8.0, "2025-12-03"),
            ("other day", 4.0, "2025-12-04"),
        ):
            event = get_planner_event_template(datestamp, sort_index)
            event["title"] = title
            self.planner_event_repo.save_new_event(event)

        events = self.planner_event_repo.get_events_for_datestamp("2025-12-03")
        self.assertEqual([event["title"] for event in events], ["early", "late"])

        self.planner_event_repo.modify_event(events[0]["id"], is_checked=True)
        unchecked = self.planner_event_repo.get_events_for_datestamp(
            "2025-12-03", is_checked=False
        )
        self.assertEqual([event["title"] for event in unchecked], ["late"])

    def test_remove_time_config(self) -> None:
        event = get_planner_event_template("2025-12-03", 8.0)
        event["time_config"] = {
            "start_iso": "2025-12-03T20:00:00Z",
            "calendar_config": None,
        }
        id = self.planner_event_repo.save_new_event(event)
        self.planner_event_repo.modify_event(id, remove_time_config=True)
        self.assertIsNone(self.planner_event_repo.get_event(id)["time_config"])

    def test_delete_removes_file(self) -> None:
        id = self.planner_event_repo.save_new_event(
            get_planner_event_template("2025-12-03", 8.0)
        )
        self.planner_event_repo.flush()
        self.planner_event_repo.delete_event(id)
        self.planner_event_repo.flush()

        self.assertFalse((configuration.DATA_PLANNER_EVENTS_DIR / f"{id}.yaml").exists())
        self.assertEqual(PlannerEventRepository().get_all_events(), [])

    def test_returned_events_are_copies(self) -> None:
        id = self.planner_event_repo.save_new_event(
            get_planner_event_template("2025-12-03", 8.0)
        )
        copy = self.planner_event_repo.get_event(id)
        copy["sort_index"] = 99.0
        self.assertEqual(self.planner_event_repo.get_event(id)["sort_index"], 8.0)


class TestChecklistItemRepository(IsolatedDataTestCase):
    def test_delete_cascades_to_descendants(self) -> None:
        folder_id = self.checklist_item_repo.save_new_item(
            get_checklist_item_template(8.0, None, "folder")
        )
        checklist_id = self.checklist_item_repo.save_new_item(
            get_checklist_item_template(8.0, folder_id, "checklist")
        )
        item_id = self.checklist_item_repo.save_new_item(
            get_checklist_item_template(8.0, checklist_id, "item")
        )
        sibling_id = self.checklist_item_repo.save_new_item(
            get_checklist_item_template(16.0, None, "checklist")
        )
        self.checklist_item_repo.flush()

        deleted_ids = self.checklist_item_repo.delete_item(folder_id)
        self.checklist_item_repo.flush()

        self.assertEqual(set(deleted_ids), {folder_id, checklist_id, item_id})
        remaining = ChecklistItemRepository().get_all_items()
        self.assertEqual([item["id"] for item in remaining], [sibling_id])

    def test_children_sorted_by_sort_index(self) -> None:
        for sort_index in (16.0, 4.0, 8.0):
            item = get_checklist_item_template(sort_index)
            item["title"] = str(sort_index)
            self.checklist_item_repo.save_new_item(item)

        children = self.checklist_item_repo.get_children(None)
        self.assertEqual([child["sort_index"] for child in children], [4.0, 8.0, 16.0])


class TestConfigurationRepository(IsolatedDataTestCase):
    def test_defaults_without_a_config_file(self) -> None:
        config = self.configuration_repo.get_config()
        self.assertTrue(config["show_header"])
        self.assertEqual(config["ical_sync_weeks"], 4)
        self.assertIsNone(config["ics_paths"])

    def test_missing_keys_are_filled_in(self) -> None:
        configuration.APP_CONFIG_PATH.write_text("show_header: false\n")
        config = ConfigurationRepository().get_config()
        self.assertFalse(config["show_header"])
        self.assertTrue(config["show_calendar_chips"])
        self.assertEqual(config["ical_sync_weeks"], 4)

    def test_update_and_flush(self) -> None:
        self.configuration_repo.update_config(
            ics_paths=["/tmp/work.ics"], ical_sync_weeks=2
        )
        self.configuration_repo.flush()

        config = ConfigurationRepository().get_config()
        self.assertEqual(config["ics_paths"], ["/tmp/work.ics"])
        self.assertEqual(config["ical_sync_weeks"], 2)

        self.configuration_repo.update_config(remove_ics_paths=True)
        self.configuration_repo.flush()
        self.assertIsNone(ConfigurationRepository().get_config()["ics_paths"])

    def test_single_ics_path_string_becomes_a_list(self) -> None:
        configuration.APP_CONFIG_PATH.write_text("ics_paths: /tmp/work.ics\n")
        config = ConfigurationRepository().get_config()
        self.assertEqual(config["ics_paths"], ["/tmp/work.ics"])

    def test_invalid_sync_weeks_raises(self) -> None:
        configuration.APP_CONFIG_PATH.write_text("ical_sync_weeks: 0\n")
        with self.assertRaises(ValueError):
            ConfigurationRepository().get_config()


if __name__ == "__main__":
    unittest.main()

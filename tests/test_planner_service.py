# SPDX-License-Identifier: MIT

import unittest

from support import IsolatedDataTestCase

from daybook.service import planner
from daybook.time import iso_to_time_values, time_24h_to_iso

DATESTAMP = "2025-12-03"


class TestPlannerService(IsolatedDataTestCase):
    def titles(self) -> list[str]:
        return [event["title"] for event in planner.get_unchecked_events(DATESTAMP)]

    def test_create_appends_on_multiples_of_eight(self) -> None:
        first = planner.create_event(DATESTAMP, "Laundry")
        second = planner.create_event(DATESTAMP, "Groceries")

        self.assertEqual(first["sort_index"], 8.0)
        self.assertEqual(second["sort_index"], 16.0)
        self.assertEqual(self.titles(), ["Laundry", "Groceries"])

    def test_create_at_index(self) -> None:
        planner.create_event(DATESTAMP, "Laundry")
        planner.create_event(DATESTAMP, "Groceries")
        planner.create_event(DATESTAMP, "Call mom", 1)

        self.assertEqual(self.titles(), ["Laundry", "Call mom", "Groceries"])

    def test_time_in_title_becomes_event_time(self) -> None:
        event = planner.create_event(DATESTAMP, "Dinner 8pm")

        self.assertEqual(event["title"], "Dinner")
        self.assertEqual(
            event["time_config"]["start_iso"], time_24h_to_iso("20:00", DATESTAMP)
        )
        self.assertEqual(
            iso_to_time_values(event["time_config"]["start_iso"]), ("8:00", "PM")
        )

    def test_created_timed_event_moves_into_time_order(self) -> None:
        planner.create_event(DATESTAMP, "Dinner 8pm")
        standup = planner.create_event(DATESTAMP, "Standup 9am")

        self.assertEqual(standup["sort_index"], 4.0)
        self.assertEqual(self.titles(), ["Standup", "Dinner"])

    def test_untimed_events_keep_their_place(self) -> None:
        planner.create_event(DATESTAMP, "Dinner 8pm")
        planner.create_event(DATESTAMP, "Laundry")

        self.assertEqual(self.titles(), ["Dinner", "Laundry"])

    def test_move_reconciles_timed_event(self) -> None:
        planner.create_event(DATESTAMP, "Standup 9am")
        planner.create_event(DATESTAMP, "Laundry")
        planner.create_event(DATESTAMP, "Dinner 8pm")

        moved = planner.move_event(DATESTAMP, 2, 0)

        self.assertEqual(moved["sort_index"], 12.0)
        self.assertEqual(self.titles(), ["Standup", "Dinner", "Laundry"])

    def test_move_untimed_event_anywhere(self) -> None:
        planner.create_event(DATESTAMP, "Standup 9am")
        planner.create_event(DATESTAMP, "Dinner 8pm")
        planner.create_event(DATESTAMP, "Laundry")

        moved = planner.move_event(DATESTAMP, 2, 0)

        self.assertEqual(moved["sort_index"], 4.0)
        self.assertEqual(self.titles(), ["Laundry", "Standup", "Dinner"])

    def test_move_to_same_position_changes_nothing(self) -> None:
        planner.create_event(DATESTAMP, "Laundry")
        moved = planner.move_event(DATESTAMP, 0, 0)
        self.assertEqual(moved["sort_index"], 8.0)

    def test_move_missing_position_raises(self) -> None:
        planner.create_event(DATESTAMP, "Laundry")
        with self.assertRaises(ValueError):
            planner.move_event(DATESTAMP, 3, 0)

    def test_rename_extracts_time_once(self) -> None:
        planner.create_event(DATESTAMP, "Dinner 8pm")
        gym = planner.create_event(DATESTAMP, "Gym")

        self.assertTrue(planner.change_event_title(gym["id"], "Gym 6am"))
        self.assertEqual(self.titles(), ["Gym", "Dinner"])

        # Already timed, the title is kept as typed
        self.assertFalse(planner.change_event_title(gym["id"], "Gym 7am"))
        self.assertEqual(self.titles(), ["Gym 7am", "Dinner"])

    def test_set_time_repositions(self) -> None:
        standup = planner.create_event(DATESTAMP, "Standup")
        planner.create_event(DATESTAMP, "Dinner 8pm")

        self.assertTrue(planner.set_event_time(standup["id"], "21:00"))
        self.assertEqual(self.titles(), ["Dinner", "Standup"])
        self.assertEqual(
            self.planner_event_repo.get_event(standup["id"])["sort_index"], 24.0
        )

    def test_set_invalid_time_raises(self) -> None:
        event = planner.create_event(DATESTAMP, "Standup")
        with self.assertRaises(ValueError):
            planner.set_event_time(event["id"], "soon")

    def test_clear_time_keeps_position(self) -> None:
        planner.create_event(DATESTAMP, "Standup 9am")
        dinner = planner.create_event(DATESTAMP, "Dinner 8pm")

        planner.clear_event_time(dinner["id"])

        cleared = self.planner_event_repo.get_event(dinner["id"])
        self.assertIsNone(cleared["time_config"])
        self.assertEqual(cleared["sort_index"], 16.0)

    def test_checked_events_are_not_reconciled_until_unchecked(self) -> None:
        breakfast = planner.create_event(DATESTAMP, "Breakfast")
        planner.create_event(DATESTAMP, "Dinner 8pm")
        planner.check_event(breakfast["id"])

        self.assertFalse(planner.set_event_time(breakfast["id"], "21:00"))
        self.assertEqual(
            [event["title"] for event in planner.get_checked_events(DATESTAMP)],
            ["Breakfast"],
        )

        self.assertTrue(planner.uncheck_event(breakfast["id"]))
        self.assertEqual(self.titles(), ["Dinner", "Breakfast"])

    def test_delete_event(self) -> None:
        event = planner.create_event(DATESTAMP, "Laundry")
        planner.delete_event(event["id"])
        self.assertEqual(self.titles(), [])


if __name__ == "__main__":
    unittest.main()

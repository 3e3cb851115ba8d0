# SPDX-License-Identifier: MIT

import unittest

from support import IsolatedDataTestCase

from daybook.service import checklist


class TestChecklistContainment(IsolatedDataTestCase):
    def test_allowed_nesting(self) -> None:
        folder = checklist.create_item(None, "Home", "folder")
        inner = checklist.create_item(folder["id"], "Kitchen", "folder")
        packing = checklist.create_item(inner["id"], "Packing", "checklist", "cyan")
        socks = checklist.create_item(packing["id"], "Socks", "item")

        self.assertEqual(socks["parent_id"], packing["id"])
        self.assertEqual(packing["color"], "cyan")

    def test_items_only_inside_checklists(self) -> None:
        folder = checklist.create_item(None, "Home", "folder")
        with self.assertRaises(ValueError):
            checklist.create_item(None, "Socks", "item")
        with self.assertRaises(ValueError):
            checklist.create_item(folder["id"], "Socks", "item")

    def test_nothing_inside_items_or_folders_inside_checklists(self) -> None:
        packing = checklist.create_item(None, "Packing")
        socks = checklist.create_item(packing["id"], "Socks", "item")
        with self.assertRaises(ValueError):
            checklist.create_item(socks["id"], "Left sock", "item")
        with self.assertRaises(ValueError):
            checklist.create_item(packing["id"], "Clothes", "folder")

    def test_unknown_type_and_color(self) -> None:
        with self.assertRaises(ValueError):
            checklist.create_item(None, "Packing", "list")
        with self.assertRaises(ValueError):
            checklist.create_item(None, "Packing", "checklist", "mauve")


class TestChecklistOrdering(IsolatedDataTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.packing = checklist.create_item(None, "Packing")
        for title in ("Socks", "Shirts", "Charger"):
            checklist.create_item(self.packing["id"], title, "item")

    def child_titles(self) -> list[str]:
        return [item["title"] for item in checklist.get_children(self.packing["id"])]

    def test_move_item(self) -> None:
        moved = checklist.move_item(self.packing["id"], 2, 0)

        self.assertEqual(moved["sort_index"], 4.0)
        self.assertEqual(self.child_titles(), ["Charger", "Socks", "Shirts"])

    def test_move_missing_position_raises(self) -> None:
        with self.assertRaises(ValueError):
            checklist.move_item(self.packing["id"], 5, 0)

    def test_checked_items_listed_last(self) -> None:
        socks = checklist.resolve_path([0, 0])
        checklist.check_item(socks["id"])
        self.assertEqual(self.child_titles(), ["Shirts", "Charger", "Socks"])

        checklist.uncheck_item(socks["id"])
        self.assertEqual(self.child_titles(), ["Socks", "Shirts", "Charger"])

    def test_insert_at_index(self) -> None:
        checklist.create_item(self.packing["id"], "Passport", "item", index=1)
        self.assertEqual(
            self.child_titles(), ["Socks", "Passport", "Shirts", "Charger"]
        )

    def test_resolve_path(self) -> None:
        self.assertEqual(checklist.resolve_path([0])["title"], "Packing")
        self.assertEqual(checklist.resolve_path([0, 1])["title"], "Shirts")

        with self.assertRaises(ValueError):
            checklist.resolve_path([0, 3])
        with self.assertRaises(ValueError):
            checklist.resolve_path([1])
        with self.assertRaises(ValueError):
            checklist.resolve_path([])

    def test_get_tree(self) -> None:
        tree = checklist.get_tree()

        self.assertEqual(len(tree), 1)
        self.assertEqual(tree[0]["item"]["title"], "Packing")
        self.assertEqual(
            [node["item"]["title"] for node in tree[0]["children"]],
            ["Socks", "Shirts", "Charger"],
        )

    def test_rename_and_recolor(self) -> None:
        checklist.rename_item(self.packing["id"], "Trip")
        checklist.recolor_item(self.packing["id"], "green")

        item = self.checklist_item_repo.get_item(self.packing["id"])
        self.assertEqual(item["title"], "Trip")
        self.assertEqual(item["color"], "green")

        with self.assertRaises(ValueError):
            checklist.recolor_item(self.packing["id"], "mauve")

    def test_delete_checklist_removes_items(self) -> None:
        deleted_ids = checklist.delete_item(self.packing["id"])

        self.assertEqual(len(deleted_ids), 4)
        self.assertEqual(checklist.get_tree(), [])


if __name__ == "__main__":
    unittest.main()

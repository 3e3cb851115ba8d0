# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daybook import configuration, time
from daybook.model.checklist_item import (
    ChecklistItem,
    ChecklistItemColor,
)
from daybook.model.entity_id import ItemId, generate_item_id
from daybook.order.sort_index import sort_by_sort_index


class ChecklistItemRepository:
    def __init__(self) -> None:
        self._items: Optional[list[ChecklistItem]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def items(self) -> list[ChecklistItem]:
        if self._items is None:
            self.__load_data()
        if self._items is None:
            raise ValueError()
        return self._items

    def __load_data(self) -> None:
        self._items = []
        if not configuration.DATA_CHECKLIST_ITEMS_DIR.is_dir():
            return
        for file_path in configuration.DATA_CHECKLIST_ITEMS_DIR.iterdir():
            if file_path.suffix != ".yaml":
                continue
            raw_item = load(file_path.read_text(), Loader=Loader)
            if raw_item is not None:
                self._items.append(self.__convert_item_for_deserialization(raw_item))

    def __save_data(self) -> None:
        configuration.DATA_CHECKLIST_ITEMS_DIR.mkdir(parents=True, exist_ok=True)

        for item in self.items:
            if item["id"] in self._dirty_ids:
                serializable_item = self.__convert_item_for_serialization(
                    deepcopy(item)
                )
                file_path = configuration.DATA_CHECKLIST_ITEMS_DIR / f"{item['id']}.yaml"
                file_path.write_text(dump(serializable_item, Dumper=Dumper))

        for item_id in self._deleted_ids:
            file_path = configuration.DATA_CHECKLIST_ITEMS_DIR / f"{item_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._items is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_item_for_serialization(self, item: ChecklistItem) -> dict[str, Any]:
        serializable_item = cast(dict[str, Any], item)
        serializable_item["created"] = time.datetime_to_iso_str(
            serializable_item["created"]
        )
        serializable_item["updated"] = time.datetime_to_iso_str(
            serializable_item["updated"]
        )
        return serializable_item

    def __convert_item_for_deserialization(self, item: dict[str, Any]) -> ChecklistItem:
        deserializable_item = item
        deserializable_item["created"] = time.datetime_from_str(
            deserializable_item["created"]
        )
        deserializable_item["updated"] = time.datetime_from_str(
            deserializable_item["updated"]
        )
        deserializable_item["sort_index"] = float(deserializable_item["sort_index"])
        return cast(ChecklistItem, deserializable_item)

    def __find(self, id: ItemId) -> ChecklistItem:
        return [item for item in self.items if item["id"] == id][0]

    def save_new_item(self, item: ChecklistItem) -> ItemId:
        self.is_dirty = True

        item["id"] = generate_item_id()
        self.items.append(item)
        self._dirty_ids.add(item["id"])

        return item["id"]

    def modify_item(
        self,
        id: ItemId,
        title: Optional[str] = None,
        is_checked: Optional[bool] = None,
        sort_index: Optional[float] = None,
        color: Optional[ChecklistItemColor] = None,
    ) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        item = self.__find(id)
        item["updated"] = time.now_utc()
        if title is not None:
            item["title"] = title
        if is_checked is not None:
            item["is_checked"] = is_checked
        if sort_index is not None:
            item["sort_index"] = sort_index
        if color is not None:
            item["color"] = color

    def delete_item(self, id: ItemId) -> list[ItemId]:
        """Delete an item and everything nested under it. Returns the deleted ids."""
        self.is_dirty = True

        deleted_ids: list[ItemId] = []
        pending: list[ItemId] = [id]
        while pending:
            current_id = pending.pop()
            pending.extend(
                cast(ItemId, child["id"])
                for child in self.items
                if child["parent_id"] == current_id
            )
            item = self.__find(current_id)
            self.items.remove(item)
            self._dirty_ids.discard(current_id)
            self._deleted_ids.add(current_id)
            deleted_ids.append(current_id)

        return deleted_ids

    def get_all_items(self) -> list[ChecklistItem]:
        return deepcopy(self.items)

    def get_item(self, id: ItemId) -> ChecklistItem:
        return deepcopy(self.__find(id))

    def get_children(
        self, parent_id: Optional[ItemId], is_checked: Optional[bool] = None
    ) -> list[ChecklistItem]:
        """Direct children of parent_id (None for the root), ascending by sort_index."""
        children = [
            item
            for item in self.items
            if item["parent_id"] == parent_id
            and (is_checked is None or item["is_checked"] == is_checked)
        ]
        return deepcopy(sort_by_sort_index(children))


CHECKLIST_ITEM_REPO = ChecklistItemRepository()

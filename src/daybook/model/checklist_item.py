# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

from daybook.model.entity_id import ItemId
from daybook.model.list_item import ListItem

ChecklistItemType = Literal["folder", "checklist", "item"]

ChecklistItemColor = Literal[
    "red",
    "orange",
    "yellow",
    "green",
    "cyan",
    "indigo",
    "purple",
    "brown",
    "label",
]

CHECKLIST_ITEM_TYPES: tuple[str, ...] = get_args(ChecklistItemType)
CHECKLIST_ITEM_COLORS: tuple[str, ...] = get_args(ChecklistItemColor)


class ChecklistItem(ListItem):
    item_type: ChecklistItemType
    color: ChecklistItemColor
    parent_id: Optional[ItemId]


class ChecklistNode(TypedDict):
    item: ChecklistItem
    children: list["ChecklistNode"]

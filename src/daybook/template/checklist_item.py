# SPDX-License-Identifier: MIT

from typing import Optional

from daybook.model.checklist_item import (
    ChecklistItem,
    ChecklistItemColor,
    ChecklistItemType,
)
from daybook.model.entity_id import ItemId
from daybook.model.entity_type import EntityType
from daybook.time import now_utc


def get_checklist_item_template(
    sort_index: float,
    parent_id: Optional[ItemId] = None,
    item_type: ChecklistItemType = "checklist",
    color: ChecklistItemColor = "red",
) -> ChecklistItem:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.CHECKLIST_ITEM,
        "title": "",
        "is_checked": False,
        "sort_index": sort_index,
        "created": now,
        "updated": now,
        "item_type": item_type,
        "color": color,
        "parent_id": parent_id,
    }

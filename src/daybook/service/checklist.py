# SPDX-License-Identifier: MIT

from typing import Optional, cast

from daybook.model.checklist_item import (
    CHECKLIST_ITEM_COLORS,
    CHECKLIST_ITEM_TYPES,
    ChecklistItem,
    ChecklistItemColor,
    ChecklistItemType,
    ChecklistNode,
)
from daybook.model.entity_id import ItemId
from daybook.order.sort_index import compute_insertion_key
from daybook.repository.checklist_item import CHECKLIST_ITEM_REPO
from daybook.template.checklist_item import get_checklist_item_template

# Which item types may be created directly under each kind of parent.
# None is the root of the tree.
ALLOWED_CHILD_TYPES: dict[Optional[str], tuple[str, ...]] = {
    None: ("folder", "checklist"),
    "folder": ("folder", "checklist"),
    "checklist": ("item",),
    "item": (),
}


def get_unchecked_children(parent_id: Optional[ItemId]) -> list[ChecklistItem]:
    return CHECKLIST_ITEM_REPO.get_children(parent_id, is_checked=False)


def get_children(parent_id: Optional[ItemId]) -> list[ChecklistItem]:
    """Display order: unchecked entries by sort_index, then checked ones."""
    return get_unchecked_children(parent_id) + CHECKLIST_ITEM_REPO.get_children(
        parent_id, is_checked=True
    )


def get_tree(parent_id: Optional[ItemId] = None) -> list[ChecklistNode]:
    return [
        {"item": child, "children": get_tree(cast(ItemId, child["id"]))}
        for child in get_children(parent_id)
    ]


def resolve_path(path: list[int]) -> ChecklistItem:
    """
    Find an item by its 0-based positions in display order, outermost first.

    Raises:
        ValueError: If a position does not exist
    """
    if len(path) == 0:
        raise ValueError("Empty checklist path")

    parent_id: Optional[ItemId] = None
    item: Optional[ChecklistItem] = None
    for depth, position in enumerate(path):
        children = get_children(parent_id)
        if position < 0 or position >= len(children):
            shown = ".".join(str(p + 1) for p in path[: depth + 1])
            raise ValueError(f"No checklist entry at {shown}")
        item = children[position]
        parent_id = item["id"]

    return cast(ChecklistItem, item)


def validate_item_type(item_type: str) -> ChecklistItemType:
    if item_type not in CHECKLIST_ITEM_TYPES:
        raise ValueError(
            f"Unknown type '{item_type}', expected one of {', '.join(CHECKLIST_ITEM_TYPES)}"
        )
    return cast(ChecklistItemType, item_type)


def validate_color(color: str) -> ChecklistItemColor:
    if color not in CHECKLIST_ITEM_COLORS:
        raise ValueError(
            f"Unknown color '{color}', expected one of {', '.join(CHECKLIST_ITEM_COLORS)}"
        )
    return cast(ChecklistItemColor, color)


def create_item(
    parent_id: Optional[ItemId],
    title: str,
    item_type: str = "checklist",
    color: str = "red",
    index: Optional[int] = None,
) -> ChecklistItem:
    """Create an entry at position index (the end when None) among its unchecked siblings."""
    valid_type = validate_item_type(item_type)
    valid_color = validate_color(color)

    parent_type = (
        CHECKLIST_ITEM_REPO.get_item(parent_id)["item_type"]
        if parent_id is not None
        else None
    )
    if valid_type not in ALLOWED_CHILD_TYPES[parent_type]:
        where = f"a {parent_type}" if parent_type is not None else "the top level"
        raise ValueError(f"A {valid_type} cannot be added to {where}")

    siblings = get_unchecked_children(parent_id)
    if index is None:
        index = len(siblings)

    item = get_checklist_item_template(
        compute_insertion_key(index, siblings), parent_id, valid_type, valid_color
    )
    item["title"] = title
    id = CHECKLIST_ITEM_REPO.save_new_item(item)

    return CHECKLIST_ITEM_REPO.get_item(id)


def move_item(parent_id: Optional[ItemId], from_index: int, to_index: int) -> ChecklistItem:
    siblings = get_unchecked_children(parent_id)
    if from_index < 0 or from_index >= len(siblings):
        raise ValueError(f"No checklist entry at position {from_index + 1}")

    moved_item = siblings[from_index]
    moved_item_id = cast(ItemId, moved_item["id"])
    if from_index == to_index:
        return moved_item

    remaining_items = [item for item in siblings if item["id"] != moved_item_id]
    CHECKLIST_ITEM_REPO.modify_item(
        moved_item_id, sort_index=compute_insertion_key(to_index, remaining_items)
    )

    return CHECKLIST_ITEM_REPO.get_item(moved_item_id)


def rename_item(item_id: ItemId, title: str) -> None:
    CHECKLIST_ITEM_REPO.modify_item(item_id, title=title)


def recolor_item(item_id: ItemId, color: str) -> None:
    CHECKLIST_ITEM_REPO.modify_item(item_id, color=validate_color(color))


def check_item(item_id: ItemId) -> None:
    CHECKLIST_ITEM_REPO.modify_item(item_id, is_checked=True)


def uncheck_item(item_id: ItemId) -> None:
    CHECKLIST_ITEM_REPO.modify_item(item_id, is_checked=False)


def delete_item(item_id: ItemId) -> list[ItemId]:
    return CHECKLIST_ITEM_REPO.delete_item(item_id)

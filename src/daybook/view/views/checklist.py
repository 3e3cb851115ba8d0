# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from daybook.color import CHECKED_ITEM_COLOR, CHECKLIST_COLOR_STYLES
from daybook.model.checklist_item import ChecklistItem, ChecklistNode
from daybook.view.views.header import header

TYPE_ICONS = {
    "folder": "▸",
    "checklist": "≡",
    "item": "•",
}


def format_checklist_item(item: ChecklistItem, path: str) -> str:
    style = CHECKLIST_COLOR_STYLES[item["color"]]
    if item["is_checked"]:
        style = CHECKED_ITEM_COLOR
    check = "[x]" if item["is_checked"] else "[ ]"
    marker = check if item["item_type"] == "item" else TYPE_ICONS[item["item_type"]]
    return f"[{style}]{path} {escape(marker)} {escape(item['title'])}[/{style}]"


def __add_nodes(tree: Tree, nodes: list[ChecklistNode], prefix: str) -> None:
    for index, node in enumerate(nodes):
        path = f"{prefix}{index + 1}"
        branch = tree.add(format_checklist_item(node["item"], path))
        __add_nodes(branch, node["children"], f"{path}.")


def checklist_tree_view(
    nodes: list[ChecklistNode],
    root: Optional[ChecklistItem] = None,
    root_path: str = "",
) -> None:
    header("checklists", root["title"] if root is not None else None)

    label = "[bold]checklists[/bold]"
    if root is not None:
        label = format_checklist_item(root, root_path)
    tree = Tree(label)
    __add_nodes(tree, nodes, f"{root_path}." if root_path else "")

    console = Console()
    console.print(tree)

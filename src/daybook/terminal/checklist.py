# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console

from daybook.model.checklist_item import (
    CHECKLIST_ITEM_COLORS,
    CHECKLIST_ITEM_TYPES,
    ChecklistItem,
)
from daybook.model.entity_id import ItemId
from daybook.service import checklist
from daybook.terminal.custom_typer import AliasedTyperGroup
from daybook.terminal.parse import parse_path, parse_position
from daybook.view.views.checklist import checklist_tree_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

ParentOption = Annotated[
    Optional[str],
    typer.Option("--parent", "-p", help="dotted path of the parent, e.g. 2.1"),
]


def __resolve(path: str) -> ChecklistItem:
    try:
        return checklist.resolve_path(parse_path(path))
    except ValueError as e:
        raise typer.BadParameter(str(e))


def __resolve_parent_id(parent: Optional[str]) -> Optional[ItemId]:
    if parent is None:
        return None
    return cast(ItemId, __resolve(parent)["id"])


def __show_tree(path: Optional[str] = None) -> None:
    if path is None:
        checklist_tree_view(checklist.get_tree())
        return

    root = __resolve(path)
    checklist_tree_view(
        checklist.get_tree(cast(ItemId, root["id"])),
        root,
        ".".join(str(index + 1) for index in parse_path(path)),
    )


@app.command("view, v")
def view(
    path: Annotated[
        Optional[str], typer.Argument(help="show only this folder or checklist")
    ] = None,
) -> None:
    __show_tree(path)


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    parent: ParentOption = None,
    item_type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help=f"valid input: {', '.join(CHECKLIST_ITEM_TYPES)}",
        ),
    ] = "checklist",
    color: Annotated[
        str,
        typer.Option(
            "--color",
            "-col",
            help=f"valid input: {', '.join(CHECKLIST_ITEM_COLORS)}",
        ),
    ] = "red",
    at: Annotated[
        Optional[int],
        typer.Option("--at", help="position to insert at, defaults to the end"),
    ] = None,
) -> None:
    parent_id = __resolve_parent_id(parent)
    index = parse_position(at) if at is not None else None

    try:
        checklist.create_item(parent_id, title, item_type, color, index)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    __show_tree(parent)


@app.command("move, mv", no_args_is_help=True)
def move(from_position: int, to_position: int, parent: ParentOption = None) -> None:
    parent_id = __resolve_parent_id(parent)

    try:
        checklist.move_item(
            parent_id, parse_position(from_position), parse_position(to_position)
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    __show_tree(parent)


@app.command("rename, r", no_args_is_help=True)
def rename(path: str, title: str) -> None:
    item = __resolve(path)

    checklist.rename_item(cast(ItemId, item["id"]), title)

    __show_tree()


@app.command("color, co", no_args_is_help=True)
def color(path: str, color: str) -> None:
    item = __resolve(path)

    try:
        checklist.recolor_item(cast(ItemId, item["id"]), color)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    __show_tree()


@app.command("check, c", no_args_is_help=True)
def check(path: str) -> None:
    item = __resolve(path)

    checklist.check_item(cast(ItemId, item["id"]))

    __show_tree()


@app.command("uncheck, u", no_args_is_help=True)
def uncheck(path: str) -> None:
    item = __resolve(path)

    checklist.uncheck_item(cast(ItemId, item["id"]))

    __show_tree()


@app.command("delete, d", no_args_is_help=True)
def delete(path: str) -> None:
    """Delete an entry and everything inside it."""
    item = __resolve(path)

    deleted_ids = checklist.delete_item(cast(ItemId, item["id"]))

    Console().print(f"[green]Deleted {len(deleted_ids)} entries[/green]")
    __show_tree()

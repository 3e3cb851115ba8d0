# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console

from daybook.model.calendar_event import CalendarEvent
from daybook.model.entity_id import ItemId
from daybook.model.planner_event import PlannerEvent
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.service import planner
from daybook.service.calendar import (
    get_all_day_events_by_datestamp,
    load_calendar_events,
)
from daybook.terminal.custom_typer import AliasedTyperGroup
from daybook.terminal.parse import parse_datestamp, parse_position, parse_time
from daybook.time import datestamp_to_datetime
from daybook.view import state as view_state
from daybook.view.views.planner import planner_day_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[str],
    typer.Option(
        "--date",
        "-d",
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]


def __all_day_events(datestamp: str) -> list[CalendarEvent]:
    ics_paths = CONFIGURATION_REPO.get_config()["ics_paths"]
    if not view_state.get_show_calendar_chips() or not ics_paths:
        return []

    start = datestamp_to_datetime(datestamp)
    calendar_events = load_calendar_events(ics_paths, start, start.add(days=1))
    return get_all_day_events_by_datestamp(calendar_events).get(datestamp, [])


def __show_day(datestamp: str) -> None:
    planner_day_view(
        datestamp,
        planner.get_unchecked_events(datestamp),
        planner.get_checked_events(datestamp),
        __all_day_events(datestamp),
    )


def __event_at(events: list[PlannerEvent], position: int) -> ItemId:
    try:
        event = planner.get_event_at(events, parse_position(position))
    except ValueError as e:
        raise typer.BadParameter(str(e))
    return cast(ItemId, event["id"])


def __report_repositioned(repositioned: bool) -> None:
    if repositioned:
        Console().print("[yellow]Moved into time order[/yellow]")


@app.command("view, v")
def view(
    date: Annotated[
        Optional[str],
        typer.Argument(
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
        ),
    ] = None,
) -> None:
    """Show a day's planner."""
    __show_day(parse_datestamp(date))


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[
        str, typer.Argument(help='a time like "9:30 pm" in the title sets the time')
    ],
    date: DateOption = None,
    at: Annotated[
        Optional[int],
        typer.Option("--at", help="position to insert at, defaults to the end"),
    ] = None,
) -> None:
    datestamp = parse_datestamp(date)
    index = parse_position(at) if at is not None else None

    planner.create_event(datestamp, title, index)

    __show_day(datestamp)


@app.command("move, mv", no_args_is_help=True)
def move(from_position: int, to_position: int, date: DateOption = None) -> None:
    """Move an event; timed events are kept in time order."""
    datestamp = parse_datestamp(date)
    from_index = parse_position(from_position)
    to_index = parse_position(to_position)

    try:
        moved_event = planner.move_event(datestamp, from_index, to_index)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    unchecked_events = planner.get_unchecked_events(datestamp)
    landed_index = [event["id"] for event in unchecked_events].index(moved_event["id"])
    __report_repositioned(landed_index != min(to_index, len(unchecked_events) - 1))

    __show_day(datestamp)


@app.command("rename, r", no_args_is_help=True)
def rename(position: int, title: str, date: DateOption = None) -> None:
    datestamp = parse_datestamp(date)
    event_id = __event_at(planner.get_unchecked_events(datestamp), position)

    __report_repositioned(planner.change_event_title(event_id, title))

    __show_day(datestamp)


@app.command("time, tm", no_args_is_help=True)
def set_time(position: int, time_value: str, date: DateOption = None) -> None:
    """Set an event's time (HH:mm)."""
    datestamp = parse_datestamp(date)
    event_id = __event_at(planner.get_unchecked_events(datestamp), position)

    try:
        repositioned = planner.set_event_time(event_id, parse_time(time_value))
    except ValueError as e:
        raise typer.BadParameter(str(e))
    __report_repositioned(repositioned)

    __show_day(datestamp)


@app.command("clear-time, ct", no_args_is_help=True)
def clear_time(position: int, date: DateOption = None) -> None:
    datestamp = parse_datestamp(date)
    event_id = __event_at(planner.get_unchecked_events(datestamp), position)

    planner.clear_event_time(event_id)

    __show_day(datestamp)


@app.command("check, c", no_args_is_help=True)
def check(position: int, date: DateOption = None) -> None:
    datestamp = parse_datestamp(date)
    event_id = __event_at(planner.get_unchecked_events(datestamp), position)

    planner.check_event(event_id)

    __show_day(datestamp)


@app.command("uncheck, u", no_args_is_help=True)
def uncheck(position: int, date: DateOption = None) -> None:
    """Return a done event (by its position in the done list) to the day."""
    datestamp = parse_datestamp(date)
    event_id = __event_at(planner.get_checked_events(datestamp), position)

    __report_repositioned(planner.uncheck_event(event_id))

    __show_day(datestamp)


@app.command("delete, d", no_args_is_help=True)
def delete(
    position: int,
    checked: Annotated[
        bool, typer.Option("--checked", "-c", help="position is in the done list")
    ] = False,
    date: DateOption = None,
) -> None:
    datestamp = parse_datestamp(date)
    events = (
        planner.get_checked_events(datestamp)
        if checked
        else planner.get_unchecked_events(datestamp)
    )
    event_id = __event_at(events, position)

    planner.delete_event(event_id)

    __show_day(datestamp)

# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from daybook.color import CALENDAR_CHIP_COLOR, CHECKED_ITEM_COLOR, TIME_COLOR
from daybook.model.calendar_event import CalendarEvent
from daybook.model.planner_event import PlannerEvent
from daybook.order.chronology import get_planner_event_time
from daybook.time import iso_to_time_values
from daybook.view.views.header import header


def format_event_time(event: PlannerEvent) -> str:
    """
    Display time for an event, e.g. "9:30 PM".

    Records of a multi-day calendar event are marked START or END.
    """
    event_time = get_planner_event_time(event)
    if event_time is None:
        return ""
    time_values = iso_to_time_values(event_time)
    if time_values is None:
        return ""

    display = f"{time_values[0]} {time_values[1]}"

    time_config = event["time_config"]
    calendar_config = time_config["calendar_config"] if time_config else None
    multi_day_config = calendar_config["multi_day_config"] if calendar_config else None
    if multi_day_config is not None:
        if multi_day_config["end_event_id"] == event["id"]:
            display += " END"
        elif multi_day_config["start_event_id"] == event["id"]:
            display += " START"

    return display


def calendar_chips(all_day_events: list[CalendarEvent]) -> Optional[Text]:
    if len(all_day_events) == 0:
        return None
    chips = Text()
    for index, calendar_event in enumerate(all_day_events):
        if index > 0:
            chips.append("  ")
        chips.append(
            f" {calendar_event['title']} ", style=f"reverse {CALENDAR_CHIP_COLOR}"
        )
    return chips


def planner_day_view(
    datestamp: str,
    unchecked_events: list[PlannerEvent],
    checked_events: list[PlannerEvent],
    all_day_events: Optional[list[CalendarEvent]] = None,
) -> None:
    header("planner", datestamp)

    console = Console()

    chips = calendar_chips(all_day_events or [])
    if chips is not None:
        console.print(chips)

    events_table = Table(box=box.SIMPLE)
    events_table.add_column("#", justify="right")
    events_table.add_column("time", style=TIME_COLOR, no_wrap=True)
    events_table.add_column("title")

    for index, event in enumerate(unchecked_events):
        events_table.add_row(
            str(index + 1), format_event_time(event), escape(event["title"])
        )

    console.print(events_table)

    if len(checked_events) == 0:
        return

    checked_table = Table(box=box.SIMPLE, title="done", title_justify="left")
    checked_table.add_column("#", justify="right")
    checked_table.add_column("time", no_wrap=True)
    checked_table.add_column("title")
    for index, event in enumerate(checked_events):
        checked_table.add_row(
            str(index + 1),
            format_event_time(event),
            escape(event["title"]),
            style=CHECKED_ITEM_COLOR,
        )

    console.print(checked_table)


def all_day_events_view(datestamp: str, all_day_events: list[CalendarEvent]) -> None:
    header("calendar", datestamp)

    console = Console()
    if len(all_day_events) == 0:
        console.print("[yellow]No all-day events[/yellow]")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("title")
    table.add_column("calendar")
    for calendar_event in all_day_events:
        table.add_row(
            escape(calendar_event["title"]), escape(calendar_event["calendar_id"])
        )
    console.print(table)

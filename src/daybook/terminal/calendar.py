# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.service.calendar import (
    get_all_day_events_by_datestamp,
    load_calendar_events,
    sync_calendar_events,
)
from daybook.terminal.custom_typer import AliasedTyperGroup
from daybook.terminal.parse import parse_datestamp
from daybook.time import datestamp_to_datetime
from daybook.view.views.planner import all_day_events_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("sync, s")
def sync() -> None:
    """Mirror timed events from config.ics_paths into the planner."""
    config = CONFIGURATION_REPO.get_config()
    console = Console()

    ics_paths = config["ics_paths"]
    if ics_paths is None or len(ics_paths) == 0:
        console.print("[yellow]No iCal sources configured in config.ics_paths[/yellow]")
        return

    start = pendulum.now("local").start_of("day")
    end = start.add(weeks=config["ical_sync_weeks"])

    events_created = 0
    events_updated = 0
    for ics_path in ics_paths:
        console.print(f"[cyan]Syncing from: {ics_path}[/cyan]")
        try:
            created, updated = sync_calendar_events(
                load_calendar_events([ics_path], start, end)
            )
        except Exception as e:
            console.print(f"[red]Error syncing {ics_path}: {e}[/red]")
            raise e
        events_created += created
        events_updated += updated

    console.print(
        f"[green]Sync complete: {events_created} created, {events_updated} updated[/green]"
    )


@app.command("day, d")
def day(
    date: Annotated[
        Optional[str],
        typer.Argument(
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
        ),
    ] = None,
) -> None:
    """Show the all-day calendar events for a day."""
    datestamp = parse_datestamp(date)
    ics_paths = CONFIGURATION_REPO.get_config()["ics_paths"] or []

    start = datestamp_to_datetime(datestamp)
    calendar_events = load_calendar_events(ics_paths, start, start.add(days=1))

    all_day_events_view(
        datestamp, get_all_day_events_by_datestamp(calendar_events).get(datestamp, [])
    )

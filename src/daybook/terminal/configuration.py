# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from daybook import configuration
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", __enabled(config["show_header"]))
    table.add_row("show_calendar_chips", __enabled(config["show_calendar_chips"]))
    table.add_row("ical_sync_weeks", str(config["ical_sync_weeks"]))
    table.add_row(
        "ics_paths",
        ", ".join(config["ics_paths"]) if config["ics_paths"] else "None",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    ical_sync_weeks: Annotated[
        Optional[int],
        typer.Option("--ical-sync-weeks", help="weeks ahead to mirror on sync"),
    ] = None,
    ics_paths: Annotated[
        Optional[list[str]],
        typer.Option(
            "--ics-path", help=".ics file or http(s) URL, accepts multiple options"
        ),
    ] = None,
    remove_ics_paths: Annotated[
        bool, typer.Option("--remove-ics-paths", help="clear all iCal sources")
    ] = False,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="go back to the default data path"),
    ] = False,
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--no-show-header")
    ] = None,
    show_calendar_chips: Annotated[
        Optional[bool],
        typer.Option("--show-calendar-chips/--no-show-calendar-chips"),
    ] = None,
) -> None:
    """Update configuration settings."""
    if ical_sync_weeks is not None and ical_sync_weeks < 1:
        raise typer.BadParameter("ical sync weeks must be at least 1")

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        show_calendar_chips=show_calendar_chips,
        ical_sync_weeks=ical_sync_weeks,
        ics_paths=ics_paths,
        remove_ics_paths=remove_ics_paths,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )

    Console().print("[green]Configuration updated[/green]")

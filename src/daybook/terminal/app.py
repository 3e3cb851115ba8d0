# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from daybook.terminal import calendar, checklist, configuration, planner
from daybook.terminal.custom_typer import OrderedAliasedTyperGroup
from daybook.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Daybook - a daily planner and checklists in the CLI",
    no_args_is_help=True,
)
app.add_typer(planner.app, name="planner, p", help="Per-day lists of events")
app.add_typer(checklist.app, name="checklist, cl", help="Folders and checklists")
app.add_typer(calendar.app, name="calendar, ca", help="Read-only calendar mirror")
app.add_typer(configuration.app, name="config, c", help="Settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option("--no-header", "-nh", help="Suppress header output in reports"),
    ] = False,
    no_chips: Annotated[
        bool,
        typer.Option(
            "--no-chips",
            "-nc",
            help="Skip all-day calendar chips in the planner view",
        ),
    ] = False,
) -> None:
    """
    Daybook - a daily planner and checklists in the CLI

    Options here override the show_header and show_calendar_chips settings
    for a single command.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_chips:
        view_state.set_show_calendar_chips(False)


def run() -> None:
    app()

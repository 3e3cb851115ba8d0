"""Per-invocation display switches for the planner and checklist reports."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)
_show_calendar_chips_var: ContextVar[bool] = ContextVar(
    "show_calendar_chips", default=True
)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_show_calendar_chips(value: bool) -> None:
    """Whether the planner day view loads all-day calendar events as chips.

    Turning this off skips reading the iCal sources entirely.
    """
    _show_calendar_chips_var.set(value)


def get_show_calendar_chips() -> bool:
    return _show_calendar_chips_var.get()

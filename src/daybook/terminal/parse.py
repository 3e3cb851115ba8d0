# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from daybook.time import datetime_to_datestamp, today_datestamp


def parse_datestamp(datestamp_param: Optional[str]) -> str:
    """
    Resolve a day argument to a 'YYYY-MM-DD' datestamp.

    Accepts YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a day offset
    like 1 or -1. None means today.

    Raises:
        typer.BadParameter: If the value matches none of these forms
    """
    if datestamp_param is None:
        return today_datestamp()

    value = datestamp_param.strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", value):
        try:
            pendulum.from_format(value, "YYYY-MM-DD")
        except ValueError:
            raise typer.BadParameter(f"Invalid date '{value}'")
        return value

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", value):
        return datetime_to_datestamp(pendulum.today("local").add(days=int(value)))

    if value == "today" or value == "t":
        return today_datestamp()
    if value == "yesterday" or value == "y":
        return datetime_to_datestamp(pendulum.yesterday("local"))
    if value == "tomorrow" or value == "o":
        return datetime_to_datestamp(pendulum.tomorrow("local"))
    raise typer.BadParameter("Incorrect date format")


def parse_time(time_str: str) -> str:
    """
    Parse a time string in (H)H:mm format.

    Args:
        time_str: Time string in format like "8:00", "17:30", etc.

    Returns:
        The zero-padded 24-hour 'HH:mm' value

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_str.strip())
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_str}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))

    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

    return f"{hour:02d}:{minute:02d}"


def parse_position(position: int) -> int:
    """Convert a 1-based display position to a 0-based list index."""
    if position < 1:
        raise typer.BadParameter(f"Positions start at 1, got {position}")
    return position - 1


def parse_path(path: str) -> list[int]:
    """
    Parse a dotted checklist path like "2.1" into 0-based indices.

    Raises:
        typer.BadParameter: If any segment is not a positive integer
    """
    indices: list[int] = []
    for segment in path.split("."):
        segment = segment.strip()
        if not re.match(r"^\d+$", segment) or int(segment) < 1:
            raise typer.BadParameter(
                f"Invalid checklist path '{path}' (expected positions like 2.1)"
            )
        indices.append(int(segment) - 1)
    return indices

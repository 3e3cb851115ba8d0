# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

DATESTAMP_FORMAT = "YYYY-MM-DD"
ISO_UTC_FORMAT = "YYYY-MM-DD[T]HH:mm:ss[Z]"

_CLOCK_TIME_P = re.compile(r"^(\d{1,2}):(\d{2})$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_datestamp() -> str:
    return pendulum.today("local").format(DATESTAMP_FORMAT)


def datestamp_to_datetime(datestamp: str) -> pendulum.DateTime:
    """Parse a 'YYYY-MM-DD' datestamp to a pendulum.DateTime at local midnight."""
    return cast(
        pendulum.DateTime, pendulum.from_format(datestamp, DATESTAMP_FORMAT, tz="local")
    )


def datetime_to_datestamp(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format(DATESTAMP_FORMAT)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_utc_iso(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("UTC").format(ISO_UTC_FORMAT)


def time_24h_to_iso(time_value: str, datestamp: str) -> Optional[str]:
    """
    Combine a 24-hour 'HH:mm' time with a 'YYYY-MM-DD' datestamp.

    The pair is read as local wall-clock time and returned as a UTC ISO string,
    or None when either part does not parse.
    """
    try:
        local = pendulum.from_format(
            f"{datestamp} {time_value}", f"{DATESTAMP_FORMAT} HH:mm", tz="local"
        )
    except ValueError:
        return None
    return datetime_to_utc_iso(cast(pendulum.DateTime, local))


def iso_to_time_values(iso: str) -> Optional[tuple[str, str]]:
    """Split an ISO timestamp into local display time and meridiem, e.g. ('9:30', 'PM')."""
    try:
        parsed = pendulum.parse(iso)
    except ValueError:
        return None
    if not isinstance(parsed, pendulum.DateTime):
        return None

    parts = parsed.in_tz("local").format("h:mm A").split(" ")
    if len(parts) != 2:
        return None
    return (parts[0], parts[1])


def normalize_time(value: str) -> str:
    """
    Canonical string form used when ordering times.

    Clock times become zero-padded 'HH:mm'. Anything else is read as ISO-8601
    and rendered in UTC, so differently offset spellings of the same instant
    compare equal. Unparseable values are returned unchanged.
    """
    clock_match = _CLOCK_TIME_P.match(value)
    if clock_match:
        return f"{int(clock_match.group(1)):02d}:{clock_match.group(2)}"

    try:
        parsed = pendulum.parse(value)
    except ValueError:
        return value
    if isinstance(parsed, pendulum.DateTime):
        return parsed.in_tz("UTC").format("YYYY-MM-DD[T]HH:mm:ss")
    return value

# SPDX-License-Identifier: MIT

import datetime
from pathlib import Path
from typing import Optional, cast

import icalevents.icalevents
import pendulum

from daybook.model.calendar_event import CalendarEvent
from daybook.model.entity_id import ItemId
from daybook.model.planner_event import CalendarConfig, MultiDayConfig, TimeConfig
from daybook.order.sort_index import compute_insertion_key
from daybook.repository.planner_event import PLANNER_EVENT_REPO
from daybook.service.planner import get_unchecked_events, reconcile_event
from daybook.template.planner_event import get_planner_event_template
from daybook.time import datetime_to_datestamp, datetime_to_utc_iso


def expand_datestamps(start: pendulum.DateTime, end: pendulum.DateTime) -> list[str]:
    """
    Local days an event covers, as 'YYYY-MM-DD'.

    The end is exclusive, so an event ending exactly at midnight does not
    spill into the next day.
    """
    current = start.in_tz("local").start_of("day")
    last = end.subtract(seconds=1).in_tz("local").start_of("day")

    datestamps = [datetime_to_datestamp(current)]
    current = current.add(days=1)
    while current <= last:
        datestamps.append(datetime_to_datestamp(current))
        current = current.add(days=1)
    return datestamps


def __local_midnight(value: datetime.datetime) -> pendulum.DateTime:
    # All-day events arrive at UTC midnight; only the calendar date counts
    return pendulum.datetime(value.year, value.month, value.day, tz="local")


def load_calendar_events(
    ics_paths: list[str], start: pendulum.DateTime, end: pendulum.DateTime
) -> list[CalendarEvent]:
    """Read events overlapping [start, end) from .ics files or http(s) URLs."""
    calendar_events: list[CalendarEvent] = []
    for ics_path in ics_paths:
        is_url = ics_path.startswith("http://") or ics_path.startswith("https://")
        if is_url:
            ical_events = icalevents.icalevents.events(
                url=ics_path, start=start, end=end, fix_apple=True
            )
        else:
            ical_events = icalevents.icalevents.events(
                file=Path(ics_path), start=start, end=end
            )

        for ical_event in ical_events:
            # Skip events without a start time
            if ical_event.start is None:
                continue

            all_day = bool(getattr(ical_event, "all_day", False))
            if all_day:
                event_start = __local_midnight(ical_event.start)
                event_end = (
                    __local_midnight(ical_event.end)
                    if ical_event.end is not None
                    else event_start.add(days=1)
                )
            else:
                event_start = pendulum.instance(ical_event.start).in_tz("UTC")
                event_end = (
                    pendulum.instance(ical_event.end).in_tz("UTC")
                    if ical_event.end is not None
                    else event_start
                )
            calendar_events.append(
                {
                    "uid": str(ical_event.uid),
                    "title": ical_event.summary or "",
                    "calendar_id": ics_path,
                    "start": event_start,
                    "end": event_end,
                    "all_day": all_day,
                }
            )

    return calendar_events


def get_all_day_events_by_datestamp(
    calendar_events: list[CalendarEvent],
) -> dict[str, list[CalendarEvent]]:
    """All-day events keyed by every day they cover."""
    by_datestamp: dict[str, list[CalendarEvent]] = {}
    for calendar_event in calendar_events:
        if not calendar_event["all_day"]:
            continue
        for datestamp in expand_datestamps(
            calendar_event["start"], calendar_event["end"]
        ):
            by_datestamp.setdefault(datestamp, []).append(calendar_event)
    return by_datestamp


def __upsert_mirror(
    calendar_event: CalendarEvent, datestamp: str, time_config: TimeConfig
) -> tuple[ItemId, bool]:
    calendar_config = cast(CalendarConfig, time_config["calendar_config"])
    existing = PLANNER_EVENT_REPO.find_calendar_mirror(
        calendar_config["calendar_event_id"], datestamp
    )
    if existing is not None:
        existing_id = cast(ItemId, existing["id"])
        PLANNER_EVENT_REPO.modify_event(
            existing_id, title=calendar_event["title"], time_config=time_config
        )
        return (existing_id, False)

    unchecked_events = get_unchecked_events(datestamp)
    event = get_planner_event_template(
        datestamp, compute_insertion_key(len(unchecked_events), unchecked_events)
    )
    event["title"] = calendar_event["title"]
    event["time_config"] = time_config
    return (PLANNER_EVENT_REPO.save_new_event(event), True)


def __build_time_config(
    calendar_event: CalendarEvent, multi_day_config: Optional[MultiDayConfig] = None
) -> TimeConfig:
    return {
        "start_iso": datetime_to_utc_iso(calendar_event["start"]),
        "calendar_config": {
            "end_iso": datetime_to_utc_iso(calendar_event["end"]),
            "calendar_event_id": calendar_event["uid"],
            "calendar_id": calendar_event["calendar_id"],
            "is_all_day": False,
            "multi_day_config": multi_day_config,
        },
    }


def sync_calendar_events(calendar_events: list[CalendarEvent]) -> tuple[int, int]:
    """
    Mirror timed calendar events into the planner.

    A single-day event becomes one planner event. A multi-day event becomes a
    start record on its first day and an end record on its last day, linked
    through a MultiDayConfig; the end record is ordered by the end time.
    Every mirrored event is then moved into time order on its day.

    Returns:
        (created count, updated count)
    """
    created = 0
    updated = 0

    for calendar_event in calendar_events:
        if calendar_event["all_day"]:
            continue

        datestamps = expand_datestamps(calendar_event["start"], calendar_event["end"])
        time_config = __build_time_config(calendar_event)

        mirrored_ids: list[ItemId] = []
        start_id, start_created = __upsert_mirror(
            calendar_event, datestamps[0], time_config
        )
        mirrored_ids.append(start_id)
        created += int(start_created)
        updated += int(not start_created)

        if len(datestamps) > 1:
            end_id, end_created = __upsert_mirror(
                calendar_event, datestamps[-1], time_config
            )
            mirrored_ids.append(end_id)
            created += int(end_created)
            updated += int(not end_created)

            linked_time_config = __build_time_config(
                calendar_event, {"start_event_id": start_id, "end_event_id": end_id}
            )
            for mirrored_id in mirrored_ids:
                PLANNER_EVENT_REPO.modify_event(
                    mirrored_id, time_config=linked_time_config
                )

        for mirrored_id in mirrored_ids:
            reconcile_event(mirrored_id)

    return (created, updated)

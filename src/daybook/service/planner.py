# SPDX-License-Identifier: MIT

from typing import Optional, cast

from daybook.model.entity_id import ItemId
from daybook.model.planner_event import PlannerEvent, TimeConfig
from daybook.order.chronology import compute_reconciled_key, get_planner_event_time
from daybook.order.sort_index import compute_insertion_key
from daybook.repository.planner_event import PLANNER_EVENT_REPO
from daybook.template.planner_event import get_planner_event_template
from daybook.text.time_value import extract_trailing_time
from daybook.time import time_24h_to_iso


def get_unchecked_events(datestamp: str) -> list[PlannerEvent]:
    return PLANNER_EVENT_REPO.get_events_for_datestamp(datestamp, is_checked=False)


def get_checked_events(datestamp: str) -> list[PlannerEvent]:
    return PLANNER_EVENT_REPO.get_events_for_datestamp(datestamp, is_checked=True)


def get_event_at(events: list[PlannerEvent], index: int) -> PlannerEvent:
    if index < 0 or index >= len(events):
        raise ValueError(f"No event at position {index + 1}")
    return events[index]


def reconcile_event(event_id: ItemId) -> bool:
    """
    Move an unchecked event so its day reads in time order.

    Returns:
        True if the event's sort_index changed
    """
    event = PLANNER_EVENT_REPO.get_event(event_id)
    if event["is_checked"]:
        return False

    valid_sort_index = compute_reconciled_key(
        event,
        get_unchecked_events(event["datestamp"]),
        time_of=get_planner_event_time,
    )
    if valid_sort_index == event["sort_index"]:
        return False

    PLANNER_EVENT_REPO.modify_event(event_id, sort_index=valid_sort_index)
    return True


def create_event(datestamp: str, title: str, index: Optional[int] = None) -> PlannerEvent:
    """Create an event at position index (the end when None) of a day's unchecked list."""
    unchecked_events = get_unchecked_events(datestamp)
    if index is None:
        index = len(unchecked_events)

    sort_index = compute_insertion_key(index, unchecked_events)
    event = get_planner_event_template(datestamp, sort_index)
    event["title"] = title
    id = PLANNER_EVENT_REPO.save_new_event(event)

    change_event_title(id, title)

    return PLANNER_EVENT_REPO.get_event(id)


def move_event(datestamp: str, from_index: int, to_index: int) -> PlannerEvent:
    """
    Drag an unchecked event from one position to another.

    The event is first placed exactly where it was dropped, then validated
    against the times of the other events in the day.
    """
    unchecked_events = get_unchecked_events(datestamp)
    moved_event = get_event_at(unchecked_events, from_index)
    moved_event_id = cast(ItemId, moved_event["id"])
    if from_index == to_index:
        return moved_event

    events_without_event = [
        event for event in unchecked_events if event["id"] != moved_event_id
    ]
    new_sort_index = compute_insertion_key(to_index, events_without_event)
    PLANNER_EVENT_REPO.modify_event(moved_event_id, sort_index=new_sort_index)

    reconcile_event(moved_event_id)

    return PLANNER_EVENT_REPO.get_event(moved_event_id)


def change_event_title(event_id: ItemId, title: str) -> bool:
    """
    Save a new title and pick up a time typed into it.

    When the event has no time yet and the title contains a phrase like
    "9:30 pm", the phrase is stripped from the title, becomes the event's start
    time on its day, and the event is moved into time order.

    Returns:
        True if the event was repositioned
    """
    PLANNER_EVENT_REPO.modify_event(event_id, title=title)

    event = PLANNER_EVENT_REPO.get_event(event_id)
    if event["time_config"] is not None:
        return False

    extracted = extract_trailing_time(title)
    if extracted is None:
        return False
    time_value, updated_text = extracted

    start_iso = time_24h_to_iso(time_value, event["datestamp"])
    if start_iso is None:
        return False

    time_config: TimeConfig = {"start_iso": start_iso, "calendar_config": None}
    PLANNER_EVENT_REPO.modify_event(
        event_id, title=updated_text, time_config=time_config
    )

    return reconcile_event(event_id)


def set_event_time(event_id: ItemId, time_value: str) -> bool:
    """
    Give an event a 24-hour HH:mm start time on its day and reposition it.

    Raises:
        ValueError: If the time does not parse, or the event mirrors a calendar
            event, whose times come from the calendar on every sync
    """
    event = PLANNER_EVENT_REPO.get_event(event_id)
    time_config = event["time_config"]
    if time_config is not None and time_config["calendar_config"] is not None:
        raise ValueError(
            f"'{event['title']}' mirrors a calendar event, change its time in the calendar"
        )

    start_iso = time_24h_to_iso(time_value, event["datestamp"])
    if start_iso is None:
        raise ValueError(f"Invalid time '{time_value}'")

    PLANNER_EVENT_REPO.modify_event(
        event_id, time_config={"start_iso": start_iso, "calendar_config": None}
    )

    return reconcile_event(event_id)


def clear_event_time(event_id: ItemId) -> None:
    # An untimed event keeps its place
    PLANNER_EVENT_REPO.modify_event(event_id, remove_time_config=True)


def check_event(event_id: ItemId) -> None:
    PLANNER_EVENT_REPO.modify_event(event_id, is_checked=True)


def uncheck_event(event_id: ItemId) -> bool:
    PLANNER_EVENT_REPO.modify_event(event_id, is_checked=False)
    return reconcile_event(event_id)


def delete_event(event_id: ItemId) -> None:
    PLANNER_EVENT_REPO.delete_event(event_id)

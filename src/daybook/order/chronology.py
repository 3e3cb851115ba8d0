# SPDX-License-Identifier: MIT

from typing import Any, Callable, Mapping, Optional, Sequence

from daybook.model.planner_event import PlannerEvent
from daybook.order.sort_index import compute_insertion_key, sort_by_sort_index
from daybook.time import normalize_time

TimeAccessor = Callable[[Any], Optional[str]]


def is_time_less_or_equal(a: str, b: str) -> bool:
    return normalize_time(a) <= normalize_time(b)


def get_occurs_at(item: Mapping[str, Any]) -> Optional[str]:
    return item.get("occurs_at")


def get_planner_event_time(event: Optional[PlannerEvent]) -> Optional[str]:
    """
    The time a planner event is ordered by.

    The end record of a multi-day calendar event sorts by the calendar end
    time; every other timed event sorts by its start.
    """
    if event is None:
        return None
    time_config = event["time_config"]
    if time_config is None:
        return None

    calendar_config = time_config["calendar_config"]
    if calendar_config is not None:
        multi_day_config = calendar_config["multi_day_config"]
        if (
            multi_day_config is not None
            and multi_day_config["end_event_id"] == event["id"]
        ):
            return calendar_config["end_iso"]

    return time_config["start_iso"]


def compute_reconciled_key(
    target: Mapping[str, Any],
    siblings: Sequence[Mapping[str, Any]],
    time_of: TimeAccessor = get_occurs_at,
) -> float:
    """
    Compute the sort_index ``target`` needs so that timed items read in time order.

    Only the target is considered for a move. Untimed siblings are ignored when
    comparing and are never reordered. The current key is returned unchanged
    whenever the target already sits between its timed neighbours, so callers
    can compare the result with the stored key to decide whether to save.

    Args:
        target: The item being validated, with its current sort_index and time.
        siblings: Every item in the target's list, the target included, in any
            order.
        time_of: Reads an item's time, returning None for untimed items.
    """
    current_key: float = target["sort_index"]
    target_time = time_of(target)
    if target_time is None:
        return current_key

    ordered = sort_by_sort_index(siblings)
    timed = [item for item in ordered if time_of(item) is not None]
    position = next(
        index for index, item in enumerate(timed) if item["id"] == target["id"]
    )

    earlier_time = time_of(timed[position - 1]) if position > 0 else None
    later_time = time_of(timed[position + 1]) if position + 1 < len(timed) else None
    if (earlier_time is None or is_time_less_or_equal(earlier_time, target_time)) and (
        later_time is None or is_time_less_or_equal(target_time, later_time)
    ):
        return current_key

    remaining = [item for item in ordered if item["id"] != target["id"]]
    insert_at = 0
    for index, item in enumerate(remaining):
        item_time = time_of(item)
        if item_time is not None and is_time_less_or_equal(item_time, target_time):
            insert_at = index + 1

    return compute_insertion_key(insert_at, remaining)

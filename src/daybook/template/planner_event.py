# SPDX-License-Identifier: MIT

from daybook.model.entity_type import EntityType
from daybook.model.planner_event import PlannerEvent
from daybook.time import now_utc


def get_planner_event_template(datestamp: str, sort_index: float) -> PlannerEvent:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.PLANNER_EVENT,
        "title": "",
        "is_checked": False,
        "sort_index": sort_index,
        "created": now,
        "updated": now,
        "datestamp": datestamp,
        "time_config": None,
        "recurring_id": None,
    }

# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from daybook.model.entity_id import ItemId
from daybook.model.list_item import ListItem


class MultiDayConfig(TypedDict):
    start_event_id: ItemId
    end_event_id: ItemId


class CalendarConfig(TypedDict):
    end_iso: str
    calendar_event_id: str
    calendar_id: str
    is_all_day: bool
    multi_day_config: Optional[MultiDayConfig]


class TimeConfig(TypedDict):
    start_iso: str
    calendar_config: Optional[CalendarConfig]


class PlannerEvent(ListItem):
    datestamp: str
    time_config: Optional[TimeConfig]
    recurring_id: Optional[str]

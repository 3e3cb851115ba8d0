# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from daybook import configuration, time
from daybook.model.entity_id import ItemId, generate_item_id
from daybook.model.planner_event import PlannerEvent, TimeConfig
from daybook.order.sort_index import sort_by_sort_index


class PlannerEventRepository:
    def __init__(self) -> None:
        self._events: Optional[list[PlannerEvent]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def events(self) -> list[PlannerEvent]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = []
        if not configuration.DATA_PLANNER_EVENTS_DIR.is_dir():
            return
        for file_path in configuration.DATA_PLANNER_EVENTS_DIR.iterdir():
            if file_path.suffix != ".yaml":
                continue
            raw_event = load(file_path.read_text(), Loader=Loader)
            if raw_event is not None:
                self._events.append(self.__convert_event_for_deserialization(raw_event))

    def __save_data(self) -> None:
        configuration.DATA_PLANNER_EVENTS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for event in self.events:
            if event["id"] in self._dirty_ids:
                serializable_event = self.__convert_event_for_serialization(
                    deepcopy(event)
                )
                file_path = configuration.DATA_PLANNER_EVENTS_DIR / f"{event['id']}.yaml"
                file_path.write_text(dump(serializable_event, Dumper=Dumper))

        # Remove hard-deleted entity files
        for item_id in self._deleted_ids:
            file_path = configuration.DATA_PLANNER_EVENTS_DIR / f"{item_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._events is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_event_for_serialization(self, event: PlannerEvent) -> dict[str, Any]:
        serializable_event = cast(dict[str, Any], event)
        serializable_event["created"] = time.datetime_to_iso_str(
            serializable_event["created"]
        )
        serializable_event["updated"] = time.datetime_to_iso_str(
            serializable_event["updated"]
        )
        return serializable_event

    def __convert_event_for_deserialization(self, event: dict[str, Any]) -> PlannerEvent:
        deserializable_event = event
        deserializable_event["created"] = time.datetime_from_str(
            deserializable_event["created"]
        )
        deserializable_event["updated"] = time.datetime_from_str(
            deserializable_event["updated"]
        )
        deserializable_event["sort_index"] = float(deserializable_event["sort_index"])
        return cast(PlannerEvent, deserializable_event)

    def __find(self, id: ItemId) -> PlannerEvent:
        return [event for event in self.events if event["id"] == id][0]

    def save_new_event(self, event: PlannerEvent) -> ItemId:
        self.is_dirty = True

        event["id"] = generate_item_id()
        self.events.append(event)
        self._dirty_ids.add(event["id"])

        return event["id"]

    def modify_event(
        self,
        id: ItemId,
        title: Optional[str] = None,
        is_checked: Optional[bool] = None,
        sort_index: Optional[float] = None,
        time_config: Optional[TimeConfig] = None,
        remove_time_config: bool = False,
    ) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        event = self.__find(id)
        event["updated"] = time.now_utc()
        if title is not None:
            event["title"] = title
        if is_checked is not None:
            event["is_checked"] = is_checked
        if sort_index is not None:
            event["sort_index"] = sort_index
        if time_config is not None:
            event["time_config"] = time_config

        if remove_time_config:
            event["time_config"] = None

    def delete_event(self, id: ItemId) -> None:
        self.is_dirty = True

        event = self.__find(id)
        self.events.remove(event)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def get_all_events(self) -> list[PlannerEvent]:
        return deepcopy(self.events)

    def get_event(self, id: ItemId) -> PlannerEvent:
        return deepcopy(self.__find(id))

    def get_events_for_datestamp(
        self, datestamp: str, is_checked: Optional[bool] = None
    ) -> list[PlannerEvent]:
        """Events for one day, ascending by sort_index, optionally filtered by check state."""
        events = [
            event
            for event in self.events
            if event["datestamp"] == datestamp
            and (is_checked is None or event["is_checked"] == is_checked)
        ]
        return deepcopy(sort_by_sort_index(events))

    def find_calendar_mirror(
        self, calendar_event_id: str, datestamp: str
    ) -> Optional[PlannerEvent]:
        for event in self.events:
            time_config = event["time_config"]
            if event["datestamp"] != datestamp or time_config is None:
                continue
            calendar_config = time_config["calendar_config"]
            if (
                calendar_config is not None
                and calendar_config["calendar_event_id"] == calendar_event_id
            ):
                return deepcopy(event)
        return None


PLANNER_EVENT_REPO = PlannerEventRepository()

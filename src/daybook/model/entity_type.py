# SPDX-License-Identifier: MIT


class EntityType:
    PLANNER_EVENT = "planner_event"
    CHECKLIST_ITEM = "checklist_item"

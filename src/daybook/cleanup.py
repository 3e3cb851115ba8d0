# SPDX-License-Identifier: MIT

import atexit

from daybook.repository.checklist_item import CHECKLIST_ITEM_REPO
from daybook.repository.configuration import CONFIGURATION_REPO
from daybook.repository.planner_event import PLANNER_EVENT_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    PLANNER_EVENT_REPO.flush()
    CHECKLIST_ITEM_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)

# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class CalendarEvent(TypedDict):
    uid: str
    title: str
    calendar_id: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    all_day: bool

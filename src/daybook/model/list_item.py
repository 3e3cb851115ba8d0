# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from daybook.model.entity_id import ItemId


class ListItem(TypedDict):
    """
    Fields shared by every user-orderable record.

    Records are tagged by entity_type. Siblings in one list are ordered by
    ascending sort_index.
    """

    id: Optional[ItemId]
    entity_type: str
    title: str
    is_checked: bool
    sort_index: float
    created: pendulum.DateTime
    updated: pendulum.DateTime

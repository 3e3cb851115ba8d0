# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

ItemId: TypeAlias = str


def generate_item_id() -> ItemId:
    return str(uuid.uuid4())

# SPDX-License-Identifier: MIT

from typing import Any, Mapping, Sequence, TypeVar

# Key handed to the first item of an empty list. Matches the append spacing so
# lists built purely by appending sit on multiples of 8.
EMPTY_LIST_SORT_INDEX = 8.0
SORT_INDEX_SPACING = 8.0

ItemT = TypeVar("ItemT", bound=Mapping[str, Any])


def sort_by_sort_index(items: Sequence[ItemT]) -> list[ItemT]:
    """Ascending by sort_index. Stable, so tied keys keep their input order."""
    return sorted(items, key=lambda item: item["sort_index"])


def compute_insertion_key(index: int, siblings: Sequence[Mapping[str, Any]]) -> float:
    """
    Compute a sort_index that places an item at position ``index``.

    Args:
        index: Target display position, 0 for the top of the list. Values at
            or past the end append.
        siblings: The list sorted ascending by sort_index, without the item
            being placed.

    Returns:
        A key strictly inside the surrounding gap, so no sibling is renumbered.
        Once float precision is exhausted the midpoint may equal a neighbour;
        that tie is tolerated rather than reported.
    """
    if len(siblings) == 0:
        return EMPTY_LIST_SORT_INDEX
    if index <= 0:
        return siblings[0]["sort_index"] / 2
    if index >= len(siblings):
        return siblings[-1]["sort_index"] + SORT_INDEX_SPACING

    before = siblings[index - 1]["sort_index"]
    after = siblings[index]["sort_index"]
    return before + (after - before) / 2

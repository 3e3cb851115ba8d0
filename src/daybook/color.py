# SPDX-License-Identifier: MIT

from daybook.model.checklist_item import ChecklistItemColor

CHECKED_ITEM_COLOR = "bright_black"
TIME_COLOR = "cyan"
CALENDAR_CHIP_COLOR = "medium_purple"

# Rich styles for checklist colors. "label" follows the terminal's own
# foreground color.
CHECKLIST_COLOR_STYLES: dict[ChecklistItemColor, str] = {
    "red": "red",
    "orange": "dark_orange",
    "yellow": "yellow",
    "green": "green",
    "cyan": "cyan",
    "indigo": "slate_blue1",
    "purple": "purple",
    "brown": "orange4",
    "label": "default",
}

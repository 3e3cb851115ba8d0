# SPDX-License-Identifier: MIT

import re
from typing import Optional

# Times like " 9 AM", " 9:30 pm", " 12:05PM"
_TIME_VALUE_P = re.compile(
    r"\s+(1[0-2]|[1-9])(?::([0-5][0-9]))?\s?(AM|PM|am|pm)\b"
)


def extract_trailing_time(text: str) -> Optional[tuple[str, str]]:
    """
    Pull a spoken-style time out of free text.

    Args:
        text: Any user input, e.g. "Dinner with Sam 7:30 pm"

    Returns:
        (time in 24-hour HH:mm, text with the time phrase removed), or None
        when no time phrase is present
    """
    match = _TIME_VALUE_P.search(text)
    if match is None:
        return None

    hour = int(match.group(1)) % 12
    minute = match.group(2) or "00"
    if match.group(3).upper() == "PM":
        hour += 12

    time_value_24_hour = f"{hour:02d}:{minute}"
    updated_text = text.replace(match.group(0), "")
    return (time_value_24_hour, updated_text)

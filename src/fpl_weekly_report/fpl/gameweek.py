"""Work out which gameweek a report belongs to."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .utils import FPL_TIMEZONE, parse_fpl_datetime


def find_current_gameweek(
    events: list[dict[str, Any]], reference_time: datetime
) -> int:
    """Return the id of the current gameweek.

    The API's ``is_current`` flag wins. Without it the gameweek whose deadline
    most recently passed is used, falling back to the first upcoming one
    before the season starts and the last one after it ends.
    """
    if not events:
        raise ValueError("No gameweek data found in FPL bootstrap response")

    flagged = [event for event in events if event.get("is_current", False)]
    if len(flagged) == 1:
        return int(flagged[0]["id"])

    reference_utc = reference_time.astimezone(FPL_TIMEZONE)
    sorted_events = sorted(events, key=lambda item: item.get("id", 0))

    for index, event in enumerate(sorted_events):
        deadline_raw = event.get("deadline_time")
        if not deadline_raw:
            continue
        if reference_utc < parse_fpl_datetime(deadline_raw):
            if index == 0:
                return int(event["id"])
            return int(sorted_events[index - 1]["id"])

    return int(sorted_events[-1]["id"])


__all__ = ["find_current_gameweek"]

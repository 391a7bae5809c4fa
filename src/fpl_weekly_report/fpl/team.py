"""Retrieve the raw FPL data behind one manager's weekly report."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .gameweek import find_current_gameweek
from .utils import (
    FPL_TIMEZONE,
    create_fpl_session,
    get_bootstrap_data,
    get_fixtures,
    safe_close_session,
)


def _format_summary(user: Any) -> dict[str, Any]:
    return {
        "entry_id": user.id,
        "first_name": user.player_first_name,
        "last_name": user.player_last_name,
        "event_points": user.summary_event_points or 0,
        "bank": user.last_deadline_bank or 0,
        "current_event": user.current_event,
    }


async def _get_current_picks(user: Any, gameweek: int) -> list[dict[str, Any]]:
    picks_by_gameweek = await user.get_picks()
    picks = picks_by_gameweek.get(gameweek) or picks_by_gameweek.get(
        user.current_event, []
    )
    return sorted(picks, key=lambda pick: pick.get("position", 0))


async def get_team_payload(
    entry_id: int, reference_time: datetime | None = None
) -> dict[str, Any]:
    """Fetch summary, picks, bootstrap tables and fixtures for ``entry_id``."""
    reference = reference_time or datetime.now(FPL_TIMEZONE)
    fpl, session = await create_fpl_session()
    try:
        bootstrap = await get_bootstrap_data(fpl)
        gameweek = find_current_gameweek(bootstrap.get("events") or [], reference)
        user = await fpl.get_user(entry_id)
        return {
            "gameweek": gameweek,
            "summary": _format_summary(user),
            "picks": await _get_current_picks(user, gameweek),
            "teams": bootstrap.get("teams", []),
            "elements": bootstrap.get("elements", []),
            "fixtures": await get_fixtures(fpl),
        }
    finally:
        await safe_close_session(session)


__all__ = ["get_team_payload"]

"""Shared helpers for interacting with the public FPL API."""

from __future__ import annotations

import importlib
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

import aiohttp
from dateutil.parser import parse as parse_datetime  # type: ignore[import-untyped]

from ..types import Position

POSITION_MAPPING = {
    1: Position.GOALKEEPER,
    2: Position.DEFENDER,
    3: Position.MIDFIELDER,
    4: Position.FORWARD,
}
FPL_TIMEZONE = ZoneInfo("UTC")

FPLClient = Any

_bootstrap_cache: dict[str, Any] | None = None
_FPL_CLASS: type[Any] | None = None


def _ensure_fpl_class() -> type[Any]:
    """Import and cache the third-party ``FPL`` client class."""

    global _FPL_CLASS
    if _FPL_CLASS is None:
        module = importlib.import_module("fpl")
        if not hasattr(module, "FPL"):
            raise ImportError(
                "Imported 'fpl' module does not expose the expected 'FPL' client"
            )
        _FPL_CLASS = module.FPL
    return _FPL_CLASS


async def create_fpl_session() -> tuple[FPLClient, aiohttp.ClientSession]:
    session = aiohttp.ClientSession()
    fpl_class = _ensure_fpl_class()
    return fpl_class(session), session


def _to_plain(obj: Any, _seen: set[int] | None = None) -> Any:
    if isinstance(obj, str | int | float | bool | type(None)):
        return obj

    if _seen is None:
        _seen = set()

    obj_id = id(obj)
    if obj_id in _seen:
        return f"<circular reference to {type(obj).__name__}>"

    _seen.add(obj_id)

    try:
        if isinstance(obj, dict):
            return {key: _to_plain(value, _seen) for key, value in obj.items()}
        if hasattr(obj, "__dict__"):
            return {key: _to_plain(value, _seen) for key, value in vars(obj).items()}
        if isinstance(obj, list):
            return [_to_plain(item, _seen) for item in obj]
        return obj
    finally:
        _seen.discard(obj_id)


async def get_bootstrap_data(
    fpl: FPLClient, force_refresh: bool = False
) -> dict[str, Any]:
    global _bootstrap_cache
    if _bootstrap_cache is None or force_refresh:
        teams = await fpl.get_teams()
        players = await fpl.get_players()
        gameweeks = await fpl.get_gameweeks()
        _bootstrap_cache = {
            "teams": [_to_plain(team) for team in teams],
            "elements": [_to_plain(player) for player in players],
            "events": [_to_plain(gameweek) for gameweek in gameweeks],
        }
    return _bootstrap_cache


async def get_fixtures(fpl: FPLClient) -> list[dict[str, Any]]:
    fixtures = await fpl.get_fixtures()
    return [_to_plain(fixture) for fixture in fixtures]


async def safe_close_session(session: aiohttp.ClientSession) -> None:
    await session.close()


def map_position(element_type: int) -> Position:
    # Unknown element types only appear for managers in the API; treat as forwards.
    return POSITION_MAPPING.get(element_type, Position.FORWARD)


def parse_fpl_datetime(value: str) -> datetime:
    parsed = parse_datetime(value)
    if not isinstance(parsed, datetime):
        raise ValueError(f"Expected datetime, got {type(parsed)}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=FPL_TIMEZONE)
    return parsed.astimezone(FPL_TIMEZONE)


def reset_bootstrap_cache() -> None:
    global _bootstrap_cache
    _bootstrap_cache = None


__all__ = [
    "FPL_TIMEZONE",
    "create_fpl_session",
    "get_bootstrap_data",
    "get_fixtures",
    "map_position",
    "parse_fpl_datetime",
    "reset_bootstrap_cache",
    "safe_close_session",
]

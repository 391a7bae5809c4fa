"""Snapshot provider backed by the public FPL API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import aiohttp
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..fpl import get_team_payload
from ..fpl.utils import map_position
from ..types import Difficulty, FixtureOutlook, InjuryAlert, Player, TeamSnapshot
from .base import DataSourceError

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    "d": "Doubtful",
    "i": "Injured",
    "s": "Suspended",
    "u": "Unavailable",
    "n": "Not available",
}
FIXTURE_HORIZON = 3
POOL_SIZE = 50

T = TypeVar("T")


def _run(coro: Any) -> Any:
    return asyncio.run(coro)


@retry(
    retry=retry_if_exception_type((aiohttp.ClientError, asyncio.TimeoutError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    reraise=True,
)
def _fetch_payload(entry_id: int) -> dict[str, Any]:
    logger.debug("Fetching FPL data for entry %s", entry_id)
    return _run(get_team_payload(entry_id))  # type: ignore[no-any-return]


def _team_codes(payload: dict[str, Any]) -> dict[int, str]:
    return {team["id"]: team.get("short_name", "UNK") for team in payload["teams"]}


def _to_player(element: dict[str, Any], teams: dict[int, str]) -> Player:
    return Player(
        name=element.get("web_name", "Unknown"),
        team=teams.get(element.get("team", 0), "UNK"),
        points=int(element.get("event_points") or 0),
        cost=int(element.get("now_cost") or 0),
        position=map_position(element.get("element_type", 0)),
    )


def _form(element: dict[str, Any]) -> float:
    try:
        return float(element.get("form") or 0.0)
    except (TypeError, ValueError):
        return 0.0


def _is_available(element: dict[str, Any], min_form: float = 1.0) -> bool:
    """Filter out injured/unavailable/suspended players and low-form players."""
    # Doubtful players stay in: they may still play.
    if element.get("status", "a") in {"i", "u", "s", "n"}:
        return False
    return _form(element) >= min_form


def build_fixture_outlook(
    fixtures: Iterable[dict[str, Any]],
    team_ids: Iterable[int],
    teams: dict[int, str],
    horizon: int = FIXTURE_HORIZON,
) -> FixtureOutlook:
    """Next ``horizon`` difficulty markers per team, keyed in ``team_ids`` order."""
    upcoming = sorted(
        (
            fixture
            for fixture in fixtures
            if fixture.get("event") is not None and not fixture.get("finished", False)
        ),
        key=lambda fixture: (fixture["event"], fixture.get("kickoff_time") or ""),
    )
    outlook: FixtureOutlook = {}
    for team_id in team_ids:
        code = teams.get(team_id)
        if code is None or code in outlook:
            continue
        markers: list[Difficulty] = []
        for fixture in upcoming:
            if fixture.get("team_h") == team_id:
                rating = fixture.get("team_h_difficulty", 3)
            elif fixture.get("team_a") == team_id:
                rating = fixture.get("team_a_difficulty", 3)
            else:
                continue
            markers.append(Difficulty.from_fpl(int(rating)))
            if len(markers) == horizon:
                break
        if markers:
            outlook[code] = tuple(markers)
    return outlook


def build_snapshot(payload: dict[str, Any], free_transfers: int) -> TeamSnapshot:
    """Convert a raw ``get_team_payload`` result into a `TeamSnapshot`.

    The snapshot's fixture outlook covers the squad's own teams only.
    """
    teams = _team_codes(payload)
    elements = {element["id"]: element for element in payload["elements"]}
    summary = payload["summary"]

    squad: list[Player] = []
    alerts: list[InjuryAlert] = []
    captain: str | None = None
    squad_team_ids: list[int] = []
    for pick in payload["picks"]:
        element = elements.get(pick.get("element"))
        if element is None:
            logger.warning("Pick %s missing from bootstrap data", pick.get("element"))
            continue
        player = _to_player(element, teams)
        squad.append(player)
        squad_team_ids.append(element.get("team", 0))
        if pick.get("is_captain") and captain is None:
            captain = player.name
        status = element.get("status", "a")
        if status in STATUS_LABELS:
            label = STATUS_LABELS[status]
            alerts.append(
                InjuryAlert(player=player.name, team=player.team, status=label)
            )

    if not squad:
        entry_id = summary.get("entry_id")
        raise DataSourceError(
            f"No picks found for entry {entry_id} in GW{payload['gameweek']}"
        )

    return TeamSnapshot(
        first_name=summary.get("first_name", ""),
        last_name=summary.get("last_name", ""),
        gameweek=payload["gameweek"],
        bank=int(summary.get("bank") or 0),
        last_points=int(summary.get("event_points") or 0),
        transfers_remaining=free_transfers,
        squad=tuple(squad),
        injury_alerts=tuple(alerts),
        captain=captain or squad[0].name,
        fixture_outlook=build_fixture_outlook(
            payload["fixtures"], squad_team_ids, teams
        ),
    )


def select_pool_elements(
    payload: dict[str, Any], pool_size: int = POOL_SIZE
) -> list[dict[str, Any]]:
    """Available non-squad players ordered by form, then total points."""
    squad_ids = {pick.get("element") for pick in payload["picks"]}
    available = [
        element
        for element in payload["elements"]
        if element.get("id") not in squad_ids and _is_available(element)
    ]
    available.sort(
        key=lambda element: (_form(element), element.get("total_points", 0)),
        reverse=True,
    )
    return available[:pool_size]


class LiveDataSource:
    """`DataSource` that reads one manager's team from the FPL API.

    All fetch methods share a single payload, fetched lazily on first use.
    """

    def __init__(
        self,
        entry_id: int,
        *,
        free_transfers: int = 1,
        pool_size: int = POOL_SIZE,
    ) -> None:
        self.entry_id = entry_id
        self.free_transfers = free_transfers
        self.pool_size = pool_size
        self._payload: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._payload is None:
            try:
                self._payload = _fetch_payload(self.entry_id)
            except Exception as exc:
                raise DataSourceError(
                    f"Could not fetch FPL data for entry {self.entry_id}: {exc}"
                ) from exc
        return self._payload

    def _convert(self, build: Callable[[dict[str, Any]], T]) -> T:
        payload = self._load()
        try:
            return build(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise DataSourceError(
                f"Malformed FPL data for entry {self.entry_id}: {exc!r}"
            ) from exc

    def fetch_snapshot(self) -> TeamSnapshot:
        return self._convert(
            lambda payload: build_snapshot(payload, self.free_transfers)
        )

    def fetch_candidate_pool(self) -> list[Player]:
        def build(payload: dict[str, Any]) -> list[Player]:
            teams = _team_codes(payload)
            return [
                _to_player(element, teams)
                for element in select_pool_elements(payload, self.pool_size)
            ]

        return self._convert(build)

    def fetch_fixture_outlook(self) -> FixtureOutlook:
        """Outlook for squad teams followed by candidate-pool teams."""

        def build(payload: dict[str, Any]) -> FixtureOutlook:
            elements = {element["id"]: element for element in payload["elements"]}
            squad_team_ids = [
                elements[pick["element"]].get("team", 0)
                for pick in payload["picks"]
                if pick.get("element") in elements
            ]
            pool_team_ids = [
                element.get("team", 0)
                for element in select_pool_elements(payload, self.pool_size)
            ]
            team_ids = [*squad_team_ids, *pool_team_ids]
            teams = _team_codes(payload)
            return build_fixture_outlook(payload["fixtures"], team_ids, teams)

        return self._convert(build)


__all__ = [
    "LiveDataSource",
    "build_fixture_outlook",
    "build_snapshot",
    "select_pool_elements",
]

"""Fixed fallback data used when no live FPL entry is configured."""

from __future__ import annotations

from typing import Any

from ..types import FixtureOutlook, Player, TeamSnapshot

G, O, R = "🟢", "🟠", "🔴"

FALLBACK_SNAPSHOT: dict[str, Any] = {
    "first_name": "Mocky",
    "last_name": "McMockface",
    "gameweek": 3,
    "bank": 15,
    "last_points": 42,
    "transfers_remaining": 1,
    "squad": [
        {
            "name": "Erling Haaland",
            "team": "MCI",
            "points": 25,
            "cost": 120,
            "position": "Forward",
        },
        {
            "name": "Trent Alexander-Arnold",
            "team": "LIV",
            "points": 15,
            "cost": 75,
            "position": "Defender",
        },
        {
            "name": "Alexis Mac Allister",
            "team": "BHA",
            "points": 4,
            "cost": 65,
            "position": "Midfielder",
        },
        {
            "name": "Mohamed Salah",
            "team": "LIV",
            "points": 0,
            "cost": 120,
            "position": "Midfielder",
        },
        {
            "name": "James Maddison",
            "team": "LEI",
            "points": 15,
            "cost": 80,
            "position": "Midfielder",
        },
        {
            "name": "Ivan Toney",
            "team": "BRE",
            "points": 13,
            "cost": 90,
            "position": "Forward",
        },
    ],
    "injury_alerts": [
        {"player": "Mohamed Salah", "team": "LIV", "status": "Doubtful"},
    ],
    "captain": "Erling Haaland",
    "fixture_outlook": {
        "MCI": [G, G, O],
        "LIV": [O, R, O],
        "LEI": [G, G, G],
        "BHA": [O, O, O],
        "BRE": [G, O, G],
    },
}

FALLBACK_CANDIDATE_POOL: list[dict[str, Any]] = [
    {"name": "James Maddison", "team": "LEI", "points": 15, "position": "Midfielder"},
    {"name": "Ivan Toney", "team": "BRE", "points": 13, "position": "Forward"},
]


class StaticDataSource:
    """`DataSource` serving a fixed snapshot, rebuilt on every call."""

    def __init__(
        self,
        snapshot: dict[str, Any] | None = None,
        candidate_pool: list[dict[str, Any]] | None = None,
    ) -> None:
        self._snapshot = FALLBACK_SNAPSHOT if snapshot is None else snapshot
        self._candidate_pool = (
            FALLBACK_CANDIDATE_POOL if candidate_pool is None else candidate_pool
        )

    def fetch_snapshot(self) -> TeamSnapshot:
        return TeamSnapshot.model_validate(self._snapshot)

    def fetch_candidate_pool(self) -> list[Player]:
        return [Player.model_validate(entry) for entry in self._candidate_pool]

    def fetch_fixture_outlook(self) -> FixtureOutlook:
        return self.fetch_snapshot().fixture_outlook


__all__ = ["FALLBACK_CANDIDATE_POOL", "FALLBACK_SNAPSHOT", "StaticDataSource"]

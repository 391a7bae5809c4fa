"""Interface shared by every snapshot provider."""

from __future__ import annotations

from typing import Protocol

from ..types import FixtureOutlook, Player, TeamSnapshot


class DataSourceError(RuntimeError):
    """Raised when a snapshot or candidate pool cannot be produced."""


class DataSource(Protocol):
    """Protocol describing where a report's input data comes from."""

    def fetch_snapshot(self) -> TeamSnapshot:
        """Return the manager's snapshot for the current gameweek."""

    def fetch_candidate_pool(self) -> list[Player]:
        """Return players outside the squad that may be transferred in."""

    def fetch_fixture_outlook(self) -> FixtureOutlook:
        """Return fixture difficulty for every team the engine may consider."""


__all__ = ["DataSource", "DataSourceError"]

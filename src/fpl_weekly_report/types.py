"""Shared value objects for the weekly report pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Position(StrEnum):
    """Squad role of a player."""

    GOALKEEPER = "Goalkeeper"
    DEFENDER = "Defender"
    MIDFIELDER = "Midfielder"
    FORWARD = "Forward"


class Difficulty(StrEnum):
    """Fixture difficulty marker, valued by the glyph rendered in reports."""

    EASY = "🟢"
    MEDIUM = "🟠"
    HARD = "🔴"

    @classmethod
    def from_fpl(cls, rating: int) -> Difficulty:
        """Collapse the FPL 1-5 difficulty rating into three bands."""
        if rating <= 2:
            return cls.EASY
        if rating == 3:
            return cls.MEDIUM
        return cls.HARD


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Player(_Frozen):
    """Squad member or transfer target. ``cost`` is in tenths of £m."""

    name: str
    team: str  # 3-letter code, e.g. "MCI"
    points: int
    cost: int = 0
    position: Position


class InjuryAlert(_Frozen):
    """Availability warning for a squad member."""

    player: str
    team: str
    status: str  # "Doubtful", "Injured", ...


class TransferSuggestion(_Frozen):
    """Single OUT/IN swap proposed by the engine."""

    out: str
    in_: str = Field(alias="in")
    reason: str


FixtureOutlook = dict[str, tuple[Difficulty, ...]]
CandidatePool = list[Player]


class TeamSnapshot(_Frozen):
    """Everything the report needs about one manager for one gameweek."""

    first_name: str
    last_name: str
    gameweek: int = Field(ge=1)
    bank: int = Field(ge=0)
    last_points: int
    transfers_remaining: int = Field(ge=0)
    squad: tuple[Player, ...] = Field(min_length=1)
    injury_alerts: tuple[InjuryAlert, ...] = ()
    captain: str
    fixture_outlook: FixtureOutlook = Field(default_factory=dict)
    suggested_transfers: tuple[TransferSuggestion, ...] = ()

    @property
    def owner_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def with_suggestions(
        self, suggestions: Sequence[TransferSuggestion]
    ) -> TeamSnapshot:
        """Return a copy of the snapshot carrying ``suggestions``."""
        return self.model_copy(update={"suggested_transfers": tuple(suggestions)})


__all__ = [
    "CandidatePool",
    "Difficulty",
    "FixtureOutlook",
    "InjuryAlert",
    "Player",
    "Position",
    "TeamSnapshot",
    "TransferSuggestion",
]

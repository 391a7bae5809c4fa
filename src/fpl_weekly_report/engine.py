"""Transfer suggestion engine.

Flags squad members in poor form or on the injury list and pairs them, in
order, with in-form candidates whose next fixture is easy. This is advisory
only: positions, prices and the transfer budget are not considered.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .types import Difficulty, InjuryAlert, Player, TransferSuggestion

logger = logging.getLogger(__name__)

DEFAULT_REASON = "Replace due to low form or injury with better fixture & form"


@dataclass(frozen=True, slots=True)
class EngineThresholds:
    """Form cut-offs used when picking transfer candidates."""

    low_form: int = 5
    good_form: int = 10
    reason: str = DEFAULT_REASON


def select_transfer_out(
    squad: Sequence[Player],
    injury_alerts: Sequence[InjuryAlert],
    low_form: int = 5,
) -> list[Player]:
    """Squad members under ``low_form`` points or on the injury list, in order."""
    injured = {alert.player for alert in injury_alerts}
    return [
        player
        for player in squad
        if player.points < low_form or player.name in injured
    ]


def _starts_easy(team: str, outlook: Mapping[str, Sequence[Difficulty]]) -> bool:
    markers = outlook.get(team)
    if not markers:
        return False
    return markers[0] == Difficulty.EASY


def select_transfer_in(
    candidate_pool: Sequence[Player],
    fixture_outlook: Mapping[str, Sequence[Difficulty]],
    good_form: int = 10,
) -> list[Player]:
    """Pool entries over ``good_form`` points whose next fixture is easy, in order."""
    return [
        player
        for player in candidate_pool
        if player.points > good_form and _starts_easy(player.team, fixture_outlook)
    ]


def suggest_transfers(
    squad: Sequence[Player],
    fixture_outlook: Mapping[str, Sequence[Difficulty]],
    injury_alerts: Sequence[InjuryAlert],
    candidate_pool: Sequence[Player],
    thresholds: EngineThresholds | None = None,
) -> list[TransferSuggestion]:
    """Pair transfer-out candidates with transfer-in targets positionally.

    The result is truncated to the shorter of the two candidate lists, so an
    empty list on either side yields no suggestions.
    """
    limits = thresholds or EngineThresholds()
    outgoing = select_transfer_out(squad, injury_alerts, limits.low_form)
    outgoing_names = {player.name for player in outgoing}
    # A name can never be both OUT and IN within one report.
    candidates = select_transfer_in(candidate_pool, fixture_outlook, limits.good_form)
    incoming = [player for player in candidates if player.name not in outgoing_names]
    logger.debug("Transfer candidates: %d out, %d in", len(outgoing), len(incoming))
    return [
        TransferSuggestion(out=leaving.name, in_=arriving.name, reason=limits.reason)
        for leaving, arriving in zip(outgoing, incoming, strict=False)
    ]


__all__ = [
    "DEFAULT_REASON",
    "EngineThresholds",
    "select_transfer_in",
    "select_transfer_out",
    "suggest_transfers",
]

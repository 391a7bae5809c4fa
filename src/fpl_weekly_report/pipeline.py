"""Core pipeline orchestration for the weekly report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from .config import ReportConfig
from .engine import EngineThresholds, suggest_transfers
from .report import format_report
from .services.telegram import TelegramNotifier
from .sources import DataSource, DataSourceError, build_data_source
from .types import TeamSnapshot

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Anything that can deliver a finished report."""

    def send(self, text: str) -> bool:
        """Deliver *text*; return whether a message was actually sent."""


class ReportError(RuntimeError):
    """Raised when the report cannot be built."""


@dataclass(slots=True)
class ReportOutcome:
    """Metadata about a completed report run."""

    snapshot: TeamSnapshot
    report: str
    sent: bool = False


def build_report(
    source: DataSource, thresholds: EngineThresholds | None = None
) -> ReportOutcome:
    """Fetch data from ``source``, attach transfer suggestions and render."""

    try:
        snapshot = source.fetch_snapshot()
        candidate_pool = source.fetch_candidate_pool()
        # May cover more teams than the squad outlook shown in the report.
        engine_outlook = source.fetch_fixture_outlook()
    except DataSourceError as exc:
        raise ReportError(str(exc)) from exc

    suggestions = suggest_transfers(
        snapshot.squad,
        engine_outlook,
        snapshot.injury_alerts,
        candidate_pool,
        thresholds,
    )
    logger.info(
        "GW%s: %d transfer suggestion(s) for %s",
        snapshot.gameweek,
        len(suggestions),
        snapshot.owner_name,
    )
    enriched = snapshot.with_suggestions(suggestions)
    return ReportOutcome(snapshot=enriched, report=format_report(enriched))


def run_report(
    config: ReportConfig,
    *,
    source: DataSource | None = None,
    notifier: Notifier | None = None,
    send: bool = True,
) -> ReportOutcome:
    """Build the report described by ``config`` and optionally deliver it.

    Delivery failures propagate unchanged as ``DeliveryError``.
    """

    outcome = build_report(source or build_data_source(config), config.thresholds)
    if not send:
        return outcome

    if notifier is None:
        notifier = TelegramNotifier(config.telegram_token, config.telegram_chat_id)
    outcome.sent = notifier.send(outcome.report)
    return outcome


__all__ = [
    "Notifier",
    "ReportError",
    "ReportOutcome",
    "build_report",
    "run_report",
]

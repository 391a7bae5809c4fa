"""Render a team snapshot as the weekly Telegram digest."""

from __future__ import annotations

from .types import TeamSnapshot

CLOSING_PROMPT = "Ready to hit “Confirm” on transfers and captain pick?"


def format_price(raw: int) -> str:
    """Render a tenths-of-£m amount with exactly one decimal place."""
    return f"{raw / 10:.1f}"


def _header_section(snapshot: TeamSnapshot) -> list[str]:
    return [
        f"📊 *FPL Weekly Report - GW{snapshot.gameweek}*",
        "",
        f"👤 Team: {snapshot.owner_name}",
        f"💰 Bank: £{format_price(snapshot.bank)}m",
        f"📈 Total Points (last GW): {snapshot.last_points}",
        f"🔄 Transfers remaining: {snapshot.transfers_remaining}",
        "",
    ]


def _squad_section(snapshot: TeamSnapshot) -> list[str]:
    lines = ["🧑‍🤝‍🧑 *Squad Highlights:*"]
    for player in snapshot.squad:
        lines.append(
            f"- {player.name} ({player.team}) - {player.points} pts - "
            f"£{format_price(player.cost)}m"
        )
    return lines


def _injury_section(snapshot: TeamSnapshot) -> list[str]:
    if not snapshot.injury_alerts:
        return []
    lines = ["", "⚠️ *Injury Alerts:*"]
    for alert in snapshot.injury_alerts:
        lines.append(f"- {alert.player} ({alert.team}) - {alert.status}")
    return lines


def _transfer_section(snapshot: TeamSnapshot) -> list[str]:
    # Header is printed even when there is nothing to suggest.
    lines = ["", "🔄 *Suggested Transfers:*"]
    for suggestion in snapshot.suggested_transfers:
        lines.extend(
            [
                f"- OUT: {suggestion.out}",
                f"- IN: {suggestion.in_}",
                f"- Reason: {suggestion.reason}",
                "",
            ]
        )
    return lines


def _captain_section(snapshot: TeamSnapshot) -> list[str]:
    return ["🎯 *Captain Suggestion:*", f"- {snapshot.captain}", ""]


def _fixture_section(snapshot: TeamSnapshot) -> list[str]:
    lines = ["📅 *Fixture Difficulty Next 3 GWs:*"]
    for team, markers in snapshot.fixture_outlook.items():
        glyphs = "".join(marker.value for marker in markers)
        lines.append(f"- {team}: {glyphs}")
    return lines


def format_report(snapshot: TeamSnapshot) -> str:
    """Build the full report text for ``snapshot``.

    Sections appear in a fixed order: header and bank summary, squad,
    injuries (only when present), suggested transfers, captain, fixture
    difficulty, then the closing prompt.
    """
    lines: list[str] = []
    lines.extend(_header_section(snapshot))
    lines.extend(_squad_section(snapshot))
    lines.extend(_injury_section(snapshot))
    lines.extend(_transfer_section(snapshot))
    lines.extend(_captain_section(snapshot))
    lines.extend(_fixture_section(snapshot))
    lines.extend(["", "---", CLOSING_PROMPT])
    return "\n".join(lines)


__all__ = ["CLOSING_PROMPT", "format_price", "format_report"]

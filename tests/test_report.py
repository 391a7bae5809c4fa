"""Tests for report rendering."""

from __future__ import annotations

import pytest

from fpl_weekly_report.report import CLOSING_PROMPT, format_price, format_report
from fpl_weekly_report.sources.static import StaticDataSource
from fpl_weekly_report.types import (
    Difficulty,
    InjuryAlert,
    Player,
    Position,
    TeamSnapshot,
    TransferSuggestion,
)

E, M, H = Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD
KEEPER = Player(
    name="Keeper", team="ARS", points=6, cost=55, position=Position.GOALKEEPER
)


def _snapshot(**overrides: object) -> TeamSnapshot:
    fields: dict[str, object] = {
        "first_name": "Ada",
        "last_name": "Manager",
        "gameweek": 7,
        "bank": 0,
        "last_points": 55,
        "transfers_remaining": 2,
        "squad": [KEEPER],
        "captain": "Keeper",
        "fixture_outlook": {"AAA": (E, E, M), "BBB": (M, H, M)},
    }
    fields.update(overrides)
    return TeamSnapshot.model_validate(fields)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(0, "0.0"), (15, "1.5"), (120, "12.0"), (9, "0.9"), (1005, "100.5")],
)
def test_format_price(raw: int, expected: str) -> None:
    assert format_price(raw) == expected


def test_fallback_snapshot_report_matches_reference_layout() -> None:
    source = StaticDataSource()
    snapshot = source.fetch_snapshot().with_suggestions(
        [
            TransferSuggestion(
                out="Alexis Mac Allister", in_="James Maddison", reason="R1"
            ),
            TransferSuggestion(out="Mohamed Salah", in_="Ivan Toney", reason="R2"),
        ]
    )

    expected = (
        "📊 *FPL Weekly Report - GW3*\n"
        "\n"
        "👤 Team: Mocky McMockface\n"
        "💰 Bank: £1.5m\n"
        "📈 Total Points (last GW): 42\n"
        "🔄 Transfers remaining: 1\n"
        "\n"
        "🧑‍🤝‍🧑 *Squad Highlights:*\n"
        "- Erling Haaland (MCI) - 25 pts - £12.0m\n"
        "- Trent Alexander-Arnold (LIV) - 15 pts - £7.5m\n"
        "- Alexis Mac Allister (BHA) - 4 pts - £6.5m\n"
        "- Mohamed Salah (LIV) - 0 pts - £12.0m\n"
        "- James Maddison (LEI) - 15 pts - £8.0m\n"
        "- Ivan Toney (BRE) - 13 pts - £9.0m\n"
        "\n"
        "⚠️ *Injury Alerts:*\n"
        "- Mohamed Salah (LIV) - Doubtful\n"
        "\n"
        "🔄 *Suggested Transfers:*\n"
        "- OUT: Alexis Mac Allister\n"
        "- IN: James Maddison\n"
        "- Reason: R1\n"
        "\n"
        "- OUT: Mohamed Salah\n"
        "- IN: Ivan Toney\n"
        "- Reason: R2\n"
        "\n"
        "🎯 *Captain Suggestion:*\n"
        "- Erling Haaland\n"
        "\n"
        "📅 *Fixture Difficulty Next 3 GWs:*\n"
        "- MCI: 🟢🟢🟠\n"
        "- LIV: 🟠🔴🟠\n"
        "- LEI: 🟢🟢🟢\n"
        "- BHA: 🟠🟠🟠\n"
        "- BRE: 🟢🟠🟢\n"
        "\n"
        "---\n"
        f"{CLOSING_PROMPT}"
    )

    assert format_report(snapshot) == expected


def test_injury_section_omitted_without_alerts() -> None:
    report = format_report(_snapshot())

    assert "Injury Alerts" not in report


def test_injury_section_lists_each_alert() -> None:
    alerts = [
        InjuryAlert(player="Keeper", team="ARS", status="Doubtful"),
        InjuryAlert(player="Keeper", team="ARS", status="Suspended"),
    ]

    report = format_report(_snapshot(injury_alerts=alerts))

    assert "⚠️ *Injury Alerts:*\n- Keeper (ARS) - Doubtful\n" in report
    assert "- Keeper (ARS) - Doubtful\n- Keeper (ARS) - Suspended\n" in report


def test_transfer_header_printed_without_suggestions() -> None:
    report = format_report(_snapshot())

    assert "🔄 *Suggested Transfers:*\n🎯 *Captain Suggestion:*\n" in report
    assert "🎯 *Captain Suggestion:*\n- Keeper\n" in report
    assert "- OUT:" not in report


def test_fixture_section_keeps_outlook_order() -> None:
    report = format_report(_snapshot())

    assert "- AAA: 🟢🟢🟠\n- BBB: 🟠🔴🟠\n" in report
    assert report.index("- AAA:") < report.index("- BBB:")


def test_header_bank_and_squad_lines() -> None:
    report = format_report(_snapshot(bank=120))

    assert report.startswith("📊 *FPL Weekly Report - GW7*\n\n")
    assert "\n👤 Team: Ada Manager\n" in report
    assert "💰 Bank: £12.0m\n" in report
    assert "🔄 Transfers remaining: 2\n" in report
    assert "- Keeper (ARS) - 6 pts - £5.5m\n" in report
    assert report.endswith(f"\n---\n{CLOSING_PROMPT}")


def test_format_is_repeatable_and_leaves_snapshot_alone() -> None:
    snapshot = _snapshot()
    before = snapshot.model_dump()

    assert format_report(snapshot) == format_report(snapshot)
    assert snapshot.model_dump() == before

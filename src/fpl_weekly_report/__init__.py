"""Weekly FPL status report with transfer suggestions."""

from .cli import main
from .engine import EngineThresholds, suggest_transfers
from .pipeline import ReportOutcome, build_report, run_report
from .report import format_price, format_report

__all__ = [
    "EngineThresholds",
    "ReportOutcome",
    "build_report",
    "format_price",
    "format_report",
    "main",
    "run_report",
    "suggest_transfers",
]

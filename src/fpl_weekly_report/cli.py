"""Command-line interface for building and sending the weekly FPL report."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from collections.abc import Sequence

from .config import DATA_SOURCES, ConfigError, ReportConfig
from .pipeline import ReportError, ReportOutcome, run_report
from .services.telegram import DeliveryError


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        choices=DATA_SOURCES,
        default=None,
        help="Where to read team data from (default: FPL_DATA_SOURCE or mock)",
    )
    parser.add_argument(
        "--team-id",
        type=int,
        default=None,
        help="FPL team ID (default: FPL_USER_ID)",
    )
    parser.add_argument(
        "--free-transfers",
        type=int,
        default=None,
        choices=range(0, 6),
        help="Number of free transfers available (0-5)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fpl-weekly-report",
        description="Build a weekly FPL status report with transfer suggestions",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Print the report without sending it",
    )
    _add_common_options(preview_parser)

    send_parser = subparsers.add_parser(
        "send",
        help="Print the report and deliver it to Telegram",
    )
    _add_common_options(send_parser)

    return parser


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("fpl_weekly_report")
    logger.setLevel(log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(log_level)


def _resolve_config(args: argparse.Namespace) -> ReportConfig:
    config = ReportConfig.from_env()
    overrides: dict[str, object] = {}
    if args.source is not None:
        overrides["data_source"] = args.source
    if args.team_id is not None:
        overrides["entry_id"] = args.team_id
    if args.free_transfers is not None:
        overrides["free_transfers"] = args.free_transfers
    return dataclasses.replace(config, **overrides) if overrides else config


def _print_send_summary(outcome: ReportOutcome) -> None:
    payload = {
        "gameweek": outcome.snapshot.gameweek,
        "suggestions": len(outcome.snapshot.suggested_transfers),
        "sent": outcome.sent,
    }
    print(json.dumps(payload, indent=2))


def _run(args: argparse.Namespace, *, send: bool) -> int:
    _configure_logging(args.verbose)
    try:
        config = _resolve_config(args)
        outcome = run_report(config, send=send)
    except (ConfigError, ReportError) as exc:
        print(f"Report failed: {exc}", file=sys.stderr)
        return 1
    except DeliveryError as exc:
        print(f"Delivery failed: {exc}", file=sys.stderr)
        return 1

    print(outcome.report)
    if send:
        print("")
        _print_send_summary(outcome)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    if argv is not None and not isinstance(argv, Sequence):
        argv = list(argv)
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "preview":
        return _run(args, send=False)
    if args.command == "send":
        return _run(args, send=True)
    parser.error(f"Unknown command {args.command}")
    return 1


if __name__ == "__main__":  # pragma: no cover - entry point
    raise SystemExit(main())

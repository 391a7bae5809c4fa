"""Environment-driven configuration for the weekly report."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from .engine import EngineThresholds

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_SOURCES = ("mock", "live")
_ENV_LOADED = False

DataSourceName = Literal["mock", "live"]


class ConfigError(ValueError):
    """Raised when configuration values are missing or malformed."""


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Settings handed to the orchestrator; the core never reads these directly."""

    entry_id: int | None = None
    data_source: DataSourceName = "mock"
    free_transfers: int = 1
    thresholds: EngineThresholds = field(default_factory=EngineThresholds)
    telegram_token: str | None = None
    telegram_chat_id: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ReportConfig:
        """Build a config from ``environ`` (``os.environ`` plus ``.env`` by default)."""

        if environ is None:
            _ensure_env_loaded()
            environ = os.environ

        source = environ.get("FPL_DATA_SOURCE", "mock").strip().lower() or "mock"
        if source not in DATA_SOURCES:
            allowed = ", ".join(DATA_SOURCES)
            raise ConfigError(
                f"FPL_DATA_SOURCE must be one of {allowed}, got {source!r}"
            )

        defaults = EngineThresholds()
        low_form = _read_int(environ, "FPL_LOW_FORM_THRESHOLD", defaults.low_form)
        good_form = _read_int(environ, "FPL_GOOD_FORM_THRESHOLD", defaults.good_form)
        thresholds = EngineThresholds(low_form=low_form, good_form=good_form)
        free_transfers = _read_int(environ, "FPL_FREE_TRANSFERS", 1)
        if free_transfers < 0:
            raise ConfigError("FPL_FREE_TRANSFERS cannot be negative")

        return cls(
            entry_id=_read_optional_int(environ, "FPL_USER_ID"),
            data_source=cast("DataSourceName", source),
            free_transfers=free_transfers,
            thresholds=thresholds,
            telegram_token=environ.get("TELEGRAM_TOKEN") or None,
            telegram_chat_id=environ.get("TELEGRAM_CHAT_ID") or None,
        )


def _read_optional_int(environ: Mapping[str, str], key: str) -> int | None:
    raw = environ.get(key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc


def _read_int(environ: Mapping[str, str], key: str, default: int) -> int:
    value = _read_optional_int(environ, key)
    return default if value is None else value


def _load_env_file(path: Path) -> None:
    """Load simple KEY=VALUE pairs from an ``.env`` file into ``os.environ``."""

    try:
        raw_lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return

    for raw_line in raw_lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if value and value[0] in {'"', "'"} and value[-1] == value[0]:
            value = value[1:-1]
        else:
            value = value.split(" #", 1)[0].rstrip()

        # Real environment wins over the file.
        os.environ.setdefault(key, os.path.expandvars(value))


def _ensure_env_loaded() -> None:
    """Load the project ``.env`` file once per interpreter session."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _load_env_file(PROJECT_ROOT / ".env")
    _ENV_LOADED = True


__all__ = ["DATA_SOURCES", "ConfigError", "ReportConfig"]

"""Tests for environment-driven configuration."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fpl_weekly_report import config as config_module
from fpl_weekly_report.config import ConfigError, ReportConfig


def test_defaults_from_empty_environment() -> None:
    config = ReportConfig.from_env({})

    assert config.data_source == "mock"
    assert config.entry_id is None
    assert config.free_transfers == 1
    assert config.thresholds.low_form == 5
    assert config.thresholds.good_form == 10
    assert config.telegram_token is None


def test_reads_all_values() -> None:
    config = ReportConfig.from_env(
        {
            "FPL_USER_ID": "1234",
            "FPL_DATA_SOURCE": "LIVE",
            "FPL_FREE_TRANSFERS": "2",
            "FPL_LOW_FORM_THRESHOLD": "3",
            "FPL_GOOD_FORM_THRESHOLD": "12",
            "TELEGRAM_TOKEN": "abc",
            "TELEGRAM_CHAT_ID": "-100",
        }
    )

    assert config.entry_id == 1234
    assert config.data_source == "live"
    assert config.free_transfers == 2
    assert config.thresholds.low_form == 3
    assert config.thresholds.good_form == 12
    assert config.telegram_token == "abc"
    assert config.telegram_chat_id == "-100"


@pytest.mark.parametrize(
    "environ",
    [
        {"FPL_USER_ID": "abc"},
        {"FPL_DATA_SOURCE": "csv"},
        {"FPL_FREE_TRANSFERS": "-1"},
        {"FPL_GOOD_FORM_THRESHOLD": "ten"},
    ],
)
def test_invalid_values_raise(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigError):
        ReportConfig.from_env(environ)


def test_load_env_file_keeps_existing_values(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "export TELEGRAM_TOKEN='from-file'\n"
        "TELEGRAM_CHAT_ID=42 # trailing\n"
        "FPL_USER_ID=7\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("FPL_USER_ID", "9")
    monkeypatch.delenv("TELEGRAM_TOKEN", raising=False)
    monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)

    config_module._load_env_file(env_file)

    assert os.environ["TELEGRAM_TOKEN"] == "from-file"
    assert os.environ["TELEGRAM_CHAT_ID"] == "42"
    assert os.environ["FPL_USER_ID"] == "9"


def test_load_env_file_missing_is_ignored(tmp_path: Path) -> None:
    config_module._load_env_file(tmp_path / "missing.env")

"""Providers of team snapshots and transfer candidate pools."""

from __future__ import annotations

from ..config import ConfigError, ReportConfig
from .base import DataSource, DataSourceError
from .live import LiveDataSource
from .static import StaticDataSource


def build_data_source(config: ReportConfig) -> DataSource:
    """Pick the data source named by ``config.data_source``."""
    if config.data_source == "live":
        if config.entry_id is None:
            raise ConfigError("FPL_USER_ID is required for the live data source")
        return LiveDataSource(config.entry_id, free_transfers=config.free_transfers)
    return StaticDataSource()


__all__ = [
    "DataSource",
    "DataSourceError",
    "LiveDataSource",
    "StaticDataSource",
    "build_data_source",
]

"""Tabular store factory."""

from __future__ import annotations

from pinlog.contracts.config import PinLogConfig
from pinlog.contracts.exceptions import ConfigError
from pinlog.contracts.store import TabularStore
from pinlog.stores.csv_store import CsvTabularStore
from pinlog.stores.sheets import GoogleSheetsStore


def create_store(config: PinLogConfig, *, token: str | None = None) -> TabularStore:
    if config.store == "csv":
        return CsvTabularStore(config.store_id)
    if config.store == "google-sheets":
        if not token:
            raise ConfigError("google-sheets store requires an API token")
        return GoogleSheetsStore(
            spreadsheet_id=config.store_id,
            token=token,
            sheet_name=config.sheet_name,
            max_retries=config.max_retries,
        )
    raise ConfigError(f"Unknown store: {config.store}")

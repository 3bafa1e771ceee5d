"""Tabular store exports."""

from pinlog.stores.csv_store import CsvTabularStore
from pinlog.stores.factory import create_store
from pinlog.stores.memory import InMemoryTabularStore
from pinlog.stores.sheets import GoogleSheetsStore

__all__ = ["CsvTabularStore", "GoogleSheetsStore", "InMemoryTabularStore", "create_store"]

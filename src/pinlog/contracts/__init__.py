"""Contracts-domain exports."""

from pinlog.contracts.config import PinLogConfig
from pinlog.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    DuplicateKeyError,
    ErrorKind,
    FormatError,
    MissingFieldError,
    PinLogError,
    RemoteApiError,
    StoreError,
    SyncError,
    UnknownItemTypeError,
)
from pinlog.contracts.fetcher import ItemFetcher
from pinlog.contracts.items import FileItem, Member, MessageItem, PinnedItem, SlackFile, SlackMessage
from pinlog.contracts.row import Row, RowHandle, StoredRow
from pinlog.contracts.store import TabularStore
from pinlog.contracts.sync import RowDiff, SyncPhase, SyncResult

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "DuplicateKeyError",
    "ErrorKind",
    "FileItem",
    "FormatError",
    "ItemFetcher",
    "Member",
    "MessageItem",
    "MissingFieldError",
    "PinLogConfig",
    "PinLogError",
    "PinnedItem",
    "RemoteApiError",
    "Row",
    "RowDiff",
    "RowHandle",
    "SlackFile",
    "SlackMessage",
    "StoreError",
    "StoredRow",
    "SyncError",
    "SyncPhase",
    "SyncResult",
    "TabularStore",
    "UnknownItemTypeError",
]

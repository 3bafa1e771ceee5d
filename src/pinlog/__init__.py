"""Public API surface for pinlog."""

__version__ = "1.0.0"

from pinlog.config import load_config
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
from pinlog.contracts.items import FileItem, Member, MessageItem, PinnedItem
from pinlog.contracts.row import Row, RowHandle, StoredRow, hyperlink_literal
from pinlog.contracts.store import TabularStore
from pinlog.contracts.sync import RowDiff, SyncPhase, SyncResult
from pinlog.engine import SyncEngine, SyncProgress, compute_diff
from pinlog.formatting import ItemFormatter, MemberDirectory, unescape_message_text
from pinlog.sdk import PinLog

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "DuplicateKeyError",
    "ErrorKind",
    "FileItem",
    "FormatError",
    "ItemFetcher",
    "ItemFormatter",
    "Member",
    "MemberDirectory",
    "MessageItem",
    "MissingFieldError",
    "PinLog",
    "PinLogConfig",
    "PinLogError",
    "PinnedItem",
    "RemoteApiError",
    "Row",
    "RowDiff",
    "RowHandle",
    "StoreError",
    "StoredRow",
    "SyncEngine",
    "SyncError",
    "SyncPhase",
    "SyncProgress",
    "SyncResult",
    "TabularStore",
    "UnknownItemTypeError",
    "__version__",
    "compute_diff",
    "hyperlink_literal",
    "load_config",
    "unescape_message_text",
]

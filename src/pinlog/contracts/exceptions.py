"""Exception hierarchy for pinlog.

All pinlog exceptions inherit from :class:`PinLogError` and carry a closed
:class:`ErrorKind` tag, so callers can catch everything with one ``except``
clause and still branch on the failure mode.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    REMOTE_API = "remote_api"
    MISSING_FIELD = "missing_field"
    UNKNOWN_ITEM_TYPE = "unknown_item_type"
    DUPLICATE_KEY = "duplicate_key"
    STORE = "store"
    SYNC = "sync"


class PinLogError(Exception):
    """Base exception for all pinlog errors."""

    kind: ErrorKind = ErrorKind.SYNC


class ConfigError(PinLogError):
    """Configuration loading or validation failure."""

    kind = ErrorKind.CONFIGURATION


class AuthenticationError(PinLogError):
    """A required API token could not be resolved."""

    kind = ErrorKind.AUTHENTICATION


class RemoteApiError(PinLogError):
    """The messaging API reported an error for a call."""

    kind = ErrorKind.REMOTE_API

    def __init__(self, message: str, *, method: str, error: str) -> None:
        super().__init__(message)
        self.method = method
        self.error = error


class FormatError(PinLogError):
    """A pinned item could not be turned into a row."""

    def __init__(self, message: str, *, item_index: int) -> None:
        super().__init__(message)
        self.item_index = item_index


class MissingFieldError(FormatError):
    """A pinned item lacks the payload or field its type tag requires."""

    kind = ErrorKind.MISSING_FIELD

    def __init__(self, message: str, *, item_index: int, field: str) -> None:
        super().__init__(message, item_index=item_index)
        self.field = field


class UnknownItemTypeError(FormatError):
    """A pinned item carries a type tag other than ``message`` or ``file``."""

    kind = ErrorKind.UNKNOWN_ITEM_TYPE

    def __init__(self, message: str, *, item_index: int, item_type: str | None) -> None:
        super().__init__(message, item_index=item_index)
        self.item_type = item_type


class DuplicateKeyError(PinLogError):
    """Two rows on the same side of a diff share a timestamp."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, message: str, *, key: str, source: str) -> None:
        super().__init__(message)
        self.key = key
        self.source = source


class StoreError(PinLogError):
    """The tabular store could not be read or written."""

    kind = ErrorKind.STORE


class SyncError(PinLogError):
    """Engine-level synchronization failure."""

    kind = ErrorKind.SYNC

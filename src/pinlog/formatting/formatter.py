"""Conversion of raw pinned items into canonical rows."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from pinlog.contracts.exceptions import MissingFieldError, UnknownItemTypeError
from pinlog.contracts.items import FileItem, MessageItem, PinnedItem
from pinlog.contracts.row import Row, epoch_to_datetime, hyperlink_literal
from pinlog.formatting.directory import MemberDirectory

_MENTION_RE = re.compile(r"<@(\w+?)>")

# &amp; must be decoded last so "&amp;lt;" yields "&lt;" rather than "<".
_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)

LinkRenderer = Callable[[str, str], str]


def substitute_mentions(text: str, directory: Mapping[str, str]) -> str:
    """Replace ``<@USERID>`` tokens with ``@name``; unknown ids are left verbatim."""

    def _replace(match: re.Match[str]) -> str:
        name = directory.get(match.group(1))
        return f"@{name}" if name else match.group(0)

    return _MENTION_RE.sub(_replace, text)


def unescape_message_text(text: str | None, directory: Mapping[str, str]) -> str:
    decoded = text or ""
    for entity, char in _ENTITIES:
        decoded = decoded.replace(entity, char)
    return substitute_mentions(decoded, directory)


def _error_field(exc: ValidationError, default: str) -> str:
    errors = exc.errors()
    if not errors:
        return default  # pragma: no cover
    return ".".join(str(part) for part in errors[0]["loc"]) or default


def parse_pinned_item(raw: Any, *, index: int) -> PinnedItem:
    """Narrow a raw API item to :class:`MessageItem` or :class:`FileItem`.

    Raises:
        UnknownItemTypeError: The item is not an object, or its type tag is
            neither ``message`` nor ``file``.
        MissingFieldError: The payload for the declared type is absent or
            lacks a required field.
    """
    item_type = raw.get("type") if isinstance(raw, Mapping) else None
    if not isinstance(item_type, str) or item_type not in {"message", "file"}:
        raise UnknownItemTypeError(
            f"pinned item #{index} has unsupported type {item_type!r}",
            item_index=index,
            item_type=item_type if isinstance(item_type, str) else None,
        )

    payload = raw.get(item_type)
    if not payload:
        raise MissingFieldError(
            f"pinned item #{index} is tagged {item_type!r} but has no {item_type} payload",
            item_index=index,
            field=item_type,
        )

    try:
        if item_type == "message":
            return MessageItem.model_validate({"type": item_type, "message": payload})
        return FileItem.model_validate({"type": item_type, "file": payload})
    except ValidationError as exc:
        field = _error_field(exc, item_type)
        raise MissingFieldError(
            f"pinned item #{index} has an invalid {item_type} payload ({field})",
            item_index=index,
            field=field,
        ) from exc


class ItemFormatter:
    """Turns pinned items into pinned rows using a member directory snapshot."""

    def __init__(self, directory: MemberDirectory, *, link_renderer: LinkRenderer = hyperlink_literal) -> None:
        self._directory = directory
        self._link_renderer = link_renderer

    def format_message(self, item: MessageItem) -> Row:
        message = item.message
        return Row(
            timestamp=message.ts,
            datetime=epoch_to_datetime(message.ts),
            user=self._directory.resolve(message.user) if message.user else "",
            text=unescape_message_text(message.text, self._directory),
            pinned=True,
        )

    def format_file(self, item: FileItem) -> Row:
        file = item.file
        return Row(
            timestamp=file.id,
            datetime=epoch_to_datetime(file.created),
            user=self._directory.resolve(file.user) if file.user else "",
            text=self._link_renderer(file.permalink, file.display_name),
            pinned=True,
            link=True,
        )

    def format_item(self, item: PinnedItem) -> Row:
        if isinstance(item, MessageItem):
            return self.format_message(item)
        return self.format_file(item)

    def format_items(self, raw_items: Iterable[Any]) -> list[Row]:
        return [self.format_item(parse_pinned_item(raw, index=index)) for index, raw in enumerate(raw_items)]

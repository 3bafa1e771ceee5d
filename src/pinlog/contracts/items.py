"""Pinned item contracts.

A pinned item is either a message or a file; each case carries only its own
payload.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, field_validator


class SlackMessage(BaseModel):
    ts: str
    user: str | None = None
    text: str | None = None

    @field_validator("ts", mode="before")
    @classmethod
    def _ts_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return repr(value)
        return value

    @field_validator("ts")
    @classmethod
    def _ts_is_epoch(cls, value: str) -> str:
        try:
            float(value)
        except ValueError as exc:
            raise ValueError(f"ts is not an epoch timestamp: {value!r}") from exc
        return value


class SlackFile(BaseModel):
    id: str
    created: float
    permalink: str
    user: str | None = None
    name: str | None = None
    title: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def display_name(self) -> str:
        return self.title or self.name or self.id


class MessageItem(BaseModel):
    type: Literal["message"] = "message"
    message: SlackMessage


class FileItem(BaseModel):
    type: Literal["file"] = "file"
    file: SlackFile


PinnedItem = MessageItem | FileItem


class Member(BaseModel):
    id: str
    name: str

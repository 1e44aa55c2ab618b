"""Typed models for the speedrun.com notifications API.

Scalars are strict: a string where a number or bool belongs is a decode
failure. Absent or null fields take their zero value.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator


class WireModel(BaseModel):  # type: ignore[explicit-any]
    """Frozen base that treats JSON null like an absent field."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _null_is_zero(cls, data: Any) -> Any:  # type: ignore[explicit-any]
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Notification(WireModel):
    """A single notification as returned by the API."""

    id: StrictStr = ""
    title: StrictStr = ""
    path: StrictStr = ""
    read: StrictBool = False
    date: StrictInt = 0  # epoch seconds


class Pagination(WireModel):
    """Pagination metadata for the fetched page."""

    count: StrictInt = 0
    page: StrictInt = 0
    pages: StrictInt = 0
    per: StrictInt = 0


class NotificationResponse(WireModel):
    """Decoded `GetNotifications` response."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    unread_count: StrictInt = Field(default=0, alias="unreadCount")
    notifications: tuple[Notification, ...] = ()
    pagination: Pagination = Field(default_factory=Pagination)

    def unread(self) -> list[Notification]:
        """Unread notifications in API order."""
        return [n for n in self.notifications if not n.read]

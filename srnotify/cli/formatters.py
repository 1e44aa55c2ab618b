"""Formatting helpers shared by the plain-text and interactive renderers."""

from __future__ import annotations

from datetime import datetime, tzinfo

from srnotify.cli.models import Notification
from srnotify.constants import TIMESTAMP_FORMAT, WEB_ORIGIN

READ_MARKER = "✓"
UNREAD_MARKER = "!"


def format_timestamp(epoch_seconds: int, tz: tzinfo | None = None) -> str:
    """Convert epoch seconds to `YYYY-MM-DD HH:MM:SS`.

    Uses the local system timezone unless `tz` is given.
    """
    if tz is None:
        dt = datetime.fromtimestamp(epoch_seconds).astimezone()
    else:
        dt = datetime.fromtimestamp(epoch_seconds, tz)
    return dt.strftime(TIMESTAMP_FORMAT)


def notification_url(notification: Notification) -> str:
    """Absolute web URL for a notification."""
    return WEB_ORIGIN + notification.path


def display_url(notification: Notification) -> str:
    """Short URL shown in the interactive list (no scheme, no `www.`)."""
    return f"speedrun.com{notification.path}"


def read_marker(notification: Notification) -> str:
    return READ_MARKER if notification.read else UNREAD_MARKER

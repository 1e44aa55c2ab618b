"""Styled fragments for the interactive notification list."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import tzinfo

from rich.text import Text

from srnotify.cli.formatters import display_url, format_timestamp, read_marker
from srnotify.cli.models import Notification
from srnotify.cli.tui.theme import Theme

ITEM_BAR = "▌ "
# Marker/date line, title line, URL line
ITEM_LINES = 3
# Item lines plus the blank separator
ITEM_HEIGHT = ITEM_LINES + 1


def render_notification(
    notification: Notification,
    theme: Theme,
    *,
    selected: bool = False,
    tz: tzinfo | None = None,
) -> Text:
    """Render one notification as three bar-prefixed lines."""
    bar_style = theme.selected_bar if selected else theme.unselected_bar
    item_style = theme.selected_item if selected else theme.unselected_item
    marker_style = theme.read_marker if notification.read else theme.unread_marker

    status = Text()
    status.append("[")
    status.append(read_marker(notification), style=marker_style)
    status.append(f"] {format_timestamp(notification.date, tz)}")

    title = Text(notification.title)
    url = Text(display_url(notification), style=theme.url)

    item = Text(style=item_style)
    for i, line in enumerate((status, title, url)):
        if i:
            item.append("\n")
        item.append(ITEM_BAR, style=bar_style)
        item.append_text(line)
    return item


def render_content(
    notifications: Sequence[Notification],
    selected: int | None,
    theme: Theme,
    *,
    tz: tzinfo | None = None,
) -> Text:
    """Render every notification; selection only changes emphasis."""
    content = Text()
    for i, notification in enumerate(notifications):
        content.append_text(render_notification(notification, theme, selected=i == selected, tz=tz))
        content.append("\n\n")
    return content

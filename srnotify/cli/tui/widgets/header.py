"""Title block and unread-count badge."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from srnotify.cli.tui.base import NotifyMixin
from srnotify.cli.tui.theme import DEFAULT_THEME, Theme

TITLE = "SPEEDRUN.COM NOTIFICATIONS"


class NotificationHeader(NotifyMixin, Horizontal):
    """Header row: gold title next to a bordered unread count."""

    DEFAULT_CSS = """
    NotificationHeader {
        width: 100%;
        height: 3;
    }
    NotificationHeader #header-title {
        width: auto;
        padding: 0 1;
        margin-top: 1;
    }
    NotificationHeader #unread-badge {
        width: auto;
        height: 3;
        padding: 0 1;
        margin-left: 1;
    }
    """

    def __init__(self, unread_count: int, viewer_theme: Theme = DEFAULT_THEME, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.unread_count = unread_count
        self.viewer_theme = viewer_theme

    def compose(self) -> ComposeResult:
        yield Static(TITLE, id="header-title")
        yield Static(f"{self.unread_count} unread", id="unread-badge")

    def on_mount(self) -> None:
        title = self.query_one("#header-title", Static)
        title.styles.color = self.viewer_theme.title_color
        title.styles.background = self.viewer_theme.title_background
        title.styles.text_style = "bold"

        badge = self.query_one("#unread-badge", Static)
        badge.styles.color = self.viewer_theme.unread_color
        badge.styles.background = self.viewer_theme.unread_background
        badge.styles.border = ("solid", self.viewer_theme.unread_border)

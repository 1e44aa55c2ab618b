"""Bottom status bar with page position and key hints."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from srnotify.cli.models import Pagination
from srnotify.cli.tui.base import NotifyMixin
from srnotify.cli.tui.theme import DEFAULT_THEME, Theme

KEY_HINTS = "j/k or ↑/↓ to navigate • enter open • q quit"


def status_text(pagination: Pagination) -> str:
    return f"Page {pagination.page}/{pagination.pages} • {KEY_HINTS}"


class StatusBar(NotifyMixin, Widget):
    DEFAULT_CSS = """
    StatusBar {
        width: 100%;
        height: 2;
        padding: 0 1;
    }
    """

    def __init__(self, pagination: Pagination, viewer_theme: Theme = DEFAULT_THEME, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.pagination = pagination
        self.viewer_theme = viewer_theme

    def on_mount(self) -> None:
        self.styles.border_top = ("solid", self.viewer_theme.status_rule)

    def render(self) -> Text:
        return Text(status_text(self.pagination), style=self.viewer_theme.status_bar)

"""Scrollable viewport holding the rendered notification list."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.geometry import Region
from textual.widgets import Static

from srnotify.cli.tui.base import NotifyMixin
from srnotify.cli.tui.theme import DEFAULT_THEME, Theme


class NotificationViewport(NotifyMixin, VerticalScroll):
    """Scroll container; owns the scroll offset and page/home/end keys."""

    DEFAULT_CSS = """
    NotificationViewport {
        width: 100%;
        height: 1fr;
    }
    NotificationViewport #notification-content {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, viewer_theme: Theme = DEFAULT_THEME, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.viewer_theme = viewer_theme

    def compose(self) -> ComposeResult:
        yield Static(id="notification-content")

    def on_mount(self) -> None:
        self.styles.border = ("round", self.viewer_theme.viewport_border)

    def set_viewport_size(self, width: int, height: int) -> None:
        """Size the content area; the border sits outside it."""
        self.styles.width = width + 2
        self.styles.height = height + 2

    def show(self, content: Text) -> None:
        self.query_one("#notification-content", Static).update(content)

    def keep_visible(self, top: int, lines: int) -> None:
        """Scroll just enough to bring content lines [top, top + lines) into view."""
        self.scroll_to_region(Region(0, top, max(self.size.width, 1), lines), animate=False)

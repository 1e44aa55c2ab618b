"""Interactive notification viewer.

Layout, top to bottom: header with unread count, scrollable notification list,
status bar. A failed fetch replaces the whole layout with an error message.
"""

from __future__ import annotations

import logging
from datetime import tzinfo

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.widgets import Static

from srnotify.cli.browser import BrowserLauncher
from srnotify.cli.models import NotificationResponse
from srnotify.cli.tui.controller import KeyOutcome, ViewerController
from srnotify.cli.tui.render import render_content
from srnotify.cli.tui.theme import DEFAULT_THEME, Theme
from srnotify.cli.tui.widgets.header import NotificationHeader
from srnotify.cli.tui.widgets.notification_list import NotificationViewport
from srnotify.cli.tui.widgets.status_bar import StatusBar
from srnotify.errors import NotifyError

logger = logging.getLogger(__name__)


class NotificationsApp(App[int]):
    """Full-screen notification list; the exit value is the process exit code."""

    BINDINGS = [
        Binding("q", "viewer_key('q')", "Quit", priority=True),
        Binding("ctrl+c", "viewer_key('ctrl+c')", "Quit", priority=True, show=False),
        Binding("up", "viewer_key('up')", "Up", key_display="↑", priority=True, show=False),
        Binding("k", "viewer_key('k')", "Up", priority=True, show=False),
        Binding("down", "viewer_key('down')", "Down", key_display="↓", priority=True, show=False),
        Binding("j", "viewer_key('j')", "Down", priority=True, show=False),
        Binding("enter", "viewer_key('enter')", "Open", key_display="↵", priority=True),
    ]

    CSS = """
    Screen {
        padding: 0 1;
    }
    #error-view {
        width: 100%;
        height: auto;
    }
    """

    def __init__(
        self,
        response: NotificationResponse | None,
        launcher: BrowserLauncher,
        *,
        error: NotifyError | None = None,
        viewer_theme: Theme = DEFAULT_THEME,
        tz: tzinfo | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(**kwargs)
        if response is None and error is None:
            raise ValueError("NotificationsApp needs a response or an error")
        self.response = response or NotificationResponse()
        self.viewer_theme = viewer_theme
        self.tz = tz
        self.controller = ViewerController(self.response.notifications, launcher, error=error)

    @property
    def error_message(self) -> str | None:
        if self.controller.error is None:
            return None
        return f"Error: {self.controller.error}"

    def compose(self) -> ComposeResult:
        if self.error_message is not None:
            yield Static(Text(self.error_message, style=self.viewer_theme.error), id="error-view")
            return
        yield NotificationHeader(self.response.unread_count, self.viewer_theme, id="header")
        yield NotificationViewport(self.viewer_theme, id="viewport")
        yield StatusBar(self.response.pagination, self.viewer_theme, id="status-bar")

    def on_mount(self) -> None:
        if self.controller.error is not None:
            return
        self._apply_size(self.size.width, self.size.height)
        self.query_one(NotificationViewport).focus()
        self._refresh_content()

    def on_resize(self, event: events.Resize) -> None:
        if self._viewport_or_none() is None:
            return
        self._apply_size(event.size.width, event.size.height)
        self._refresh_content()

    def action_viewer_key(self, key: str) -> None:
        outcome = self.controller.handle_key(key)
        logger.debug("Key %s -> %s", key, outcome.value)
        if outcome is KeyOutcome.QUIT:
            self.exit(1 if self.controller.error is not None else 0)
        elif outcome is KeyOutcome.HANDLED:
            self._refresh_content()

    def _viewport_or_none(self) -> NotificationViewport | None:
        if self.controller.error is not None:
            return None
        try:
            return self.query_one(NotificationViewport)
        except NoMatches:
            return None

    def _apply_size(self, width: int, height: int) -> None:
        viewport_width, viewport_height = self.controller.resize(width, height)
        self.query_one(NotificationViewport).set_viewport_size(viewport_width, viewport_height)

    def _refresh_content(self) -> None:
        """Re-render the whole list into the viewport."""
        viewport = self.query_one(NotificationViewport)
        viewport.show(
            render_content(
                self.controller.notifications,
                self.controller.state.selected,
                self.viewer_theme,
                tz=self.tz,
            )
        )
        region = self.controller.selected_region()
        if region is not None:
            viewport.keep_visible(*region)

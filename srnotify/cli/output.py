"""Output strategies for a fetched notification response.

`JSONOutput` and `PlainTextOutput` write to a stream and return; the
interactive output runs the Textual app until the user quits.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from datetime import tzinfo
from typing import TextIO

from srnotify.cli.browser import BrowserLauncher, SystemBrowserLauncher
from srnotify.cli.formatters import format_timestamp, notification_url, read_marker
from srnotify.cli.models import NotificationResponse
from srnotify.cli.tui.theme import DEFAULT_THEME, Theme
from srnotify.errors import FormatError, NotifyError

JSON_INDENT = 2
NO_NOTIFICATIONS = "No notifications."


class Output(ABC):
    """Presentation mode for one run."""

    @abstractmethod
    def present(self, response: NotificationResponse) -> int:
        """Present the response; return the process exit code."""

    def present_error(self, error: NotifyError) -> int:
        """Present a fetch failure; batch outputs let it propagate."""
        raise error


class JSONOutput(Output):
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def render(self, response: NotificationResponse) -> str:
        try:
            return response.model_dump_json(by_alias=True, indent=JSON_INDENT)
        except (TypeError, ValueError) as e:
            raise FormatError(e) from e

    def present(self, response: NotificationResponse) -> int:
        document = self.render(response)
        _write(self.stream, document + "\n")
        return 0


class PlainTextOutput(Output):
    """Line-oriented listing; read notifications are skipped unless show_all."""

    def __init__(self, stream: TextIO | None = None, *, show_all: bool = False, tz: tzinfo | None = None) -> None:
        self.stream = stream
        self.show_all = show_all
        self.tz = tz

    def render(self, response: NotificationResponse) -> str:
        pagination = response.pagination
        lines = [f"{response.unread_count} unread · page {pagination.page}/{pagination.pages}"]
        shown = response.notifications if self.show_all else response.unread()
        if not shown:
            lines.append(NO_NOTIFICATIONS)
        for notification in shown:
            lines.append(
                f"[{read_marker(notification)}] {format_timestamp(notification.date, self.tz)}  {notification.title}"
            )
            lines.append(f"    {notification_url(notification)}")
        return "\n".join(lines) + "\n"

    def present(self, response: NotificationResponse) -> int:
        _write(self.stream, self.render(response))
        return 0


class InteractiveOutput(Output):
    """Full-screen viewer; a fetch failure becomes a static error view."""

    def __init__(
        self,
        launcher: BrowserLauncher | None = None,
        *,
        viewer_theme: Theme = DEFAULT_THEME,
    ) -> None:
        self.launcher = launcher or SystemBrowserLauncher()
        self.viewer_theme = viewer_theme

    def present(self, response: NotificationResponse) -> int:
        return self._run(response, None)

    def present_error(self, error: NotifyError) -> int:
        self._run(None, error)
        return 1

    def _run(self, response: NotificationResponse | None, error: NotifyError | None) -> int:
        # Imported here so batch modes do not pay for loading Textual
        from srnotify.cli.tui.app import NotificationsApp

        app = NotificationsApp(response, self.launcher, error=error, viewer_theme=self.viewer_theme)
        result = app.run()
        return result if result is not None else 0


def _write(stream: TextIO | None, text: str) -> None:
    target = stream if stream is not None else sys.stdout
    try:
        target.write(text)
        target.flush()
    except OSError as e:
        raise FormatError(e) from e

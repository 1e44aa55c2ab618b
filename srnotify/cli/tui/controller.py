"""Viewer state and key handling for the interactive notification list.

The controller owns selection and terminal size. Scrolling itself belongs to
the Textual scroll container; keys the controller does not claim are
forwarded to it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from srnotify.cli.browser import BrowserLauncher
from srnotify.cli.formatters import notification_url
from srnotify.cli.models import Notification
from srnotify.cli.tui.render import ITEM_HEIGHT, ITEM_LINES
from srnotify.constants import VIEWPORT_CHROME_HEIGHT, VIEWPORT_CHROME_WIDTH
from srnotify.errors import NotifyError, PlatformError

logger = logging.getLogger(__name__)


class ViewerPhase(str, Enum):
    READY = "ready"
    ERROR = "error"
    EXITED = "exited"


class KeyOutcome(str, Enum):
    """What the app should do after a key was handled."""

    HANDLED = "handled"  # state may have changed, re-render
    QUIT = "quit"
    FORWARD = "forward"  # pass to the scroll container
    IGNORED = "ignored"


@dataclass
class ViewerState:
    """Mutable state of one interactive session."""

    phase: ViewerPhase = ViewerPhase.READY
    selected: int | None = None
    width: int = 0
    height: int = 0
    viewport_width: int = 0
    viewport_height: int = 0


QUIT_KEYS = frozenset({"q", "ctrl+c"})
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
OPEN_KEYS = frozenset({"enter"})


class ViewerController:
    """State machine behind the interactive viewer."""

    def __init__(
        self,
        notifications: Sequence[Notification],
        launcher: BrowserLauncher,
        *,
        error: NotifyError | None = None,
    ) -> None:
        self.notifications = tuple(notifications)
        self.launcher = launcher
        self.error = error
        if error is not None:
            self.state = ViewerState(phase=ViewerPhase.ERROR)
        else:
            self.state = ViewerState(selected=0 if self.notifications else None)

    @property
    def selected_notification(self) -> Notification | None:
        if self.state.selected is None:
            return None
        return self.notifications[self.state.selected]

    def handle_key(self, key: str) -> KeyOutcome:
        """Apply a key press to the viewer state."""
        if self.state.phase is ViewerPhase.EXITED:
            return KeyOutcome.IGNORED
        if key in QUIT_KEYS:
            self.state.phase = ViewerPhase.EXITED
            return KeyOutcome.QUIT
        if self.state.phase is ViewerPhase.ERROR:
            return KeyOutcome.IGNORED

        if key in UP_KEYS:
            self.move_up()
        elif key in DOWN_KEYS:
            self.move_down()
        elif key in OPEN_KEYS:
            self.open_selected()
        else:
            return KeyOutcome.FORWARD
        return KeyOutcome.HANDLED

    def move_up(self) -> None:
        if self.state.selected is not None and self.state.selected > 0:
            self.state.selected -= 1

    def move_down(self) -> None:
        if self.state.selected is not None and self.state.selected < len(self.notifications) - 1:
            self.state.selected += 1

    def open_selected(self) -> bool:
        """Open the selected notification in the browser.

        Launch failures are not reported to the user.

        Returns:
            True if a launch was attempted and did not raise
        """
        notification = self.selected_notification
        if notification is None:
            return False
        url = notification_url(notification)
        try:
            self.launcher.open(url)
        except (PlatformError, OSError) as e:
            logger.debug("Browser launch failed for %s: %s", url, e)
            return False
        return True

    def resize(self, width: int, height: int) -> tuple[int, int]:
        """Store terminal size and return the new viewport size."""
        self.state.width = width
        self.state.height = height
        self.state.viewport_width = max(width - VIEWPORT_CHROME_WIDTH, 0)
        self.state.viewport_height = max(height - VIEWPORT_CHROME_HEIGHT, 0)
        return self.state.viewport_width, self.state.viewport_height

    def selected_region(self) -> tuple[int, int] | None:
        """Return (top line, line count) of the selected item in the content."""
        if self.state.selected is None:
            return None
        return self.state.selected * ITEM_HEIGHT, ITEM_LINES

"""Open URLs in the system's default browser."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Protocol

from srnotify.errors import PlatformError

logger = logging.getLogger(__name__)


class BrowserLauncher(Protocol):
    """Side-effect port used by the interactive viewer to open URLs."""

    def open(self, url: str) -> None: ...


def browser_command(url: str, platform: str) -> list[str]:
    """Return the open-default-browser command for a platform.

    Raises:
        PlatformError: If the platform has no known command
    """
    if platform.startswith("linux"):
        return ["xdg-open", url]
    if platform == "win32":
        return ["cmd", "/c", "start", url]
    if platform == "darwin":
        return ["open", url]
    raise PlatformError(f"unsupported platform: {platform}")


class SystemBrowserLauncher:
    """Spawn the platform's opener and return without waiting for it."""

    def __init__(self, platform: str = sys.platform) -> None:
        self.platform = platform

    def open(self, url: str) -> None:
        cmd = browser_command(url, self.platform)
        logger.debug("Launching browser: %s", cmd)
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=self.platform != "win32",
        )


class NullBrowserLauncher:
    """Launcher that ignores every request."""

    def open(self, url: str) -> None:
        _ = url

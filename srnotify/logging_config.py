"""srnotify logging configuration.

Logs go to stderr by default. Set `SRNOTIFY_LOG_FILE` to keep them while the
interactive viewer owns the terminal; without it, viewer runs drop log output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LEVEL = "WARNING"
VIEWER_LOGS_DROPPED = "Logs are not shown in the interactive viewer; set SRNOTIFY_LOG_FILE to keep them."


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None, *, interactive: bool = False) -> None:
    """Configure srnotify logging.

    Args:
        level: Optional override for `SRNOTIFY_LOG_LEVEL`.
        log_file: Optional override for `SRNOTIFY_LOG_FILE`.
        interactive: The Textual viewer will own the terminal, so stderr is
            not a usable log target.
    """
    level_name = (level or os.getenv("SRNOTIFY_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.WARNING)
    target = log_file or os.getenv("SRNOTIFY_LOG_FILE")

    handler: logging.Handler
    if target:
        handler = logging.FileHandler(os.path.expanduser(target), encoding="utf-8")
    elif interactive:
        handler = logging.NullHandler()
        if numeric_level < logging.WARNING:
            print(VIEWER_LOGS_DROPPED, file=sys.stderr)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("srnotify")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)
    root.propagate = False

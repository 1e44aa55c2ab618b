"""Runtime settings.

Settings come from the environment, optionally seeded from a `.env` file:
    from srnotify.config import load_settings
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from srnotify.constants import REQUEST_TIMEOUT_S
from srnotify.errors import ValidationError

_env_path = os.getenv("SRNOTIFY_ENV_PATH")
_dotenv_path = Path(_env_path).expanduser() if _env_path else Path.cwd() / ".env"

load_dotenv(_dotenv_path)


@dataclass(frozen=True)
class Settings:
    """Environment-derived settings.

    Attributes:
        session: Fallback `PHPSESSID` value when `-session` is not given.
        timeout: Request timeout in seconds.
        log_level: Log level name, None for the logging default.
        log_file: Log file path, None for stderr.
    """

    session: str | None
    timeout: float
    log_level: str | None
    log_file: str | None


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from e


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        session=os.getenv("SRNOTIFY_SESSION") or None,
        timeout=_float_env("SRNOTIFY_TIMEOUT", REQUEST_TIMEOUT_S),
        log_level=os.getenv("SRNOTIFY_LOG_LEVEL") or None,
        log_file=os.getenv("SRNOTIFY_LOG_FILE") or None,
    )

"""srnotify: show your speedrun.com notifications.

Usage:
  srnotify -session <PHPSESSID>            # interactive list (plain text when piped)
  srnotify -session <PHPSESSID> -plain     # unread notifications as text
  srnotify -session <PHPSESSID> -all       # all notifications as text
  srnotify -session <PHPSESSID> -json      # decoded response as JSON
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from srnotify.cli.api_client import SpeedrunClient
from srnotify.cli.output import InteractiveOutput, JSONOutput, Output, PlainTextOutput
from srnotify.config import Settings, load_settings
from srnotify.errors import NotifyError, ValidationError
from srnotify.logging_config import setup_logging

logger = logging.getLogger(__name__)

MISSING_SESSION = "Please provide your PHPSESSID using the -session flag"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srnotify",
        description="Show your speedrun.com notifications.",
        allow_abbrev=False,
    )
    parser.add_argument("-session", "--session", default="", help="Speedrun.com PHPSESSID cookie value")
    parser.add_argument("-json", "--json", action="store_true", help="Print the raw response as JSON")
    parser.add_argument("-all", "--all", action="store_true", help="Include read notifications (plain text)")
    parser.add_argument("-plain", "--plain", action="store_true", help="Print plain text instead of the viewer")
    parser.add_argument("-debug", "--debug", action="store_true", help="Enable debug logging")
    return parser


def select_output(args: argparse.Namespace, stdout: TextIO) -> Output:
    """Pick the output mode from flags and whether stdout is a terminal."""
    if args.json:
        return JSONOutput(stdout)
    if args.all or args.plain or not stdout.isatty():
        return PlainTextOutput(stdout, show_all=args.all)
    return InteractiveOutput()


def run(args: argparse.Namespace, settings: Settings, output: Output) -> int:
    """Fetch once and hand the result to the selected output.

    Raises:
        NotifyError: On any failure in batch modes
    """
    session = args.session or settings.session
    if not session:
        raise ValidationError(MISSING_SESSION)

    try:
        with SpeedrunClient(session, timeout=settings.timeout) as client:
            response = client.fetch_notifications()
    except NotifyError as e:
        logger.debug("Fetch failed: %s", e)
        return output.present_error(e)
    return output.present(response)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        output = select_output(args, sys.stdout)
        setup_logging(
            "DEBUG" if args.debug else settings.log_level,
            settings.log_file,
            interactive=isinstance(output, InteractiveOutput),
        )
        return run(args, settings, output)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 1
    except NotifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 1
    except Exception as e:  # noqa: BLE001 - CLI error path
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error running program: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

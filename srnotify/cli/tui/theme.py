"""Colors and styling for the interactive viewer.

All styles live on one frozen `Theme` that is passed to the renderer and
widgets. Palette: gold accents on a dark background.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.style import Style

GOLD = "#FFD700"
GOLD_BACKGROUND = "#2C2A1C"
DARK_BACKGROUND = "#1A1B26"
MUTED_BORDER = "#404040"
READ_GREEN = "#00FF00"
URL_BLUE = "#5F89F4"
STATUS_GRAY = "#666666"
STATUS_RULE = "#333333"
VIEWPORT_BORDER = "#3B82F6"


@dataclass(frozen=True)
class Theme:
    """Immutable style set for the notification viewer."""

    selected_bar: Style = field(default_factory=lambda: Style(color=GOLD, bgcolor=GOLD_BACKGROUND))
    selected_item: Style = field(default_factory=lambda: Style(bgcolor=GOLD_BACKGROUND))
    unselected_bar: Style = field(default_factory=lambda: Style(color=MUTED_BORDER))
    unselected_item: Style = field(default_factory=Style)
    read_marker: Style = field(default_factory=lambda: Style(color=READ_GREEN))
    unread_marker: Style = field(default_factory=lambda: Style(color=GOLD))
    url: Style = field(default_factory=lambda: Style(color=URL_BLUE, dim=True))
    status_bar: Style = field(default_factory=lambda: Style(color=STATUS_GRAY))
    error: Style = field(default_factory=lambda: Style(color="red", bold=True))
    # CSS colors for header and container borders
    title_color: str = "#000000"
    title_background: str = GOLD
    unread_color: str = GOLD
    unread_background: str = DARK_BACKGROUND
    unread_border: str = GOLD
    viewport_border: str = VIEWPORT_BORDER
    status_rule: str = STATUS_RULE


DEFAULT_THEME = Theme()

"""Base mixin for srnotify TUI widgets."""


class NotifyMixin:
    """Mixin for widgets that render controlled content.

    Notification titles come from the API; Textual's link processing is
    suppressed so they render verbatim.
    """

    auto_links = False

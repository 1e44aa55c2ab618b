"""srnotify: speedrun.com notification viewer."""

__version__ = "0.1.0"

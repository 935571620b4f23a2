"""Campaign console: global search across members, campaigns and segments."""

__version__ = "0.1.0"

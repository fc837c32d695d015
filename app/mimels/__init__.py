"""mimels - list files recursively, grouped by content type."""

__version__ = "0.1.0"

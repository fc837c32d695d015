"""CLI package for mimels.

This package contains the Typer application and its entry point.
"""

from mimels.cli.main import app, main

__all__ = ["app", "main"]

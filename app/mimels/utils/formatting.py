"""Rich console formatting utilities.

Diagnostics go to standard error, prefixed with the program name and a
[WARNING] or [ERROR] tag. Standard output is reserved for the listing.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from mimels.core.paths import APP_NAME

_THEME = Theme(
    {
        "warning": "#f5b332",
        "error": "bold #f53263",
        "muted": "#b2bec3",
    }
)

# Shared stderr console; highlighting and emoji codes off so paths are printed verbatim
err_console = Console(theme=_THEME, stderr=True, highlight=False, emoji=False)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"{APP_NAME}: [warning]\\[WARNING][/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"{APP_NAME}: [error]\\[ERROR][/] {escape(message)}", soft_wrap=True)


def setup_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level; otherwise WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

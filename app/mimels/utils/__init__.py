"""Utility modules for mimels.

This module exports commonly used utility functions.
"""

from mimels.utils.formatting import err_console, print_error, print_warning, setup_logging

__all__ = [
    "err_console",
    "print_error",
    "print_warning",
    "setup_logging",
]

"""Utility modules for sandboxfs.

This module exports commonly used console helpers.
"""

from sandboxfs.utils.formatting import (
    console,
    create_roots_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_roots_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]

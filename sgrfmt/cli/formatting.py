"""Formatting utilities for the sgrfmt CLI.

The CLI styles its own messages with the library's macros.
"""

import os
import sys

from sgrfmt.macros import blue, green, red, yellow


def should_use_colors() -> bool:
    """Determine if colors should be used based on terminal capabilities."""
    if "NO_COLOR" in os.environ:
        return False

    if "FORCE_COLOR" in os.environ:
        return True

    return sys.stdout.isatty()


def resolve_color_flag(setting: str) -> bool:
    """Turn an "auto"/"always"/"never" setting into click's color flag."""
    if setting == "always":
        return True
    if setting == "never":
        return False
    return should_use_colors()


def format_error(message: str) -> str:
    """Format an error message.

    Args:
        message (str): The error message

    Returns:
        str: Formatted error message
    """
    return f"{red('Error:')} {message}"


def format_warning(message: str) -> str:
    """Format a warning message."""
    return f"{yellow('Warning:')} {message}"


def format_success(message: str) -> str:
    """Format a success message."""
    return green(message)


def format_validation_hint(message: str) -> str:
    """Format a validation hint message."""
    return f"  {blue('•')} {message}"

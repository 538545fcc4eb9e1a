# ABOUTME: Terminal colour capability detection and accent styling helpers
# ABOUTME: Honours NO_COLOR and only colours output going to a terminal
"""Colour accents for diagnostics"""

import os
import sys

import click

_forced_off = False


def disable_colors() -> None:
    """Turn colour off for the rest of the process (``--no-color``)."""
    global _forced_off
    _forced_off = True


def color_enabled(stream=None) -> bool:
    """
    Check whether ANSI colour should be used.

    Args:
        stream: Stream the text will be written to (defaults to stderr)

    Returns:
        False when disabled by flag, NO_COLOR is set, or the stream is not a tty
    """
    if _forced_off or os.environ.get("NO_COLOR"):
        return False

    stream = stream if stream is not None else sys.stderr
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def red(text: str, enabled: bool) -> str:
    return click.style(text, fg="red") if enabled else text


def yellow(text: str, enabled: bool) -> str:
    return click.style(text, fg="yellow") if enabled else text


def green(text: str, enabled: bool) -> str:
    return click.style(text, fg="green") if enabled else text

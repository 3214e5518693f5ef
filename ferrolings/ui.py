"""Coloured status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console

_WARN_EMOJI = "⚠️ "
_WARN_PLAIN = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_PLAIN = "✓"


def emoji_enabled() -> bool:
    """Return False when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def format_warn(message: str) -> str:
    """Return a warning line with its marker, without colour."""
    marker = _WARN_EMOJI if emoji_enabled() else _WARN_PLAIN
    return f"{marker} {message}"


def format_success(message: str) -> str:
    """Return a success line with its marker, without colour."""
    marker = _SUCCESS_EMOJI if emoji_enabled() else _SUCCESS_PLAIN
    return f"{marker} {message}"


def _print(text: str, style: str) -> None:
    console = Console(highlight=False, soft_wrap=True)
    console.print(text, style=style, markup=False, emoji=False)


def warn(message: str) -> None:
    """Print a warning in red."""
    _print(format_warn(message), "red")


def success(message: str) -> None:
    """Print a success message in green."""
    _print(format_success(message), "green")
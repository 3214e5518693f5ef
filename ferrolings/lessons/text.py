"""String handling: trimming, composing, replacing and choosing the longer one."""

from __future__ import annotations


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def longest(x: str, y: str) -> str:
    """Return the string with more UTF-8 bytes; y wins a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y
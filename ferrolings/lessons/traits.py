"""Shared behaviour: appending "Bar" and common licensing information."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Return value with "Bar" appended; supports strings and lists of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Mixin providing the default licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 1


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = "v2.0.0"


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both programs report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()
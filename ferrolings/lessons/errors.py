"""Error handling: name tags, token costs, positive integers and ice cream."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_RANGE = (-(2**31), 2**31 - 1)
_I64_RANGE = (-(2**63), 2**63 - 1)


def _parse_int(text: str, bounds: tuple[int, int]) -> int:
    """Parse a signed decimal integer strictly, within the given bounds."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    low, high = bounds
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Items cost 5 tokens each plus a processing fee of 1 token."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32_RANGE)
    cost = qty * cost_per_item + processing_fee
    low, high = _I32_RANGE
    if not low <= cost <= high:
        raise OverflowError("attempt to compute the total cost with overflow")
    return cost


class CreationError(ValueError):
    """A value could not be made into a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"
    _MESSAGES = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(self._MESSAGES[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind == self.kind

    def __hash__(self) -> int:
        return hash((CreationError, self.kind))

    def __repr__(self) -> str:
        return f"CreationError({self.kind!r})"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive non-zero integer."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(err)

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(err)

    @property
    def is_creation(self) -> bool:
        """True when the text was a number but not a positive one."""
        return isinstance(self.cause, CreationError)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, _I64_RANGE)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_parse_int(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at a given hour: 5 before 22, 0 after, None past 24."""
    if time_of_day > 24:
        return None
    if time_of_day >= 22:
        return 0
    return 5
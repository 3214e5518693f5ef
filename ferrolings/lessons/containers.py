"""Generic wrappers, cons lists and copy-on-write sequences."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    tail: Union[Cons, Nil]


ConsList = Union[Cons, Nil]


def create_empty_list() -> ConsList:
    """Return an empty cons list."""
    return Nil()


def create_non_empty_list() -> ConsList:
    """Return a cons list holding a single element."""
    return Cons(1, Nil())


class CopyOnWrite(Sequence[T]):
    """A sequence that borrows its data until it first needs to change it."""

    def __init__(self, data: Sequence[T], *, owned: bool = False) -> None:
        if owned and not isinstance(data, list):
            data = list(data)
        self._data: Sequence[T] = data
        self._owned = owned

    @property
    def is_owned(self) -> bool:
        """True once the data belongs to this object rather than being borrowed."""
        return self._owned

    def to_mut(self) -> list[T]:
        """Return a mutable list, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        assert isinstance(self._data, list)
        return self._data

    def __getitem__(self, index):  # type: ignore[override]
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(values: CopyOnWrite[int]) -> CopyOnWrite[int]:
    """Make every element non-negative, copying borrowed data only if needed."""
    negatives = [i for i, value in enumerate(values) if value < 0]
    if negatives:
        data = values.to_mut()
        for i in negatives:
            data[i] = -data[i]
    return values
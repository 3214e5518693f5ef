"""Messages that change the state of a small machine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position on a byte grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    """Replace the stored message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Request that the machine stops."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """The machine's current colour, position, message and quit flag."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit_requested: bool = False
    message: str = ""

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, text: str) -> None:
        self.message = text

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")
"""Worked answers on messages, shared behaviour, recursive lists, copy-on-write and generics."""

from __future__ import annotations

import functools
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Quit:
    pass


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                print(text)
            case Quit():
                self.quit = True
            case Move(point=point):
                self.position = point
            case _:
                raise TypeError(f"unknown message: {message!r}")


@functools.singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of a cons list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, Nil()))


class Cow:
    """A sequence that is borrowed until it first needs to change, then copied and owned."""

    def __init__(self, data: Sequence[int], owned: bool = False):
        self._data = data
        self.owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> "Cow":
        return cls(data, owned=False)

    @classmethod
    def from_owned(cls, data: list[int]) -> "Cow":
        return cls(data, owned=True)

    @property
    def is_borrowed(self) -> bool:
        return not self.owned

    def to_mut(self) -> list[int]:
        """Return a list that may be changed, copying the borrowed data first if needed."""
        if not self.owned:
            self._data = list(self._data)
            self.owned = True
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if not isinstance(other, Cow):
            return NotImplemented
        return list(self._data) == list(other._data)

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying borrowed data only when a change is needed."""
    for index, value in enumerate(tuple(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T
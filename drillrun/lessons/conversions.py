"""Worked answers on conversions: text to records, components to colours, text sizes."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_LIMIT = 2**64
_COLOR_RANGE = range(0, 256)


def _parse_usize(text: str) -> int:
    """Parse an unsigned 64-bit integer strictly, raising ValueError with the usual messages."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= _USIZE_LIMIT:
        raise ValueError("number too large to fit in target type")
    return value


class PersonErrorKind(enum.Enum):
    """Why text could not be parsed into a Person."""

    EMPTY = "empty input"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Text is not of the form ``name,age``.

    ``cause`` holds the ValueError from parsing the age for PARSE_INT.
    """

    def __init__(self, kind: PersonErrorKind, cause: ValueError | None = None):
        message = kind.value if cause is None else f"{kind.value}: {cause}"
        super().__init__(message)
        self.kind = kind
        self.cause = cause

    def __eq__(self, other):
        if not isinstance(other, ParsePersonError):
            return NotImplemented
        return self.kind is other.kind and str(self) == str(other)

    def __hash__(self):
        return hash((self.kind, str(self)))


@dataclass
class Person:
    """A named person of some age; the default is 30 year old John."""

    name: str = "John"
    age: int = 30

    @classmethod
    def parse(cls, text: str) -> "Person":
        """Parse ``name,age``; raise ParsePersonError when the text does not fit."""
        if not text:
            raise ParsePersonError(PersonErrorKind.EMPTY)
        fields = text.split(",")
        if len(fields) != 2:
            raise ParsePersonError(PersonErrorKind.BAD_LEN)
        name, age_text = fields
        if not name:
            raise ParsePersonError(PersonErrorKind.NO_NAME)
        try:
            age = _parse_usize(age_text)
        except ValueError as err:
            raise ParsePersonError(PersonErrorKind.PARSE_INT, err) from err
        return cls(name, age)

    @classmethod
    def from_text(cls, text: str) -> "Person":
        """Parse ``name,age``, falling back to the default person on any problem."""
        try:
            return cls.parse(text)
        except ParsePersonError:
            return cls()


class ColorErrorKind(enum.Enum):
    """Why components could not be made into a Color."""

    BAD_LEN = "incorrect number of components"
    INT_CONVERSION = "component out of range"


class IntoColorError(ValueError):
    """Components do not describe an RGB colour."""

    def __init__(self, kind: ColorErrorKind):
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, IntoColorError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash(self.kind)


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_components(cls, components) -> "Color":
        """Make a colour from exactly three integer components in 0..=255."""
        values = tuple(components)
        if len(values) != 3:
            raise IntoColorError(ColorErrorKind.BAD_LEN)
        if any(value not in _COLOR_RANGE for value in values):
            raise IntoColorError(ColorErrorKind.INT_CONVERSION)
        return cls(*values)


def byte_counter(text: str) -> int:
    """Number of bytes in the UTF-8 encoding of ``text``."""
    return len(text.encode("utf-8"))


def char_counter(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def num_sq(value: int) -> int:
    """Return the square of ``value``."""
    return value * value
"""Worked answers on error handling: validated text, parsed numbers and custom errors."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width the strict way, with the usual messages."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 2 ** (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for ``item_quantity`` items at 5 each plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Return the tokens left after buying ``item_quantity`` items.

    Raises ValueError if the quantity cannot be parsed or the items cannot be afforded.
    """
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationKind(enum.Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value given was not a positive non-zero integer."""

    def __init__(self, kind: CreationKind):
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other):
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> "PositiveNonzeroInteger":
        """Make one from ``value``; raise CreationError if it is zero or negative."""
        if value < 0:
            raise CreationError(CreationKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationKind.ZERO)
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a positive non-zero integer.

    ``error`` is the underlying CreationError, or the ValueError from parsing.
    """

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error

    @property
    def is_creation(self) -> bool:
        return isinstance(self.error, CreationError)

    @property
    def is_parse_int(self) -> bool:
        return not self.is_creation


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse ``text`` as a 64-bit integer and check that it is positive and non-zero."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err
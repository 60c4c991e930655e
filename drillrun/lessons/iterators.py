"""Worked answers on iterators: capitalising words, checked division, factorials, counting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping

_U64_MAX = 2**64 - 1
_DIVIDEND_SAMPLE = (27, 297, 38502, 81)
_DIVISOR_SAMPLE = 27


def capitalize_first(word: str) -> str:
    """Upper-case the first character of ``word``: "hello" -> "Hello"."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other):
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self):
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self):
        super().__init__("division by zero")

    def __eq__(self, other):
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return ``a / b`` when ``a`` is evenly divisible by ``b``; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def _divide_or_error(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping each quotient or error in place."""
    return [_divide_or_error(n, _DIVISOR_SAMPLE) for n in _DIVIDEND_SAMPLE]


def result_with_list() -> list[int]:
    """Divide each sample number by 27; raise the first DivisionError met."""
    return [divide(n, _DIVISOR_SAMPLE) for n in _DIVIDEND_SAMPLE]


def factorial(num: int) -> int:
    """Return ``num!`` for an unsigned 64-bit ``num``; raise if the result does not fit."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries of ``mapping`` with progress ``value`` using a loop."""
    count = 0
    for progress in mapping.values():
        if progress is value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries of ``mapping`` with progress ``value``."""
    return sum(1 for progress in mapping.values() if progress is value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with progress ``value`` across several mappings using loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with progress ``value`` across several mappings."""
    return sum(count_iterator(mapping, value) for mapping in collection)
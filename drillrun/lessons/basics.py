"""Small worked answers: conditionals, functions, options, strings and lists."""

from __future__ import annotations

_BIG_ORDER = 40


def calculate_price_of_apples(count: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return count if count > _BIG_ORDER else count * 2


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day, or None for an hour out of range."""
    if time_of_day > 24:
        return None
    return 5 if time_of_day % 24 < 22 else 0


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed-size tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def average(values) -> float:
    """Arithmetic mean of the values."""
    values = list(values)
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) / len(values)
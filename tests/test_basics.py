import pytest

from drillrun.lessons.basics import (
    array_and_vec,
    average,
    bigger,
    calculate_price_of_apples,
    compose_me,
    foo_if_fizz,
    is_a_color_word,
    is_even,
    maybe_icecream,
    replace_me,
    sale_price,
    square,
    trim_me,
    vec_loop,
    vec_map,
)


def test_price_of_apples():
    assert calculate_price_of_apples(35) == 70
    assert calculate_price_of_apples(40) == 80
    assert calculate_price_of_apples(41) == 41
    assert calculate_price_of_apples(65) == 65


def test_bigger():
    assert bigger(10, 8) == 10
    assert bigger(32, 42) == 42


@pytest.mark.parametrize(
    "word, expected",
    [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")],
)
def test_foo_if_fizz(word, expected):
    assert foo_if_fizz(word) == expected


def test_sale_price():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9


def test_is_even():
    assert is_even(4) is True
    assert is_even(5) is False


def test_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None
    assert maybe_icecream(12) == 5


def test_color_words():
    assert is_a_color_word("green") is True
    assert is_a_color_word("purple") is False


def test_trim():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


def test_array_and_vec_similarity():
    fixed, values = array_and_vec()
    assert list(fixed) == values


def test_vec_loop_doubles_in_place():
    values = [2, 4, 6, 8, 10]
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map_returns_new_list():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_average():
    assert average([3.5, 0.3, 13.0, 11.7]) == 7.125


def test_average_empty():
    with pytest.raises(ValueError):
        average([])
import pytest

from drillrun.lessons.records import (
    Command,
    CommandKind,
    Fruit,
    Team,
    build_scores_table,
    default_fruit_basket,
    fill_fruit_basket,
    transformer,
)


def test_at_least_three_types_of_fruits():
    assert len(default_fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(default_fruit_basket().values()) >= 5


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_team_record_holds_name():
    assert build_scores_table(RESULTS)["Italy"] == Team("Italy", 1, 3)


def test_build_scores_rejects_bad_goals():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_build_scores_rejects_short_line():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


def test_transformer_works():
    output = transformer(
        [
            ("hello", Command.uppercase()),
            (" all roads lead to rome! ", Command.trim()),
            ("foo", Command.append(1)),
            ("bar", Command.append(5)),
        ]
    )
    assert output[0] == "HELLO"
    assert output[1] == "all roads lead to rome!"
    assert output[2] == "foobar"
    assert output[3] == "barbarbarbarbarbar"


def test_append_zero_leaves_text():
    assert transformer([("foo", Command(CommandKind.APPEND, 0))]) == ["foo"]


def test_negative_append_count_rejected():
    with pytest.raises(ValueError):
        Command.append(-1)
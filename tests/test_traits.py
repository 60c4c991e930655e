import pytest

from drillrun.lessons.traits import (
    ChangeColor,
    Cons,
    Cow,
    Echo,
    Licensed,
    Move,
    Nil,
    OtherSoftware,
    Point,
    Quit,
    SomeSoftware,
    State,
    Wrapper,
    abs_all,
    append_bar,
    compare_license_types,
    create_empty_list,
    create_non_empty_list,
)


def test_match_message_call(capsys):
    state = State(color=(0, 0, 0), position=Point(0, 0), quit=False)
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_process_unknown_message():
    with pytest.raises(TypeError):
        State().process("nonsense")


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_list_leaves_original():
    original = ["Foo"]
    append_bar(original)
    assert original == ["Foo"]


def test_append_bar_unsupported():
    with pytest.raises(TypeError):
        append_bar(3)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(), OtherSoftware()) is True


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware(), SomeSoftware()) is True


def test_compare_license_differs():
    class Custom(Licensed):
        def licensing_info(self):
            return "other"

    assert compare_license_types(SomeSoftware(), Custom()) is False


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert isinstance(non_empty, Cons)
    assert non_empty != create_empty_list()


def test_reference_mutation():
    data = (-1, 0, 1)
    cow = abs_all(Cow.borrowed(data))
    assert cow.owned is True
    assert list(cow) == [1, 0, 1]
    assert data == (-1, 0, 1)


def test_reference_no_mutation():
    data = [0, 1, 2]
    cow = abs_all(Cow.borrowed(data))
    assert cow.is_borrowed is True
    assert list(cow) == [0, 1, 2]


def test_owned_no_mutation():
    cow = abs_all(Cow.from_owned([0, 1, 2]))
    assert cow.owned is True
    assert list(cow) == [0, 1, 2]


def test_owned_mutation():
    data = [-1, 0, 1]
    cow = abs_all(Cow.from_owned(data))
    assert cow.owned is True
    assert data == [1, 0, 1]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"
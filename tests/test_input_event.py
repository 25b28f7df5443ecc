from termage.input_event import (
    KeyboardInput,
    NoInput,
    get_keyboard_input,
    is_keyboard_input,
    is_no_input,
)


def test_no_input_predicates():
    event = NoInput()
    assert is_no_input(event)
    assert not is_keyboard_input(event)


def test_keyboard_input_predicates():
    event = KeyboardInput(ord("w"))
    assert is_keyboard_input(event)
    assert not is_no_input(event)


def test_get_keyboard_input_returns_event():
    event = KeyboardInput(ord(" "))
    result = get_keyboard_input(event)
    assert result is event
    assert result.key == ord(" ")


def test_get_keyboard_input_on_no_input_is_none():
    assert get_keyboard_input(NoInput()) is None


def test_keyboard_inputs_compare_by_key():
    assert KeyboardInput(ord("q")) == KeyboardInput(ord("q"))
    assert KeyboardInput(ord("q")) != KeyboardInput(ord("m"))
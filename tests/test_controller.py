import curses

from termage.controller import CursesController
from termage.input_event import KeyboardInput, NoInput


class FakeWindow:
    def __init__(self, keys):
        self._keys = list(keys)

    def getch(self):
        return self._keys.pop(0) if self._keys else curses.ERR


def test_no_key_gives_no_input():
    controller = CursesController(FakeWindow([curses.ERR]))
    assert controller.get_input() == NoInput()


def test_key_press_gives_keyboard_input():
    controller = CursesController(FakeWindow([ord(" ")]))
    assert controller.get_input() == KeyboardInput(ord(" "))


def test_sequence_of_reads():
    keys = [ord("w"), curses.ERR, curses.KEY_UP]
    controller = CursesController(FakeWindow(keys))
    results = [controller.get_input() for _ in range(4)]
    assert results == [KeyboardInput(ord("w")), NoInput(), KeyboardInput(curses.KEY_UP), NoInput()]